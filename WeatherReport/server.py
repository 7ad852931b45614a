"""Flask application exposing the welcome page and per-city weather reports."""
import logging
from typing import Optional, Union

from flask import Flask, Response

from api_config import ConfigError
from weather_provider import WeatherProviderError
from weather_service import WeatherService

WELCOME_TEXT = "Welcome to the homepage, navigate to /weather/%your-query%"
TEXT_PLAIN = "text/plain; charset=utf-8"


def create_app(service: Optional[WeatherService] = None) -> Flask:
    """
    Build the Flask app.

    Args:
        service: Lookup pipeline to use; a default WeatherService reading
            ".apiConfig" from the working directory when omitted
    """
    app = Flask(__name__)
    service = service or WeatherService()

    # "/" also catches every path the lookup route doesn't match
    @app.route("/")
    @app.route("/<path:_path>")
    def index(_path: Optional[str] = None):
        return Response(WELCOME_TEXT, mimetype="text/plain")

    @app.route("/weather/<city>")
    def weather(city: str):
        report = service.get_report(city)
        return Response(report, status=200, content_type=TEXT_PLAIN)

    @app.errorhandler(ConfigError)
    @app.errorhandler(WeatherProviderError)
    def lookup_failed(err: Union[ConfigError, WeatherProviderError]):
        logging.error("Weather lookup failed: %s", err)
        return Response(f"{err}\n", status=500, content_type=TEXT_PLAIN)

    return app
