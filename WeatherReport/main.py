"""Weather report HTTP service entry point."""
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from api_config import DEFAULT_CONFIG_PATH
from server import create_app
from weather_service import WeatherService

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8070


@dataclass(frozen=True)
class Settings:
    config_path: str = DEFAULT_CONFIG_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: Optional[float] = None
    log_file: Optional[str] = None
    verbose: bool = False


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def load_settings() -> Settings:
    """Read runtime settings from the environment, after loading .env."""
    load_dotenv()
    port = os.getenv("WEATHER_PORT", str(DEFAULT_PORT))
    timeout = os.getenv("WEATHER_HTTP_TIMEOUT")

    try:
        port_val = int(port)
        timeout_val = float(timeout) if timeout else None
    except ValueError as exc:
        raise SystemExit(f"Invalid numeric setting: {exc}") from exc

    return Settings(
        config_path=os.getenv("WEATHER_API_CONFIG", DEFAULT_CONFIG_PATH),
        host=os.getenv("WEATHER_HOST", DEFAULT_HOST),
        port=port_val,
        timeout=timeout_val,
        log_file=os.getenv("WEATHER_LOG_FILE") or None,
        verbose=os.getenv("WEATHER_VERBOSE", "").lower() in ("1", "true", "yes"),
    )


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_file, settings.verbose)
    logging.info(
        "Configuration loaded: api_config=%s timeout=%s",
        settings.config_path,
        settings.timeout,
    )

    service = WeatherService(config_path=settings.config_path, timeout=settings.timeout)
    app = create_app(service)

    logging.info("Server Running on http://localhost:%s", settings.port)
    try:
        app.run(host=settings.host, port=settings.port, threaded=True)
    except KeyboardInterrupt:
        logging.info("Stopping server")


if __name__ == "__main__":
    main()
