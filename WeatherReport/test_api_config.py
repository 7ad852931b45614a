"""Tests for the API config loader."""
import json
import pytest
from api_config import ApiConfig, ConfigError, load_api_config


def write_config(tmp_path, content):
    path = tmp_path / ".apiConfig"
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_load_api_config(tmp_path):
    """Test reading the key from a valid file."""
    path = write_config(tmp_path, json.dumps({"OpenWeatherApiKey": "abc123"}))

    assert load_api_config(path) == ApiConfig(open_weather_api_key="abc123")


def test_load_api_config_ignores_unknown_fields(tmp_path):
    path = write_config(tmp_path, json.dumps({"OpenWeatherApiKey": "abc123", "Other": 1}))

    assert load_api_config(path).open_weather_api_key == "abc123"


def test_load_api_config_missing_key_field(tmp_path):
    """A file without the key field yields an empty key."""
    path = write_config(tmp_path, "{}")

    assert load_api_config(path).open_weather_api_key == ""


def test_load_api_config_missing_file(tmp_path):
    """Test that a missing file raises ConfigError with the OS error text."""
    path = str(tmp_path / "does-not-exist")

    with pytest.raises(ConfigError) as exc_info:
        load_api_config(path)

    assert "No such file or directory" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_load_api_config_invalid_json(tmp_path):
    """Test that malformed JSON raises ConfigError with the parse error text."""
    path = write_config(tmp_path, "{not json")

    with pytest.raises(ConfigError) as exc_info:
        load_api_config(path)

    assert "invalid API config" in str(exc_info.value)
    assert "Expecting property name" in str(exc_info.value)


def test_load_api_config_not_an_object(tmp_path):
    path = write_config(tmp_path, "[1, 2, 3]")

    with pytest.raises(ConfigError) as exc_info:
        load_api_config(path)

    assert "expected a JSON object" in str(exc_info.value)


def test_load_api_config_key_not_string(tmp_path):
    path = write_config(tmp_path, json.dumps({"OpenWeatherApiKey": 42}))

    with pytest.raises(ConfigError) as exc_info:
        load_api_config(path)

    assert "OpenWeatherApiKey must be a string" in str(exc_info.value)
