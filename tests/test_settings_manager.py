import pytest
import yaml

from config import ACCESS_KEY_ENV, API_URI
from gtranslate.errors import InvalidAccessKeyError
from gtranslate.mt_api import UrllibTransport
from settings_manager import DEFAULT_SETTINGS, create_client_from_settings, load_settings, save_settings

KEY = "S" * 39


@pytest.fixture(autouse=True)
def _no_env_key(monkeypatch):
    monkeypatch.delenv(ACCESS_KEY_ENV, raising=False)


def test_missing_file_returns_defaults(tmp_path):
    assert load_settings(tmp_path / "missing.yaml") == DEFAULT_SETTINGS


def test_file_is_merged_onto_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"client": {"api_key": KEY, "timeout_sec": 5}}), encoding="utf-8")

    settings = load_settings(path)

    assert settings["client"]["api_key"] == KEY
    assert settings["client"]["timeout_sec"] == 5
    assert settings["client"]["api_uri"] == API_URI
    assert settings["logging"]["level"] == "WARNING"


def test_malformed_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("client: [unclosed", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_null_client_section_is_restored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("client:\n", encoding="utf-8")
    assert load_settings(path)["client"] == DEFAULT_SETTINGS["client"]


def test_env_key_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"client": {"api_key": "from-file"}}), encoding="utf-8")
    monkeypatch.setenv(ACCESS_KEY_ENV, KEY)
    assert load_settings(path)["client"]["api_key"] == KEY


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    settings = load_settings(path)
    settings["client"]["api_key"] = KEY
    save_settings(settings, path)
    assert load_settings(path)["client"]["api_key"] == KEY


def test_create_client_from_settings():
    client = create_client_from_settings(
        {"client": {"api_key": KEY, "timeout_sec": 3, "verify_ssl": False, "api_uri": "http://localhost/v2"}}
    )
    assert client.access_key == KEY
    assert client.api_uri == "http://localhost/v2"
    assert isinstance(client.transport, UrllibTransport)
    assert client.transport.timeout == 3.0
    assert client.transport.verify_ssl is False


def test_create_client_without_key_fails():
    with pytest.raises(InvalidAccessKeyError):
        create_client_from_settings(DEFAULT_SETTINGS)
