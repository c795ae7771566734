"""Utility helpers for loading and storing client settings in YAML."""
from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from config import (
    ACCESS_KEY_ENV,
    API_URI,
    DEFAULT_TIMEOUT_SEC,
    DEFAULT_VERIFY_SSL,
    get_settings_path,
)
from gtranslate.client import TranslationClient
from gtranslate.mt_api import UrllibTransport

logger = logging.getLogger(__name__)

# Default shape of the settings tree.
DEFAULT_SETTINGS: Dict[str, Any] = {
    "client": {
        "api_key": "",
        "api_uri": API_URI,
        "timeout_sec": DEFAULT_TIMEOUT_SEC,
        "verify_ssl": DEFAULT_VERIFY_SSL,
    },
    "logging": {
        "level": "WARNING",
    },
}


def _merge_dicts(base: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge two dictionaries without mutating the inputs."""
    merged = deepcopy(base)
    for key, value in extra.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load settings from a YAML file (or return defaults), then apply env overrides."""
    settings = deepcopy(DEFAULT_SETTINGS)
    config_path = Path(path) if path is not None else get_settings_path()
    if config_path.is_file():
        try:
            raw_data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            # Keep defaults if the file is malformed.
            logger.warning("Ignoring malformed settings file %s: %s", config_path, exc)
            raw_data = {}
        if isinstance(raw_data, dict):
            settings = _merge_dicts(settings, raw_data)
        else:
            logger.warning("Ignoring settings file %s: top level is not a mapping", config_path)
    if not isinstance(settings.get("client"), dict):
        settings["client"] = deepcopy(DEFAULT_SETTINGS["client"])

    env_key = os.environ.get(ACCESS_KEY_ENV)
    if env_key:
        settings["client"]["api_key"] = env_key
    return settings


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Persist settings into a YAML file."""
    config_path = Path(path) if path is not None else get_settings_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        yaml.safe_dump(settings, allow_unicode=True, sort_keys=False),
        encoding="utf-8",
    )


def create_client_from_settings(settings: Dict[str, Any]) -> TranslationClient:
    """Build a client with an HTTP transport configured from ``settings['client']``."""
    client_settings = _merge_dicts(DEFAULT_SETTINGS["client"], settings.get("client", {}) or {})
    transport = UrllibTransport(
        timeout=float(client_settings["timeout_sec"]),
        verify_ssl=bool(client_settings["verify_ssl"]),
    )
    return TranslationClient(
        str(client_settings.get("api_key") or ""),
        transport=transport,
        api_uri=str(client_settings["api_uri"]),
    )
