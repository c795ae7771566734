"""Google Translate v2 API client."""

from gtranslate.base import Detection, Echo, TextInput, TranslationOutcome
from gtranslate.client import TranslationClient
from gtranslate.errors import (
    DetectError,
    ErrorKind,
    GoogleTranslateError,
    InvalidAccessKeyError,
    InvalidLanguageError,
    InvalidSourceLanguageError,
    InvalidTargetLanguageError,
    InvalidTextError,
    LanguagesError,
    ServiceError,
    TranslateError,
)
from gtranslate.mt_api import Transport, TransportError, UrllibTransport

__all__ = [
    "Detection",
    "DetectError",
    "Echo",
    "ErrorKind",
    "GoogleTranslateError",
    "InvalidAccessKeyError",
    "InvalidLanguageError",
    "InvalidSourceLanguageError",
    "InvalidTargetLanguageError",
    "InvalidTextError",
    "LanguagesError",
    "ServiceError",
    "TextInput",
    "TranslateError",
    "TranslationClient",
    "TranslationOutcome",
    "Transport",
    "TransportError",
    "UrllibTransport",
]
