"""Exceptions raised by the translation client."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ACCESS_KEY = "invalid_access_key"
    INVALID_TEXT = "invalid_text"
    INVALID_SOURCE_LANGUAGE = "invalid_source_language"
    INVALID_TARGET_LANGUAGE = "invalid_target_language"
    TRANSLATE_ERROR = "translate_error"
    LANGUAGES_ERROR = "languages_error"
    DETECT_ERROR = "detect_error"


class GoogleTranslateError(Exception):
    """Base class for every error raised by the client."""

    default_message = "Google Translate error"
    kind: ErrorKind | None = None
    code = 0

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


# -------------------- validation errors --------------------
class InvalidAccessKeyError(GoogleTranslateError, ValueError):
    default_message = "Invalid access key"
    kind = ErrorKind.INVALID_ACCESS_KEY
    code = 1


class InvalidTextError(GoogleTranslateError, ValueError):
    default_message = "Invalid text"
    kind = ErrorKind.INVALID_TEXT
    code = 2


class InvalidLanguageError(GoogleTranslateError, ValueError):
    """Catch-all for a rejected language code; ``kind`` tells which one."""

    default_message = "Invalid language"
    code = 3

    def __init__(self, message: str | None = None, language: str | None = None):
        super().__init__(message)
        self.language = language


class InvalidSourceLanguageError(InvalidLanguageError):
    default_message = "Invalid source language"
    kind = ErrorKind.INVALID_SOURCE_LANGUAGE


class InvalidTargetLanguageError(InvalidLanguageError):
    default_message = "Invalid target language"
    kind = ErrorKind.INVALID_TARGET_LANGUAGE


# -------------------- service errors --------------------
class ServiceError(GoogleTranslateError):
    """Raised when the service call fails or answers with an unexpected shape."""

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TranslateError(ServiceError):
    default_message = "Translate error"
    kind = ErrorKind.TRANSLATE_ERROR
    code = 4


class LanguagesError(ServiceError):
    default_message = "Languages error"
    kind = ErrorKind.LANGUAGES_ERROR
    code = 5


class DetectError(ServiceError):
    default_message = "Detect error"
    kind = ErrorKind.DETECT_ERROR
    code = 6
