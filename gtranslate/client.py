"""Google Translate v2 client: translate, list languages and detect."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from config import API_URI, DETECT_PATH, LANGUAGES_PATH
from gtranslate.base import Detection, Echo, TextInput, TranslationOutcome
from gtranslate.errors import (
    DetectError,
    InvalidAccessKeyError,
    InvalidSourceLanguageError,
    InvalidTargetLanguageError,
    InvalidTextError,
    LanguagesError,
    ServiceError,
    TranslateError,
)
from gtranslate.mt_api import Transport, TransportError, UrllibTransport
from gtranslate.normalizer import normalize_detection, normalize_languages, normalize_translation
from gtranslate.query import build_params, build_query, prepare_text
from languages import is_non_empty_input, is_valid_credential, is_valid_language_code

logger = logging.getLogger(__name__)

TextArg = Union[str, Sequence[str]]


class TranslationClient:
    """
    Stateless facade over the translation service.

    Every call validates its input before touching the network, sends one
    request and returns results shaped like the input: a single string in,
    a single value out; a list in, a list of the same length out.
    """

    def __init__(
        self,
        access_key: str,
        transport: Optional[Transport] = None,
        api_uri: str = API_URI,
    ) -> None:
        if not is_valid_credential(access_key):
            raise InvalidAccessKeyError()
        self._access_key = access_key
        self.transport = transport or UrllibTransport()
        self.api_uri = api_uri.rstrip("/")

    @property
    def access_key(self) -> str:
        return self._access_key

    # -------------------- public api --------------------
    def translate(self, text: TextArg, target_language: str, source_language: Optional[str] = None):
        """
        Translate ``text`` into ``target_language``.

        Returns ``(translated, detected_source)``. For a list input both are
        lists aligned with the input. ``detected_source`` is None when
        ``source_language`` was given.
        """
        return self.translate_result(text, target_language, source_language).as_pair()

    def translate_result(
        self,
        text: TextArg,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> TranslationOutcome:
        prepared = self._prepare(text)
        if not is_valid_language_code(target_language):
            raise InvalidTargetLanguageError(language=target_language)
        if source_language and not is_valid_language_code(source_language):
            raise InvalidSourceLanguageError(language=source_language)

        params = build_params(
            self._access_key,
            texts=prepared.texts,
            target=target_language,
            source=source_language or None,
        )
        logger.debug(
            "translate: %d text(s), target=%s, source=%s",
            len(prepared.texts),
            target_language,
            source_language or "auto",
        )
        body = self._send("POST", self.api_uri, params, TranslateError, "Translate error")
        return normalize_translation(
            body,
            prepared.single,
            source_provided=bool(source_language),
            expected=len(prepared.texts),
        )

    def languages(self, target_language: Optional[str] = None) -> List[Dict[str, Any]]:
        """List supported languages, with names localized to ``target_language`` if given."""
        if target_language and not is_valid_language_code(target_language):
            raise InvalidTargetLanguageError(language=target_language)

        params = build_params(self._access_key, target=target_language or None)
        logger.debug("languages: target=%s", target_language or "-")
        body = self._send("GET", self.api_uri + LANGUAGES_PATH, params, LanguagesError, "Languages error")
        return normalize_languages(body)

    def detect(self, text: TextArg):
        """Return the most likely language code for ``text`` (a list for a list input)."""
        result = self.detect_result(text)
        return Echo(values=[item.language for item in result.values], single=result.single).unwrap()

    def detect_result(self, text: TextArg) -> Echo[Detection]:
        prepared = self._prepare(text)
        params = build_params(self._access_key, texts=prepared.texts)
        logger.debug("detect: %d text(s)", len(prepared.texts))
        body = self._send("POST", self.api_uri + DETECT_PATH, params, DetectError, "Detect error")
        return normalize_detection(body, prepared.single, expected=len(prepared.texts))

    # -------------------- internals --------------------
    @staticmethod
    def _prepare(text: TextArg) -> TextInput:
        if not is_non_empty_input(text):
            raise InvalidTextError()
        return prepare_text(text)

    def _send(
        self,
        method: str,
        url: str,
        params: Dict[str, Any],
        error_cls: type[ServiceError],
        label: str,
    ) -> str:
        try:
            return self.transport.send(method, url, build_query(params))
        except Exception as exc:  # noqa: BLE001
            logger.warning("%s: %s", label, exc)
            status_code = exc.status_code if isinstance(exc, TransportError) else None
            raise error_cls(f"{label}: {exc}", status_code=status_code) from exc
