"""Unwrap the service's ``data`` envelope and reshape results to the caller's input."""
from __future__ import annotations

import json
from html import unescape
from typing import Any, Dict, List, Optional, Type

from gtranslate.base import Detection, Echo, TranslationOutcome
from gtranslate.errors import DetectError, LanguagesError, ServiceError, TranslateError


def decode_payload(body: Any, error_cls: Type[ServiceError]) -> Dict[str, Any]:
    """Parse a JSON object body or raise ``error_cls``."""
    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise error_cls("Invalid response") from exc
    if not isinstance(payload, dict):
        raise error_cls("Invalid response")
    return payload


def _envelope_field(body: Any, name: str, error_cls: Type[ServiceError]) -> Any:
    payload = decode_payload(body, error_cls)
    data = payload.get("data")
    if not isinstance(data, dict) or name not in data:
        raise error_cls("Invalid response")
    return data[name]


def _expected_count(expected: Optional[int], single: bool) -> Optional[int]:
    if expected is None and single:
        return 1
    return expected


def normalize_translation(
    body: Any,
    single: bool,
    source_provided: bool,
    expected: Optional[int] = None,
) -> TranslationOutcome:
    """
    Reshape ``data.translations`` to the caller's input.

    ``expected`` is the number of texts sent; a response with a different
    number of entries is rejected rather than returned partially.
    """
    entries = _envelope_field(body, "translations", TranslateError)
    if not isinstance(entries, list):
        raise TranslateError("Invalid response")
    expected = _expected_count(expected, single)
    if expected is not None and len(entries) != expected:
        raise TranslateError("Invalid response")

    translations: List[str] = []
    sources: List[Optional[str]] = []
    for entry in entries:
        if not isinstance(entry, dict) or "translatedText" not in entry:
            raise TranslateError("Invalid response")
        # The service HTML-escapes its output (&amp;, &#39;, ...).
        translations.append(unescape(str(entry["translatedText"])))
        # One slot per entry keeps sources aligned with translations.
        language = entry.get("detectedSourceLanguage")
        sources.append(str(language) if language is not None else None)

    detected = None if source_provided else Echo(values=sources, single=single)
    return TranslationOutcome(translations=Echo(values=translations, single=single), detected=detected)


def normalize_languages(body: Any) -> List[Dict[str, Any]]:
    languages = _envelope_field(body, "languages", LanguagesError)
    if not isinstance(languages, list):
        raise LanguagesError("Invalid response")
    return languages


def _first_candidate(candidates: Any) -> Detection:
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        raise DetectError("Invalid response")
    best = candidates[0]
    if "language" not in best:
        raise DetectError("Invalid response")
    confidence = best.get("confidence")
    is_reliable = best.get("isReliable")
    return Detection(
        language=str(best["language"]),
        confidence=float(confidence) if confidence is not None else None,
        is_reliable=bool(is_reliable) if is_reliable is not None else None,
    )


def normalize_detection(body: Any, single: bool, expected: Optional[int] = None) -> Echo[Detection]:
    """Keep the first (most likely) candidate reported for each input."""
    detections = _envelope_field(body, "detections", DetectError)
    if not isinstance(detections, list):
        raise DetectError("Invalid response")
    expected = _expected_count(expected, single)
    if expected is not None and len(detections) != expected:
        raise DetectError("Invalid response")
    return Echo(values=[_first_candidate(item) for item in detections], single=single)
