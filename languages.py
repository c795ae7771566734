"""Input checks shared by the client: language codes, access keys and text."""
import re
from typing import Any, Optional

from config import ACCESS_KEY_LENGTH, LANGUAGE_CODE_PATTERN

_LANGUAGE_CODE_RE = re.compile(LANGUAGE_CODE_PATTERN)


def is_valid_language_code(code: Optional[str]) -> bool:
    """Return True if the whole code looks like ``xx`` or ``xx-yy`` (lowercase)."""
    if not isinstance(code, str):
        return False
    return _LANGUAGE_CODE_RE.fullmatch(code) is not None


def is_valid_credential(token: Optional[str]) -> bool:
    """Return True if the access key has the fixed service length."""
    return isinstance(token, str) and len(token) == ACCESS_KEY_LENGTH


def is_non_empty_input(text: Any) -> bool:
    """
    Return True for a non-empty string or a non-empty list/tuple of strings.

    Only the missing/empty case is rejected; items of a non-empty sequence
    are forwarded to the service as given.
    """
    if isinstance(text, str):
        return bool(text)
    if isinstance(text, (list, tuple)):
        return len(text) > 0
    return False
