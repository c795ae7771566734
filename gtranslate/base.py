"""Request and result records shared by the query builder, normalizer and client."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar, Union

_T = TypeVar("_T")


@dataclass(frozen=True)
class TextInput:
    """Text prepared for a request, remembering whether the caller passed one string."""

    texts: List[str]
    single: bool = False


@dataclass
class Echo(Generic[_T]):
    """
    Per-input results tagged with the cardinality of the original call.

    A call made with a single string unwraps to a single value; a call made
    with a list unwraps to a list aligned by index with the input.
    """

    values: List[_T] = field(default_factory=list)
    single: bool = False

    def unwrap(self) -> Union[_T, List[_T], None]:
        if self.single:
            return self.values[0] if self.values else None
        return list(self.values)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Detection:
    """Most likely language reported by the service for one input."""

    language: str
    confidence: Optional[float] = None
    is_reliable: Optional[bool] = None


@dataclass
class TranslationOutcome:
    """Normalized translate response; ``detected`` is None when the source was given."""

    translations: Echo[str]
    detected: Optional[Echo[Optional[str]]] = None

    def as_pair(self):
        """Return ``(translated, detected_source)`` shaped like the caller's input."""
        detected = self.detected.unwrap() if self.detected is not None else None
        return self.translations.unwrap(), detected
