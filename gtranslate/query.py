"""Build the form-encoded query sent to the translation service."""
from __future__ import annotations

import urllib.parse
from typing import Any, Dict, List, Optional, Sequence, Union

from gtranslate.base import TextInput

ParamValue = Union[str, Sequence[str]]


def prepare_text(text: Union[str, Sequence[str]]) -> TextInput:
    """Wrap a single string into a one-item list and remember that it was single."""
    if isinstance(text, str):
        return TextInput(texts=[text], single=True)
    return TextInput(texts=list(text), single=False)


def build_params(
    key: str,
    texts: Optional[Sequence[str]] = None,
    target: Optional[str] = None,
    source: Optional[str] = None,
) -> Dict[str, ParamValue]:
    """Return the parameter map for a request; absent values are left out."""
    params: Dict[str, ParamValue] = {}
    if texts is not None:
        params["q"] = list(texts)
    if target:
        params["target"] = target
    if source:
        params["source"] = source
    params["key"] = key
    return params


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def build_query(params: Dict[str, ParamValue]) -> str:
    """
    Serialize params into ``k=v&k=v`` form.

    A list value becomes one pair per item under the same key, in item order,
    e.g. ``q=Hello&q=Bye``. Scalar values follow the repeated pairs.
    """
    pairs: List[str] = []
    for name, value in params.items():
        if not _is_sequence(value):
            continue
        for item in value:
            pairs.append(urllib.parse.urlencode({name: item}))

    scalars = {name: value for name, value in params.items() if not _is_sequence(value)}
    if scalars:
        pairs.append(urllib.parse.urlencode(scalars))
    return "&".join(pairs)
