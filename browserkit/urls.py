"""Query-string helpers compatible with ``encodeURIComponent``."""

from __future__ import annotations

from typing import Any, Iterable, Mapping
from urllib.parse import quote, unquote

# characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: Any) -> str:
    """Encode ``value`` the way ``encodeURIComponent(String(value))`` would."""
    if value is None:
        text = "null"
    elif isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return quote(text, safe=_URI_COMPONENT_SAFE)


def encode_params(params: Mapping[str, Any] | None = None, *, prefix: str = "?") -> str:
    """Turn ``{"name": "zs", "age": 20}`` into ``?name=zs&age=20``."""
    if not params:
        return ""
    query = "&".join(f"{key}={encode_component(value)}" for key, value in params.items())
    return f"{prefix}{query}"


def strip_fragment(url: str) -> str:
    index = url.find("#")
    return url if index == -1 else url[:index]


def decode_params(url: str) -> dict[str, str]:
    """Parse the query string of ``url`` into a dict of decoded values."""
    url = strip_fragment(url)
    if "?" not in url:
        return {}
    query = url.split("?", 1)[1]
    params: dict[str, str] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        params[key] = unquote(value)
    return params


def drop_empty(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Copy ``mapping`` without ``None`` and empty-string values."""
    return {key: value for key, value in mapping.items() if value is not None and value != ""}


def pick(mapping: Mapping[str, Any], keys: Iterable[str] = ()) -> dict[str, Any]:
    wanted = set(keys)
    return {key: value for key, value in mapping.items() if key in wanted}


__all__ = [
    "decode_params",
    "drop_empty",
    "encode_component",
    "encode_params",
    "pick",
    "strip_fragment",
]
