"""Validation utilities for form-style field values."""

from __future__ import annotations

import re
from typing import Any, Literal, Mapping

from .exceptions import UnsupportedValidationKind

FieldKind = Literal["phone", "email", "num_en_cn"]

_PATTERNS: dict[str, tuple[re.Pattern[str], bool]] = {
    # pattern, whole-string match
    "phone": (re.compile(r"1[0-9]{10}"), True),
    "email": (re.compile(r"\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*", re.ASCII), False),
    "num_en_cn": (re.compile(r"[0-9a-zA-Z一-龥]+"), True),
}

_SPECIAL_CHARS = re.compile(r"[`~!@$%&*?<>/\\|=+^{}\[\]'\"【】‘’￥——、，。；：？《》！]")
_SQL_KEYWORDS = re.compile(
    r"\b(and|or|delete|update|insert|exec|execute|like|select|set|create|table|"
    r"declare|master|backup|mid|count|add|alter|drop|from|truncate|union|join|"
    r"script|alert|link)\b",
    re.IGNORECASE,
)
_CN_CHAR = re.compile(r"[一-龥]")


def validate_value(kind: str, value: Any, required: bool = False) -> bool:
    """Check ``value`` against the pattern for ``kind``.

    Empty values (``None`` or ``""``) fail when ``required`` and pass otherwise.
    """
    try:
        pattern, whole = _PATTERNS[kind]
    except KeyError as exc:
        raise UnsupportedValidationKind(kind) from exc

    if value is None or value == "":
        return not required

    text = str(value)
    match = pattern.fullmatch(text) if whole else pattern.search(text)
    return match is not None


def validate_fields(rules: Mapping[str, tuple[str, Any, bool]]) -> list[str]:
    """Return list of validation errors for ``{field: (kind, value, required)}``."""
    errors: list[str] = []
    for field_name, (kind, value, required) in rules.items():
        if validate_value(kind, value, required):
            continue
        if required and (value is None or value == ""):
            errors.append(f"Field '{field_name}' is required.")
        else:
            errors.append(f"Field '{field_name}' is not a valid {kind} value: {value!r}.")
    return errors


def has_special_char(text: str = "") -> bool:
    return _SPECIAL_CHARS.search(text) is not None


def has_sql_keyword(text: str = "") -> bool:
    return _SQL_KEYWORDS.search(text) is not None


def has_cn_char(text: str = "") -> bool:
    return _CN_CHAR.search(text) is not None


__all__ = [
    "FieldKind",
    "has_cn_char",
    "has_special_char",
    "has_sql_keyword",
    "validate_fields",
    "validate_value",
]
