"""Display-width helpers for mixed ASCII/CJK text."""

from __future__ import annotations


def char_length(text: str) -> int:
    """Count ASCII and half-width katakana as 1 and everything else as 2.

    Widths are counted per UTF-16 code unit, so characters outside the BMP
    count as 4.
    """
    length = 0
    for char in text:
        code = ord(char)
        if 0x0001 <= code <= 0x007E or 0xFF60 <= code <= 0xFF9F:
            length += 1
        elif code > 0xFFFF:
            length += 4
        else:
            length += 2
    return length


__all__ = ["char_length"]
