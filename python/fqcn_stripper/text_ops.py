"""
Byte-oriented and codepoint-aware string primitives.

With ``multibyte=False`` every operation works on the UTF-8 encoded bytes of
the string: case mapping touches ASCII letters only, and lengths and slices
count bytes. With ``multibyte=True`` operations work on codepoints with full
Unicode case mapping, so multi-byte characters are never split.
"""

from .constants import BYTE_ENCODING, BYTE_ERRORS


def _encode(text: str) -> bytes:
    return text.encode(BYTE_ENCODING, BYTE_ERRORS)


def _decode(data: bytes) -> str:
    return data.decode(BYTE_ENCODING, BYTE_ERRORS)


def lower(text: str, multibyte: bool) -> str:
    if multibyte:
        return text.lower()
    return _decode(_encode(text).lower())


def upper(text: str, multibyte: bool) -> str:
    if multibyte:
        return text.upper()
    return _decode(_encode(text).upper())


def upper_first(text: str, multibyte: bool) -> str:
    """Uppercase the first character (or byte) only, leaving the rest as is."""
    if multibyte:
        return text[:1].upper() + text[1:]
    data = _encode(text)
    return _decode(data[:1].upper() + data[1:])


def length(text: str, multibyte: bool) -> int:
    if multibyte:
        return len(text)
    return len(_encode(text))


def tail(text: str, count: int, multibyte: bool) -> str:
    """Last ``count`` characters (or bytes) of ``text``."""
    if count <= 0:
        return ""
    if multibyte:
        return text[-count:]
    return _decode(_encode(text)[-count:])


def drop_tail(text: str, count: int, multibyte: bool) -> str:
    """``text`` without its last ``count`` characters (or bytes)."""
    if count <= 0:
        return text
    if multibyte:
        return text[:-count]
    return _decode(_encode(text)[:-count])
