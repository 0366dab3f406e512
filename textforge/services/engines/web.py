"""Percent-encoding, HTML numeric entities and ``\\uXXXX`` escapes."""

import re
from urllib.parse import quote, unquote

from textforge.core.exceptions import InputFormatError

# URI-component unreserved marks, left unescaped with the alphanumerics.
_URL_SAFE = "-_.!~*'()"
_BROKEN_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

_HTML_SPECIAL = frozenset("<>&\"'")
_DECIMAL_ENTITY = re.compile(r"&#(\d+);")
_HEX_ENTITY = re.compile(r"&#x([0-9a-fA-F]+);")
_NAMED_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&apos;", "'"),
)

_UNICODE_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{4})")


def url_encode(text: str) -> str:
    return quote(text, safe=_URL_SAFE)


def url_decode(text: str) -> str:
    if _BROKEN_PERCENT.search(text):
        raise InputFormatError("Malformed percent-encoding")
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise InputFormatError("Percent-encoded bytes are not valid UTF-8") from exc


def html_entity_encode(text: str) -> str:
    """Replace non-ASCII and HTML-special characters with decimal references."""
    return "".join(
        f"&#{ord(char)};" if ord(char) > 127 or char in _HTML_SPECIAL else char
        for char in text
    )


def _join_surrogates(text: str, codec: str) -> str:
    """Combine UTF-16 surrogate pairs into astral characters; unpaired halves are an error."""
    try:
        return text.encode("utf-16-be", "surrogatepass").decode("utf-16-be")
    except UnicodeDecodeError as exc:
        raise InputFormatError(
            f"{codec} input contains an unpaired surrogate",
            {"codec": codec, "position": exc.start // 2},
        ) from exc


def _code_point(value: int, original: str) -> str:
    try:
        return chr(value)
    except (ValueError, OverflowError):
        return original


def html_entity_decode(text: str) -> str:
    """
    Resolve decimal and hex references, then the five named entities.

    A pair of references to UTF-16 surrogate halves decodes to the one
    astral character they encode.
    """
    result = _DECIMAL_ENTITY.sub(lambda m: _code_point(int(m.group(1)), m.group(0)), text)
    result = _HEX_ENTITY.sub(lambda m: _code_point(int(m.group(1), 16), m.group(0)), result)
    result = _join_surrogates(result, "HTML entity")
    for entity, char in _NAMED_ENTITIES:
        result = result.replace(entity, char)
    return result


def unicode_escape_encode(text: str) -> str:
    """
    Escape every non-ASCII UTF-16 code unit as ``\\uXXXX``.

    Astral characters become a UTF-16 surrogate pair of escapes.
    """
    out = []
    for char in text:
        if ord(char) <= 127:
            out.append(char)
            continue
        units = char.encode("utf-16-be", "surrogatepass")
        for i in range(0, len(units), 2):
            out.append(f"\\u{int.from_bytes(units[i:i + 2], 'big'):04x}")
    return "".join(out)


def unicode_escape_decode(text: str) -> str:
    replaced = _UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), text)
    return _join_surrogates(replaced, "Unicode escape")
