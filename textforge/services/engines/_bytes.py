"""Byte/bit helpers shared by the byte-oriented codecs."""

from textforge.core.exceptions import InputFormatError


def utf8(text: str) -> bytes:
    return text.encode("utf-8")


def to_text(data: bytes, codec: str) -> str:
    """Interpret decoded bytes as UTF-8, failing loudly on invalid sequences."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputFormatError(
            f"{codec} payload is not valid UTF-8",
            {"codec": codec, "position": exc.start},
        ) from exc


def to_bits(data: bytes) -> str:
    return "".join(f"{byte:08b}" for byte in data)


def from_bits(bits: str) -> bytes:
    """Pack a 0/1 string into bytes; a trailing group shorter than 8 is dropped."""
    whole = len(bits) - len(bits) % 8
    return bytes(int(bits[i:i + 8], 2) for i in range(0, whole, 8))
