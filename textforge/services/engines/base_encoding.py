"""
Base-N codecs.

Every encoder works on the UTF-8 bytes of its input and every decoder
rebuilds bytes and interprets them as UTF-8.
"""

import base64
import binascii
import re

from textforge.core.exceptions import InputFormatError
from textforge.services.engines._bytes import to_text, utf8

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_BASE64_SHAPE = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")
_HEX_SHAPE = re.compile(r"^[0-9a-fA-F]*$")
_BINARY_TOKEN = re.compile(r"^[01]{1,8}$")


# ============================================================================
# Base64
# ============================================================================


def base64_encode(text: str) -> str:
    return base64.b64encode(utf8(text)).decode("ascii")


def base64_decode(text: str) -> str:
    """Decode standard Base64; whitespace is ignored and padding is optional."""
    cleaned = "".join(text.split())
    if not _BASE64_SHAPE.match(cleaned) or len(cleaned.rstrip("=")) % 4 == 1:
        raise InputFormatError("Invalid Base64 input")

    body = cleaned.rstrip("=")
    padded = body + "=" * (-len(body) % 4)
    try:
        data = base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise InputFormatError(f"Invalid Base64 input: {exc}") from exc
    return to_text(data, "Base64")


# ============================================================================
# Base32 (RFC 4648 alphabet)
# ============================================================================


def base32_encode(text: str) -> str:
    result = []
    buffer = 0
    bits_left = 0

    for byte in utf8(text):
        buffer = (buffer << 8) | byte
        bits_left += 8
        while bits_left >= 5:
            bits_left -= 5
            result.append(BASE32_ALPHABET[(buffer >> bits_left) & 0x1F])
        buffer &= (1 << bits_left) - 1

    if bits_left > 0:
        result.append(BASE32_ALPHABET[(buffer << (5 - bits_left)) & 0x1F])

    encoded = "".join(result)
    return encoded + "=" * (-len(encoded) % 8)


def base32_decode(text: str) -> str:
    """Decode Base32, skipping characters outside the alphabet."""
    cleaned = text.rstrip("=").upper()
    buffer = 0
    bits_left = 0
    data = bytearray()

    for char in cleaned:
        value = BASE32_ALPHABET.find(char)
        if value == -1:
            continue
        buffer = (buffer << 5) | value
        bits_left += 5
        if bits_left >= 8:
            bits_left -= 8
            data.append((buffer >> bits_left) & 0xFF)
        buffer &= (1 << bits_left) - 1

    return to_text(bytes(data), "Base32")


# ============================================================================
# Base58 (Bitcoin alphabet)
# ============================================================================


def base58_encode(text: str) -> str:
    data = utf8(text)
    num = int.from_bytes(data, "big")

    digits = []
    while num > 0:
        num, remainder = divmod(num, 58)
        digits.append(BASE58_ALPHABET[remainder])

    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return "1" * leading_zeros + "".join(reversed(digits))


def base58_decode(text: str) -> str:
    num = 0
    for char in text:
        value = BASE58_ALPHABET.find(char)
        if value == -1:
            raise InputFormatError(
                "Invalid Base58 character",
                {"character": char},
            )
        num = num * 58 + value

    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    leading_ones = len(text) - len(text.lstrip("1"))
    return to_text(b"\x00" * leading_ones + body, "Base58")


# ============================================================================
# Base85 / ASCII85
# ============================================================================


def base85_encode(text: str) -> str:
    """ASCII85 with ``<~``/``~>`` delimiters; an all-zero 4-byte group becomes ``z``."""
    data = utf8(text)
    result = ["<~"]

    for i in range(0, len(data), 4):
        chunk = data[i:i + 4]
        count = len(chunk)
        value = int.from_bytes(chunk.ljust(4, b"\x00"), "big")

        if value == 0 and count == 4:
            result.append("z")
            continue

        encoded = []
        for _ in range(5):
            value, remainder = divmod(value, 85)
            encoded.append(chr(remainder + 33))
        result.append("".join(reversed(encoded))[:count + 1])

    result.append("~>")
    return "".join(result)


def base85_decode(text: str) -> str:
    data = text.strip()
    if data.startswith("<~"):
        data = data[2:]
    if data.endswith("~>"):
        data = data[:-2]
    data = "".join(data.split()).replace("z", "!!!!!")

    out = bytearray()
    for i in range(0, len(data), 5):
        chunk = data[i:i + 5]
        value = 0
        for char in chunk.ljust(5, "u"):
            digit = ord(char) - 33
            if not 0 <= digit < 85:
                raise InputFormatError(
                    "Invalid Base85 character",
                    {"character": char},
                )
            value = value * 85 + digit

        if value > 0xFFFFFFFF:
            raise InputFormatError("Base85 group out of range", {"group": chunk})

        out.extend(value.to_bytes(4, "big")[:len(chunk) - 1])

    return to_text(bytes(out), "Base85")


# ============================================================================
# Hex (Base16)
# ============================================================================


def hex_encode(text: str) -> str:
    return utf8(text).hex()


def hex_decode(text: str) -> str:
    cleaned = "".join(text.split())
    if not _HEX_SHAPE.match(cleaned):
        raise InputFormatError("Invalid hex input: non-hex characters")
    if len(cleaned) % 2:
        raise InputFormatError("Invalid hex input: odd number of digits")
    return to_text(bytes.fromhex(cleaned), "Hex")


# ============================================================================
# Binary
# ============================================================================


def binary_encode(text: str, bits: int = 8) -> str:
    """Space-separated binary bytes; with ``bits=7`` the high bit is masked off."""
    width = 7 if bits == 7 else 8
    mask = (1 << width) - 1
    return " ".join(format(byte & mask, f"0{width}b") for byte in utf8(text))


def binary_decode(text: str) -> str:
    data = bytearray()
    for token in text.split():
        if not _BINARY_TOKEN.match(token):
            raise InputFormatError(
                "Invalid binary group",
                {"group": token},
            )
        data.append(int(token, 2))
    return to_text(bytes(data), "Binary")
