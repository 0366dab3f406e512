"""Keyed ciphers: repeating-key XOR and password-based AES-GCM."""

from textforge.core.exceptions import InputFormatError
from textforge.services.engines import crypto
from textforge.services.engines._bytes import to_text, utf8

DEFAULT_XOR_KEY = "KEY"
DEFAULT_AES_PASSWORD = "password"


def _xor(data: bytes, key: bytes) -> bytes:
    return bytes(byte ^ key[i % len(key)] for i, byte in enumerate(data))


def xor_encode(text: str, key: str = DEFAULT_XOR_KEY) -> str:
    """XOR the UTF-8 bytes with a repeating key; output is lowercase hex."""
    return _xor(utf8(text), utf8(key or DEFAULT_XOR_KEY)).hex()


def xor_decode(text: str, key: str = DEFAULT_XOR_KEY) -> str:
    cleaned = "".join(text.split())
    try:
        data = bytes.fromhex(cleaned)
    except ValueError as exc:
        raise InputFormatError("XOR input must be hex pairs") from exc
    return to_text(_xor(data, utf8(key or DEFAULT_XOR_KEY)), "XOR")


def aes_encode(
    text: str,
    key: str = DEFAULT_AES_PASSWORD,
    iterations: int = crypto.DEFAULT_ITERATIONS,
) -> str:
    return crypto.aes_encrypt(text, key or DEFAULT_AES_PASSWORD, iterations)


def aes_decode(
    text: str,
    key: str = DEFAULT_AES_PASSWORD,
    iterations: int = crypto.DEFAULT_ITERATIONS,
) -> str:
    return crypto.aes_decrypt(text, key or DEFAULT_AES_PASSWORD, iterations)
