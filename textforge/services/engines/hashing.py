"""
One-way digests.

MD5 is implemented here in full; SHA-256/SHA-512 use the standard library
digest. ``demo_hash`` is the legacy 32-bit rolling hash kept for the
``hash`` catalog entry.
"""

import math
import struct

from textforge.services.engines import crypto
from textforge.services.engines._bytes import utf8

# Per-round left-rotation amounts.
_MD5_SHIFTS = (
    [7, 12, 17, 22] * 4
    + [5, 9, 14, 20] * 4
    + [4, 11, 16, 23] * 4
    + [6, 10, 15, 21] * 4
)

# K[i] = floor(abs(sin(i + 1)) * 2**32)
_MD5_CONSTANTS = [int(abs(math.sin(i + 1)) * 2**32) & 0xFFFFFFFF for i in range(64)]

_MD5_INIT = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_MASK32 = 0xFFFFFFFF


def _rotate_left(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _md5_pad(data: bytes) -> bytes:
    bit_length = (len(data) * 8) & 0xFFFFFFFFFFFFFFFF
    padded = data + b"\x80"
    padded += b"\x00" * ((56 - len(padded) % 64) % 64)
    return padded + struct.pack("<Q", bit_length)


def md5_hex(text: str) -> str:
    """RFC 1321 MD5 of the UTF-8 bytes of ``text``."""
    a0, b0, c0, d0 = _MD5_INIT
    message = _md5_pad(utf8(text))

    for offset in range(0, len(message), 64):
        words = struct.unpack("<16I", message[offset:offset + 64])
        a, b, c, d = a0, b0, c0, d0

        for i in range(64):
            if i < 16:
                f = (b & c) | (~b & d)
                g = i
            elif i < 32:
                f = (d & b) | (~d & c)
                g = (5 * i + 1) % 16
            elif i < 48:
                f = b ^ c ^ d
                g = (3 * i + 5) % 16
            else:
                f = c ^ (b | (~d & _MASK32))
                g = (7 * i) % 16

            f = (f + a + _MD5_CONSTANTS[i] + words[g]) & _MASK32
            a, d, c = d, c, b
            b = (b + _rotate_left(f, _MD5_SHIFTS[i])) & _MASK32

        a0 = (a0 + a) & _MASK32
        b0 = (b0 + b) & _MASK32
        c0 = (c0 + c) & _MASK32
        d0 = (d0 + d) & _MASK32

    return struct.pack("<4I", a0, b0, c0, d0).hex()


def sha256_hex(text: str) -> str:
    return crypto.digest_hex("sha256", text)


def sha512_hex(text: str) -> str:
    return crypto.digest_hex("sha512", text)


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def demo_hash(text: str) -> str:
    """
    Non-cryptographic 32-bit rolling hash (``h = h * 31 + unit``).

    Runs over UTF-16 code units with signed 32-bit wraparound and prints the
    absolute value as hex, zero-padded to 8 digits.
    """
    units = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(units), 2):
        unit = units[i] | (units[i + 1] << 8)
        value = _to_int32((value << 5) - value + unit)
    return format(abs(value), "08x")
