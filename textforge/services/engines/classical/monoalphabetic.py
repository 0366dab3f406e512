"""
Monoalphabetic substitution ciphers.

All of these preserve case and leave non-letters untouched.
"""

import string

ALPHABET = string.ascii_uppercase


def _shift_letter(char: str, shift: int) -> str:
    base = ord("A") if char.isupper() else ord("a")
    return chr((ord(char) - base + shift) % 26 + base)


def _is_ascii_letter(char: str) -> bool:
    return char in string.ascii_letters


def rotate(text: str, shift: int) -> str:
    """Shift every ASCII letter by ``shift`` positions."""
    return "".join(_shift_letter(c, shift) if _is_ascii_letter(c) else c for c in text)


def rot13(text: str) -> str:
    return rotate(text, 13)


def rot47(text: str) -> str:
    """Rotate the 94 printable ASCII characters ``!``..``~`` by 47."""
    return "".join(
        chr(33 + (ord(c) - 33 + 47) % 94) if 33 <= ord(c) <= 126 else c
        for c in text
    )


def rot_n_encode(text: str, shift: int = 5) -> str:
    return rotate(text, shift)


def rot_n_decode(text: str, shift: int = 5) -> str:
    return rotate(text, 26 - (shift % 26))


def caesar_encode(text: str, shift: int = 3) -> str:
    return rot_n_encode(text, shift)


def caesar_decode(text: str, shift: int = 3) -> str:
    return rot_n_decode(text, shift)


def atbash(text: str) -> str:
    """Mirror the alphabet (A<->Z, B<->Y, ...). Self-inverse."""
    out = []
    for char in text:
        if _is_ascii_letter(char):
            base = ord("A") if char.isupper() else ord("a")
            out.append(chr(base + 25 - (ord(char) - base)))
        else:
            out.append(char)
    return "".join(out)


# ============================================================================
# Affine: E(x) = (ax + b) mod 26
# ============================================================================


def mod_inverse(a: int, m: int = 26) -> int:
    """
    Multiplicative inverse of ``a`` modulo ``m`` by search over 1..m-1.

    Returns 1 when no inverse exists (``a`` shares a factor with ``m``), so
    decoding with such an ``a`` yields consistent garbage rather than an error.
    """
    for x in range(1, m):
        if (a % m) * x % m == 1:
            return x
    return 1


def affine_encode(text: str, a: int = 5, b: int = 8) -> str:
    out = []
    for char in text:
        if _is_ascii_letter(char):
            x = ord(char.upper()) - ord("A")
            letter = ALPHABET[(a * x + b) % 26]
            out.append(letter if char.isupper() else letter.lower())
        else:
            out.append(char)
    return "".join(out)


def affine_decode(text: str, a: int = 5, b: int = 8) -> str:
    a_inv = mod_inverse(a, 26)
    out = []
    for char in text:
        if _is_ascii_letter(char):
            y = ord(char.upper()) - ord("A")
            letter = ALPHABET[(a_inv * (y - b)) % 26]
            out.append(letter if char.isupper() else letter.lower())
        else:
            out.append(char)
    return "".join(out)
