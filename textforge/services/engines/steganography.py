"""
Steganographic and look-alike encodings.

Decoders here tolerate foreign characters: marker-based decoders ignore
anything that is not a marker, and map-based decoders pass unknown
characters through. Trailing bit groups shorter than a byte are dropped.
"""

import random
import re
import string

from textforge.services.engines._bytes import from_bits, to_bits, to_text, utf8

# ============================================================================
# Braille
# ============================================================================

# Digits reuse the cells of a-j, as in literary Braille without a number sign.
_BRAILLE_LETTERS = "⠁⠃⠉⠙⠑⠋⠛⠓⠊⠚⠅⠇⠍⠝⠕⠏⠟⠗⠎⠞⠥⠧⠺⠭⠽⠵"
BRAILLE_MAP = {
    **dict(zip(string.ascii_lowercase, _BRAILLE_LETTERS)),
    " ": "\u2800",
    **{digit: _BRAILLE_LETTERS[(int(digit) - 1) % 10] for digit in string.digits},
}
# Letters win over digits for the shared cells.
_BRAILLE_REVERSE = {
    cell: char for char, cell in reversed(list(BRAILLE_MAP.items()))
}

BRAILLE_ONE = "⠿"  # all six dots raised
BRAILLE_ZERO = "\u2800"  # blank cell
_BRAILLE_BINARY = re.compile(f"^[{BRAILLE_ONE}{BRAILLE_ZERO}]+$")


def braille_encode(text: str, mode: str = "alphabetic") -> str:
    """
    ``alphabetic``: lowercase letters, digits and space map to cells.
    ``binary``: every UTF-8 byte becomes 8 cells (full cell = 1, blank = 0).
    """
    if mode == "binary":
        bits = to_bits(utf8(text))
        return "".join(BRAILLE_ONE if bit == "1" else BRAILLE_ZERO for bit in bits)
    return "".join(BRAILLE_MAP.get(char, char) for char in text.lower())


def braille_decode(text: str) -> str:
    """Decode binary-mode cells when only full/blank cells appear, else map cells back."""
    compact = "".join(text.split())
    if _BRAILLE_BINARY.match(compact):
        bits = "".join("1" if cell == BRAILLE_ONE else "0" for cell in compact)
        return to_text(from_bits(bits), "Braille")
    return "".join(_BRAILLE_REVERSE.get(char, char) for char in text)


# ============================================================================
# Homoglyphs (Latin -> Cyrillic look-alikes)
# ============================================================================

HOMOGLYPHS_LIGHT = {
    "a": "а", "c": "с", "e": "е", "o": "о", "p": "р", "x": "х", "y": "у",
    "A": "А", "B": "В", "C": "С", "E": "Е", "H": "Н", "K": "К", "M": "М",
    "O": "О", "P": "Р", "T": "Т", "X": "Х",
}

HOMOGLYPHS_HEAVY = {
    **HOMOGLYPHS_LIGHT,
    "i": "і", "j": "ј", "s": "ѕ", "I": "І", "J": "Ј", "S": "Ѕ",
    "0": "О", "1": "І", "3": "З", "6": "б",
}


def homoglyph_encode(text: str, level: str = "light") -> str:
    table = HOMOGLYPHS_HEAVY if level == "heavy" else HOMOGLYPHS_LIGHT
    return "".join(table.get(char, char) for char in text)


# ============================================================================
# Zero-width characters
# ============================================================================

ZW_SPACE = "\u200b"
ZW_NON_JOINER = "\u200c"  # bit 0
ZW_JOINER = "\u200d"  # bit 1

_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d]")
_ZW_LABELS = {ZW_SPACE: "[ZWSP]", ZW_JOINER: "[ZWJ]", ZW_NON_JOINER: "[ZWNJ]"}


def zero_width_encode(
    secret: str,
    carrier: str = "hidden message: ",
    density: float = 1.0,
    rng: random.Random | None = None,
) -> str:
    """
    Interleave the bits of ``secret`` after carrier characters.

    After each carrier character a marker is emitted with probability
    ``density``; remaining bits are appended after the carrier. With
    ``density < 1`` placement depends on ``rng`` and is not repeatable
    unless ``rng`` is seeded.
    """
    rng = rng or random.Random()
    bits = to_bits(utf8(secret))
    markers = [ZW_JOINER if bit == "1" else ZW_NON_JOINER for bit in bits]

    out = []
    index = 0
    for char in carrier:
        out.append(char)
        if index < len(markers) and rng.random() < density:
            out.append(markers[index])
            index += 1
    out.extend(markers[index:])
    return "".join(out)


def zero_width_decode(text: str) -> str:
    bits = "".join("1" if c == ZW_JOINER else "0" for c in text if c in (ZW_JOINER, ZW_NON_JOINER))
    return to_text(from_bits(bits), "Zero-width")


def zero_width_reveal(text: str) -> str:
    return _ZERO_WIDTH.sub(lambda m: _ZW_LABELS[m.group(0)], text)


def zero_width_remove(text: str) -> str:
    return _ZERO_WIDTH.sub("", text)


# ============================================================================
# Case, whitespace and punctuation bit carriers
# ============================================================================

CASE_CARRIER = "thequickbrownfoxjumpsoverthelazydog"


def case_encode(text: str) -> str:
    """One carrier letter per bit: uppercase = 1, lowercase = 0."""
    bits = to_bits(utf8(text))
    repeats = -(-len(bits) // len(CASE_CARRIER))
    carrier = CASE_CARRIER * repeats
    return "".join(
        char.upper() if bit == "1" else char
        for char, bit in zip(carrier, bits)
    )


def case_decode(text: str) -> str:
    bits = "".join("1" if c.isupper() else "0" for c in text if c in string.ascii_letters)
    return to_text(from_bits(bits), "Case")


def whitespace_encode(text: str) -> str:
    """Tab = 1, space = 0, terminated by a newline."""
    bits = to_bits(utf8(text))
    return bits.replace("1", "\t").replace("0", " ") + "\n"


def whitespace_decode(text: str) -> str:
    bits = "".join("1" if c == "\t" else "0" for c in text if c in "\t ")
    return to_text(from_bits(bits), "Whitespace")


def punctuation_encode(text: str) -> str:
    """Comma = 1, period = 0."""
    return to_bits(utf8(text)).replace("1", ",").replace("0", ".")


def punctuation_decode(text: str) -> str:
    bits = "".join("1" if c == "," else "0" for c in text if c in ".,")
    return to_text(from_bits(bits), "Punctuation")
