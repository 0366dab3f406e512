"""
Emoji encodings.

``emoji_alphabet_decode`` matches greedily over up to three code points so
multi-code-point emoji (keycaps, variation-selector forms) decode as one
symbol. Unknown characters pass through unchanged; strict binary alphabets
drop them.
"""

import random
import string

from textforge.services.engines._bytes import from_bits, to_bits, to_text, utf8
from textforge.services.engines.base_encoding import base64_decode, base64_encode

VS16 = "\ufe0f"  # emoji presentation selector
KEYCAP = "\u20e3"
ZWJ = "\u200d"

# ============================================================================
# Emoji alphabet
# ============================================================================

EMOJI_ALPHABET = {
    "a": "🍎", "b": "🍌", "c": "🐱", "d": "🐕", "e": "🦅", "f": "🐸", "g": "🍇",
    "h": "🏠", "i": "🍦", "j": "🃏", "k": "🔑", "l": "🦁", "m": "🌙", "n": "📰",
    "o": "🐙", "p": "🍕", "q": "👸", "r": "🌈", "s": "⭐", "t": "🌲",
    "u": "☂" + VS16, "v": "🎻", "w": "🐋", "x": "✖" + VS16, "y": "💛",
    "z": "⚡", " ": "➖",
    **{digit: digit + VS16 + KEYCAP for digit in string.digits},
}
_EMOJI_ALPHABET_REVERSE = {emoji: char for char, emoji in EMOJI_ALPHABET.items()}
_LONGEST_EMOJI = max(len(emoji) for emoji in EMOJI_ALPHABET.values())

# Letter symbols, used by detection.
EMOJI_LETTER_SYMBOLS = tuple(EMOJI_ALPHABET[c] for c in string.ascii_lowercase)


def emoji_alphabet_encode(text: str) -> str:
    return "".join(EMOJI_ALPHABET.get(char, char) for char in text.lower())


def emoji_alphabet_decode(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        for length in range(_LONGEST_EMOJI, 0, -1):
            symbol = text[i:i + length]
            if symbol in _EMOJI_ALPHABET_REVERSE:
                out.append(_EMOJI_ALPHABET_REVERSE[symbol])
                i += length
                break
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


# ============================================================================
# Binary as circles
# ============================================================================

BLACK_CIRCLE = "⚫"  # 0
WHITE_CIRCLE = "⚪"  # 1


def binary_emoji_encode(text: str) -> str:
    bits = to_bits(utf8(text))
    return bits.replace("0", BLACK_CIRCLE).replace("1", WHITE_CIRCLE)


def binary_emoji_decode(text: str) -> str:
    bits = "".join(
        "0" if c == BLACK_CIRCLE else "1"
        for c in text
        if c in (BLACK_CIRCLE, WHITE_CIRCLE)
    )
    return to_text(from_bits(bits), "Binary emoji")


# ============================================================================
# Base64 alphabet as faces (U+1F600 onwards)
# ============================================================================

_BASE64_SYMBOLS = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/="
BASE64_EMOJI_MAP = {char: chr(0x1F600 + i) for i, char in enumerate(_BASE64_SYMBOLS)}
_BASE64_EMOJI_REVERSE = {emoji: char for char, emoji in BASE64_EMOJI_MAP.items()}


def base64_emoji_encode(text: str) -> str:
    return "".join(BASE64_EMOJI_MAP[char] for char in base64_encode(text))


def base64_emoji_decode(text: str) -> str:
    return base64_decode("".join(_BASE64_EMOJI_REVERSE.get(c, c) for c in text))


# ============================================================================
# Invisible padding and visible noise
# ============================================================================

SKIN_TONES = ("🏻", "🏼", "🏽", "🏾", "🏿")
PADDING_MARKS = (VS16, ZWJ) + SKIN_TONES

NOISE_EMOJIS = ("😀", "😃", "😄", "😁", "😆", "😅", "🤣", "😂", "🙂", "🙃", "😉", "😊")


def _first_utf16_unit(char: str) -> int:
    code_point = ord(char)
    if code_point <= 0xFFFF:
        return code_point
    return 0xD800 + ((code_point - 0x10000) >> 10)


def emoji_padding_encode(text: str) -> str:
    """
    Follow each character with a modifier picked by its first UTF-16 code unit.

    Astral characters are keyed on their high surrogate.
    """
    return "".join(
        char + PADDING_MARKS[_first_utf16_unit(char) % len(PADDING_MARKS)] for char in text
    )


def emoji_padding_decode(text: str) -> str:
    return "".join(c for c in text if c not in PADDING_MARKS)


def emoji_noise_encode(
    text: str,
    density: float = 0.3,
    rng: random.Random | None = None,
) -> str:
    """
    Append a random face after each character with probability ``density``.

    Output depends on ``rng``; pass a seeded generator for repeatable output.
    """
    rng = rng or random.Random()
    out = []
    for char in text:
        out.append(char)
        if rng.random() < density:
            out.append(NOISE_EMOJIS[rng.randrange(len(NOISE_EMOJIS))])
    return "".join(out)


def emoji_noise_decode(text: str) -> str:
    return "".join(c for c in text if c not in NOISE_EMOJIS)


# ============================================================================
# Skin-tone steganography
# ============================================================================

WAVE = "👋"


def emoji_skin_tone_encode(text: str) -> str:
    """
    Two waving hands per byte; the tones carry ``(byte // 32) % 5`` and ``byte % 5``.

    Five tone levels cannot carry a full nibble: decoding rebuilds
    ``32 * high + low``, so only bytes 0-4 survive a round trip.
    """
    out = []
    for byte in utf8(text):
        high = (byte // 32) % 5
        low = byte % 5
        out.append(WAVE + SKIN_TONES[high] + WAVE + SKIN_TONES[low])
    return "".join(out)


def emoji_skin_tone_decode(text: str) -> str:
    data = bytearray()
    i = 0
    while i < len(text) - 3:
        if text[i] == WAVE and text[i + 2] == WAVE:
            high, low = text[i + 1], text[i + 3]
            if high in SKIN_TONES and low in SKIN_TONES:
                data.append(SKIN_TONES.index(high) * 32 + SKIN_TONES.index(low))
                i += 4
                continue
        i += 1
    # Lossy encoding can yield stray continuation bytes.
    return bytes(data).decode("utf-8", errors="replace")
