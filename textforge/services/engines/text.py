"""Plain text transformations: reversal, case, leetspeak and synonym swaps."""

import random

# ============================================================================
# Simple text operations
# ============================================================================


def reverse(text: str) -> str:
    # Code-point reversal; combining sequences are not kept together.
    return text[::-1]


def uppercase(text: str) -> str:
    return text.upper()


def lowercase(text: str) -> str:
    return text.lower()


# ============================================================================
# Leetspeak
# ============================================================================

LEET_LIGHT = {"a": "4", "e": "3", "i": "1", "o": "0", "s": "5", "t": "7", "l": "1", "b": "8"}

LEET_HEAVY = {
    "a": "/-\\", "b": "|3", "c": "(", "d": "|)", "e": "3", "f": "|=", "g": "9",
    "h": "|-|", "i": "!", "j": "_|", "k": "|<", "l": "|_", "m": "|\\/|",
    "n": "|\\|", "o": "0", "p": "|*", "q": "0,", "r": "|2", "s": "$", "t": "+",
    "u": "|_|", "v": "\\/", "w": "\\/\\/", "x": "><", "y": "`/", "z": "2",
}


def leet_light_encode(text: str) -> str:
    return "".join(LEET_LIGHT.get(char, char) for char in text.lower())


def leet_light_decode(text: str) -> str:
    """
    Map digits back to letters.

    '1' is shared by 'i' and 'l'; the later entry wins, so it decodes as 'l'.
    Case is not recoverable.
    """
    reverse_map = {}
    for char, leet in LEET_LIGHT.items():
        reverse_map[leet] = char
    return "".join(reverse_map.get(char, char) for char in text)


def leet_heavy_encode(text: str) -> str:
    return "".join(LEET_HEAVY.get(char, char) for char in text.lower())


# ============================================================================
# Synonym shuffle
# ============================================================================

SYNONYMS = {
    "hello": ("hi", "hey", "greetings"),
    "world": ("earth", "globe", "planet"),
    "good": ("great", "excellent", "fine"),
    "bad": ("terrible", "awful", "poor"),
    "big": ("large", "huge", "massive"),
    "small": ("tiny", "little", "mini"),
    "fast": ("quick", "rapid", "swift"),
    "slow": ("sluggish", "gradual", "leisurely"),
}


def synonym_encode(text: str, rng: random.Random | None = None) -> str:
    """Replace known words with a random synonym. Whitespace collapses to single spaces."""
    rng = rng or random.Random()
    words = []
    for word in text.split():
        choices = SYNONYMS.get(word.lower())
        words.append(rng.choice(choices) if choices else word)
    return " ".join(words)
