"""Fixed-table codes: Polybius square, Baconian cipher and Morse code."""

import re

# ============================================================================
# Polybius square (I and J share a cell)
# ============================================================================

POLYBIUS_GRID = (
    "ABCDE",
    "FGHIK",
    "LMNOP",
    "QRSTU",
    "VWXYZ",
)

_POLYBIUS_COORDS = {
    letter: f"{row + 1}{col + 1}"
    for row, line in enumerate(POLYBIUS_GRID)
    for col, letter in enumerate(line)
}

_DIGIT_PAIR = re.compile(r"\d{2}")


def polybius_encode(text: str) -> str:
    """
    Uppercase, fold J into I, then emit row/column pairs joined by spaces.

    Characters outside the grid are emitted as themselves.
    """
    folded = text.upper().replace("J", "I")
    return " ".join(_POLYBIUS_COORDS.get(char, char) for char in folded)


def polybius_decode(text: str) -> str:
    """Read every two-digit pair; pairs outside 1..5 decode to ``?``."""
    out = []
    for pair in _DIGIT_PAIR.findall(text):
        row, col = int(pair[0]) - 1, int(pair[1]) - 1
        if 0 <= row < 5 and 0 <= col < 5:
            out.append(POLYBIUS_GRID[row][col])
        else:
            out.append("?")
    return "".join(out)


# ============================================================================
# Baconian cipher (distinct 5-bit A/B code for all 26 letters)
# ============================================================================

BACON_CODE = {
    chr(ord("A") + i): format(i, "05b").replace("0", "A").replace("1", "B")
    for i in range(26)
}
_BACON_REVERSE = {code: letter for letter, code in BACON_CODE.items()}

_NOT_BACON = re.compile(r"[^ABab\s]")


def bacon_encode(text: str) -> str:
    return " ".join(BACON_CODE.get(char, char) for char in text.upper())


def bacon_decode(text: str) -> str:
    """Keep only A/B/whitespace, then decode every 5-letter group (unknown -> ``?``)."""
    cleaned = _NOT_BACON.sub("", text).upper()
    groups = [group for group in cleaned.split() if len(group) == 5]
    return "".join(_BACON_REVERSE.get(group, "?") for group in groups)


# ============================================================================
# International Morse code
# ============================================================================

MORSE_CODE = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..", "0": "-----", "1": ".----", "2": "..---",
    "3": "...--", "4": "....-", "5": ".....", "6": "-....", "7": "--...",
    "8": "---..", "9": "----.", ".": ".-.-.-", ",": "--..--", "?": "..--..",
    "'": ".----.", "!": "-.-.--", "/": "-..-.", "(": "-.--.", ")": "-.--.-",
    "&": ".-...", ":": "---...", ";": "-.-.-.", "=": "-...-", "+": ".-.-.",
    "-": "-....-", "_": "..--.-", '"': ".-..-.", "$": "...-..-", "@": ".--.-.",
    " ": "/",
}
_MORSE_REVERSE = {code: char for char, code in MORSE_CODE.items()}


def morse_encode(text: str) -> str:
    """Codes separated by single spaces; a word gap is ``/``."""
    return " ".join(MORSE_CODE.get(char, char) for char in text.upper())


def morse_decode(text: str) -> str:
    return "".join(_MORSE_REVERSE.get(code, code) for code in text.split(" "))
