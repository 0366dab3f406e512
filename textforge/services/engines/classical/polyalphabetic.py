"""Keyword ciphers."""

DEFAULT_KEY = "SECRET"


def _normalize_key(key: str | None) -> str:
    return "".join(c for c in (key or DEFAULT_KEY).upper() if "A" <= c <= "Z")


def _vigenere(text: str, key: str | None, direction: int) -> str:
    shifts = [ord(c) - ord("A") for c in _normalize_key(key)]
    if not shifts:
        return text

    out = []
    key_index = 0
    for char in text:
        if "A" <= char <= "Z" or "a" <= char <= "z":
            base = ord("A") if char.isupper() else ord("a")
            shift = shifts[key_index % len(shifts)] * direction
            out.append(chr((ord(char) - base + shift) % 26 + base))
            key_index += 1
        else:
            out.append(char)
    return "".join(out)


def vigenere_encode(text: str, key: str | None = DEFAULT_KEY) -> str:
    """
    Vigenère encryption.

    The key is reduced to its ASCII letters; the key position only advances
    on letters, so punctuation and spaces do not consume key material. A
    key with no letters leaves the text unchanged.
    """
    return _vigenere(text, key, 1)


def vigenere_decode(text: str, key: str | None = DEFAULT_KEY) -> str:
    return _vigenere(text, key, -1)
