"""
Informational transformations.

These produce reports about the input rather than an encoding of it, so
none of them can be inverted.
"""

import base64
import binascii
import json
import logging
import re
from collections import Counter

import qrcode
from qrcode.constants import ERROR_CORRECT_M

from textforge.services.context import TransformContext
from textforge.services.engines.classical.monoalphabetic import rotate

logger = logging.getLogger(__name__)

QR_EMPTY_MESSAGE = "Please enter text to generate a QR code."
JWT_FORMAT_MESSAGE = "Invalid JWT format (expected 3 parts separated by dots)"


def frequency_analysis(text: str) -> str:
    """Letter counts, most frequent first, with their share of all letters."""
    letters = [c for c in text.lower() if "a" <= c <= "z"]
    total = len(letters)
    lines = "\n".join(
        f"{char.upper()}: {count} ({count / total * 100:.1f}%)"
        for char, count in Counter(letters).most_common()
    )
    return (
        "=== Frequency Analysis ===\n"
        f"Total letters: {total}\n\n"
        f"{lines}\n\n"
        "Expected English: E T A O I N S H R"
    )


def brute_force_caesar(text: str) -> str:
    """Every Caesar back-shift from 1 to 25, truncated to 50 characters each."""
    rows = []
    for shift in range(1, 26):
        decoded = rotate(text, -shift)
        suffix = "..." if len(decoded) > 50 else ""
        rows.append(f"ROT {shift:02d}: {decoded[:50]}{suffix}")
    return "\n".join(rows)


def character_stats(text: str) -> str:
    letters = len(re.findall(r"[a-zA-Z]", text))
    digits = len(re.findall(r"[0-9]", text))
    spaces = sum(1 for c in text if c.isspace())
    return (
        "=== Character Statistics ===\n"
        f"Characters: {len(text)}\n"
        f"Bytes (UTF-8): {len(text.encode('utf-8'))}\n"
        f"Words: {len(text.split())}\n"
        f"Lines: {text.count(chr(10)) + 1}\n"
        "\n"
        f"Letters: {letters}\n"
        f"Digits: {digits}\n"
        f"Spaces: {spaces}\n"
        f"Special: {len(text) - letters - digits - spaces}\n"
        "\n"
        f"Uppercase: {len(re.findall(r'[A-Z]', text))}\n"
        f"Lowercase: {len(re.findall(r'[a-z]', text))}"
    )


def _base64url_text(segment: str) -> str:
    padded = segment + "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(padded).decode("utf-8")


def jwt_decode(token: str) -> str:
    """
    Pretty-print a JWT's header and payload. The signature is not verified.

    Malformed tokens produce an explanatory message instead of an error so
    the report can still be shown.
    """
    parts = token.strip().split(".")
    if len(parts) != 3:
        return JWT_FORMAT_MESSAGE
    try:
        header = json.loads(_base64url_text(parts[0]))
        payload = json.loads(_base64url_text(parts[1]))
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        return f"JWT decode error: {exc}"
    return json.dumps(
        {"header": header, "payload": payload, "signature": parts[2]},
        indent=2,
        ensure_ascii=False,
    )


def _render_qr(text: str) -> str:
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, border=0)
    qr.add_data(text)
    qr.make(fit=True)
    matrix = qr.get_matrix()
    size = len(matrix)

    # Two module rows per text line using half blocks.
    lines = [""]
    for y in range(0, size, 2):
        line = "  "
        for x in range(size):
            top = matrix[y][x]
            bottom = matrix[y + 1][x] if y + 1 < size else False
            if top and bottom:
                line += "█"
            elif top:
                line += "▀"
            elif bottom:
                line += "▄"
            else:
                line += " "
        lines.append(line)
    lines.append("")
    return "\n".join(lines)


def qr_code_encode(text: str, context: TransformContext) -> str:
    """
    Render ``text`` as a scannable QR code in Unicode block art.

    Results are memoized in ``context``; a cache hit returns the identical
    string a fresh render would.
    """
    if not text.strip():
        return QR_EMPTY_MESSAGE

    cached = context.cached("qrcode", text)
    if cached is not None:
        return cached

    logger.debug("Rendering QR code for %d characters", len(text))
    return context.remember("qrcode", text, _render_qr(text))
