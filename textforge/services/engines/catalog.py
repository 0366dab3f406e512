"""
The transformation catalog.

Declaration order is significant: it is the order every registry listing
returns, and clients group entries by ``category`` in that order.

Adapters translate a step's open ``options`` mapping into keyword
arguments. A missing, ``None`` or empty option falls back to the
algorithm's default; a value that cannot be converted raises
``InputFormatError``. For rail count, affine coefficients and zero-width
density, 0 also means "use the default".
"""

from typing import Any, Callable

from textforge.core.exceptions import InputFormatError
from textforge.models.schemas import Reversibility, RiskLevel
from textforge.services.context import TransformContext
from textforge.services.engines import (
    analysis,
    base_encoding,
    emoji,
    hashing,
    modern,
    steganography,
    text,
    web,
)
from textforge.services.engines.classical import (
    codes,
    monoalphabetic,
    polyalphabetic,
    transposition,
)
from textforge.services.engines.descriptor import Options, Transform, TransformationDescriptor

REVERSIBLE = Reversibility.REVERSIBLE
PARTIAL = Reversibility.PARTIAL
IRREVERSIBLE = Reversibility.IRREVERSIBLE
LOW = RiskLevel.LOW
MEDIUM = RiskLevel.MEDIUM
HIGH = RiskLevel.HIGH


# ============================================================================
# Option handling
# ============================================================================


def _raw_option(options: Options | None, name: str) -> Any:
    if not options:
        return None
    value = options.get(name)
    return None if value == "" else value


def _option(options: Options | None, name: str, default: Any, convert: Callable[[Any], Any]) -> Any:
    value = _raw_option(options, name)
    if value is None:
        return default
    try:
        return convert(value)
    except (TypeError, ValueError) as exc:
        raise InputFormatError(
            f"Invalid value for option '{name}'",
            {"option": name, "value": repr(value)},
        ) from exc


def int_option(options: Options | None, name: str, default: int) -> int:
    return _option(options, name, default, int)


def float_option(options: Options | None, name: str, default: float) -> float:
    return _option(options, name, default, float)


def nonzero_int_option(options: Options | None, name: str, default: int) -> int:
    """Like ``int_option``, but an explicit 0 also selects the default."""
    return int_option(options, name, default) or default


def nonzero_float_option(options: Options | None, name: str, default: float) -> float:
    return float_option(options, name, default) or default


def str_option(options: Options | None, name: str, default: str) -> str:
    return _option(options, name, default, str)


def _plain(func: Callable[[str], str]) -> Transform:
    """Adapt an option-free algorithm."""

    def transform(value: str, options: Options, context: TransformContext) -> str:
        return func(value)

    return transform


# ============================================================================
# Parameterized adapters
# ============================================================================


def _binary7_encode(value: str, options: Options, context: TransformContext) -> str:
    return base_encoding.binary_encode(value, bits=7)


def _caesar_encode(value: str, options: Options, context: TransformContext) -> str:
    return monoalphabetic.caesar_encode(value, int_option(options, "shift", 3))


def _caesar_decode(value: str, options: Options, context: TransformContext) -> str:
    return monoalphabetic.caesar_decode(value, int_option(options, "shift", 3))


def _custom_rot_encode(value: str, options: Options, context: TransformContext) -> str:
    return monoalphabetic.rot_n_encode(value, int_option(options, "shift", 5))


def _custom_rot_decode(value: str, options: Options, context: TransformContext) -> str:
    return monoalphabetic.rot_n_decode(value, int_option(options, "shift", 5))


def _braille_encode(value: str, options: Options, context: TransformContext) -> str:
    return steganography.braille_encode(value, str_option(options, "mode", "alphabetic"))


def _homoglyph_encode(value: str, options: Options, context: TransformContext) -> str:
    return steganography.homoglyph_encode(value, str_option(options, "level", "light"))


def _zero_width_encode(value: str, options: Options, context: TransformContext) -> str:
    return steganography.zero_width_encode(
        value,
        carrier=str_option(options, "carrier", "hidden message: "),
        density=nonzero_float_option(options, "density", 1.0),
        rng=context.rng,
    )


def _emoji_noise_encode(value: str, options: Options, context: TransformContext) -> str:
    return emoji.emoji_noise_encode(
        value, density=float_option(options, "density", 0.3), rng=context.rng
    )


def _synonym_encode(value: str, options: Options, context: TransformContext) -> str:
    return text.synonym_encode(value, rng=context.rng)


def _vigenere_encode(value: str, options: Options, context: TransformContext) -> str:
    return polyalphabetic.vigenere_encode(
        value, str_option(options, "key", polyalphabetic.DEFAULT_KEY)
    )


def _vigenere_decode(value: str, options: Options, context: TransformContext) -> str:
    return polyalphabetic.vigenere_decode(
        value, str_option(options, "key", polyalphabetic.DEFAULT_KEY)
    )


def _xor_encode(value: str, options: Options, context: TransformContext) -> str:
    return modern.xor_encode(value, str_option(options, "key", modern.DEFAULT_XOR_KEY))


def _xor_decode(value: str, options: Options, context: TransformContext) -> str:
    return modern.xor_decode(value, str_option(options, "key", modern.DEFAULT_XOR_KEY))


def _aes_encode(value: str, options: Options, context: TransformContext) -> str:
    return modern.aes_encode(
        value,
        str_option(options, "key", modern.DEFAULT_AES_PASSWORD),
        context.kdf_iterations,
    )


def _aes_decode(value: str, options: Options, context: TransformContext) -> str:
    return modern.aes_decode(
        value,
        str_option(options, "key", modern.DEFAULT_AES_PASSWORD),
        context.kdf_iterations,
    )


def _rail_fence_encode(value: str, options: Options, context: TransformContext) -> str:
    return transposition.rail_fence_encode(value, nonzero_int_option(options, "rails", 3))


def _rail_fence_decode(value: str, options: Options, context: TransformContext) -> str:
    return transposition.rail_fence_decode(value, nonzero_int_option(options, "rails", 3))


def _affine_encode(value: str, options: Options, context: TransformContext) -> str:
    return monoalphabetic.affine_encode(
        value, nonzero_int_option(options, "a", 5), nonzero_int_option(options, "b", 8)
    )


def _affine_decode(value: str, options: Options, context: TransformContext) -> str:
    return monoalphabetic.affine_decode(
        value, nonzero_int_option(options, "a", 5), nonzero_int_option(options, "b", 8)
    )


def _qr_code_encode(value: str, options: Options, context: TransformContext) -> str:
    return analysis.qr_code_encode(value, context)


# ============================================================================
# Catalog
# ============================================================================

CATALOG: tuple[TransformationDescriptor, ...] = (
    # ===== Base encodings =====
    TransformationDescriptor(
        "base64", "Base64", "Base Encoding", "Standard Base64 encoding/decoding",
        REVERSIBLE, LOW,
        _plain(base_encoding.base64_encode), _plain(base_encoding.base64_decode),
    ),
    TransformationDescriptor(
        "base32", "Base32", "Base Encoding", "RFC 4648 compliant Base32 encoding",
        REVERSIBLE, LOW,
        _plain(base_encoding.base32_encode), _plain(base_encoding.base32_decode),
    ),
    TransformationDescriptor(
        "base58", "Base58", "Base Encoding", "Bitcoin-style Base58 encoding",
        REVERSIBLE, LOW,
        _plain(base_encoding.base58_encode), _plain(base_encoding.base58_decode),
    ),
    TransformationDescriptor(
        "base85", "Base85 / ASCII85", "Base Encoding",
        "ASCII85 encoding with <~ ~> delimiters",
        REVERSIBLE, LOW,
        _plain(base_encoding.base85_encode), _plain(base_encoding.base85_decode),
    ),
    TransformationDescriptor(
        "hex", "Hexadecimal", "Base Encoding", "Hex encoding (Base16)",
        REVERSIBLE, LOW,
        _plain(base_encoding.hex_encode), _plain(base_encoding.hex_decode),
    ),
    TransformationDescriptor(
        "binary", "Binary (8-bit)", "Base Encoding", "8-bit binary representation",
        REVERSIBLE, LOW,
        _plain(base_encoding.binary_encode), _plain(base_encoding.binary_decode),
    ),
    TransformationDescriptor(
        "binary7", "Binary (7-bit)", "Base Encoding", "7-bit binary (ASCII range)",
        REVERSIBLE, LOW,
        _binary7_encode, _plain(base_encoding.binary_decode),
    ),
    # ===== Web =====
    TransformationDescriptor(
        "url", "URL Encode", "Web", "Percent-encoding for URLs",
        REVERSIBLE, LOW,
        _plain(web.url_encode), _plain(web.url_decode),
    ),
    TransformationDescriptor(
        "html-entity", "HTML Entity", "Web", "HTML numeric character references",
        REVERSIBLE, LOW,
        _plain(web.html_entity_encode), _plain(web.html_entity_decode),
    ),
    TransformationDescriptor(
        "unicode-escape", "Unicode Escape", "Web", "JavaScript-style \\uXXXX escapes",
        REVERSIBLE, LOW,
        _plain(web.unicode_escape_encode), _plain(web.unicode_escape_decode),
    ),
    # ===== Ciphers =====
    TransformationDescriptor(
        "rot13", "ROT13", "Cipher", "Caesar cipher with 13-character rotation",
        REVERSIBLE, LOW,
        _plain(monoalphabetic.rot13), _plain(monoalphabetic.rot13),
    ),
    TransformationDescriptor(
        "rot47", "ROT47", "Cipher", "Rotates ASCII printable characters",
        REVERSIBLE, LOW,
        _plain(monoalphabetic.rot47), _plain(monoalphabetic.rot47),
    ),
    TransformationDescriptor(
        "caesar", "Caesar Cipher", "Cipher", "Classic shift cipher (default shift: 3)",
        REVERSIBLE, LOW,
        _caesar_encode, _caesar_decode,
    ),
    TransformationDescriptor(
        "atbash", "Atbash Cipher", "Cipher", "Hebrew mirror cipher (A↔Z, B↔Y, etc.)",
        REVERSIBLE, LOW,
        _plain(monoalphabetic.atbash), _plain(monoalphabetic.atbash),
    ),
    TransformationDescriptor(
        "custom-rot", "Custom ROT", "Cipher", "User-defined rotation shift (default: 5)",
        REVERSIBLE, LOW,
        _custom_rot_encode, _custom_rot_decode,
    ),
    # ===== Leetspeak =====
    TransformationDescriptor(
        "leet-light", "Leetspeak (Light)", "Substitution",
        "Simple letter substitution (a→4, e→3)",
        PARTIAL, LOW,
        _plain(text.leet_light_encode), _plain(text.leet_light_decode),
    ),
    TransformationDescriptor(
        "leet-heavy", "Leetspeak (Heavy)", "Substitution",
        "Complex letter substitution (a→/-\\)",
        IRREVERSIBLE, MEDIUM,
        _plain(text.leet_heavy_encode),
    ),
    # ===== Steganography =====
    TransformationDescriptor(
        "braille", "Braille Unicode", "Steganography",
        "Encode text as Braille Unicode characters",
        REVERSIBLE, LOW,
        _braille_encode, _plain(steganography.braille_decode),
    ),
    TransformationDescriptor(
        "homoglyph", "Homoglyph", "Steganography",
        "Replace characters with similar-looking Unicode",
        IRREVERSIBLE, MEDIUM,
        _homoglyph_encode,
    ),
    TransformationDescriptor(
        "zerowidth-encode", "Zero-Width Encode", "Steganography",
        "Hide secret message in zero-width characters",
        REVERSIBLE, LOW,
        encode=_zero_width_encode,
    ),
    TransformationDescriptor(
        "zerowidth-decode", "Zero-Width Decode", "Steganography",
        "Extract hidden message from zero-width chars",
        REVERSIBLE, LOW,
        decode=_plain(steganography.zero_width_decode),
    ),
    TransformationDescriptor(
        "zerowidth-reveal", "Zero-Width Reveal", "Steganography",
        "Visualize hidden zero-width characters",
        REVERSIBLE, LOW,
        decode=_plain(steganography.zero_width_reveal),
    ),
    TransformationDescriptor(
        "zerowidth-remove", "Zero-Width Remove", "Steganography",
        "Strip all zero-width characters",
        IRREVERSIBLE, LOW,
        decode=_plain(steganography.zero_width_remove),
    ),
    # ===== Emoji =====
    TransformationDescriptor(
        "emoji-alphabet", "Emoji Alphabet", "Emoji", "Map letters to themed emojis (A→🍎)",
        REVERSIBLE, LOW,
        _plain(emoji.emoji_alphabet_encode), _plain(emoji.emoji_alphabet_decode),
    ),
    TransformationDescriptor(
        "binary-emoji", "Binary Emoji", "Emoji", "Binary as circles (0→⚫, 1→⚪)",
        REVERSIBLE, LOW,
        _plain(emoji.binary_emoji_encode), _plain(emoji.binary_emoji_decode),
    ),
    TransformationDescriptor(
        "base64-emoji", "Base64 → Emoji", "Emoji", "Base64 characters as face emojis",
        REVERSIBLE, LOW,
        _plain(emoji.base64_emoji_encode), _plain(emoji.base64_emoji_decode),
    ),
    TransformationDescriptor(
        "emoji-padding", "Emoji Padding", "Emoji", "Add invisible emoji modifiers",
        REVERSIBLE, LOW,
        _plain(emoji.emoji_padding_encode), _plain(emoji.emoji_padding_decode),
    ),
    TransformationDescriptor(
        "emoji-noise", "Emoji Noise", "Emoji", "Inject random face emojis as noise",
        REVERSIBLE, LOW,
        _emoji_noise_encode, _plain(emoji.emoji_noise_decode),
    ),
    TransformationDescriptor(
        "emoji-skintone", "Emoji Skin Tone", "Emoji", "Encode data in skin tone variations",
        PARTIAL, LOW,
        _plain(emoji.emoji_skin_tone_encode), _plain(emoji.emoji_skin_tone_decode),
    ),
    # ===== Obfuscation =====
    TransformationDescriptor(
        "case-encode", "Case Encoding", "Obfuscation",
        "Encode in letter case (upper=1, lower=0)",
        REVERSIBLE, LOW,
        _plain(steganography.case_encode), _plain(steganography.case_decode),
    ),
    TransformationDescriptor(
        "whitespace", "Whitespace", "Obfuscation", "Encode as tabs and spaces",
        REVERSIBLE, LOW,
        _plain(steganography.whitespace_encode), _plain(steganography.whitespace_decode),
    ),
    TransformationDescriptor(
        "punctuation", "Punctuation", "Obfuscation", "Encode as dots and commas",
        REVERSIBLE, LOW,
        _plain(steganography.punctuation_encode), _plain(steganography.punctuation_decode),
    ),
    TransformationDescriptor(
        "synonym", "Synonym Shuffle", "Obfuscation", "Replace words with random synonyms",
        IRREVERSIBLE, HIGH,
        _synonym_encode,
    ),
    # ===== Text utilities =====
    TransformationDescriptor(
        "reverse", "Reverse", "Text", "Reverse character order",
        REVERSIBLE, LOW,
        _plain(text.reverse), _plain(text.reverse),
    ),
    TransformationDescriptor(
        "uppercase", "Uppercase", "Text", "Convert to uppercase",
        PARTIAL, LOW,
        _plain(text.uppercase),
    ),
    TransformationDescriptor(
        "lowercase", "Lowercase", "Text", "Convert to lowercase",
        PARTIAL, LOW,
        _plain(text.lowercase),
    ),
    # ===== Hash =====
    TransformationDescriptor(
        "hash", "Hash (Demo)", "Hash", "One-way hash function",
        IRREVERSIBLE, HIGH,
        _plain(hashing.demo_hash),
    ),
    # ===== Keyed and classical ciphers =====
    TransformationDescriptor(
        "vigenere", "Vigenère Cipher", "Cipher",
        "Polyalphabetic cipher with keyword (default: SECRET)",
        REVERSIBLE, LOW,
        _vigenere_encode, _vigenere_decode,
    ),
    TransformationDescriptor(
        "xor", "XOR Encryption", "Cipher", "Symmetric XOR cipher with key (output as hex)",
        REVERSIBLE, LOW,
        _xor_encode, _xor_decode,
    ),
    TransformationDescriptor(
        "aes", "AES Encryption", "Cipher", "AES-256-GCM encryption with PBKDF2 key derivation",
        REVERSIBLE, MEDIUM,
        _aes_encode, _aes_decode,
    ),
    TransformationDescriptor(
        "morse", "Morse Code", "Cipher", "International Morse code encoding",
        REVERSIBLE, LOW,
        _plain(codes.morse_encode), _plain(codes.morse_decode),
    ),
    TransformationDescriptor(
        "bacon", "Bacon Cipher", "Cipher", "Baconian cipher using A/B (steganographic)",
        REVERSIBLE, LOW,
        _plain(codes.bacon_encode), _plain(codes.bacon_decode),
    ),
    TransformationDescriptor(
        "railfence", "Rail Fence Cipher", "Cipher", "Transposition cipher with 3 rails",
        REVERSIBLE, LOW,
        _rail_fence_encode, _rail_fence_decode,
    ),
    TransformationDescriptor(
        "affine", "Affine Cipher", "Cipher", "Mathematical cipher (ax + b mod 26)",
        REVERSIBLE, LOW,
        _affine_encode, _affine_decode,
    ),
    TransformationDescriptor(
        "polybius", "Polybius Square", "Cipher", "5x5 grid encoding (row/col coordinates)",
        REVERSIBLE, LOW,
        _plain(codes.polybius_encode), _plain(codes.polybius_decode),
    ),
    # ===== Cryptographic hashes =====
    TransformationDescriptor(
        "sha256", "SHA-256", "Hash", "SHA-256 cryptographic hash (256-bit)",
        IRREVERSIBLE, HIGH,
        _plain(hashing.sha256_hex),
    ),
    TransformationDescriptor(
        "sha512", "SHA-512", "Hash", "SHA-512 cryptographic hash (512-bit)",
        IRREVERSIBLE, HIGH,
        _plain(hashing.sha512_hex),
    ),
    TransformationDescriptor(
        "md5", "MD5", "Hash", "MD5 hash (128-bit, legacy)",
        IRREVERSIBLE, HIGH,
        _plain(hashing.md5_hex),
    ),
    # ===== Analysis =====
    TransformationDescriptor(
        "frequency", "Frequency Analysis", "Analysis",
        "Character frequency analysis for cryptanalysis",
        IRREVERSIBLE, LOW,
        _plain(analysis.frequency_analysis),
    ),
    TransformationDescriptor(
        "bruteforce-caesar", "Brute Force Caesar", "Analysis",
        "Try all 25 Caesar/ROT shift values",
        IRREVERSIBLE, LOW,
        decode=_plain(analysis.brute_force_caesar),
    ),
    TransformationDescriptor(
        "char-stats", "Character Statistics", "Analysis",
        "Count characters, words, lines, bytes",
        IRREVERSIBLE, LOW,
        _plain(analysis.character_stats),
    ),
    TransformationDescriptor(
        "jwt-decode", "JWT Decoder", "Analysis",
        "Decode JWT header and payload (signature not verified)",
        IRREVERSIBLE, LOW,
        decode=_plain(analysis.jwt_decode),
    ),
    TransformationDescriptor(
        "qrcode", "QR Code", "Analysis", "Render text as a scannable QR code",
        IRREVERSIBLE, LOW,
        _qr_code_encode,
    ),
)
