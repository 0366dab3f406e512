import logging
import re
from dataclasses import dataclass
from typing import Callable, ClassVar

from textforge.services.context import TransformContext
from textforge.services.engines.descriptor import TransformationDescriptor
from textforge.services.engines.emoji import (
    BLACK_CIRCLE,
    EMOJI_LETTER_SYMBOLS,
    SKIN_TONES,
    WAVE,
    WHITE_CIRCLE,
)
from textforge.services.engines.registry import TransformationRegistry, get_registry

logger = logging.getLogger(__name__)

JWT_PATTERN = re.compile(r"[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*")
BASE64_PATTERN = re.compile(r"[A-Za-z0-9+/]+=*")
BASE32_PATTERN = re.compile(r"[A-Z2-7]+=*", re.IGNORECASE)
BASE58_PATTERN = re.compile(r"[1-9A-HJ-NP-Za-km-z]+")
HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")
BINARY_PATTERN = re.compile(r"[01\s]+")
PERCENT_PATTERN = re.compile(r"%[0-9A-Fa-f]{2}")
HTML_ENTITY_PATTERN = re.compile(r"&#[0-9]+;|&#x[0-9a-fA-F]+;|&\w+;", re.ASCII)
UNICODE_ESCAPE_PATTERN = re.compile(r"\\u[0-9a-fA-F]{4}")
BRAILLE_PATTERN = re.compile(r"[\u2800-\u28ff]")
ZERO_WIDTH_PATTERN = re.compile(r"[\u200b\u200c\u200d]")
BINARY_EMOJI_PATTERN = re.compile(f"[{BLACK_CIRCLE}{WHITE_CIRCLE}]+")
PUNCTUATION_PATTERN = re.compile(r"[.,]+")
WHITESPACE_PATTERN = re.compile(r"[\t ]+\n?")
MORSE_PATTERN = re.compile(r"[.\-\s/]+")
BACON_PATTERN = re.compile(r"[AB\s]+", re.IGNORECASE)
DIGITS_PATTERN = re.compile(r"[0-9\s]+")
POLYBIUS_PAIR_PATTERN = re.compile(r"[1-5]{2}")
LETTERS_PATTERN = re.compile(r"[A-Za-z\s]+")
PRINTABLE_PATTERN = re.compile(r"[\x20-\x7e]")


@dataclass
class DetectionResult:
    """A candidate transformation with a 0-100 confidence."""

    transformation: TransformationDescriptor
    confidence: int
    reason: str


def _is_jwt(value: str) -> bool:
    return bool(JWT_PATTERN.fullmatch(value))


def _is_base64(value: str) -> bool:
    return bool(BASE64_PATTERN.fullmatch(value)) and len(value) % 4 == 0


def _is_base32(value: str) -> bool:
    # Canonical Base32 is always padded to whole 8-character blocks.
    return bool(BASE32_PATTERN.fullmatch(value)) and len(value) % 8 == 0


def _is_base85(value: str) -> bool:
    return value.startswith("<~") and value.endswith("~>")


def _is_hex(value: str) -> bool:
    return bool(HEX_PATTERN.fullmatch(value)) and len(value) % 2 == 0


def _is_emoji_alphabet(value: str) -> bool:
    return any(symbol in value for symbol in EMOJI_LETTER_SYMBOLS)


def _is_skin_tone(value: str) -> bool:
    return WAVE in value and any(tone in value for tone in SKIN_TONES)


def _is_morse(value: str) -> bool:
    return (
        bool(MORSE_PATTERN.fullmatch(value))
        and "." in value
        and ("-" in value or "/" in value)
    )


def _is_bacon(value: str) -> bool:
    return bool(BACON_PATTERN.fullmatch(value)) and len("".join(value.split())) % 5 == 0


def _is_polybius(value: str) -> bool:
    return bool(DIGITS_PATTERN.fullmatch(value)) and bool(POLYBIUS_PAIR_PATTERN.search(value))


def _is_letter_text(value: str) -> bool:
    return bool(LETTERS_PATTERN.fullmatch(value)) and 10 <= len(value) <= 500


Heuristic = tuple[tuple[str, ...], Callable[[str], bool]]


class FormatDetector:
    """
    Heuristic guesser for the transformation that produced a text.

    ``detect`` runs an ordered battery of independent predicates; result
    order follows battery order and several candidates can match at once.
    """

    HEURISTICS: ClassVar[tuple[Heuristic, ...]] = (
        (("jwt-decode",), _is_jwt),
        (("base64",), _is_base64),
        (("base32",), _is_base32),
        (("base58",), lambda v: bool(BASE58_PATTERN.fullmatch(v))),
        (("base85",), _is_base85),
        (("hex",), _is_hex),
        (("binary",), lambda v: bool(BINARY_PATTERN.fullmatch(v))),
        (("url",), lambda v: bool(PERCENT_PATTERN.search(v))),
        (("html-entity",), lambda v: bool(HTML_ENTITY_PATTERN.search(v))),
        (("unicode-escape",), lambda v: bool(UNICODE_ESCAPE_PATTERN.search(v))),
        (("braille",), lambda v: bool(BRAILLE_PATTERN.search(v))),
        (("zerowidth-decode", "zerowidth-reveal"), lambda v: bool(ZERO_WIDTH_PATTERN.search(v))),
        (("binary-emoji",), lambda v: bool(BINARY_EMOJI_PATTERN.fullmatch(v))),
        (("emoji-alphabet",), _is_emoji_alphabet),
        (("punctuation",), lambda v: bool(PUNCTUATION_PATTERN.fullmatch(v)) and len(v) >= 8),
        (("whitespace",), lambda v: bool(WHITESPACE_PATTERN.fullmatch(v)) and len(v) >= 8),
        (("emoji-skintone",), _is_skin_tone),
        (("morse",), _is_morse),
        (("bacon",), _is_bacon),
        (("polybius",), _is_polybius),
        (("bruteforce-caesar",), _is_letter_text),
    )

    FINAL_PREVIEW_LENGTH: ClassVar[int] = 100

    def __init__(
        self,
        registry: TransformationRegistry | None = None,
        context: TransformContext | None = None,
    ):
        self.registry = registry or get_registry()
        self.context = context or TransformContext()

    def _descriptors(self, ids: tuple[str, ...]) -> list[TransformationDescriptor]:
        found = (self.registry.lookup(tid) for tid in ids)
        return [d for d in found if d is not None]

    def detect(self, value: str) -> list[TransformationDescriptor]:
        """
        Candidate transformations for ``value``.

        Args:
            value: Text of unknown origin

        Returns:
            Matching descriptors in heuristic order; empty when nothing matches
        """
        candidates: list[TransformationDescriptor] = []
        for ids, predicate in self.HEURISTICS:
            if predicate(value):
                candidates.extend(self._descriptors(ids))
        return candidates

    def _base64_confidence(self, descriptor: TransformationDescriptor, value: str) -> int:
        try:
            decoded = descriptor.decode(value, {}, self.context)
        except Exception:
            return 40
        if not decoded:
            return 60
        ratio = len(PRINTABLE_PATTERN.findall(decoded)) / len(decoded)
        if ratio > 0.8:
            return 90
        if ratio > 0.5:
            return 75
        return 60

    def detect_with_confidence(self, value: str) -> list[DetectionResult]:
        """
        Higher-precision subset (JWT, Base64, Hex, Morse) with confidence scores.

        Base64 candidates are decoded and scored by how printable the
        result is.

        Returns:
            Results sorted by confidence, highest first
        """
        results: list[DetectionResult] = []

        if _is_jwt(value):
            parts = value.split(".")
            jwt = self.registry.lookup("jwt-decode")
            if jwt and len(parts) == 3 and len(parts[0]) > 10 and len(parts[1]) > 10:
                results.append(
                    DetectionResult(jwt, 95, "Matches JWT format (header.payload.signature)")
                )

        base64 = self.registry.lookup("base64")
        if base64 and _is_base64(value) and len(value) >= 4:
            results.append(
                DetectionResult(
                    base64,
                    self._base64_confidence(base64, value),
                    "Matches Base64 character set with valid padding",
                )
            )

        hex_descriptor = self.registry.lookup("hex")
        if hex_descriptor and _is_hex(value) and len(value) >= 2:
            results.append(
                DetectionResult(
                    hex_descriptor,
                    80 if len(value) > 8 else 50,
                    "Even number of hexadecimal characters",
                )
            )

        morse = self.registry.lookup("morse")
        if morse and MORSE_PATTERN.fullmatch(value) and "." in value:
            has_dashes = "-" in value
            has_slashes = "/" in value
            if has_dashes and has_slashes:
                confidence = 90
            elif has_dashes:
                confidence = 75
            else:
                confidence = 50
            results.append(
                DetectionResult(morse, confidence, "Contains Morse code characters (. - /)")
            )

        # Stable sort keeps battery order among equal scores.
        results.sort(key=lambda r: r.confidence, reverse=True)
        return results

    def detect_multi_layer(self, value: str, max_depth: int = 3) -> list[str]:
        """
        Peel encoding layers by repeatedly decoding with the first candidate.

        Stops at ``max_depth`` layers, or when the first candidate cannot
        decode, raises, returns its input unchanged or returns an empty string.

        Returns:
            ``"Layer n: <name>"`` entries followed by a ``"Final: ..."`` preview,
            or an empty list when no layer was peeled
        """
        layers: list[str] = []
        current = value

        while len(layers) < max_depth:
            candidates = self.detect(current)
            if not candidates:
                break
            first = candidates[0]
            if first.decode is None:
                break
            try:
                decoded = first.decode(current, {}, self.context)
            except Exception as exc:
                logger.debug("Layer %d: %s decode failed: %s", len(layers) + 1, first.id, exc)
                break
            if decoded == current or not decoded:
                break

            layers.append(f"Layer {len(layers) + 1}: {first.name}")
            logger.debug("Layer %d decoded as %s", len(layers), first.id)
            current = decoded

        if layers:
            preview = current[: self.FINAL_PREVIEW_LENGTH]
            suffix = "..." if len(current) > self.FINAL_PREVIEW_LENGTH else ""
            layers.append(f"Final: {preview}{suffix}")
        return layers


def detect(value: str, registry: TransformationRegistry | None = None) -> list[TransformationDescriptor]:
    return FormatDetector(registry).detect(value)


def detect_with_confidence(
    value: str,
    registry: TransformationRegistry | None = None,
) -> list[DetectionResult]:
    return FormatDetector(registry).detect_with_confidence(value)


def detect_multi_layer(
    value: str,
    max_depth: int = 3,
    registry: TransformationRegistry | None = None,
) -> list[str]:
    return FormatDetector(registry).detect_multi_layer(value, max_depth)
