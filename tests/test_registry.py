"""
Tests for the transformation catalog and registry.
"""
import pytest

from textforge.core.exceptions import TransformationNotFoundError
from textforge.models.schemas import Reversibility, RiskLevel, StepMode, TransformMode
from textforge.services.context import TransformContext
from textforge.services.engines import (
    CATALOG,
    TransformationDescriptor,
    TransformationRegistry,
    get_registry,
    reversibility_badge,
    risk_icon,
)

ENCODE_ONLY = {
    "leet-heavy", "homoglyph", "zerowidth-encode", "synonym", "uppercase",
    "lowercase", "hash", "sha256", "sha512", "md5", "frequency", "char-stats",
    "qrcode",
}
DECODE_ONLY = {
    "zerowidth-decode", "zerowidth-reveal", "zerowidth-remove",
    "bruteforce-caesar", "jwt-decode",
}

DEFAULT_SAMPLE = "Hello, World! 🔥"
ROUNDTRIP_SAMPLES = {
    "binary7": "Hello, World!",
    "braille": "hello world",
    "emoji-alphabet": "hello world 42",
    "morse": "SOS HELP",
    "bacon": "HELLO",
    "polybius": "HELLO",
}


def _reversible_pairs():
    return [
        d.id for d in CATALOG
        if d.reversibility == Reversibility.REVERSIBLE and d.can_encode and d.can_decode
    ]


@pytest.fixture
def registry():
    return TransformationRegistry()


@pytest.fixture
def context():
    return TransformContext.seeded(1234)


class TestCatalog:
    def test_size_and_order(self, registry):
        ids = registry.list_registered()
        assert len(registry) == 53
        assert ids[0] == "base64"
        assert ids[-1] == "qrcode"
        assert ids.index("base64") < ids.index("url") < ids.index("rot13")

    def test_ids_are_unique(self):
        ids = [d.id for d in CATALOG]
        assert len(ids) == len(set(ids))

    def test_capability_flags_match_functions(self):
        for descriptor in CATALOG:
            assert descriptor.can_encode == (descriptor.encode is not None)
            assert descriptor.can_decode == (descriptor.decode is not None)
            assert descriptor.can_encode or descriptor.can_decode

    def test_one_way_entries(self):
        assert {d.id for d in CATALOG if not d.can_decode} == ENCODE_ONLY
        assert {d.id for d in CATALOG if not d.can_encode} == DECODE_ONLY

    def test_hashes_are_irreversible_and_high_risk(self, registry):
        for tid in ("hash", "sha256", "sha512", "md5"):
            descriptor = registry.get(tid)
            assert descriptor.category == "Hash"
            assert descriptor.reversibility == Reversibility.IRREVERSIBLE
            assert descriptor.risk_level == RiskLevel.HIGH

    def test_analysis_entries_are_irreversible_and_low_risk(self, registry):
        for descriptor in registry.get_by_category("Analysis"):
            assert descriptor.reversibility == Reversibility.IRREVERSIBLE
            assert descriptor.risk_level == RiskLevel.LOW

    def test_function_for(self, registry):
        sha = registry.get("sha256")
        assert sha.function_for(StepMode.ENCODE) is sha.encode
        assert sha.function_for("decode") is None


class TestRegistryLookup:
    def test_lookup_known_and_unknown(self, registry):
        assert registry.lookup("base64").name == "Base64"
        assert registry.lookup("nope") is None

    def test_get_unknown_raises(self, registry):
        with pytest.raises(TransformationNotFoundError) as exc_info:
            registry.get("nope")
        assert exc_info.value.message == "Transformation not found"

    def test_is_registered(self, registry):
        assert registry.is_registered("aes")
        assert not registry.is_registered("AES")

    def test_list_by_capability(self, registry):
        encoders = registry.list_by_capability(TransformMode.ENCODE)
        decoders = registry.list_by_capability("decode")
        assert len(encoders) == 53 - len(DECODE_ONLY)
        assert len(decoders) == 53 - len(ENCODE_ONLY)
        assert all(d.can_encode for d in encoders)
        assert all(d.can_decode for d in decoders)
        assert [d.id for d in encoders] == [d.id for d in CATALOG if d.can_encode]

    def test_detect_mode_lists_everything(self, registry):
        assert registry.list_by_capability(TransformMode.DETECT) == list(CATALOG)

    def test_invalid_mode(self, registry):
        with pytest.raises(ValueError):
            registry.list_by_capability("sideways")

    def test_categories_in_first_appearance_order(self, registry):
        assert registry.categories() == [
            "Base Encoding", "Web", "Cipher", "Substitution", "Steganography",
            "Emoji", "Obfuscation", "Text", "Hash", "Analysis",
        ]

    def test_duplicate_ids_rejected(self):
        duplicate = TransformationDescriptor(
            "base64", "Again", "Base Encoding", "dup",
            Reversibility.REVERSIBLE, RiskLevel.LOW,
        )
        with pytest.raises(ValueError):
            TransformationRegistry(CATALOG + (duplicate,))

    def test_shared_instance(self):
        assert get_registry() is get_registry()
        assert len(get_registry()) == len(CATALOG)


class TestPresentationHelpers:
    def test_badges(self):
        assert reversibility_badge(Reversibility.REVERSIBLE) == {
            "label": "Reversible",
            "className": "badge-reversible",
        }
        assert reversibility_badge("partial")["label"] == "Partial"
        assert reversibility_badge("irreversible")["className"] == "badge-irreversible"

    def test_risk_icons(self):
        assert risk_icon(RiskLevel.LOW) == "●"
        assert risk_icon("medium") == "●●"
        assert risk_icon("high") == "●●●"


class TestRoundTrip:
    """Every reversible entry with both directions inverts its own output."""

    @pytest.mark.parametrize("transformation_id", _reversible_pairs())
    def test_decode_inverts_encode(self, registry, context, transformation_id):
        if transformation_id == "aes":
            context = TransformContext(kdf_iterations=1000)
        descriptor = registry.get(transformation_id)
        sample = ROUNDTRIP_SAMPLES.get(transformation_id, DEFAULT_SAMPLE)
        encoded = descriptor.encode(sample, {}, context)
        assert descriptor.decode(encoded, {}, context) == sample

    @pytest.mark.parametrize(
        "transformation_id, options",
        [
            ("caesar", {"shift": 11}),
            ("custom-rot", {"shift": "20"}),
            ("vigenere", {"key": "LEMON"}),
            ("xor", {"key": "k3y"}),
            ("railfence", {"rails": 5}),
            ("affine", {"a": 7, "b": 3}),
        ],
    )
    def test_roundtrip_with_options(self, registry, context, transformation_id, options):
        descriptor = registry.get(transformation_id)
        encoded = descriptor.encode(DEFAULT_SAMPLE, options, context)
        assert descriptor.decode(encoded, options, context) == DEFAULT_SAMPLE

    def test_zero_width_pair(self, registry, context):
        encoded = registry.get("zerowidth-encode").encode("secret", {"density": "0.5"}, context)
        assert registry.get("zerowidth-decode").decode(encoded, {}, context) == "secret"
        assert registry.get("zerowidth-remove").decode(encoded, {}, context) == "hidden message: "


class TestOptionDefaults:
    """Zero selects the default for counts and coefficients, but not for shifts."""

    def _encode(self, registry, transformation_id, value, options, context=None):
        context = context or TransformContext.seeded(1)
        return registry.get(transformation_id).encode(value, options, context)

    def test_zero_rails_uses_three(self, registry):
        text = "WEAREDISCOVEREDFLEEATONCE"
        assert self._encode(registry, "railfence", text, {"rails": 0}) == "WECRLTEERDSOEEFEAOCAIVDEN"

    def test_zero_affine_coefficients_use_defaults(self, registry):
        encoded = self._encode(registry, "affine", "AFFINE CIPHER", {"a": 0, "b": "0"})
        assert encoded == "IHHWVC SWFRCP"

    def test_zero_density_hides_every_bit_in_the_carrier(self, registry):
        encoded = self._encode(registry, "zerowidth-encode", "hi", {"density": 0})
        assert encoded == self._encode(registry, "zerowidth-encode", "hi", {})
        assert encoded[1] in ("\u200c", "\u200d")

    def test_zero_shift_is_kept(self, registry):
        assert self._encode(registry, "caesar", "abc", {"shift": 0}) == "abc"

    def test_zero_noise_density_is_kept(self, registry):
        assert self._encode(registry, "emoji-noise", "hello", {"density": 0}) == "hello"
