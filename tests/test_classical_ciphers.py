"""
Tests for the classical cipher family.
"""
import pytest

from textforge.services.engines.classical import codes, monoalphabetic, polyalphabetic, transposition


class TestMonoalphabeticCiphers:
    """Shift, mirror and affine ciphers preserve case and non-letters."""

    @pytest.fixture
    def sample_plaintext(self):
        return "Hello, World!"

    def test_caesar_default_shift(self, sample_plaintext):
        assert monoalphabetic.caesar_encode(sample_plaintext) == "Khoor, Zruog!"
        assert monoalphabetic.caesar_decode("Khoor, Zruog!") == sample_plaintext

    def test_caesar_roundtrip_all_shifts(self, sample_plaintext):
        for shift in range(-30, 30):
            encoded = monoalphabetic.caesar_encode(sample_plaintext, shift)
            assert monoalphabetic.caesar_decode(encoded, shift) == sample_plaintext

    def test_custom_rot_default_shift(self):
        assert monoalphabetic.rot_n_encode("abc") == "fgh"
        assert monoalphabetic.rot_n_decode("fgh") == "abc"

    def test_rot13_self_reciprocal(self, sample_plaintext):
        assert monoalphabetic.rot13("Hello") == "Uryyb"
        assert monoalphabetic.rot13(monoalphabetic.rot13(sample_plaintext)) == sample_plaintext

    def test_rot47(self):
        assert monoalphabetic.rot47("Hello") == "w6==@"
        assert monoalphabetic.rot47("w6==@ é") == "Hello é"

    def test_atbash_self_reciprocal(self):
        assert monoalphabetic.atbash("abc XYZ") == "zyx CBA"
        assert monoalphabetic.atbash(monoalphabetic.atbash("Attack at dawn")) == "Attack at dawn"

    def test_affine_known_value(self):
        assert monoalphabetic.affine_encode("AFFINE CIPHER") == "IHHWVC SWFRCP"

    def test_affine_roundtrip_preserves_case_and_punctuation(self, sample_plaintext):
        encoded = monoalphabetic.affine_encode(sample_plaintext, 7, 3)
        assert encoded[5:7] == ", "
        assert monoalphabetic.affine_decode(encoded, 7, 3) == sample_plaintext

    def test_mod_inverse(self):
        assert monoalphabetic.mod_inverse(5) == 21
        assert monoalphabetic.mod_inverse(7) == 15

    def test_affine_non_invertible_key_is_consistent(self):
        """a=13 shares a factor with 26: decoding falls back to inverse 1."""
        assert monoalphabetic.mod_inverse(13) == 1
        first = monoalphabetic.affine_decode("HELLO", 13, 0)
        assert first == monoalphabetic.affine_decode("HELLO", 13, 0)
        assert first == "HELLO"


class TestPolyalphabeticCiphers:
    def test_vigenere_known_value(self):
        assert polyalphabetic.vigenere_encode("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"
        assert polyalphabetic.vigenere_decode("LXFOPVEFRNHR", "LEMON") == "ATTACKATDAWN"

    def test_vigenere_key_skips_non_letters(self):
        assert polyalphabetic.vigenere_encode("AT TA", "LEMON") == "LX FO"

    def test_vigenere_default_key_roundtrip(self):
        text = "Meet me at noon!"
        assert polyalphabetic.vigenere_decode(polyalphabetic.vigenere_encode(text)) == text

    def test_vigenere_key_without_letters_is_identity(self):
        assert polyalphabetic.vigenere_encode("Hello", "123") == "Hello"


class TestTranspositionCiphers:
    def test_rail_fence_known_value(self):
        plaintext = "WEAREDISCOVEREDFLEEATONCE"
        ciphertext = "WECRLTEERDSOEEFEAOCAIVDEN"
        assert transposition.rail_fence_encode(plaintext) == ciphertext
        assert transposition.rail_fence_decode(ciphertext) == plaintext

    @pytest.mark.parametrize("rails", [2, 3, 4, 7, 40])
    def test_rail_fence_roundtrip(self, rails):
        text = "Rail fence keeps spaces, too!"
        encoded = transposition.rail_fence_encode(text, rails)
        assert transposition.rail_fence_decode(encoded, rails) == text

    def test_rail_fence_single_rail_is_identity(self):
        assert transposition.rail_fence_encode("abc", 1) == "abc"
        assert transposition.rail_fence_decode("abc", 0) == "abc"


class TestCodes:
    def test_polybius_merges_i_and_j(self):
        assert codes.polybius_encode("HI") == "23 24"
        assert codes.polybius_encode("j") == "24"
        assert codes.polybius_decode("23 24") == "HI"

    def test_polybius_out_of_range_pair(self):
        assert codes.polybius_decode("11 66") == "A?"

    def test_bacon(self):
        assert codes.bacon_encode("AB") == "AAAAA AAAAB"
        assert codes.bacon_decode("AAAAA AAAAB") == "AB"
        assert codes.bacon_decode(codes.bacon_encode("hello")) == "HELLO"

    def test_morse(self):
        assert codes.morse_encode("SOS") == "... --- ..."
        assert codes.morse_encode("hi you") == ".... .. / -.-- --- ..-"
        assert codes.morse_decode(".... .. / -.-- --- ..-") == "HI YOU"
