"""Tests for digests, key derivation, AES-GCM and secure generators."""

import base64
import hashlib
import string
import uuid

import pytest

from textforge.core.exceptions import DecryptionError, InputFormatError
from textforge.services.engines import crypto, hashing, modern


class TestMD5:
    def test_empty_string(self):
        assert hashing.md5_hex("") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_known_value(self):
        assert (
            hashing.md5_hex("The quick brown fox jumps over the lazy dog")
            == "9e107d9d372bb6826bd81d3542a419d6"
        )

    @pytest.mark.parametrize("length", [1, 55, 56, 63, 64, 65, 119, 120, 1000])
    def test_matches_hashlib_across_padding_boundaries(self, length):
        text = ("abcdefghij" * 100)[:length]
        assert hashing.md5_hex(text) == hashlib.md5(text.encode()).hexdigest()

    def test_hashes_utf8_bytes(self):
        text = "pässwörd 🔑"
        assert hashing.md5_hex(text) == hashlib.md5(text.encode("utf-8")).hexdigest()


class TestDigests:
    def test_sha256(self):
        assert hashing.sha256_hex("abc") == hashlib.sha256(b"abc").hexdigest()

    def test_sha512(self):
        assert hashing.sha512_hex("abc") == hashlib.sha512(b"abc").hexdigest()

    def test_digest_hex_rejects_unknown_algorithm(self):
        with pytest.raises(ValueError):
            crypto.digest_hex("whirlpool", "abc")

    def test_hmac_sha256(self):
        # RFC 4231 test case 2
        assert crypto.hmac_sha256("what do ya want for nothing?", "Jefe") == (
            "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
        )

    def test_demo_hash(self):
        assert hashing.demo_hash("") == "00000000"
        assert hashing.demo_hash("hello") == "05e918d2"
        assert len(hashing.demo_hash("a much longer input string")) >= 8


class TestKeyDerivation:
    def test_key_is_256_bits(self):
        assert len(crypto.derive_key("password", iterations=1000)) == 32

    def test_deterministic_for_same_salt(self):
        first = crypto.derive_key_hex("password", "salt", 1000)
        assert first == crypto.derive_key_hex("password", "salt", 1000)
        assert first != crypto.derive_key_hex("password", "other", 1000)

    def test_matches_hashlib_pbkdf2(self):
        expected = hashlib.pbkdf2_hmac("sha256", b"pw", b"RedConverterSalt2024", 1000, 32)
        assert crypto.derive_key("pw", iterations=1000) == expected


class TestAES:
    ITERATIONS = 1000

    def test_roundtrip(self):
        payload = crypto.aes_encrypt("top secret 🔥", "pw", self.ITERATIONS)
        assert crypto.aes_decrypt(payload, "pw", self.ITERATIONS) == "top secret 🔥"

    def test_output_differs_per_call(self):
        first = crypto.aes_encrypt("same", "pw", self.ITERATIONS)
        assert first != crypto.aes_encrypt("same", "pw", self.ITERATIONS)

    def test_empty_plaintext(self):
        payload = crypto.aes_encrypt("", "pw", self.ITERATIONS)
        assert crypto.aes_decrypt(payload, "pw", self.ITERATIONS) == ""

    def test_wrong_password_fails_loudly(self):
        payload = crypto.aes_encrypt("secret", "right", self.ITERATIONS)
        with pytest.raises(DecryptionError, match="wrong password or corrupted data"):
            crypto.aes_decrypt(payload, "wrong", self.ITERATIONS)

    def test_truncated_payload(self):
        payload = crypto.aes_encrypt("secret", "pw", self.ITERATIONS)
        with pytest.raises(DecryptionError):
            crypto.aes_decrypt(payload[:20], "pw", self.ITERATIONS)

    def test_not_base64(self):
        with pytest.raises(DecryptionError):
            crypto.aes_decrypt("not base64!!", "pw", self.ITERATIONS)

    def test_modern_wrapper_defaults_password(self):
        payload = modern.aes_encode("x", "", self.ITERATIONS)
        assert modern.aes_decode(payload, "password", self.ITERATIONS) == "x"


class TestXOR:
    def test_known_value(self):
        assert modern.xor_encode("hi", "KEY") == "232c"

    def test_roundtrip(self):
        encoded = modern.xor_encode("Grüße 🔥", "k3y")
        assert modern.xor_decode(encoded, "k3y") == "Grüße 🔥"

    def test_decode_rejects_non_hex(self):
        with pytest.raises(InputFormatError):
            modern.xor_decode("zz")


class TestGenerators:
    def test_password_length_and_charset(self):
        password = crypto.generate_password(40, symbols=False)
        assert len(password) == 40
        assert set(password) <= set(string.ascii_letters + string.digits)

    def test_numbers_only(self):
        password = crypto.generate_password(12, uppercase=False, lowercase=False, symbols=False)
        assert password.isdigit()

    def test_no_classes_falls_back_to_lowercase(self):
        password = crypto.generate_password(12, False, False, False, False)
        assert set(password) <= set(string.ascii_lowercase)

    def test_uuid_is_version_4(self):
        assert uuid.UUID(crypto.generate_uuid()).version == 4

    def test_random_hex_length(self):
        assert len(crypto.generate_random_hex(64)) == 64
        assert len(crypto.generate_random_hex(7)) == 7

    def test_random_base64_decodes_to_requested_bytes(self):
        value = crypto.generate_random_base64(32)
        assert len(base64.b64decode(value)) == 32
