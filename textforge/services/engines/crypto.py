"""
Shared cryptographic primitives.

Key derivation is PBKDF2-HMAC-SHA256; symmetric encryption is AES-256-GCM
with a random 128-bit salt and 96-bit nonce prepended to the ciphertext.
All random material comes from the operating system CSPRNG.
"""

import base64
import binascii
import hashlib
import hmac
import logging
import os
import secrets
import string
import uuid

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from textforge.core.exceptions import DecryptionError

logger = logging.getLogger(__name__)

DEFAULT_SALT = "RedConverterSalt2024"
DEFAULT_ITERATIONS = 100_000
KEY_LENGTH = 32  # 256 bits
SALT_LENGTH = 16  # 128 bits
NONCE_LENGTH = 12  # 96 bits

PASSWORD_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

_DIGESTS = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


# ============================================================================
# Digests
# ============================================================================


def digest_hex(algorithm: str, text: str) -> str:
    """Hex digest of the UTF-8 bytes of ``text`` (sha1, sha256 or sha512)."""
    try:
        factory = _DIGESTS[algorithm.lower().replace("-", "")]
    except KeyError:
        raise ValueError(f"Unsupported digest: {algorithm}") from None
    return factory(text.encode("utf-8")).hexdigest()


def hmac_sha256(message: str, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


# ============================================================================
# Key derivation
# ============================================================================


def derive_key(
    password: str,
    salt: str | bytes = DEFAULT_SALT,
    iterations: int = DEFAULT_ITERATIONS,
) -> bytes:
    """Derive a 256-bit key from ``password`` with PBKDF2-HMAC-SHA256."""
    salt_bytes = salt.encode("utf-8") if isinstance(salt, str) else salt
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt_bytes,
        iterations=iterations,
    )
    return kdf.derive(password.encode("utf-8"))


def derive_key_hex(
    password: str,
    salt: str | bytes = DEFAULT_SALT,
    iterations: int = DEFAULT_ITERATIONS,
) -> str:
    return derive_key(password, salt, iterations).hex()


# ============================================================================
# Authenticated encryption
# ============================================================================


def aes_encrypt(plaintext: str, password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """
    Encrypt ``plaintext`` under a key derived from ``password``.

    Output is Base64 of ``salt(16) || nonce(12) || ciphertext || tag``. The
    per-message salt is fed to the KDF as its hex string. Output differs on
    every call.
    """
    salt = generate_random_bytes(SALT_LENGTH)
    nonce = generate_random_bytes(NONCE_LENGTH)
    key = derive_key(password, salt.hex(), iterations)
    ciphertext = AESGCM(key).encrypt(nonce, plaintext.encode("utf-8"), None)
    return base64.b64encode(salt + nonce + ciphertext).decode("ascii")


def aes_decrypt(payload: str, password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """
    Reverse :func:`aes_encrypt`.

    Raises:
        DecryptionError: wrong password, tampered or truncated payload.
    """
    try:
        data = base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.warning("AES payload is not valid Base64")
        raise DecryptionError() from exc

    # 16 tag bytes follow the header even for an empty plaintext.
    if len(data) < SALT_LENGTH + NONCE_LENGTH + 16:
        logger.warning("AES payload truncated (%d bytes)", len(data))
        raise DecryptionError()

    salt = data[:SALT_LENGTH]
    nonce = data[SALT_LENGTH:SALT_LENGTH + NONCE_LENGTH]
    ciphertext = data[SALT_LENGTH + NONCE_LENGTH:]

    key = derive_key(password, salt.hex(), iterations)
    try:
        plaintext = AESGCM(key).decrypt(nonce, ciphertext, None)
    except InvalidTag as exc:
        logger.warning("AES authentication tag mismatch")
        raise DecryptionError() from exc

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecryptionError() from exc


# ============================================================================
# Secure random generation
# ============================================================================


def generate_random_bytes(length: int) -> bytes:
    return os.urandom(length)


def generate_random_hex(length: int) -> str:
    return generate_random_bytes((length + 1) // 2).hex()[:length]


def generate_random_base64(length: int) -> str:
    return base64.b64encode(generate_random_bytes(length)).decode("ascii")


def generate_password(
    length: int = 16,
    uppercase: bool = True,
    lowercase: bool = True,
    numbers: bool = True,
    symbols: bool = True,
) -> str:
    """Random password over the selected character classes (lowercase if none)."""
    chars = ""
    if uppercase:
        chars += string.ascii_uppercase
    if lowercase:
        chars += string.ascii_lowercase
    if numbers:
        chars += string.digits
    if symbols:
        chars += PASSWORD_SYMBOLS
    if not chars:
        chars = string.ascii_lowercase

    return "".join(secrets.choice(chars) for _ in range(length))


def generate_uuid() -> str:
    return str(uuid.uuid4())
