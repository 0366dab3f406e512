from typing import Any


class TextforgeError(Exception):
    """Base exception for all transformation engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(TextforgeError):
    """Raised when input validation fails."""

    pass


class InputTooLongError(ValidationError):
    """Raised when an input exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Input length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InputFormatError(ValidationError):
    """Raised when input contains characters outside a codec's alphabet."""

    pass


class PipelineFormatError(ValidationError):
    """Raised when a pipeline description document is malformed."""

    pass


class RegistryError(TextforgeError):
    """Base exception for transformation lookup errors."""

    pass


class TransformationNotFoundError(RegistryError):
    """Raised when a transformation id is not in the catalog."""

    def __init__(self, transformation_id: str):
        super().__init__(
            "Transformation not found",
            {"transformation_id": transformation_id},
        )


class UnsupportedModeError(RegistryError):
    """Raised when a transformation does not implement the requested mode."""

    def __init__(self, mode: str, name: str):
        super().__init__(
            f"{mode} not supported for {name}",
            {"mode": mode, "transformation": name},
        )


class CryptoError(TextforgeError):
    """Base exception for cryptographic failures."""

    pass


class DecryptionError(CryptoError):
    """Raised when authenticated decryption fails."""

    def __init__(self, message: str = "Decryption failed - wrong password or corrupted data"):
        super().__init__(message)
