"""Custom exception hierarchy for filecrypt."""

from __future__ import annotations


class FileCryptError(Exception):
    """Base exception for all filecrypt errors."""


class ConfigurationError(FileCryptError):
    """Invalid or missing configuration.

    Never fatal: :func:`filecrypt.config.load_parameters` catches it and
    substitutes defaults.
    """


class InputError(FileCryptError):
    """Input missing, empty or unreadable; the operation is aborted."""


class KeyFormatError(FileCryptError):
    """Key material could not be decoded or has the wrong shape."""


class InvalidEncoding(KeyFormatError):
    """Hex text has odd length or contains non-hex characters."""


class InvalidKeyLength(KeyFormatError):
    """Key length does not match what the operation requires."""

    def __init__(self, message: str, *, expected: int | None = None, actual: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class CipherError(FileCryptError):
    """Encryption or decryption failure."""


class EnvelopeTooShort(CipherError):
    """Encrypted input is smaller than the IV it must start with."""


class PaddingInvalid(CipherError):
    """Padding check failed after decryption.

    Usually means a wrong key or corrupted data.  The message is the same
    for every failure so callers cannot tell which byte was rejected.
    """


class CipherBackendFailure(CipherError):
    """The underlying cipher implementation raised an unexpected error."""


class RngFailure(FileCryptError):
    """The operating system entropy source could not be read."""
