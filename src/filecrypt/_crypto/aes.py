"""AES-CBC encryption with the IV prepended to the ciphertext.

Envelope layout: ``[IV: iv_bytes][ciphertext: multiple of 16 bytes]``,
PKCS#7 padded, no header and no MAC.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from filecrypt._constants import AES_BLOCK_BYTES
from filecrypt._crypto.rng import random_bytes
from filecrypt.config import CryptoParameters
from filecrypt.exceptions import CipherBackendFailure, InvalidKeyLength, PaddingInvalid
from filecrypt.models.results import CipherEnvelope

_logger = logging.getLogger(__name__)

KeyBytes = bytes | bytearray | memoryview

# One message for every decryption failure after the IV split, so callers
# cannot distinguish a bad block length from a bad padding byte.
_DECRYPT_FAILED = "decryption failed: invalid padding or wrong key"


def _check_key(key: KeyBytes, params: CryptoParameters) -> None:
    if len(key) != params.symmetric_key_bytes:
        raise InvalidKeyLength(
            f"symmetric key must be {params.symmetric_key_bytes} bytes (got {len(key)})",
            expected=params.symmetric_key_bytes,
            actual=len(key),
        )


def aes_cbc_encrypt(plaintext: bytes, key: KeyBytes, params: CryptoParameters) -> CipherEnvelope:
    """Encrypt *plaintext* under AES-CBC with a fresh random IV.

    Parameters
    ----------
    plaintext : bytes
        Data to encrypt; may be empty.
    key : bytes-like
        Raw key of ``params.symmetric_key_bytes`` bytes.
    params : CryptoParameters
        Key and IV sizing.

    Returns
    -------
    CipherEnvelope
        The IV and the PKCS#7-padded ciphertext.

    Raises
    ------
    InvalidKeyLength
        If the key does not match the configured size.
    RngFailure
        If no IV could be drawn.
    CipherBackendFailure
        If the cipher backend fails.
    """
    _check_key(key, params)
    # Never reuse an IV: each call draws its own.
    iv = random_bytes(params.iv_bytes)
    try:
        padder = padding.PKCS7(AES_BLOCK_BYTES * 8).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        ct = encryptor.update(padded) + encryptor.finalize()
    except Exception as exc:
        raise CipherBackendFailure(f"AES encryption failed: {exc}") from exc
    _logger.debug("Encrypted %d bytes into %d-byte envelope", len(plaintext), len(iv) + len(ct))
    return CipherEnvelope(iv=iv, ciphertext=ct)


def aes_cbc_decrypt(envelope: bytes | CipherEnvelope, key: KeyBytes, params: CryptoParameters) -> bytes:
    """Decrypt an ``IV ‖ ciphertext`` envelope.

    Parameters
    ----------
    envelope : bytes or CipherEnvelope
        Raw envelope bytes (as read from disk) or a parsed envelope.
    key : bytes-like
        Raw key of ``params.symmetric_key_bytes`` bytes.
    params : CryptoParameters
        Key and IV sizing.

    Returns
    -------
    bytes
        The recovered plaintext.

    Raises
    ------
    EnvelopeTooShort
        If the input is shorter than the IV.
    InvalidKeyLength
        If the key does not match the configured size.
    PaddingInvalid
        If the ciphertext is not block aligned or its padding is wrong,
        usually because of a wrong key or corrupted data.
    CipherBackendFailure
        If the cipher backend fails in any other way.
    """
    if not isinstance(envelope, CipherEnvelope):
        envelope = CipherEnvelope.from_bytes(envelope, params.iv_bytes)
    _check_key(key, params)

    ct = envelope.ciphertext
    if not ct or len(ct) % AES_BLOCK_BYTES != 0:
        raise PaddingInvalid(_DECRYPT_FAILED)

    try:
        decryptor = Cipher(algorithms.AES(key), modes.CBC(envelope.iv)).decryptor()
        padded = decryptor.update(ct) + decryptor.finalize()
    except Exception as exc:
        raise CipherBackendFailure(f"AES decryption failed: {exc}") from exc

    try:
        unpadder = padding.PKCS7(AES_BLOCK_BYTES * 8).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError:
        raise PaddingInvalid(_DECRYPT_FAILED) from None
    _logger.debug("Decrypted %d-byte envelope into %d bytes", len(envelope), len(plaintext))
    return plaintext
