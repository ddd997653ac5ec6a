"""Stateless crypto engine.

:class:`CryptoEngine` is the operations surface used by the session layer
and the CLI.  Its only state is the immutable :class:`CryptoParameters`;
keys and buffers belong to the individual call.
"""

from __future__ import annotations

import logging

from filecrypt._crypto.aes import aes_cbc_decrypt, aes_cbc_encrypt
from filecrypt._crypto.hashing import sha256_digest
from filecrypt._crypto.keys import KeyMaterial, KeyRole
from filecrypt._crypto.mac import hmac_sha256
from filecrypt._crypto.rng import generate_key
from filecrypt._crypto.sniff import classify
from filecrypt.config import CryptoParameters
from filecrypt.models.results import CipherEnvelope, DigestResult, MacResult, TextClassification
from filecrypt.policy import MacKeySource, select_mac_key

_logger = logging.getLogger(__name__)


class CryptoEngine:
    """Key generation, AES-CBC, SHA-256, HMAC-SHA256 and text sniffing.

    Parameters
    ----------
    params : CryptoParameters, optional
        Sizing for keys and IVs.  Defaults to :class:`CryptoParameters()`.
    """

    def __init__(self, params: CryptoParameters | None = None) -> None:
        self._params = params if params is not None else CryptoParameters()

    @property
    def params(self) -> CryptoParameters:
        return self._params

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def generate_symmetric_key(self) -> KeyMaterial:
        return generate_key(self._params.symmetric_key_bytes, KeyRole.SYMMETRIC)

    def generate_mac_key(self) -> KeyMaterial:
        return generate_key(self._params.mac_key_bytes, KeyRole.MAC)

    def generate_keys(self) -> tuple[KeyMaterial, KeyMaterial]:
        """Return a fresh ``(symmetric_key, mac_key)`` pair."""
        symmetric = self.generate_symmetric_key()
        mac = self.generate_mac_key()
        _logger.debug("Generated %d-byte symmetric key and %d-byte MAC key", len(symmetric), len(mac))
        return symmetric, mac

    def parse_symmetric_key(self, key_hex: str) -> KeyMaterial:
        """Decode a hex symmetric key, enforcing the configured length."""
        return KeyMaterial.from_hex(key_hex, KeyRole.SYMMETRIC, expected_nbytes=self._params.symmetric_key_bytes)

    @staticmethod
    def parse_mac_key(key_hex: str) -> KeyMaterial:
        """Decode a hex MAC key of any length."""
        return KeyMaterial.from_hex(key_hex, KeyRole.MAC)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def encrypt(self, data: bytes, key: KeyMaterial) -> CipherEnvelope:
        return aes_cbc_encrypt(data, key.buffer, self._params)

    def decrypt(self, envelope: bytes | CipherEnvelope, key: KeyMaterial) -> bytes:
        return aes_cbc_decrypt(envelope, key.buffer, self._params)

    @staticmethod
    def digest(data: bytes) -> DigestResult:
        return sha256_digest(data)

    def compute_mac(
        self,
        data: bytes,
        key: KeyMaterial | None = None,
        *,
        fallback_key: KeyMaterial | None = None,
    ) -> tuple[MacResult, KeyMaterial, MacKeySource]:
        """HMAC-SHA256 *data*, choosing the key with :func:`select_mac_key`.

        Returns the tag, the key that was used, and where it came from.  A
        generated key must be surfaced to the user, otherwise the tag can
        never be reproduced.
        """
        mac_key, source = select_mac_key(key, fallback_key, self.generate_mac_key)
        result = hmac_sha256(data, mac_key.buffer)
        _logger.debug("Computed HMAC over %d bytes with %s key", len(data), source.value)
        return result, mac_key, source

    @staticmethod
    def classify(data: bytes) -> TextClassification:
        return classify(data)
