"""Result models produced by the crypto engine."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from filecrypt._constants import SHA256_DIGEST_BYTES
from filecrypt.exceptions import EnvelopeTooShort


class TextEncoding(StrEnum):
    UTF8 = "utf-8"
    UTF16LE = "utf-16-le"
    NONE = "none"


class CipherEnvelope(BaseModel):
    """``IV ‖ ciphertext`` as written to disk.

    No header, magic bytes, version tag or MAC.
    """

    model_config = ConfigDict(frozen=True)

    iv: bytes
    ciphertext: bytes

    @classmethod
    def from_bytes(cls, data: bytes, iv_bytes: int) -> CipherEnvelope:
        """Split *data* into IV and ciphertext.

        Raises :class:`EnvelopeTooShort` when *data* cannot hold the IV.
        """
        if len(data) < iv_bytes:
            raise EnvelopeTooShort(f"input too small to contain IV ({len(data)} < {iv_bytes} bytes)")
        return cls(iv=bytes(data[:iv_bytes]), ciphertext=bytes(data[iv_bytes:]))

    def to_bytes(self) -> bytes:
        return self.iv + self.ciphertext

    def __len__(self) -> int:
        return len(self.iv) + len(self.ciphertext)


class DigestResult(BaseModel):
    """A SHA-256 digest."""

    model_config = ConfigDict(frozen=True)

    digest: bytes = Field(min_length=SHA256_DIGEST_BYTES, max_length=SHA256_DIGEST_BYTES)
    algorithm: str = "SHA-256"

    @property
    def hex(self) -> str:
        return self.digest.hex()


class MacResult(BaseModel):
    """An HMAC-SHA256 tag.

    The ``combined_*`` helpers build the presentation artefacts of the
    HMAC operation: the input followed by the tag, as text for preview or
    as bytes for saving.
    """

    model_config = ConfigDict(frozen=True)

    tag: bytes = Field(min_length=SHA256_DIGEST_BYTES, max_length=SHA256_DIGEST_BYTES)
    algorithm: str = "HMAC-SHA256"

    @property
    def hex(self) -> str:
        return self.tag.hex()

    def combined_text(self, data: bytes) -> str:
        """``data`` read as UTF-8 (undecodable bytes replaced) followed by the hex tag."""
        return data.decode("utf-8", errors="replace") + self.hex

    def combined_bytes(self, data: bytes) -> bytes:
        """``data`` followed by the raw tag bytes."""
        return data + self.tag


class TextClassification(BaseModel):
    """Outcome of sniffing decrypted bytes for text."""

    model_config = ConfigDict(frozen=True)

    is_text: bool
    encoding: TextEncoding = TextEncoding.NONE
    text: str | None = Field(default=None, repr=False)
