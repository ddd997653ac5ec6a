"""Session output models.

A session holds at most one :data:`ProcessedOutput`; producing a new one
replaces the previous.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from filecrypt.models.results import TextEncoding


class LastAction(StrEnum):
    NONE = "none"
    GENERATED_KEY = "generated_key"
    PROCESSED_DATA = "processed_data"
    DIGEST_OR_MAC_TEXT = "digest_or_mac_text"


class Operation(StrEnum):
    GENERATE_KEY = "generate_key"
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    DIGEST = "digest"
    HMAC = "hmac"


class BinaryOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["binary"] = "binary"
    data: bytes = Field(repr=False)


class TextOutput(BaseModel):
    """Text output.

    Decrypted text keeps the exact plaintext in ``data`` so saving never
    re-encodes it.  Digest text has no ``data`` and is saved as UTF-8.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str = Field(repr=False)
    source_encoding: TextEncoding = TextEncoding.NONE
    data: bytes | None = Field(default=None, repr=False)

    def to_bytes(self) -> bytes:
        if self.data is not None:
            return self.data
        return self.text.encode("utf-8")


class MacOutput(BaseModel):
    """HMAC output: the text shown in preview and the bytes offered for saving."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["mac"] = "mac"
    text: str = Field(repr=False)
    data: bytes = Field(repr=False)
    tag_hex: str


ProcessedOutput = Annotated[BinaryOutput | TextOutput | MacOutput, Field(discriminator="kind")]


class InputFile(BaseModel):
    """The uploaded input: a display name and its full contents."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    data: bytes = Field(repr=False)


class ExportArtifact(BaseModel):
    """What a save dialog would write: a suggested file name and the bytes."""

    model_config = ConfigDict(frozen=True)

    suggested_name: str
    data: bytes = Field(repr=False)
