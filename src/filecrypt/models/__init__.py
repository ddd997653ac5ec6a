"""Data models for filecrypt."""

from filecrypt.models.output import (
    BinaryOutput,
    ExportArtifact,
    InputFile,
    LastAction,
    MacOutput,
    Operation,
    ProcessedOutput,
    TextOutput,
)
from filecrypt.models.results import (
    CipherEnvelope,
    DigestResult,
    MacResult,
    TextClassification,
    TextEncoding,
)

__all__ = [
    "BinaryOutput",
    "CipherEnvelope",
    "DigestResult",
    "ExportArtifact",
    "InputFile",
    "LastAction",
    "MacOutput",
    "MacResult",
    "Operation",
    "ProcessedOutput",
    "TextClassification",
    "TextEncoding",
    "TextOutput",
]
