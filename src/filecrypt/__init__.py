"""filecrypt - AES-CBC, SHA-256 and HMAC-SHA256 operations on whole files."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyfilecrypt")
except PackageNotFoundError:
    __version__ = "0+local"
from filecrypt._crypto.keys import KeyMaterial, KeyRole
from filecrypt._crypto.mac import constant_time_equal
from filecrypt.config import CipherMode, CryptoParameters, DigestAlgorithm, load_parameters
from filecrypt.engine import CryptoEngine
from filecrypt.exceptions import (
    CipherBackendFailure,
    CipherError,
    ConfigurationError,
    EnvelopeTooShort,
    FileCryptError,
    InputError,
    InvalidEncoding,
    InvalidKeyLength,
    KeyFormatError,
    PaddingInvalid,
    RngFailure,
)
from filecrypt.models import (
    BinaryOutput,
    CipherEnvelope,
    DigestResult,
    ExportArtifact,
    LastAction,
    MacOutput,
    MacResult,
    Operation,
    TextClassification,
    TextEncoding,
    TextOutput,
)
from filecrypt.policy import MacKeySource, select_mac_key
from filecrypt.session import CryptoSession

__all__ = [
    "__version__",
    "BinaryOutput",
    "CipherBackendFailure",
    "CipherEnvelope",
    "CipherError",
    "CipherMode",
    "ConfigurationError",
    "CryptoEngine",
    "CryptoParameters",
    "CryptoSession",
    "DigestAlgorithm",
    "DigestResult",
    "EnvelopeTooShort",
    "ExportArtifact",
    "FileCryptError",
    "InputError",
    "InvalidEncoding",
    "InvalidKeyLength",
    "KeyFormatError",
    "KeyMaterial",
    "KeyRole",
    "LastAction",
    "MacKeySource",
    "MacOutput",
    "MacResult",
    "Operation",
    "PaddingInvalid",
    "RngFailure",
    "TextClassification",
    "TextEncoding",
    "TextOutput",
    "constant_time_equal",
    "load_parameters",
    "select_mac_key",
]
