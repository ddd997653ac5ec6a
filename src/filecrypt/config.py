"""Cryptographic parameter configuration for filecrypt."""

from __future__ import annotations

import json
import logging
import os
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from filecrypt._constants import (
    AES_BLOCK_BYTES,
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_IV_BYTES,
    DEFAULT_MAC_KEY_BYTES,
    DEFAULT_SYMMETRIC_KEY_BYTES,
    VALID_AES_KEY_BYTES,
)
from filecrypt.exceptions import ConfigurationError

_logger = logging.getLogger(__name__)


class CipherMode(StrEnum):
    CBC = "CBC"


class DigestAlgorithm(StrEnum):
    SHA256 = "SHA-256"


class CryptoParameters(BaseModel):
    """Cipher and digest sizing, immutable once loaded.

    Field aliases match the keys of the JSON configuration file, so a
    parsed ``config.json`` object can be passed straight to
    :meth:`model_validate`.

    Parameters
    ----------
    symmetric_key_bytes : int
        AES key length (16, 24 or 32).  JSON key ``aes_key_bytes``.
    iv_bytes : int
        CBC initialization vector length; must equal the AES block size.
        JSON key ``aes_iv_bytes``.
    mac_key_bytes : int
        Length of generated HMAC keys.  JSON key ``hmac_key_bytes``.
    cipher_mode : CipherMode
        Only ``"CBC"`` is supported.  JSON key ``aes_mode``.
    digest_algorithm : DigestAlgorithm
        Only ``"SHA-256"`` is supported.  JSON key ``hash_algorithm``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    symmetric_key_bytes: int = Field(default=DEFAULT_SYMMETRIC_KEY_BYTES, alias="aes_key_bytes", gt=0)
    iv_bytes: int = Field(default=DEFAULT_IV_BYTES, alias="aes_iv_bytes", gt=0)
    mac_key_bytes: int = Field(default=DEFAULT_MAC_KEY_BYTES, alias="hmac_key_bytes", gt=0)
    cipher_mode: CipherMode = Field(default=CipherMode.CBC, alias="aes_mode")
    digest_algorithm: DigestAlgorithm = Field(default=DigestAlgorithm.SHA256, alias="hash_algorithm")

    @model_validator(mode="after")
    def _check_cipher_sizes(self) -> CryptoParameters:
        if self.symmetric_key_bytes not in VALID_AES_KEY_BYTES:
            allowed = ", ".join(str(n) for n in sorted(VALID_AES_KEY_BYTES))
            raise ValueError(f"aes_key_bytes must be one of {allowed} (got {self.symmetric_key_bytes})")
        if self.iv_bytes != AES_BLOCK_BYTES:
            raise ValueError(f"aes_iv_bytes must be {AES_BLOCK_BYTES} for CBC (got {self.iv_bytes})")
        return self


def resolve_config_path(path: str | os.PathLike[str] | None = None) -> Path:
    """Return the config path: explicit *path*, then ``$FILECRYPT_CONFIG``, then ``./config.json``."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path(DEFAULT_CONFIG_FILENAME)


def _read_config_source(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigurationError(f"could not open {path}") from exc
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"{path} is not valid JSON") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")
    return data


def parameters_from_mapping(data: dict[str, Any]) -> CryptoParameters:
    """Build parameters from a config mapping, defaulting any field that fails validation.

    Individual bad fields are dropped and replaced by their defaults; if the
    remaining values are still inconsistent, every field is defaulted.
    """
    try:
        return CryptoParameters.model_validate(data)
    except ValidationError as exc:
        bad_fields = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        _logger.warning("Invalid configuration values (%s); using defaults for them", exc.error_count())

    remaining = {key: value for key, value in data.items() if key not in bad_fields}
    try:
        return CryptoParameters.model_validate(remaining)
    except ValidationError:
        _logger.warning("Configuration is inconsistent; using defaults")
        return CryptoParameters()


def load_parameters(path: str | os.PathLike[str] | None = None) -> CryptoParameters:
    """Load :class:`CryptoParameters` from a JSON config file.

    A missing or malformed file never fails startup: a warning is logged
    and the defaults are returned.

    Parameters
    ----------
    path : str or PathLike, optional
        Config file location.  See :func:`resolve_config_path`.

    Returns
    -------
    CryptoParameters
        Loaded (or default) parameters.
    """
    config_path = resolve_config_path(path)
    try:
        data = _read_config_source(config_path)
    except ConfigurationError as exc:
        _logger.warning("%s; using defaults", exc)
        return CryptoParameters()

    params = parameters_from_mapping(data)
    _logger.debug(
        "Loaded crypto parameters from %s: key=%d iv=%d mac_key=%d",
        config_path,
        params.symmetric_key_bytes,
        params.iv_bytes,
        params.mac_key_bytes,
    )
    return params
