"""Session-scoped orchestration on top of :class:`CryptoEngine`.

A :class:`CryptoSession` holds what a user interface needs between
actions: the uploaded input, the two key fields, the single live output
and the last action.  Operations compute their complete result first and
only then commit it, so a failing operation leaves the session untouched.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Any

from filecrypt._constants import PREVIEW_MAX_CHARS
from filecrypt._redact import redact_for_log
from filecrypt.engine import CryptoEngine
from filecrypt.exceptions import InputError, KeyFormatError
from filecrypt.keyfile import KeyPairHex, format_keypair, suggested_keypair_name
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
from filecrypt.policy import MacKeySource

_logger = logging.getLogger(__name__)

_EXPORT_SUFFIXES: dict[Operation, str] = {
    Operation.ENCRYPT: ".aescbc",
    Operation.DIGEST: ".sha256",
    Operation.HMAC: ".hmac",
}


class CryptoSession:
    """Mutable session state around a stateless engine.

    Parameters
    ----------
    engine : CryptoEngine, optional
        Engine to run operations on.  Defaults to one with default
        parameters.
    """

    def __init__(self, engine: CryptoEngine | None = None) -> None:
        self.engine = engine if engine is not None else CryptoEngine()
        self.current_input: InputFile | None = None
        self.last_output: ProcessedOutput | None = None
        self.last_action = LastAction.NONE
        self.last_operation: Operation | None = None
        self.symmetric_key_hex = ""
        self.mac_key_hex = ""
        self.status = "Idle"
        self._preview = ""

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        """Session state as a dict (keys included, so redact before logging)."""
        return {
            "input": self.current_input.name if self.current_input else None,
            "input_size": len(self.current_input.data) if self.current_input else 0,
            "last_action": self.last_action,
            "last_operation": self.last_operation,
            "output_kind": self.last_output.kind if self.last_output else None,
            "symmetric_key_hex": self.symmetric_key_hex,
            "hmac_key_hex": self.mac_key_hex,
            "status": self.status,
        }

    def _commit(
        self,
        *,
        action: LastAction,
        operation: Operation | None,
        output: ProcessedOutput | None,
        preview: str,
        status: str,
    ) -> None:
        self.last_action = action
        self.last_operation = operation
        self.last_output = output
        self._preview = preview
        self.status = status
        _logger.debug("Session updated: %s", redact_for_log(self.snapshot()))

    def preview(self) -> str:
        """Text a user interface would show for the current output."""
        return self._preview

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def upload(self, name: str, data: bytes) -> None:
        """Select a new input; clears any previous output."""
        self.current_input = InputFile(name=name, data=data)
        self._commit(
            action=LastAction.NONE,
            operation=None,
            output=None,
            preview="",
            status=f"Selected: {name}",
        )

    def generate_keys(self) -> KeyPairHex:
        """Generate a symmetric key and an HMAC key and fill both key fields."""
        symmetric, mac = self.engine.generate_keys()
        with symmetric, mac:
            keys = KeyPairHex(symmetric_key_hex=symmetric.hex, hmac_key_hex=mac.hex)
        self.symmetric_key_hex = keys.symmetric_key_hex
        self.mac_key_hex = keys.hmac_key_hex
        self._commit(
            action=LastAction.GENERATED_KEY,
            operation=Operation.GENERATE_KEY,
            output=None,
            preview="Symmetric and HMAC keys generated. Export to save the key pair.",
            status="Generated symmetric key and HMAC key (shown in hex)",
        )
        return keys

    def process(self, operation: Operation) -> ProcessedOutput | None:
        """Run *operation* on the current input.

        Raises
        ------
        InputError
            If no input was uploaded or it is empty.
        KeyFormatError
            If a key field holds bad hex, has the wrong length, or decryption
            has no key.
        CipherError
            If encryption or decryption fails.
        """
        operation = Operation(operation)
        if operation is Operation.GENERATE_KEY:
            self.generate_keys()
            return None

        if self.current_input is None:
            raise InputError("Please upload a file first.")
        data = self.current_input.data
        if not data:
            raise InputError(f"input {self.current_input.name!r} is empty")

        if operation is Operation.ENCRYPT:
            self._encrypt(data)
        elif operation is Operation.DECRYPT:
            self._decrypt(data)
        elif operation is Operation.DIGEST:
            self._digest(data)
        else:
            self._hmac(data)
        return self.last_output

    def _encrypt(self, data: bytes) -> None:
        generated: KeyPairHex | None = None
        if not self.symmetric_key_hex.strip():
            symmetric, mac = self.engine.generate_keys()
            with symmetric, mac:
                generated = KeyPairHex(symmetric_key_hex=symmetric.hex, hmac_key_hex=mac.hex)
        key_hex = generated.symmetric_key_hex if generated else self.symmetric_key_hex

        with self.engine.parse_symmetric_key(key_hex) as key:
            envelope = self.engine.encrypt(data, key)

        if generated is not None:
            self.symmetric_key_hex = generated.symmetric_key_hex
            self.mac_key_hex = generated.hmac_key_hex
        blob = envelope.to_bytes()
        self._commit(
            action=LastAction.PROCESSED_DATA,
            operation=Operation.ENCRYPT,
            output=BinaryOutput(data=blob),
            preview=f"Encryption successful. Ciphertext size (IV + ciphertext): {len(blob)} bytes",
            status="Encryption done (no HMAC)",
        )

    def _decrypt(self, data: bytes) -> None:
        if not self.symmetric_key_hex.strip():
            raise KeyFormatError("Please provide a symmetric key (hex) or generate one.")
        with self.engine.parse_symmetric_key(self.symmetric_key_hex) as key:
            plaintext = self.engine.decrypt(data, key)

        output: ProcessedOutput
        if not plaintext:
            output = BinaryOutput(data=plaintext)
            preview = "Decryption produced empty output"
        else:
            sniffed = self.engine.classify(plaintext)
            if sniffed.is_text and sniffed.text is not None:
                output = TextOutput(text=sniffed.text, source_encoding=sniffed.encoding, data=plaintext)
                preview = sniffed.text[:PREVIEW_MAX_CHARS]
            else:
                output = BinaryOutput(data=plaintext)
                preview = f"Decryption successful. Plaintext size: {len(plaintext)} bytes"
        self._commit(
            action=LastAction.PROCESSED_DATA,
            operation=Operation.DECRYPT,
            output=output,
            preview=preview,
            status="Decryption done",
        )

    def _digest(self, data: bytes) -> None:
        digest_hex = self.engine.digest(data).hex
        self._commit(
            action=LastAction.DIGEST_OR_MAC_TEXT,
            operation=Operation.DIGEST,
            output=TextOutput(text=digest_hex),
            preview=digest_hex,
            status="SHA-256 generated",
        )

    def _hmac(self, data: bytes) -> None:
        explicit = self.engine.parse_mac_key(self.mac_key_hex) if self.mac_key_hex.strip() else None
        fallback = None
        if explicit is None and self.symmetric_key_hex.strip():
            # Used as raw bytes of any length, not checked against the AES key size.
            fallback = self.engine.parse_mac_key(self.symmetric_key_hex)

        try:
            result, used_key, source = self.engine.compute_mac(data, explicit, fallback_key=fallback)
            with used_key:
                generated_hex = used_key.hex if source is MacKeySource.GENERATED else None
        finally:
            for key in (explicit, fallback):
                if key is not None:
                    key.wipe()

        if generated_hex is not None:
            self.mac_key_hex = generated_hex
        text = result.combined_text(data)
        self._commit(
            action=LastAction.DIGEST_OR_MAC_TEXT,
            operation=Operation.HMAC,
            output=MacOutput(text=text, data=result.combined_bytes(data), tag_hex=result.hex),
            preview=text[:PREVIEW_MAX_CHARS],
            status="HMAC-SHA256 generated and appended",
        )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(self) -> ExportArtifact:
        """Return the suggested file name and bytes to save.

        After key generation this is the key pair file.  Otherwise it is the
        live output.

        Raises
        ------
        InputError
            If there is nothing to save.
        """
        input_name = self.current_input.name if self.current_input else None
        if self.last_action is LastAction.GENERATED_KEY:
            keys = KeyPairHex(symmetric_key_hex=self.symmetric_key_hex, hmac_key_hex=self.mac_key_hex)
            return ExportArtifact(
                suggested_name=suggested_keypair_name(input_name),
                data=format_keypair(keys).encode("utf-8"),
            )

        output = self.last_output
        if output is None or self.last_operation is None:
            raise InputError("No processed data to save. Run process first.")

        if isinstance(output, TextOutput):
            payload = output.to_bytes()
        else:
            payload = output.data

        suffix = _EXPORT_SUFFIXES.get(self.last_operation)
        if suffix is None:
            suffix = ".txt" if isinstance(output, TextOutput) else ".bin"
        base = (PurePath(input_name).stem if input_name else "") or "output"
        name = base if base.lower().endswith(suffix) else f"{base}{suffix}"
        return ExportArtifact(suggested_name=name, data=payload)
