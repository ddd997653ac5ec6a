"""Key material held in a wipeable buffer."""

from __future__ import annotations

from enum import StrEnum
from types import TracebackType

from filecrypt._crypto.hexcodec import decode_hex, encode_hex
from filecrypt._crypto.mac import constant_time_equal


class KeyRole(StrEnum):
    SYMMETRIC = "symmetric"
    MAC = "mac"


class KeyMaterial:
    """A key buffer tagged with its role.

    The bytes live in a ``bytearray`` so :meth:`wipe` can overwrite them in
    place.  Used as a context manager the key is wiped on exit.  Python may
    still hold copies elsewhere (hex strings, cipher contexts), so wiping is
    best effort.
    """

    __slots__ = ("_buffer", "role")

    def __init__(self, data: bytes | bytearray, role: KeyRole) -> None:
        self._buffer = bytearray(data)
        self.role = role

    @classmethod
    def from_hex(cls, text: str, role: KeyRole, *, expected_nbytes: int | None = None) -> KeyMaterial:
        """Decode a hex key typed by a user.

        Surrounding whitespace and a leading ``0x`` are dropped before the
        strict decode.  Raises :class:`~filecrypt.exceptions.KeyFormatError`
        subclasses.
        """
        name = "symmetric key" if role is KeyRole.SYMMETRIC else "HMAC key"
        text = text.strip()
        if text[:2] in ("0x", "0X"):
            text = text[2:]
        return cls(decode_hex(text, name=name, expected_nbytes=expected_nbytes), role)

    @property
    def buffer(self) -> bytearray:
        """The live key buffer (not a copy)."""
        return self._buffer

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)

    @property
    def hex(self) -> str:
        return encode_hex(self._buffer)

    def wipe(self) -> None:
        for i in range(len(self._buffer)):
            self._buffer[i] = 0

    @property
    def is_wiped(self) -> bool:
        return not any(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyMaterial):
            return NotImplemented
        return self.role == other.role and constant_time_equal(self._buffer, other._buffer)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"KeyMaterial(role={self.role.value}, length={len(self._buffer)})"

    def __enter__(self) -> KeyMaterial:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.wipe()
