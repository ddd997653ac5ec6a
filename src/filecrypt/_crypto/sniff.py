"""Heuristic text detection for decrypted output.

Presentation only: the classification never changes the bytes a caller
holds, and a wrong guess only affects how the output is previewed.
"""

from __future__ import annotations

from filecrypt._constants import UTF16_SCAN_LIMIT, UTF16_ZERO_THRESHOLD, UTF16LE_BOM
from filecrypt.models.results import TextClassification, TextEncoding


def _decode_utf8_exact(data: bytes) -> str | None:
    # Decoding stops at the first NUL, so a buffer holding one never
    # round-trips.  This sends ASCII-range UTF-16LE on to the UTF-16 check.
    if b"\x00" in data:
        return None
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return None
    if text.encode("utf-8") != data:
        return None
    return text


def looks_utf16le(data: bytes) -> bool:
    """Return ``True`` when *data* carries a UTF-16LE BOM or many zero high bytes.

    Without a BOM, zero bytes are counted at odd offsets within the first
    ``UTF16_SCAN_LIMIT`` bytes; ASCII-range UTF-16LE text has a zero at
    every odd offset.
    """
    if len(data) < 2:
        return False
    if data.startswith(UTF16LE_BOM):
        return True
    limit = min(len(data) - 1, UTF16_SCAN_LIMIT)
    zeros = sum(1 for i in range(1, limit, 2) if data[i] == 0)
    return zeros > UTF16_ZERO_THRESHOLD


def classify(data: bytes) -> TextClassification:
    """Decide whether *data* is UTF-8 text, UTF-16LE text, or binary.

    1. Lossless UTF-8 round trip (no NUL bytes) → UTF-8.
    2. UTF-16LE signature (see :func:`looks_utf16le`) and even length →
       UTF-16LE; a leading BOM is consumed, invalid units are replaced.
    3. Otherwise binary, with no text.
    """
    data = bytes(data)
    text = _decode_utf8_exact(data)
    if text is not None:
        return TextClassification(is_text=True, encoding=TextEncoding.UTF8, text=text)

    if looks_utf16le(data) and len(data) % 2 == 0:
        body = data[len(UTF16LE_BOM) :] if data.startswith(UTF16LE_BOM) else data
        return TextClassification(
            is_text=True,
            encoding=TextEncoding.UTF16LE,
            text=body.decode("utf-16-le", errors="replace"),
        )

    return TextClassification(is_text=False, encoding=TextEncoding.NONE, text=None)
