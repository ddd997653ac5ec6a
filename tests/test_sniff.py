from __future__ import annotations

from filecrypt._crypto.sniff import classify, looks_utf16le
from filecrypt.models.results import TextEncoding


def test_utf8_text_is_detected() -> None:
    result = classify("hello".encode())
    assert result.is_text
    assert result.encoding is TextEncoding.UTF8
    assert result.text == "hello"


def test_non_ascii_utf8_text_is_detected() -> None:
    result = classify("naïve café ✓".encode())
    assert result.encoding is TextEncoding.UTF8
    assert result.text == "naïve café ✓"


def test_random_binary_is_not_text() -> None:
    result = classify(b"\xde\xad\xbe\xef")
    assert not result.is_text
    assert result.encoding is TextEncoding.NONE
    assert result.text is None


def test_utf16le_with_bom_is_detected_and_bom_consumed() -> None:
    data = b"\xff\xfe" + "héllo".encode("utf-16-le")
    result = classify(data)
    assert result.is_text
    assert result.encoding is TextEncoding.UTF16LE
    assert result.text == "héllo"


def test_utf16le_without_bom_is_detected_by_zero_bytes() -> None:
    data = "hello world".encode("utf-16-le")
    result = classify(data)
    assert result.encoding is TextEncoding.UTF16LE
    assert result.text == "hello world"


def test_few_zero_bytes_are_not_enough_for_utf16() -> None:
    # Three zeros at odd offsets is not more than the threshold.
    data = b"\x80\x00\x81\x00\x82\x00\x83\x84\x85\x86"
    assert not looks_utf16le(data)
    assert not classify(data).is_text


def test_odd_length_utf16_candidate_is_binary() -> None:
    data = "hello".encode("utf-16-le") + b"\x80"
    assert looks_utf16le(data)
    assert not classify(data).is_text


def test_single_byte_input() -> None:
    assert classify(b"a").encoding is TextEncoding.UTF8
    assert not classify(b"\xff").is_text


def test_classify_does_not_modify_input() -> None:
    data = bytearray(b"\xff\xfe\x41\x00")
    classify(bytes(data))
    assert data == bytearray(b"\xff\xfe\x41\x00")
