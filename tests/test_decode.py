from pathlib import Path

import pytest

from licenseguess.core.decode import decode_bytes, read_license_text


def test_decode_utf8_happy_path() -> None:
    original = "Copyright (c) 2014 François – all rights"

    dec = decode_bytes(original.encode("utf-8"))

    assert dec.text == original
    assert dec.encoding == "utf-8"
    assert dec.had_replacement is False


def test_decode_keeps_line_endings() -> None:
    dec = decode_bytes(b"line one\r\nline two\n")

    assert dec.text == "line one\r\nline two\n"


def test_decode_strips_utf8_bom() -> None:
    dec = decode_bytes(b"\xef\xbb\xbfMIT License")

    assert dec.text == "MIT License"
    assert dec.encoding == "utf-8-sig"


def test_decode_utf16_with_bom() -> None:
    dec = decode_bytes(b"\xff\xfe" + "GNU GPL".encode("utf-16-le"))

    assert dec.text == "GNU GPL"
    assert dec.encoding == "utf-16-le"


def test_decode_utf16_without_bom() -> None:
    dec = decode_bytes("Apache License Version 2.0".encode("utf-16-be"))

    assert dec.text == "Apache License Version 2.0"
    assert dec.encoding == "utf-16-be"


def test_decode_cp1252_fallback() -> None:
    dec = decode_bytes("François".encode("cp1252"))

    assert dec.encoding == "cp1252"
    assert dec.text == "François"


def test_decode_latin1_last_resort() -> None:
    dec = decode_bytes(b"\x81\x8d\xfa")

    assert dec.encoding == "latin-1"
    assert len(dec.text) == 3


def test_decode_empty() -> None:
    dec = decode_bytes(b"")

    assert dec.text == ""
    assert dec.had_replacement is False


def test_read_license_text_propagates_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_license_text(str(tmp_path / "LICENSE"))


def test_read_license_text_limit(tmp_path: Path) -> None:
    target = tmp_path / "COPYING"
    target.write_bytes(b"abcdef")

    assert read_license_text(str(target), max_bytes=3) == "abc"
    assert read_license_text(str(target)) == "abcdef"
