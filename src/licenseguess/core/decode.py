# decode.py
# SPDX-License-Identifier: MIT
"""Decode license file bytes into text.

License files in the wild arrive as UTF-8, UTF-8 with a BOM, UTF-16 from
Windows editors, or legacy cp1252. Decoding never rewrites line endings or
whitespace: the returned text is the license body as written, and the
classifier does its own normalization.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .fs import default_fs
from .interfaces import LicenseFS
from .log import get_logger

__all__ = ["DecodedText", "decode_bytes", "read_license_text"]

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class DecodedText:
    """Decoded text content with encoding metadata."""

    text: str
    encoding: str
    had_replacement: bool


_BOMS: tuple[tuple[bytes, str], ...] = (
    # UTF-32 first: its LE BOM starts with the UTF-16 LE BOM.
    (b"\x00\x00\xFE\xFF", "utf-32-be"),
    (b"\xFF\xFE\x00\x00", "utf-32-le"),
    (b"\xEF\xBB\xBF", "utf-8-sig"),
    (b"\xFE\xFF", "utf-16-be"),
    (b"\xFF\xFE", "utf-16-le"),
)

# Typical UTF-8-read-as-cp1252 debris (A-tilde pairs, curly-quote triples, stray A-circumflex).
_MOJI_REGEX = re.compile(r"[\u00C0-\u00FF][\u0080-\u00FF]|\u00C3.|\u00E2.|\u00C2|\ufffd")


def _detect_bom(data: bytes) -> tuple[str, int] | None:
    for sig, enc in _BOMS:
        if data.startswith(sig):
            return enc, len(sig)
    return None


def _guess_utf16_endian(sample: bytes) -> str | None:
    """Guess UTF-16 byte order from where NUL bytes fall.

    ASCII-heavy UTF-16 has a NUL in every code unit; the side (even or odd
    offsets) with clearly more NULs gives the byte order.
    """
    if not sample:
        return None
    even = sum(1 for i in range(0, len(sample), 2) if sample[i] == 0)
    odd = sum(1 for i in range(1, len(sample), 2) if sample[i] == 0)
    if even + odd < max(4, len(sample) // 64):
        return None
    if even > odd * 2:
        return "utf-16-be"
    if odd > even * 2:
        return "utf-16-le"
    return None


def _repair_mojibake(text: str) -> str:
    """Undo a cp1252 decode of UTF-8 bytes when that clearly reduces noise."""
    try:
        fixed = text.encode("cp1252", errors="ignore").decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return text
    before = max(1, len(_MOJI_REGEX.findall(text)))
    return fixed if len(_MOJI_REGEX.findall(fixed)) * 3 < before else text


def decode_bytes(data: bytes, *, fix_mojibake: bool = True) -> DecodedText:
    """Decode raw license bytes.

    Strategy:
      1) Honor a UTF-8/16/32 BOM (the BOM itself is dropped).
      2) UTF-16 without BOM when NUL placement gives the byte order away.
         NULs are valid UTF-8, so this has to come before step 3.
      3) Strict UTF-8.
      4) cp1252, else latin-1, optionally repairing UTF-8 mojibake.

    Args:
        data (bytes): Raw file contents.
        fix_mojibake (bool): Attempt the cp1252/UTF-8 repair in step 4.

    Returns:
        DecodedText: Text plus the encoding used.
    """
    if not data:
        return DecodedText("", "utf-8", False)

    bom = _detect_bom(data)
    if bom:
        enc, size = bom
        try:
            text = data[size:].decode(enc.replace("-sig", ""), errors="strict")
            return DecodedText(text, enc, "\ufffd" in text)
        except UnicodeDecodeError:
            log.debug("BOM suggested %s but decoding failed; falling back", enc)

    guess = _guess_utf16_endian(data[:4096])
    if guess:
        try:
            text = data.decode(guess, errors="strict")
            return DecodedText(text, guess, "\ufffd" in text)
        except UnicodeDecodeError:
            pass

    try:
        text = data.decode("utf-8", errors="strict")
        return DecodedText(text, "utf-8", "\ufffd" in text)
    except UnicodeDecodeError:
        pass

    try:
        text = data.decode("cp1252", errors="strict")
        enc = "cp1252"
    except UnicodeDecodeError:
        text = data.decode("latin-1")
        enc = "latin-1"
    if fix_mojibake:
        text = _repair_mojibake(text)
    return DecodedText(text, enc, "\ufffd" in text)


def read_license_text(
    path: str,
    *,
    fs: LicenseFS | None = None,
    max_bytes: Optional[int] = None,
    fix_mojibake: bool = True,
) -> str:
    """Read a license file through ``fs`` and decode it.

    Unlike best-effort readers this does not swallow ``OSError``: a missing
    or unreadable license file is the caller's problem to report.
    """
    fs = fs or default_fs()
    data = fs.read_bytes(path, max_bytes)
    decoded = decode_bytes(data, fix_mojibake=fix_mojibake)
    if decoded.encoding != "utf-8":
        log.debug("Decoded %s as %s", path, decoded.encoding)
    return decoded.text
