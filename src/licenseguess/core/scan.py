# scan.py
# SPDX-License-Identifier: MIT
"""Batch license detection over many directories.

Each root is handled on its own: expected failures (no license file,
ambiguous files, unrecognized text, unreadable paths) are captured in that
root's :class:`ScanResult` and the scan moves on.
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .classifier import normalize_text
from .config import ReadConfig
from .errors import LicenseError, MultipleLicensesError
from .identifiers import is_recognized
from .interfaces import LicenseFS
from .license import License
from .log import get_logger

__all__ = ["ScanResult", "scan_dir", "scan_dirs", "license_sha256"]

log = get_logger(__name__)

IO_ERROR_CODE = "io_error"


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of license detection for one root directory."""

    root: str
    license_type: Optional[str] = None
    license_path: Optional[str] = None
    license_sha256: Optional[str] = None
    recognized: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None
    candidates: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["candidates"] = list(self.candidates)
        return data


def license_sha256(text: str) -> str:
    """Return the SHA-256 hex digest of the normalized license text.

    Hashing the normalized form makes the digest stable across line-ending
    and rewrapping differences between copies of the same license.
    """
    return hashlib.sha256(normalize_text(text).encode("utf-8")).hexdigest()


def scan_dir(
    root: str | Path,
    *,
    fs: LicenseFS | None = None,
    read: ReadConfig | None = None,
) -> ScanResult:
    """Detect the license of a single directory without raising.

    Only :class:`LicenseError` and ``OSError`` are captured; anything else
    propagates.
    """
    read = read or ReadConfig()
    location = str(root)
    try:
        lic = License.from_dir(root, fs=fs, max_bytes=read.max_bytes, fix_mojibake=read.fix_mojibake)
    except MultipleLicensesError as exc:
        log.warning("License detection (%s): %s %s", location, exc, list(exc.candidates))
        return ScanResult(root=location, error=str(exc), error_code=exc.code, candidates=exc.candidates)
    except LicenseError as exc:
        log.warning("License detection (%s): %s", location, exc)
        return ScanResult(root=location, error=str(exc), error_code=exc.code)
    except OSError as exc:
        log.warning("License detection (%s): %s", location, exc)
        return ScanResult(root=location, error=str(exc), error_code=IO_ERROR_CODE)

    log.info("License detection (%s): %s via %s", location, lic.license_type, lic.source_path)
    return ScanResult(
        root=location,
        license_type=lic.license_type,
        license_path=lic.source_path,
        license_sha256=license_sha256(lic.text),
        recognized=is_recognized(lic.license_type),
    )


def scan_dirs(
    roots: Iterable[str | Path],
    *,
    fs: LicenseFS | None = None,
    read: ReadConfig | None = None,
) -> list[ScanResult]:
    """Run :func:`scan_dir` over ``roots`` in order."""
    return [scan_dir(root, fs=fs, read=read) for root in roots]
