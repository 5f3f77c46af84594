# locator.py
# SPDX-License-Identifier: MIT
"""Find the license file of a directory by well-known file names."""

from __future__ import annotations

from pathlib import Path

from .errors import MultipleLicensesError, NoLicenseFileError
from .fs import default_fs
from .interfaces import LicenseFS
from .log import get_logger

__all__ = [
    "LICENSE_FILE_BASENAMES",
    "LICENSE_FILE_EXTENSIONS",
    "DEFAULT_LICENSE_FILES",
    "is_license_filename",
    "license_files_in_dir",
    "guess_file",
]

log = get_logger(__name__)

LICENSE_FILE_BASENAMES = (
    "copying",
    "copyleft",
    "copyright",
    "license",
    "unlicense",
)

LICENSE_FILE_EXTENSIONS = (
    "",
    ".md",
    ".rst",
    ".txt",
)

DEFAULT_LICENSE_FILES: tuple[str, ...] = tuple(
    base + ext for base in LICENSE_FILE_BASENAMES for ext in LICENSE_FILE_EXTENSIONS
)

_FILE_TABLE = frozenset(DEFAULT_LICENSE_FILES)


def is_license_filename(name: str) -> bool:
    """Return True if ``name`` (any case) is a candidate license file name."""
    return name.lower() in _FILE_TABLE


def license_files_in_dir(directory: str | Path, fs: LicenseFS | None = None) -> list[str]:
    """List the candidate license files directly inside ``directory``.

    Only immediate entries are considered. Names come back as found in the
    directory (original casing), sorted.

    Raises:
        OSError: Propagated from ``fs`` when the directory is missing, is
            not a directory, or cannot be listed.
    """
    fs = fs or default_fs()
    found = sorted(name for name in fs.list_dir(str(directory)) if is_license_filename(name))
    log.debug("License file candidates in %s: %s", directory, found)
    return found


def guess_file(directory: str | Path, fs: LicenseFS | None = None) -> str:
    """Return the path of the single license file in ``directory``.

    Args:
        directory (str | Path): Directory to scan (non-recursively).
        fs (LicenseFS | None): Filesystem to read; the local one by default.

    Returns:
        str: ``directory`` joined with the matching entry name.

    Raises:
        NoLicenseFileError: No entry has a candidate license file name.
        MultipleLicensesError: More than one entry does; the choice is left
            to the caller.
        OSError: Propagated from ``fs``.
    """
    fs = fs or default_fs()
    files = license_files_in_dir(directory, fs)
    if not files:
        raise NoLicenseFileError(str(directory))
    if len(files) > 1:
        raise MultipleLicensesError(files, str(directory))
    return fs.join(str(directory), files[0])
