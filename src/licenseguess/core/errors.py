# errors.py
# SPDX-License-Identifier: MIT
"""Error taxonomy for license discovery and classification.

Filesystem failures are deliberately absent: ``OSError`` subclasses raised
by the filesystem collaborator reach the caller unchanged.
"""

from __future__ import annotations

__all__ = [
    "ERR_NO_LICENSE_FILE",
    "ERR_UNRECOGNIZED_LICENSE",
    "ERR_MULTIPLE_LICENSES",
    "LicenseError",
    "NoLicenseFileError",
    "MultipleLicensesError",
    "UnrecognizedLicenseError",
]

ERR_NO_LICENSE_FILE = "license: unable to find any license file"
ERR_UNRECOGNIZED_LICENSE = "license: could not guess license type"
ERR_MULTIPLE_LICENSES = "license: multiple license files found"


class LicenseError(RuntimeError):
    """Base class for recoverable license lookup failures."""

    code = "license_error"


class NoLicenseFileError(LicenseError):
    """Raised when a directory holds no candidate license file."""

    code = "no_license_file"

    def __init__(self, directory: str | None = None) -> None:
        super().__init__(ERR_NO_LICENSE_FILE)
        self.directory = directory


class MultipleLicensesError(LicenseError):
    """Raised when a directory holds more than one candidate license file."""

    code = "multiple_licenses"

    def __init__(self, candidates=(), directory: str | None = None) -> None:
        super().__init__(ERR_MULTIPLE_LICENSES)
        self.candidates = tuple(candidates)
        self.directory = directory


class UnrecognizedLicenseError(LicenseError):
    """Raised when license text matches none of the known signatures."""

    code = "unrecognized_license"

    def __init__(self) -> None:
        super().__init__(ERR_UNRECOGNIZED_LICENSE)
