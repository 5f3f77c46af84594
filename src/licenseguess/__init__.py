# __init__.py
# SPDX-License-Identifier: MIT
"""
Top-level package exports for :mod:`licenseguess`.

licenseguess finds the license file of a source tree and names the license
it contains. Classification is literal phrase matching against a fixed,
ordered table of signatures; a text either yields one of
:data:`KNOWN_LICENSES` or raises :class:`UnrecognizedLicenseError`. There is
no similarity scoring and no confidence value.

Examples:
    Directory lookup::

        >>> from licenseguess import License
        >>> lic = License.from_dir("path/to/repo")
        >>> lic.license_type
        'MIT'

    Classify text directly::

        >>> from licenseguess import classify
        >>> classify("This is free and unencumbered software released into the public domain.")
        'Unlicense'

    Batch scan without raising::

        >>> from licenseguess import scan_dirs
        >>> [r.license_type or r.error_code for r in scan_dirs(["a", "b"])]
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Package version
# ---------------------------------------------------------------------------
try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("licenseguess")
except Exception:  # PackageNotFoundError when running from a source checkout
    __version__ = "0.0.0+unknown"


from .core.classifier import SIGNATURE_RULES, SignatureRule, classify, match_rule, normalize_text
from .core.config import LicenseGuessConfig, LoggingConfig, ReadConfig, load_config_from_path
from .core.decode import DecodedText, decode_bytes, read_license_text
from .core.errors import (
    LicenseError,
    MultipleLicensesError,
    NoLicenseFileError,
    UnrecognizedLicenseError,
)
from .core.fs import LocalFS, ZipFS
from .core.identifiers import KNOWN_LICENSES, is_recognized
from .core.interfaces import LicenseFS
from .core.license import License
from .core.locator import DEFAULT_LICENSE_FILES, guess_file, is_license_filename, license_files_in_dir
from .core.log import configure_logging, get_logger, temp_level
from .core.scan import ScanResult, license_sha256, scan_dir, scan_dirs

__all__ = [
    "__version__",
    "License",
    "classify",
    "match_rule",
    "normalize_text",
    "SignatureRule",
    "SIGNATURE_RULES",
    "KNOWN_LICENSES",
    "is_recognized",
    "DEFAULT_LICENSE_FILES",
    "guess_file",
    "is_license_filename",
    "license_files_in_dir",
    "LicenseFS",
    "LocalFS",
    "ZipFS",
    "DecodedText",
    "decode_bytes",
    "read_license_text",
    "ScanResult",
    "scan_dir",
    "scan_dirs",
    "license_sha256",
    "LicenseError",
    "NoLicenseFileError",
    "MultipleLicensesError",
    "UnrecognizedLicenseError",
    "LicenseGuessConfig",
    "LoggingConfig",
    "ReadConfig",
    "load_config_from_path",
    "configure_logging",
    "get_logger",
    "temp_level",
]
