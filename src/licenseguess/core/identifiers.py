# identifiers.py
# SPDX-License-Identifier: MIT
"""Standardized license identifiers recognized by licenseguess."""

from __future__ import annotations

__all__ = [
    "LICENSE_MIT",
    "LICENSE_ISC",
    "LICENSE_NEW_BSD",
    "LICENSE_FREE_BSD",
    "LICENSE_APACHE_20",
    "LICENSE_MPL_20",
    "LICENSE_GPL_20",
    "LICENSE_GPL_30",
    "LICENSE_LGPL_21",
    "LICENSE_LGPL_30",
    "LICENSE_AGPL_30",
    "LICENSE_CDDL_10",
    "LICENSE_EPL_10",
    "LICENSE_UNLICENSE",
    "KNOWN_LICENSES",
    "is_recognized",
]

LICENSE_MIT = "MIT"
LICENSE_ISC = "ISC"
LICENSE_NEW_BSD = "NewBSD"
LICENSE_FREE_BSD = "FreeBSD"
LICENSE_APACHE_20 = "Apache-2.0"
LICENSE_MPL_20 = "MPL-2.0"
LICENSE_GPL_20 = "GPL-2.0"
LICENSE_GPL_30 = "GPL-3.0"
LICENSE_LGPL_21 = "LGPL-2.1"
LICENSE_LGPL_30 = "LGPL-3.0"
LICENSE_AGPL_30 = "AGPL-3.0"
LICENSE_CDDL_10 = "CDDL-1.0"
LICENSE_EPL_10 = "EPL-1.0"
LICENSE_UNLICENSE = "Unlicense"

KNOWN_LICENSES: tuple[str, ...] = (
    LICENSE_MIT,
    LICENSE_ISC,
    LICENSE_NEW_BSD,
    LICENSE_FREE_BSD,
    LICENSE_APACHE_20,
    LICENSE_MPL_20,
    LICENSE_GPL_20,
    LICENSE_GPL_30,
    LICENSE_LGPL_21,
    LICENSE_LGPL_30,
    LICENSE_AGPL_30,
    LICENSE_CDDL_10,
    LICENSE_EPL_10,
    LICENSE_UNLICENSE,
)

_LICENSE_TABLE = frozenset(KNOWN_LICENSES)


def is_recognized(license_type: str | None) -> bool:
    """Return True if ``license_type`` is exactly one of KNOWN_LICENSES.

    The comparison is literal: no case folding or alias resolution, so
    ``"mit"`` is not recognized while ``"MIT"`` is.
    """
    return license_type in _LICENSE_TABLE
