# interfaces.py
# SPDX-License-Identifier: MIT
"""Protocols for the filesystem collaborators used by license discovery."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable


@runtime_checkable
class LicenseFS(Protocol):
    """
    Read-only view of a tree that may contain license files.

    Implementations must raise ``OSError`` subclasses for missing paths
    (``FileNotFoundError``), for listing something that is not a directory
    (``NotADirectoryError``), and for unreadable entries. Callers rely on
    those errors propagating unchanged.
    """

    def list_dir(self, path: str) -> Iterable[str]:
        """
        Return the names of the immediate entries of ``path``.

        Returns:
            Iterable[str]: Entry names (not full paths), files and
            directories alike.
        """

    def read_bytes(self, path: str, limit: Optional[int] = None) -> bytes:
        """
        Return the contents of the file at ``path``.

        Args:
            path (str): File path in this filesystem's namespace.
            limit (int | None): Optional cap on bytes read.
        """

    def join(self, directory: str, name: str) -> str:
        """Join a directory path and an entry name in this namespace."""
