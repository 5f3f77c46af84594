# fs.py
# SPDX-License-Identifier: MIT
"""Filesystem collaborators: the local OS tree and zip archives."""

from __future__ import annotations

import errno
import os
import posixpath
import zipfile
from pathlib import Path
from typing import Optional

from .log import get_logger

__all__ = ["LocalFS", "ZipFS", "default_fs"]

log = get_logger(__name__)


def _os_error(cls: type[OSError], code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class LocalFS:
    """Read entries and file bytes from the local filesystem."""

    def list_dir(self, path: str | Path) -> list[str]:
        return [entry.name for entry in Path(path).iterdir()]

    def read_bytes(self, path: str | Path, limit: Optional[int] = None) -> bytes:
        with Path(path).open("rb") as fh:
            return fh.read(limit) if limit else fh.read()

    def join(self, directory: str | Path, name: str) -> str:
        return os.path.join(os.fspath(directory), name)


_LOCAL = LocalFS()


def default_fs() -> LocalFS:
    """Return the shared LocalFS instance."""
    return _LOCAL


class ZipFS:
    """
    Read a zip archive as a directory tree.

    GitHub zipballs wrap the repository in a single ``owner-repo-sha/``
    folder; when every member shares one top-level folder it is treated as
    the archive root. Paths are POSIX-style and relative to that root, with
    ``""`` naming the root itself.

    The archive stays open until :meth:`close` (or the end of a ``with``
    block).
    """

    def __init__(self, archive: str | Path | zipfile.ZipFile, *, subpath: str | None = None):
        if isinstance(archive, zipfile.ZipFile):
            self.zipf = archive
            self._owns = False
        else:
            self.zipf = zipfile.ZipFile(archive)
            self._owns = True
        self.top_prefix = self._infer_top_prefix()
        self.base_prefix = self._build_base_prefix(subpath)

    def __enter__(self) -> "ZipFS":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns:
            self.zipf.close()

    def _infer_top_prefix(self) -> str:
        components: set[str] = set()
        for name in self.zipf.namelist():
            if not name or name.startswith("__MACOSX/"):
                continue
            first, sep, _ = name.partition("/")
            if not sep:
                # A file at the archive root means there is no wrapper folder.
                return ""
            components.add(first)
        if len(components) == 1:
            return next(iter(components))
        return ""

    def _build_base_prefix(self, subpath: str | None) -> str:
        prefix = "/".join(filter(None, [self.top_prefix.strip("/"), (subpath or "").strip("/")]))
        return prefix + "/" if prefix else ""

    def _member(self, path: str) -> str:
        rel = posixpath.normpath(str(path).replace("\\", "/")).lstrip("/")
        if rel == ".":
            rel = ""
        return self.base_prefix + rel

    def list_dir(self, path: str = "") -> list[str]:
        member = self._member(path)
        prefix = member if not member or member.endswith("/") else member + "/"
        members = set(self.zipf.namelist())
        names: set[str] = set()
        for name in members:
            if not name.startswith(prefix) or name == prefix:
                continue
            child = name[len(prefix):].split("/", 1)[0]
            if child:
                names.add(child)
        if names:
            return sorted(names)
        if member in members:
            raise _os_error(NotADirectoryError, errno.ENOTDIR, str(path))
        if prefix in members:
            return []  # explicit empty directory entry
        if not prefix:
            return []
        raise _os_error(FileNotFoundError, errno.ENOENT, str(path))

    def read_bytes(self, path: str, limit: Optional[int] = None) -> bytes:
        member = self._member(path)
        try:
            info = self.zipf.getinfo(member)
        except KeyError:
            raise _os_error(FileNotFoundError, errno.ENOENT, str(path)) from None
        if info.is_dir():
            raise _os_error(IsADirectoryError, errno.EISDIR, str(path))
        with self.zipf.open(info) as fh:
            return fh.read(limit) if limit else fh.read()

    def join(self, directory: str, name: str) -> str:
        return posixpath.join(directory, name) if directory else name
