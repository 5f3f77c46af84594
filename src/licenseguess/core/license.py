# license.py
# SPDX-License-Identifier: MIT
"""The License value object and its constructors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .classifier import classify
from .decode import read_license_text
from .identifiers import is_recognized
from .interfaces import LicenseFS
from .locator import guess_file

__all__ = ["License"]


@dataclass(frozen=True, slots=True)
class License:
    """
    A software license: its identifier, its text and where it came from.

    ``License(type, text)`` records a caller-supplied identifier as is; the
    ``from_*`` constructors derive it from the text. Fields are read-only
    apart from ``license_type``, which :meth:`guess_type` fills in.

    Attributes:
        license_type (str): Standardized identifier such as ``"MIT"``, a
            caller-supplied label, or ``""`` when unknown.
        text (str): License body exactly as read or supplied.
        source_path (str | None): File the text was loaded from, if any.
    """

    license_type: str = ""
    text: str = ""
    source_path: Optional[str] = None

    @classmethod
    def from_text(cls, text: str) -> "License":
        """Classify ``text`` and return a License carrying the result.

        Raises:
            UnrecognizedLicenseError: The text matched no known signature.
        """
        lic = cls(text=text)
        lic.guess_type()
        return lic

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        fs: LicenseFS | None = None,
        max_bytes: Optional[int] = None,
        fix_mojibake: bool = True,
    ) -> "License":
        """Load a license file and classify its contents.

        Args:
            path (str | Path): License file to read.
            fs (LicenseFS | None): Filesystem to read from; local by default.
            max_bytes (int | None): Optional cap on bytes read.
            fix_mojibake (bool): Passed through to the decoder.

        Raises:
            OSError: The file could not be read.
            UnrecognizedLicenseError: The text matched no known signature.
        """
        source = str(path)
        text = read_license_text(source, fs=fs, max_bytes=max_bytes, fix_mojibake=fix_mojibake)
        lic = cls(text=text, source_path=source)
        lic.guess_type()
        return lic

    @classmethod
    def from_dir(
        cls,
        directory: str | Path,
        *,
        fs: LicenseFS | None = None,
        max_bytes: Optional[int] = None,
        fix_mojibake: bool = True,
    ) -> "License":
        """Locate the license file of ``directory`` and load it.

        Raises:
            NoLicenseFileError: No candidate license file was found.
            MultipleLicensesError: More than one candidate was found.
            OSError: The directory or file could not be read.
            UnrecognizedLicenseError: The text matched no known signature.
        """
        path = guess_file(directory, fs)
        return cls.from_file(path, fs=fs, max_bytes=max_bytes, fix_mojibake=fix_mojibake)

    def guess_type(self) -> str:
        """Classify :attr:`text` and store the identifier on this record.

        The record is left unchanged when classification fails.

        Raises:
            UnrecognizedLicenseError: The text matched no known signature.
        """
        license_type = classify(self.text)
        object.__setattr__(self, "license_type", license_type)
        return license_type

    def recognized(self) -> bool:
        """Return True if :attr:`license_type` is a known identifier."""
        return is_recognized(self.license_type)
