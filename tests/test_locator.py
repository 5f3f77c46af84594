# test_locator.py
# SPDX-License-Identifier: MIT
import os

import pytest

from licenseguess.core.errors import (
    ERR_MULTIPLE_LICENSES,
    ERR_NO_LICENSE_FILE,
    MultipleLicensesError,
    NoLicenseFileError,
)
from licenseguess.core.locator import (
    DEFAULT_LICENSE_FILES,
    LICENSE_FILE_BASENAMES,
    LICENSE_FILE_EXTENSIONS,
    guess_file,
    is_license_filename,
    license_files_in_dir,
)


def test_candidate_table_is_full_cross_product():
    assert len(DEFAULT_LICENSE_FILES) == len(LICENSE_FILE_BASENAMES) * len(LICENSE_FILE_EXTENSIONS)
    assert len(set(DEFAULT_LICENSE_FILES)) == len(DEFAULT_LICENSE_FILES)
    assert "license" in DEFAULT_LICENSE_FILES
    assert "copying.rst" in DEFAULT_LICENSE_FILES
    assert "unlicense.txt" in DEFAULT_LICENSE_FILES


def test_filename_match_is_case_insensitive():
    assert is_license_filename("LICENSE")
    assert is_license_filename("License.Md")
    assert is_license_filename("copying.RST")
    assert not is_license_filename("LICENSE-MIT")
    assert not is_license_filename("licence")
    assert not is_license_filename("README.md")


def test_single_license_file_resolves(tmp_path):
    (tmp_path / "LICENSE.txt").write_text("text", encoding="utf-8")
    (tmp_path / "README.md").write_text("readme", encoding="utf-8")

    assert guess_file(tmp_path) == os.path.join(str(tmp_path), "LICENSE.txt")


def test_single_license_file_any_case(tmp_path):
    (tmp_path / "license.TXT").write_text("text", encoding="utf-8")

    assert guess_file(str(tmp_path)) == os.path.join(str(tmp_path), "license.TXT")


def test_multiple_license_files_fail(tmp_path):
    (tmp_path / "LICENSE.txt").write_text("a", encoding="utf-8")
    (tmp_path / "COPYING.rst").write_text("b", encoding="utf-8")

    with pytest.raises(MultipleLicensesError) as excinfo:
        guess_file(tmp_path)
    assert str(excinfo.value) == ERR_MULTIPLE_LICENSES
    assert excinfo.value.candidates == ("COPYING.rst", "LICENSE.txt")


def test_empty_directory_fails(tmp_path):
    with pytest.raises(NoLicenseFileError) as excinfo:
        guess_file(tmp_path)
    assert str(excinfo.value) == ERR_NO_LICENSE_FILE


def test_unrelated_files_are_ignored(tmp_path):
    (tmp_path / "nope").write_text("", encoding="utf-8")
    (tmp_path / "LICENSE-APACHE").write_text("", encoding="utf-8")

    assert license_files_in_dir(tmp_path) == []
    with pytest.raises(NoLicenseFileError):
        guess_file(tmp_path)


def test_scan_is_not_recursive(tmp_path):
    nested = tmp_path / "docs"
    nested.mkdir()
    (nested / "LICENSE").write_text("", encoding="utf-8")

    with pytest.raises(NoLicenseFileError):
        guess_file(tmp_path)


def test_missing_directory_raises_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        guess_file(tmp_path / "does-not-exist")


def test_file_instead_of_directory_raises_os_error(tmp_path):
    target = tmp_path / "LICENSE.txt"
    target.write_text("text", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        guess_file(target)


def test_license_files_in_dir_keeps_original_names(tmp_path):
    for name in ("COPYING", "license.md", "other.txt"):
        (tmp_path / name).write_text("", encoding="utf-8")

    assert license_files_in_dir(tmp_path) == ["COPYING", "license.md"]
