# test_config.py
# SPDX-License-Identifier: MIT
import json
from pathlib import Path

import pytest

from licenseguess.core.config import LicenseGuessConfig, ReadConfig, load_config_from_path


def test_defaults_read_whole_file():
    cfg = LicenseGuessConfig()

    assert cfg.read.max_bytes is None
    assert cfg.read.fix_mojibake is True
    assert cfg.logging.logger_name == "licenseguess"


def test_json_round_trip(tmp_path: Path):
    cfg = LicenseGuessConfig(read=ReadConfig(max_bytes=4096, fix_mojibake=False))
    cfg.logging.level = "DEBUG"
    path = tmp_path / "cfg.json"

    cfg.to_json(path)
    loaded = load_config_from_path(path)

    assert loaded.read.max_bytes == 4096
    assert loaded.read.fix_mojibake is False
    assert loaded.logging.level == "DEBUG"
    assert "max_bytes" not in LicenseGuessConfig().to_dict()["read"]


def test_toml_loading(tmp_path: Path):
    path = tmp_path / "cfg.toml"
    path.write_text(
        "[read]\nmax_bytes = 65536\n\n[logging]\nlevel = \"WARNING\"\npropagate = true\n",
        encoding="utf-8",
    )

    cfg = load_config_from_path(path)

    assert cfg.read.max_bytes == 65536
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.propagate is True


def test_unknown_keys_rejected(tmp_path: Path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"read": {"max_byte": 10}}), encoding="utf-8")

    with pytest.raises(ValueError, match="max_byte"):
        load_config_from_path(path)


def test_invalid_max_bytes_rejected(tmp_path: Path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"read": {"max_bytes": 0}}), encoding="utf-8")

    with pytest.raises(ValueError, match="max_bytes"):
        load_config_from_path(path)


def test_unsupported_extension(tmp_path: Path):
    with pytest.raises(ValueError, match="Unsupported config extension"):
        load_config_from_path(tmp_path / "cfg.yaml")
