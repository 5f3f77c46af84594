# main.py
# SPDX-License-Identifier: MIT

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..core.config import LicenseGuessConfig, load_config_from_path
from ..core.decode import decode_bytes
from ..core.fs import ZipFS
from ..core.identifiers import KNOWN_LICENSES, is_recognized
from ..core.license import License
from ..core.scan import scan_dir, scan_dirs


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level licenseguess CLI argument parser.

    Returns:
        argparse.ArgumentParser: Parser with the ``dir``, ``zip``, ``file``,
        ``text``, ``known`` and ``check`` subcommands.
    """
    parser = argparse.ArgumentParser(prog="licenseguess", description="Identify software licenses.")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g., DEBUG, INFO, WARNING). Overrides the config file.",
    )
    parser.add_argument("-c", "--config", help="Optional config file (TOML or JSON).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    dir_p = subparsers.add_parser("dir", help="Detect the license of one or more directories.")
    dir_p.add_argument("roots", nargs="+", help="Directories to scan (non-recursively).")

    zip_p = subparsers.add_parser("zip", help="Detect the license inside a zip archive.")
    zip_p.add_argument("archive", help="Path to the zip archive (e.g., a GitHub zipball).")
    zip_p.add_argument("--subpath", help="Directory inside the archive to treat as the root.")

    file_p = subparsers.add_parser("file", help="Classify a single license file.")
    file_p.add_argument("path", help="License file to classify.")

    text_p = subparsers.add_parser("text", help="Classify license text from a file or stdin.")
    text_p.add_argument("source", nargs="?", default="-", help="Text file, or '-' for stdin (default).")

    subparsers.add_parser("known", help="List the recognized license identifiers.")

    check_p = subparsers.add_parser("check", help="Check whether an identifier is recognized.")
    check_p.add_argument("license_type", help="Identifier to test, e.g. MIT.")

    return parser


def _load_config(path: Optional[str]) -> LicenseGuessConfig:
    if not path:
        return LicenseGuessConfig()
    return load_config_from_path(path)


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2))


def _license_payload(lic: License) -> dict:
    return {
        "license_type": lic.license_type,
        "source_path": lic.source_path,
        "recognized": lic.recognized(),
    }


def _cmd_dir(args: argparse.Namespace, cfg: LicenseGuessConfig) -> int:
    """Scan each root and report every result; fail if any root failed."""
    results = scan_dirs(args.roots, read=cfg.read)
    _print_json([result.to_dict() for result in results])
    return 0 if all(result.ok for result in results) else 1


def _cmd_zip(args: argparse.Namespace, cfg: LicenseGuessConfig) -> int:
    with ZipFS(args.archive, subpath=args.subpath) as fs:
        result = scan_dir("", fs=fs, read=cfg.read)
    label = args.archive if not args.subpath else f"{args.archive}:{args.subpath}"
    result = dataclasses.replace(result, root=label)
    _print_json(result.to_dict())
    return 0 if result.ok else 1


def _cmd_text(args: argparse.Namespace) -> int:
    if args.source == "-":
        text = sys.stdin.read()
    else:
        text = decode_bytes(Path(args.source).read_bytes()).text
    _print_json(_license_payload(License.from_text(text)))
    return 0


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch a parsed CLI command to its handler.

    Returns:
        int: Process exit code, where 0 indicates success.
    """
    cfg = _load_config(args.config)
    if args.log_level:
        cfg.logging.level = args.log_level
    cfg.logging.apply()
    cmd = args.command

    if cmd == "dir":
        return _cmd_dir(args, cfg)

    if cmd == "zip":
        return _cmd_zip(args, cfg)

    if cmd == "file":
        lic = License.from_file(args.path, max_bytes=cfg.read.max_bytes, fix_mojibake=cfg.read.fix_mojibake)
        _print_json(_license_payload(lic))
        return 0

    if cmd == "text":
        return _cmd_text(args)

    if cmd == "known":
        _print_json(list(KNOWN_LICENSES))
        return 0

    if cmd == "check":
        recognized = is_recognized(args.license_type)
        _print_json({"license_type": args.license_type, "recognized": recognized})
        return 0 if recognized else 1

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the licenseguess command-line interface.

    Args:
        argv (Sequence[str] | None): Argument strings to parse instead of
            ``sys.argv[1:]``. Primarily useful for tests.

    Returns:
        int: Process exit code, where 0 indicates success and non-zero
        values indicate failure.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        return _dispatch(args)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
