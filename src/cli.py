"""Command-line interface for docgraft."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from artifacts.write import publish
from contract.validation import validate_artifacts
from links.registry import LinkResolutionError, RegistryFrozenError
from parse.doclets import InputError
from rules.config import ConfigError, load_config, resolve_destination
from verify.verify import verify_determinism


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        help="Project root holding docgraft.toml (default: .)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docgraft")
    subparsers = parser.add_subparsers(dest="command", required=True)

    publish_parser = subparsers.add_parser(
        "publish", help="Publish documentation from a doclet dump"
    )
    publish_parser.add_argument("input", help="JSON doclet dump (jsdoc -X output)")
    _add_common_paths(publish_parser)
    publish_parser.add_argument(
        "--out-dir",
        default=None,
        help="Output directory (default: config destination)",
    )
    publish_parser.add_argument(
        "--tutorials",
        default=None,
        help="Tutorials directory (default: config tutorials)",
    )
    publish_parser.add_argument(
        "--private",
        action="store_true",
        help="Publish symbols tagged @private",
    )

    validate_parser = subparsers.add_parser(
        "validate", help="Validate published snapshots"
    )
    _add_common_paths(validate_parser)
    validate_parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Published output directory (default: config destination)",
    )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify determinism of published output"
    )
    verify_parser.add_argument("input", help="JSON doclet dump (jsdoc -X output)")
    _add_common_paths(verify_parser)
    verify_parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Published output directory (default: config destination)",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_output_dir(out_dir: str | None) -> Path | None:
    if out_dir is None:
        return None
    return Path(out_dir).expanduser().resolve()


def _resolve_artifacts_dir(root: Path, artifacts_dir: str | None) -> Path:
    if artifacts_dir is None:
        config = load_config(root)
        return resolve_destination(root, config.destination)
    return Path(artifacts_dir).expanduser().resolve()


def _handle_publish(root: Path, args: argparse.Namespace) -> int:
    config = load_config(root)
    if args.private:
        config = config.model_copy(update={"show_private": True})
    tutorials_dir = (
        Path(args.tutorials).expanduser().resolve() if args.tutorials else None
    )
    publish(
        input_path=Path(args.input).expanduser().resolve(),
        root=root,
        out_dir=_resolve_output_dir(args.out_dir),
        config=config,
        tutorials_dir=tutorials_dir,
    )
    return 0


def _handle_validate(root: Path, artifacts_dir: str | None) -> int:
    resolved_artifacts_dir = _resolve_artifacts_dir(root, artifacts_dir)
    result = validate_artifacts(resolved_artifacts_dir)
    for warning in result.warnings:
        sys.stderr.write(f"warning: {warning.location()}: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def _handle_verify(root: Path, input_path: str, artifacts_dir: str | None) -> int:
    resolved_artifacts_dir = _resolve_artifacts_dir(root, artifacts_dir)
    try:
        result = verify_determinism(
            input_path=Path(input_path).expanduser().resolve(),
            root=root,
            artifacts_dir=resolved_artifacts_dir,
        )
    except (FileNotFoundError, NotADirectoryError) as exc:
        sys.stderr.write(f"artifacts-dir: {resolved_artifacts_dir}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if not result.ok:
        for label, paths in (
            ("missing", result.missing),
            ("extra", result.extra),
            ("mismatches", result.mismatches),
        ):
            for path in paths:
                sys.stderr.write(f"{label}: {path}\n")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)
    root = Path(args.root).expanduser().resolve()

    try:
        if args.command == "publish":
            return _handle_publish(root, args)

        if args.command == "validate":
            return _handle_validate(root, args.artifacts_dir)

        if args.command == "verify":
            return _handle_verify(root, args.input, args.artifacts_dir)
    except (
        ConfigError,
        InputError,
        LinkResolutionError,
        RegistryFrozenError,
    ) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
