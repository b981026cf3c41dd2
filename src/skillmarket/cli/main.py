"""CLI entrypoint for Skillmarket."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skillmarket import __version__
from skillmarket.cli.handlers import handle_index, handle_validate, handle_validate_config
from skillmarket.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillmarket",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Check manifests against skill and agent files")
    _add_common_arguments(validate)
    validate.add_argument(
        "-j",
        "--json-output",
        type=Path,
        default=None,
        help="Also write the report as JSON to this path",
    )
    validate.add_argument("--no-color", action="store_true", help="Disable colored output")
    validate.add_argument("-q", "--quiet", action="store_true", help="Print only issues and the final verdict")
    validate.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    index = subparsers.add_parser("index", help="Generate the compressed skills index")
    _add_common_arguments(index)
    index.add_argument(
        "-u",
        "--update-readme",
        action="store_true",
        help="Rewrite the marked index block in the README instead of printing",
    )
    index.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    validate_config = subparsers.add_parser("validate-config", help="Validate configuration only")
    _add_common_arguments(validate_config)

    return parser


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path("."),
        help="Repository root path (default: current directory)",
    )
    subparser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate":
        return handle_validate(args)
    if args.command == "index":
        return handle_index(args)
    if args.command == "validate-config":
        return handle_validate_config(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
