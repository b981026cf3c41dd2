"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys

from skillmarket.checks import validate_marketplace
from skillmarket.config import SkillmarketConfig, load_config
from skillmarket.exceptions import ConfigError, SkillmarketError
from skillmarket.exceptions.validation import format_errors
from skillmarket.index import build_index, render_index, update_readme
from skillmarket.reporting import StdoutReporter, write_report_json
from skillmarket.validation import preflight_validate


def handle_validate(args: argparse.Namespace) -> int:
    """Run ``skillmarket validate`` and return the process exit code."""
    config = _load_checked_config(args)
    if config is None:
        return 2

    try:
        report = validate_marketplace(args.root, config=config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillmarketError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1

    use_color = not args.no_color and sys.stdout.isatty()
    reporter = StdoutReporter(
        report,
        color=use_color,
        quiet=args.quiet,
        plugin_manifest=config.plugin_manifest,
        marketplace_manifest=config.marketplace_manifest,
    )
    print(reporter.render())
    issues = reporter.render_issues(color=not args.no_color and sys.stderr.isatty())
    if issues:
        print(issues, file=sys.stderr)

    if args.json_output is not None:
        write_report_json(args.json_output, report)

    return report.exit_code


def handle_index(args: argparse.Namespace) -> int:
    """Run ``skillmarket index``: print the index or rewrite the README block."""
    config = _load_checked_config(args)
    if config is None:
        return 2

    root = args.root.resolve()
    try:
        index = build_index(root, config=config)
        rendered = render_index(index)
        if not args.update_readme:
            print(rendered)
            return 0
        readme_path = config.readme(root)
        changed = update_readme(readme_path, rendered, title=index.title)
    except SkillmarketError as exc:
        print(f"Index error: {exc}", file=sys.stderr)
        return 1

    print(f"Updated {readme_path}" if changed else f"{readme_path} is already up to date")
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _load_checked_config(args: argparse.Namespace) -> SkillmarketConfig | None:
    """Preflight-validate then load config; print problems and return ``None`` on failure."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return None
    try:
        return load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None
