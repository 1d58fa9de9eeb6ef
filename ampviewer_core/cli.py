"""CLI for checking viewer configuration documents before deployment."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass, field

from .config import (
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    ConfigLoadError,
    ConfigValidator,
    ValidationError,
    load_config,
)

logger = logging.getLogger(__name__)

__all__ = ["ValidationReport", "check_file", "main"]

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2


@dataclass
class ValidationReport:
    """Validation outcome for one configuration file."""

    path: str
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False, indent=2)


def check_file(path: str) -> ValidationReport:
    """Programmatic entry point for the validate command.

    Raises:
        ConfigLoadError: the file cannot be read or parsed.
    """
    config = load_config(path)
    errors = ConfigValidator.validate(config)
    if errors:
        logger.debug("%s failed %d rule(s)", path, len(errors))
    return ValidationReport(path=path, valid=not errors, errors=errors)


# =============================================================================
# Subcommand: validate
# =============================================================================

def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a configuration file."""
    try:
        report = check_file(args.config_file)
    except ConfigLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    if args.as_json:
        print(report.to_json())
    elif report.valid:
        print(f"{report.path}: OK")
    else:
        print(f"{report.path}: invalid")
        for err in report.errors:
            print(f"  {err.path}: {err.message}")

    return EXIT_OK if report.valid else EXIT_INVALID


# =============================================================================
# Subcommand: fields
# =============================================================================

def cmd_fields(args: argparse.Namespace) -> int:
    """List the configuration fields."""
    fields = {name: name in REQUIRED_FIELDS for name in sorted(REQUIRED_FIELDS | OPTIONAL_FIELDS)}

    if args.as_json:
        print(json.dumps(fields, indent=2))
        return EXIT_OK

    for name, required in fields.items():
        print(f"{name}: {'required' if required else 'optional'}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ampviewer-config",
        description="Validate AMP viewer configuration files.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a JSON or YAML config file")
    validate_parser.add_argument(
        "config_file",
        help="Configuration file (.json, .yaml or .yml)",
    )
    validate_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output as JSON",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # fields command
    fields_parser = subparsers.add_parser("fields", help="List configuration fields")
    fields_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output as JSON",
    )
    fields_parser.set_defaults(func=cmd_fields)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return EXIT_OK

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
