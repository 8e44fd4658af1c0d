"""CLI entry point for DataDecorator."""

import argparse
import json
import logging
import os
import sys

from . import DataDecorator, DecoratorError, ExitCode, get_registry, parse
from .loader import load_collection, load_registry_module

REGISTRY_ENV = "DATADECORATOR_REGISTRY"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="datadecorator",
        description="DataDecorator - post-process collections with key templates",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Process command
    process_parser = subparsers.add_parser("process", help="Process a JSON or YAML collection")
    process_parser.add_argument("file", help="Path to collection file")
    process_parser.add_argument(
        "--registry",
        "-r",
        action="append",
        default=[],
        help=f"Python file registering template targets (repeatable, also ${REGISTRY_ENV})",
    )
    process_parser.add_argument(
        "--output",
        "-o",
        choices=["json", "pretty"],
        default="pretty",
        help="Output format",
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check every template key parses")
    validate_parser.add_argument("file", help="Path to collection file")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Show the capture groups of a template")
    parse_parser.add_argument("template", help="Template key, e.g. '${Car({name: ?}).presentUrl()}:url'")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return ExitCode.SUCCESS

    try:
        if args.command == "process":
            return cmd_process(args)
        elif args.command == "validate":
            return cmd_validate(args)
        elif args.command == "parse":
            return cmd_parse(args)
    except DecoratorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except Exception as e:
        print(f"Unexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        return ExitCode.RUNTIME_ERROR

    return ExitCode.SUCCESS


def _registry_paths(args) -> list[str]:
    paths = [p for p in os.environ.get(REGISTRY_ENV, "").split(os.pathsep) if p]
    return paths + args.registry


def cmd_process(args) -> int:
    """Process a collection file and print the result."""
    registry = get_registry()
    for path in _registry_paths(args):
        load_registry_module(path, registry)

    collection = load_collection(args.file)
    output = DataDecorator(registry).process_collection(collection)

    if args.output == "json":
        print(json.dumps(output, default=str))
    else:
        print(json.dumps(output, indent=2, default=str))
    return ExitCode.SUCCESS


def cmd_validate(args) -> int:
    """Parse every template key of a collection file."""
    collection = load_collection(args.file)
    templates = DataDecorator().validate_collection(collection)

    print(f"Valid: {args.file}")
    print(f"  Templates: {len(templates)}")
    for template in templates:
        print(f"    {template}")
    return ExitCode.SUCCESS


def cmd_parse(args) -> int:
    """Print the capture groups of a single template."""
    parsed = parse(args.template)
    output = parsed.groups()
    output["shape"] = parsed.shape.value
    print(json.dumps(output, indent=2))
    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
