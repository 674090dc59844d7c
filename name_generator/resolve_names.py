"""Command-line entry point: print the generated-field table of a parsed document."""

import argparse
import json
import logging
from pathlib import Path

import yaml

from name_generator.load_config import load_config
from name_generator.load_parsed_document import (
    DocumentFormatError,
    load_parsed_document,
)
from name_generator.name_resolver import NameResolver
from name_generator.resolved_name import ResolvedName

logger = logging.getLogger(__name__)


def format_names(names: list[ResolvedName], fmt: str) -> str:
    """Render resolved names as JSON or YAML text."""
    data = [n.to_dict() for n in names]
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    return json.dumps(data, indent=2)


def run(args: argparse.Namespace) -> int:
    """Resolve the names of one document and print them."""
    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        msg = f"Invalid configuration: {e}"
        raise SystemExit(msg) from None

    level = "DEBUG" if args.verbose else config["logging"].get("level", "WARNING")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    modifier = (
        args.default_field_modifier
        or config["resolver"].get("default_field_modifier")
        or "internal"
    )
    try:
        resolver = NameResolver(modifier)
    except ValueError as e:
        raise SystemExit(str(e)) from None

    if not args.document.is_file():
        msg = f"Document not found: {args.document}"
        raise SystemExit(msg)

    try:
        document = load_parsed_document(args.document)
    except (DocumentFormatError, yaml.YAMLError) as e:
        msg = f"Could not load {args.document}: {e}"
        raise SystemExit(msg) from None

    logger.debug("Default field modifier: %s", resolver.default_field_modifier.value)
    names = resolver.resolve_document(document)
    print(format_names(names, args.format))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse command-line arguments and run the resolver."""
    ap = argparse.ArgumentParser(
        description="List the named controls of a parsed XAML document.",
    )
    ap.add_argument(
        "document",
        type=Path,
        help="YAML file holding the parsed markup tree",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--default-field-modifier",
        help="Visibility for fields without x:FieldModifier "
        "(private, protected, internal, public)",
    )
    ap.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every skipped control",
    )
    args = ap.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
