"""Convert a CAMT.053 statement file to JSON."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import get_config
from .errors import CamtError
from .models import BankStatementDocument
from .reader import parse_camt053


def read_statement(xml_path: Path, strict: bool = False) -> BankStatementDocument:
    """
    Read and parse a CAMT.053 file.

    Args:
        xml_path: Path to the XML file
        strict: Use strict mapping

    Returns:
        BankStatementDocument object
    """
    config = get_config()
    if strict:
        config = replace(config, strict=True)
    return parse_camt053(xml_path.read_bytes(), config=config)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the JSON converter."""
    parser = argparse.ArgumentParser(
        description="Convert a CAMT.053 bank statement to JSON"
    )
    parser.add_argument(
        "input_file",
        type=Path,
        help="CAMT.053 XML file"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout"
    )
    parser.add_argument(
        "-s", "--strict",
        action="store_true",
        help="Fail on empty balances, empty transaction details and missing amounts"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.input_file.is_file():
        print(f"Error: File not found: {args.input_file}", file=sys.stderr)
        sys.exit(1)

    try:
        document = read_statement(args.input_file, strict=args.strict)
    except CamtError as e:
        print(f"Error: Could not parse {args.input_file.name}: {e}", file=sys.stderr)
        sys.exit(1)

    output = document.to_json(indent=get_config().json_indent)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output + "\n", encoding="utf-8")
        print(f"Parsed data saved to: {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
