#!/usr/bin/env python3
"""Normalize an XML document into its canonical form."""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_canon.errors import XmlNormalizationError
from xml_canon.inputs import InputTooLargeError, read_xml_file, read_xml_stream
from xml_canon.logging_utils import setup_logging
from xml_canon.options import NormalizationOptions, parse_options_file
from xml_canon.pipeline import ALL_STEPS, StepName, normalize_xml


def parse_steps(steps_arg: str | None) -> list[StepName]:
    """Parse steps argument.

    Args:
        steps_arg: Comma-separated step names or 'all'.

    Returns:
        List of step names to execute.

    Raises:
        ValueError: If invalid step name is provided.
    """
    if steps_arg is None or steps_arg.lower() == "all":
        return list(ALL_STEPS)

    steps: list[StepName] = []
    for step in steps_arg.split(","):
        step = step.strip().lower()
        if step not in ALL_STEPS:
            valid_steps = ", ".join(ALL_STEPS)
            raise ValueError(f"Invalid step '{step}'. Valid steps: {valid_steps}, all")
        steps.append(step)  # type: ignore

    return steps


def add_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add normalization option flags shared by the XML scripts."""
    parser.add_argument(
        "--config", "-c", type=Path, help="YAML file with normalization options"
    )
    parser.add_argument(
        "--no-pretty",
        action="store_true",
        help="Write compact output instead of indented output",
    )
    parser.add_argument(
        "--indent",
        type=int,
        help="Number of spaces per indentation level (default: 2)",
    )
    parser.add_argument(
        "--no-sort-attributes",
        action="store_true",
        help="Keep attributes in source order",
    )
    parser.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="Keep whitespace inside text and between tags (implies --no-pretty)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )


def build_options(args: argparse.Namespace) -> NormalizationOptions:
    """Build options from the config file and command-line overrides.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the config file or flags are invalid.
    """
    if args.config is not None:
        options = parse_options_file(args.config)
    else:
        options = NormalizationOptions()

    if args.no_pretty:
        options.pretty_print_output = False
    if args.indent is not None:
        if args.indent < 0:
            raise ValueError("--indent must not be negative")
        options.indentation = " " * args.indent
    if args.no_sort_attributes:
        options.sort_attributes = False
    if args.keep_whitespace:
        options.ignore_insignificant_whitespace = False
        options.preserve_leading_trailing_whitespace_in_text = True
        options.normalize_whitespace_in_text_nodes = False
        # Indentation would be read back as text on the next run
        options.pretty_print_output = False

    return options


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O error
        - 2: Configuration error
        - 3: XML error
    """
    parser = argparse.ArgumentParser(
        description="Normalize an XML document into its canonical form.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Normalize a file to stdout
  %(prog)s input.xml

  # Read from stdin, write to a file
  cat input.xml | %(prog)s - --output normalized.xml

  # Sort only, keep namespace declarations where they are
  %(prog)s input.xml --steps whitespace,canonicalize
""",
    )
    parser.add_argument("xml_file", help="Path to XML file, or '-' for stdin")
    parser.add_argument(
        "--output", "-o", type=Path, help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--steps",
        "-s",
        type=str,
        default="all",
        help="Steps to execute: whitespace,canonicalize,namespaces or 'all' (default: all)",
    )
    add_option_arguments(parser)

    args = parser.parse_args()
    setup_logging(args.verbose)

    # Parse steps and options
    try:
        steps = parse_steps(args.steps)
        options = build_options(args)
    except Exception as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 2

    # Read input
    try:
        if args.xml_file == "-":
            xml_text = read_xml_stream(sys.stdin)
        else:
            xml_path = Path(args.xml_file)
            if not xml_path.exists():
                print(f"Error: XML file not found: {xml_path}", file=sys.stderr)
                return 1
            xml_text = read_xml_file(xml_path)
    except InputTooLargeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to read input: {e}", file=sys.stderr)
        return 1

    # Normalize
    try:
        output = normalize_xml(xml_text, options, steps=steps)
    except XmlNormalizationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 3

    # Write output
    if args.output:
        try:
            args.output.write_text(output + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: Failed to write output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
