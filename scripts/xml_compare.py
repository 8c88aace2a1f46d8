#!/usr/bin/env python3
"""Normalize two XML documents for side-by-side comparison."""

import argparse
import shlex
import subprocess
import sys
import tempfile
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_canon.errors import XmlNormalizationError
from xml_canon.inputs import InputTooLargeError, read_xml_file
from xml_canon.logging_utils import setup_logging
from xml_canon.pipeline import compare_documents, format_comparison_report

from xml_normalize import add_option_arguments, build_options


def launch_diff_tool(command: str, left: Path, right: Path) -> int:
    """Run an external diff tool on two files.

    Args:
        command: Diff tool command line, e.g. "diff -u" or "code --diff --wait".
        left: First file.
        right: Second file.

    Returns:
        The tool's exit code.

    Raises:
        FileNotFoundError: If the tool executable is not found.
    """
    result = subprocess.run(shlex.split(command) + [str(left), str(right)])
    return result.returncode


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O error
        - 2: Configuration error
        - 3: XML error in either document
        - 4: Documents differ (with --fail-on-difference)
    """
    parser = argparse.ArgumentParser(
        description="Normalize two XML documents for side-by-side comparison.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report whether two documents are equivalent
  %(prog)s a.xml b.xml

  # Save normalized copies for a diff viewer
  %(prog)s a.xml b.xml --left-output a.norm.xml --right-output b.norm.xml

  # Open the normalized documents in an external diff tool
  %(prog)s a.xml b.xml --diff-tool "code --diff --wait"
""",
    )
    parser.add_argument("left_file", type=Path, help="First XML file")
    parser.add_argument("right_file", type=Path, help="Second XML file")
    parser.add_argument(
        "--left-output", type=Path, help="Write normalized first document here"
    )
    parser.add_argument(
        "--right-output", type=Path, help="Write normalized second document here"
    )
    parser.add_argument(
        "--diff-tool",
        type=str,
        help="Command to open the normalized documents with (e.g. 'diff -u')",
    )
    parser.add_argument(
        "--fail-on-difference",
        action="store_true",
        help="Exit with code 4 when the documents differ",
    )
    add_option_arguments(parser)

    args = parser.parse_args()
    setup_logging(args.verbose)

    try:
        options = build_options(args)
    except Exception as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 2

    # Read both inputs
    texts = []
    for xml_path in (args.left_file, args.right_file):
        if not xml_path.exists():
            print(f"Error: XML file not found: {xml_path}", file=sys.stderr)
            return 1
        try:
            texts.append(read_xml_file(xml_path))
        except InputTooLargeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: Failed to read {xml_path}: {e}", file=sys.stderr)
            return 1

    # Normalize
    try:
        result = compare_documents(
            texts[0],
            texts[1],
            options,
            left_label=str(args.left_file),
            right_label=str(args.right_file),
        )
    except XmlNormalizationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 3

    print(format_comparison_report(result))

    # Write outputs
    try:
        if args.left_output:
            args.left_output.write_text(result.left + "\n", encoding="utf-8")
            print(f"\nLeft output written to: {args.left_output}")
        if args.right_output:
            args.right_output.write_text(result.right + "\n", encoding="utf-8")
            print(f"Right output written to: {args.right_output}")
    except OSError as e:
        print(f"Error: Failed to write output: {e}", file=sys.stderr)
        return 1

    # Hand off to the diff tool
    if args.diff_tool:
        with tempfile.TemporaryDirectory(prefix="xml-canon-") as tmp:
            left = args.left_output or Path(tmp) / f"left-{args.left_file.name}"
            right = args.right_output or Path(tmp) / f"right-{args.right_file.name}"
            if not args.left_output:
                left.write_text(result.left + "\n", encoding="utf-8")
            if not args.right_output:
                right.write_text(result.right + "\n", encoding="utf-8")
            try:
                launch_diff_tool(args.diff_tool, left, right)
            except FileNotFoundError as e:
                print(f"Error: Diff tool not found: {e}", file=sys.stderr)
                return 1

    if args.fail_on_difference and not result.equivalent:
        return 4

    return 0


if __name__ == "__main__":
    sys.exit(main())
