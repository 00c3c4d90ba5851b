#!/usr/bin/env python3
import argparse
import logging
import os
import sys
from typing import List

from yaml2php_lib import ConversionError, from_file, from_string


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Convert a YAML document into a PHP file that returns the equivalent array literal."
        )
    )
    parser.add_argument(
        "input",
        help="Path to the YAML file, or - to read YAML from stdin (includes then resolve against ./)",
    )
    parser.add_argument(
        "-o",
        "--out",
        default=None,
        help="Output path for the generated PHP file (default: write to stdout)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Emit multi-line, indented output instead of a single line",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=4,
        help="Spaces per nesting level when --pretty is given (default: 4)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log file loads and include resolution to stderr",
    )

    args = parser.parse_args(argv)

    if args.indent < 0:
        print(f"Invalid --indent value: {args.indent}. Expect a non-negative integer.", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.input == "-":
            program = from_string(sys.stdin.read(), args.pretty, args.indent)
        else:
            program = from_file(args.input, args.pretty, args.indent)
    except ConversionError as e:
        print(f"Conversion failed: {e}", file=sys.stderr)
        return 1

    if args.out is None:
        sys.stdout.write(program + "\n")
        return 0

    try:
        out_dir = os.path.dirname(args.out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(program + "\n")
    except OSError as e:
        print(f"Writing output failed: {e}", file=sys.stderr)
        return 1

    print(f"Conversion completed. Output at: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
