#!/usr/bin/env python3
"""Command-line interface for Epox."""

import argparse
import json
import sys
from typing import List, Optional

from .ant import Ant, AntLandscape
from .config import ParserConfig, setup_logging
from .core import Variable, to_source
from .errors import EpoxError
from .parser import EpoxParser
from .terminals import parse_boolean, parse_double
from .verify import node_count, tree_depth


def parse_variable(text: str) -> Variable:
    """
    Build a Variable from a NAME=VALUE command line argument.

    VALUE may be a boolean ("true"/"false") or a numeric literal.

    Raises:
        argparse.ArgumentTypeError: If text is not NAME=VALUE with a valid value
    """
    name, sep, raw = text.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {text!r}")

    value = parse_boolean(raw)
    if value is None:
        value = parse_double(raw)
    if value is None:
        raise argparse.ArgumentTypeError(f"Invalid value for variable {name}: {raw!r}")

    return Variable(name, value)


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {text!r}")
    return value


def parse_main(argv: Optional[List[str]] = None):
    """Main entry point for epox-parse command."""
    parser = argparse.ArgumentParser(description="Parse an Epox program into a node tree")
    parser.add_argument("expression", help="Program source, e.g. 'AND(x, NOT(y))'")
    parser.add_argument(
        "--var", dest="variables", action="append", type=parse_variable, default=[],
        metavar="NAME=VALUE", help="Make a variable available (repeatable)"
    )
    parser.add_argument("--ant", action="store_true",
                        help="Bind an ant on an empty landscape for ant functions")
    parser.add_argument("--ant-size", type=int, default=32, help="Ant landscape width and height")
    parser.add_argument("--strict", action="store_true",
                        help="Reject text after the matching closing parenthesis")
    parser.add_argument("--max-depth", type=positive_int, default=None, help="Maximum nesting depth")
    parser.add_argument("--evaluate", action="store_true", help="Evaluate the parsed tree")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    context = None
    if args.ant:
        context = Ant(AntLandscape(args.ant_size, args.ant_size))

    epox_parser = EpoxParser(
        variables=args.variables,
        context=context,
        config=ParserConfig(strict_parens=args.strict, max_depth=args.max_depth),
    )

    try:
        tree = epox_parser.parse(args.expression)
    except EpoxError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    result = {
        "program": to_source(tree),
        "depth": tree_depth(tree),
        "nodes": node_count(tree),
    }

    if args.evaluate:
        try:
            result["value"] = tree.evaluate()
        except (RuntimeError, ValueError, TypeError) as e:
            print(f"Error: evaluation failed: {e}", file=sys.stderr)
            sys.exit(1)

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(f"Program: {result['program']}")
        print(f"Depth: {result['depth']}")
        print(f"Nodes: {result['nodes']}")
        if args.evaluate:
            print(f"Value: {result['value']}")


if __name__ == "__main__":
    parse_main()
