# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command-line driver: parse one text argument and print the tree.

The parser raises; this module turns failures into `Diagnostic` records and
picks the exit status. With --json everything (tree or diagnostics) goes to
stdout as one JSON object; otherwise errors go to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from bracket_parser.core.diagnostics import Diagnostic
from bracket_parser.core.span import Span
from bracket_parser.parser import DEFAULT_MAX_DEPTH, NestingTooDeep, ParseError, UnclosedBracket, parse
from bracket_parser.printer import format_node, format_tree, node_to_json

log = logging.getLogger("bracket_parser")


_ERROR_CODES = {
	UnclosedBracket: "E-UNCLOSED-BRACKET",
	NestingTooDeep: "E-NESTING-DEPTH",
}


def _diagnostic_from_error(err: ParseError) -> Diagnostic:
	code = _ERROR_CODES[type(err)]
	notes: list[str] = []
	if err.position != err.offset:
		notes.append(f"absolute position in input: {err.position}")
	return Diagnostic(message=str(err), code=code, phase="parser", span=Span.from_error(err), notes=notes)


def _configure_logging(verbose: bool) -> None:
	stream_handler = logging.StreamHandler(stream=sys.stderr)
	log.handlers = [stream_handler]
	log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: list[str] | None = None) -> int:
	"""
	Parse a single text argument.

	Exit status: 0 on success, 1 on a parse failure, 2 (argparse) on bad usage.
	"""
	parser = argparse.ArgumentParser(prog="bracket-parser", description="Parse nested (), {} and [] brackets into a tree")
	parser.add_argument("text", help="Text to parse")
	parser.add_argument("--tree", action="store_true", help="Print an indented tree instead of the one-line form")
	parser.add_argument("--json", action="store_true", help="Emit the tree or diagnostics as JSON on stdout")
	parser.add_argument(
		"--max-depth",
		type=int,
		default=DEFAULT_MAX_DEPTH,
		help=f"Maximum bracket nesting depth (default: {DEFAULT_MAX_DEPTH})",
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
	args = parser.parse_args(argv)

	_configure_logging(args.verbose)
	if args.max_depth < 0:
		parser.error("--max-depth must be non-negative")

	try:
		tree = parse(args.text, max_depth=args.max_depth)
	except ParseError as err:
		diag = _diagnostic_from_error(err)
		log.debug("parse failed: %s (offset=%s, position=%s)", diag.code, diag.span.offset, diag.span.position)
		if args.json:
			print(json.dumps({"exit_code": 1, "diagnostics": [diag.to_json()]}))
		else:
			print(diag.message, file=sys.stderr)
		return 1

	if args.json:
		print(json.dumps({"exit_code": 0, "tree": node_to_json(tree)}))
	elif args.tree:
		print(format_tree(tree))
	else:
		print(f"parsed: {format_node(tree)}")
	return 0


__all__ = ["main"]
