# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Bracket matcher and recursive tree builder.

`parse` scans left to right accumulating plain-text runs. Each opening bracket
asks `find_matching_close` for the extent of its region, parses the strict
interior recursively, wraps it in the node for that bracket kind and resumes
just past the close. Interior text is therefore scanned twice (once by the
matcher, once by the nested parse).

The matcher counts only the bracket kind it was asked for; brackets of the
other two kinds are inert. `(aaa]bbb)` parses, and `(aaa]` fails only because
no `)` is ever found.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .ast import BracketKind, Node, OPEN_BRACKETS, Sequence, Text

log = logging.getLogger(__name__)

# Nesting guard. Each level costs one Python frame, so this stays well inside
# the interpreter's default recursion limit.
DEFAULT_MAX_DEPTH = 256


class ParseError(ValueError):
	"""
	Base class for bracket parse failures.

	`offset` is relative to the substring scanned by the call that detected the
	failure (nested calls see only their interior). `position` is the same
	character in the top-level input.
	"""

	def __init__(self, message: str, *, offset: int, position: int) -> None:
		super().__init__(message)
		self.offset = offset
		self.position = position


class UnclosedBracket(ParseError):
	"""An opening bracket whose matching close was never found."""

	def __init__(self, *, offset: int, position: int) -> None:
		super().__init__(f"not close at: {offset}", offset=offset, position=position)


class NestingTooDeep(ParseError):
	"""
	Bracket nesting exceeded the maximum depth.

	`max_depth` is the configured limit, or the depth actually reached when the
	interpreter recursion limit was hit first.
	"""

	def __init__(self, *, offset: int, position: int, max_depth: int) -> None:
		super().__init__(
			f"nesting too deep at: {offset} (max depth {max_depth})",
			offset=offset,
			position=position,
		)
		self.max_depth = max_depth


def find_matching_close(text: str, kind: BracketKind) -> Optional[int]:
	"""
	Return the offset of the bracket closing the one at the start of `text`.

	`text` is expected to begin with `kind.open`; that is not checked. The
	offset is relative to the start of `text`. Returns None when the nesting
	counter never returns to zero.

	  find_matching_close("(123456)texttext", BracketKind.PAREN)  -> 7
	"""
	open_ch, close_ch = kind.open, kind.close
	depth = 0
	for index, ch in enumerate(text):
		if ch == open_ch:
			depth += 1
		elif ch == close_ch:
			depth -= 1
			if depth == 0:
				return index
	return None


def parse(text: str, *, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> Node:
	"""
	Parse `text` into a bracket tree.

	Raises `UnclosedBracket` for the first opening bracket (depth-first) that
	has no matching close, and `NestingTooDeep` when nesting exceeds
	`max_depth` or the interpreter recursion limit, whichever is hit first
	(None leaves only the interpreter limit). No partial tree is returned.
	"""
	log.debug("parse: %d chars, max_depth=%s", len(text), max_depth)
	return _parse(text, base=0, depth=0, max_depth=max_depth)


def _parse(text: str, *, base: int, depth: int, max_depth: Optional[int]) -> Node:
	if not text:
		return Text("")

	tokens: List[Node] = []
	run_start = 0
	index = 0
	while index < len(text):
		ch = text[index]
		if ch not in OPEN_BRACKETS:
			index += 1
			continue

		if run_start != index:
			tokens.append(Text(text[run_start:index]))

		kind = BracketKind.from_open(ch)
		end = find_matching_close(text[index:], kind)
		if end is None:
			raise UnclosedBracket(offset=index, position=base + index)
		if max_depth is not None and depth >= max_depth:
			raise NestingTooDeep(offset=index, position=base + index, max_depth=max_depth)

		try:
			inner = _parse(
				text[index + 1 : index + end],
				base=base + index + 1,
				depth=depth + 1,
				max_depth=max_depth,
			)
		except RecursionError:
			# Interpreter stack ran out before max_depth. Report the innermost
			# bracket whose frame had room to build the error.
			raise NestingTooDeep(offset=index, position=base + index, max_depth=depth) from None
		tokens.append(kind.node_type(inner))

		index = index + end + 1
		run_start = index

	if run_start < len(text):
		tokens.append(Text(text[run_start:]))

	if len(tokens) == 1:
		return tokens[0]
	return Sequence(tuple(tokens))


__all__ = [
	"DEFAULT_MAX_DEPTH",
	"ParseError",
	"UnclosedBracket",
	"NestingTooDeep",
	"find_matching_close",
	"parse",
]
