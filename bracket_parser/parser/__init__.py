# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Bracket parser front-end.

`parse(text)` is the entry point; `find_matching_close` is exposed for callers
that only need the extent of one bracketed region.
"""

from __future__ import annotations

from .ast import (
	BracketKind,
	Bracketed,
	Curly,
	Node,
	Parenthesis,
	Sequence,
	Square,
	Text,
)
from .parser import (
	DEFAULT_MAX_DEPTH,
	NestingTooDeep,
	ParseError,
	UnclosedBracket,
	find_matching_close,
	parse,
)

__all__ = [
	"BracketKind",
	"Bracketed",
	"Curly",
	"Node",
	"Parenthesis",
	"Sequence",
	"Square",
	"Text",
	"DEFAULT_MAX_DEPTH",
	"NestingTooDeep",
	"ParseError",
	"UnclosedBracket",
	"find_matching_close",
	"parse",
]
