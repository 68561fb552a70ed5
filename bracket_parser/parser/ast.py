# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parse-tree nodes produced by `bracket_parser.parser.parse`.

The tree is a tagged union of frozen dataclasses:

  Text(content)              literal run, leaf
  Parenthesis(inner)         ( ... )
  Curly(inner)               { ... }
  Square(inner)              [ ... ]
  Sequence(items)            ordered siblings, left-to-right scan order

Bracket nodes own exactly one child: the result of parsing everything strictly
between the matched pair. Nodes compare by value and are immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator, Optional, Tuple, Type


class BracketKind(Enum):
	PAREN = ("(", ")")
	CURLY = ("{", "}")
	SQUARE = ("[", "]")

	@property
	def open(self) -> str:
		return self.value[0]

	@property
	def close(self) -> str:
		return self.value[1]

	@classmethod
	def from_open(cls, ch: str) -> Optional["BracketKind"]:
		"""Return the kind whose opening character is `ch`, or None."""
		return _KIND_BY_OPEN.get(ch)

	@property
	def node_type(self) -> Type["Bracketed"]:
		return _NODE_BY_KIND[self]


_KIND_BY_OPEN = {k.open: k for k in BracketKind}
OPEN_BRACKETS = frozenset(_KIND_BY_OPEN)


class Node:
	"""Base class of every parse-tree node."""

	def __str__(self) -> str:
		from bracket_parser.printer import format_node

		return format_node(self)


@dataclass(frozen=True)
class Text(Node):
	content: str


@dataclass(frozen=True)
class Bracketed(Node):
	inner: Node

	kind: ClassVar[BracketKind]


@dataclass(frozen=True)
class Parenthesis(Bracketed):
	kind: ClassVar[BracketKind] = BracketKind.PAREN


@dataclass(frozen=True)
class Curly(Bracketed):
	kind: ClassVar[BracketKind] = BracketKind.CURLY


@dataclass(frozen=True)
class Square(Bracketed):
	kind: ClassVar[BracketKind] = BracketKind.SQUARE


@dataclass(frozen=True)
class Sequence(Node):
	"""
	Siblings in scan order.

	A parse call never returns a one-element Sequence; single results are
	collapsed to the element itself.
	"""

	items: Tuple[Node, ...]

	def __post_init__(self) -> None:
		# Accept any iterable (lists from callers/tests) but store a tuple so the
		# node stays hashable and immutable.
		if not isinstance(self.items, tuple):
			object.__setattr__(self, "items", tuple(self.items))

	def __len__(self) -> int:
		return len(self.items)

	def __iter__(self) -> Iterator[Node]:
		return iter(self.items)

	def __getitem__(self, index: int) -> Node:
		return self.items[index]


_NODE_BY_KIND = {
	BracketKind.PAREN: Parenthesis,
	BracketKind.CURLY: Curly,
	BracketKind.SQUARE: Square,
}


__all__ = [
	"BracketKind",
	"OPEN_BRACKETS",
	"Node",
	"Text",
	"Bracketed",
	"Parenthesis",
	"Curly",
	"Square",
	"Sequence",
]
