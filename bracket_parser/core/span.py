# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Character-offset span used by diagnostics.

Offsets index code points of the input text. `offset` is relative to the
substring the reporting parse call was scanning; `position` is the same place
in the top-level input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bracket_parser.parser import ParseError


@dataclass(frozen=True)
class Span:
	"""Represents a source span (relative and absolute character offsets)."""

	offset: Optional[int] = None
	position: Optional[int] = None

	@classmethod
	def from_error(cls, err: ParseError) -> "Span":
		"""Construct a Span from the location fields of a parser error."""
		return cls(offset=err.offset, position=err.position)


__all__ = ["Span"]
