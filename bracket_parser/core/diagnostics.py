# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic records emitted by the command-line driver.

The parser itself raises exceptions; the driver turns them into these records
so text and JSON output share one shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a parse diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Span() denotes unknown.
	notes: list[str] = field(default_factory=list)

	def to_json(self) -> dict[str, object]:
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"offset": self.span.offset,
			"position": self.span.position,
			"notes": list(self.notes),
		}
