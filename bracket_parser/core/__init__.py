"""
bracket_parser.core: shared diagnostic types used by the driver.

Modules:
  - span: character-offset Span
  - diagnostics: Diagnostic record
"""

__all__ = [
	"diagnostics",
	"span",
]
