# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
bracket_parser: turn text with nested (), {} and [] into a tree.

Packages:
  parser: node types, bracket matcher and tree builder
  core: Span/Diagnostic used by the driver
The CLI entrypoint is `bracket_parser.cli:main`.
"""

from .parser import ParseError, UnclosedBracket, NestingTooDeep, parse

__all__ = ["parse", "ParseError", "UnclosedBracket", "NestingTooDeep"]
