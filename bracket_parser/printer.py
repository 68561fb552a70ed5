# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Renderings of parse trees for display.

None of these are meant to be parsed back; they exist for diagnostics and for
the CLI.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .parser.ast import Bracketed, BracketKind, Node, Sequence, Text

_KIND_JSON_NAMES = {
	BracketKind.PAREN: "paren",
	BracketKind.CURLY: "curly",
	BracketKind.SQUARE: "square",
}


def format_node(node: Node) -> str:
	"""Single-line debug form, e.g. `Tokens([ Text(foo), Parenthesis(Text(bar)), ])`."""
	if isinstance(node, Text):
		return f"Text({node.content})"
	if isinstance(node, Bracketed):
		return f"{type(node).__name__}({format_node(node.inner)})"
	if isinstance(node, Sequence):
		items = "".join(f"{format_node(item)}, " for item in node.items)
		return f"Tokens([ {items}])"
	return "<invalid node>"


def format_tree(node: Node, indent: str = "  ") -> str:
	"""Multi-line form: one node per line, children indented under parents."""
	lines: List[str] = []
	_format_tree_into(node, 0, indent, lines)
	return "\n".join(lines)


def _format_tree_into(node: Node, depth: int, indent: str, lines: List[str]) -> None:
	pad = indent * depth
	if isinstance(node, Text):
		lines.append(f"{pad}Text {node.content!r}")
	elif isinstance(node, Bracketed):
		lines.append(f"{pad}{type(node).__name__} {node.kind.open}{node.kind.close}")
		_format_tree_into(node.inner, depth + 1, indent, lines)
	elif isinstance(node, Sequence):
		lines.append(f"{pad}Tokens ({len(node.items)})")
		for item in node.items:
			_format_tree_into(item, depth + 1, indent, lines)
	else:
		lines.append(f"{pad}<invalid node>")


def node_to_json(node: Node) -> Dict[str, Any]:
	"""Encode a tree as nested dicts/lists suitable for `json.dumps`."""
	if isinstance(node, Text):
		return {"kind": "text", "content": node.content}
	if isinstance(node, Bracketed):
		return {"kind": _KIND_JSON_NAMES[node.kind], "inner": node_to_json(node.inner)}
	if isinstance(node, Sequence):
		return {"kind": "sequence", "items": [node_to_json(item) for item in node.items]}
	raise TypeError(f"not a parse-tree node: {node!r}")


__all__ = ["format_node", "format_tree", "node_to_json"]
