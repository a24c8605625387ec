"""
Small C# text helpers shared by the attribute suite renderers.
"""

from __future__ import annotations

import textwrap

INDENT = "    "

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def string_literal(text: str) -> str:
    """Quote *text* as a regular (non-verbatim) C# string literal."""
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def indent(block: str, levels: int = 1) -> str:
    """Indent every non-blank line of *block* by *levels* steps."""
    return textwrap.indent(block, INDENT * levels)


def join_blocks(blocks: list[str]) -> str:
    """Separate fragments by one blank line."""
    return "\n\n".join(block for block in blocks if block)
