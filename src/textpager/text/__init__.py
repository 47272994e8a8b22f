"""Styled text module.

Exports the fragment node types, their builders, the list/flatten
combinators and the chat-component serializer.
"""
from __future__ import annotations

from textpager.text.format import (
    NEWLINE,
    find_click_actions,
    format_list,
    iter_runs,
    plain_text,
)
from textpager.text.nodes import (
    EMPTY_STYLE,
    ClickAction,
    Colour,
    Concat,
    Fragment,
    Style,
    Styled,
    TextRun,
    concat,
    empty,
    literal,
    styled,
)
from textpager.text.serializer import FragmentSerializer

__all__ = [
    # Node types
    "Fragment",
    "TextRun",
    "Styled",
    "Concat",
    "Style",
    "ClickAction",
    "Colour",
    "EMPTY_STYLE",
    # Builders
    "concat",
    "empty",
    "literal",
    "styled",
    # Combinators
    "NEWLINE",
    "format_list",
    "iter_runs",
    "plain_text",
    "find_click_actions",
    # Serializer
    "FragmentSerializer",
]
