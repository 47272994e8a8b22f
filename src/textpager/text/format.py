"""Combinators over styled fragments.

These helpers never mutate their inputs; each returns a new fragment or
a view computed from the tree.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from textpager.text.nodes import (
    EMPTY_STYLE,
    Concat,
    Fragment,
    Style,
    Styled,
    TextRun,
    concat,
)

NEWLINE: Fragment = TextRun("\n")


def format_list(fragments: Iterable[Fragment], separator: Fragment = NEWLINE) -> Fragment:
    """Join ``fragments`` in order with ``separator`` between neighbours.

    Parameters
    ----------
    fragments:
        The fragments to join.
    separator:
        Placed between each pair of adjacent fragments.

    Returns
    -------
    Fragment
        The joined fragment; empty when ``fragments`` is empty.
    """
    parts: list[Fragment] = []
    for index, fragment in enumerate(fragments):
        if index:
            parts.append(separator)
        parts.append(fragment)
    return concat(*parts)


def iter_runs(fragment: Fragment, inherited: Style = EMPTY_STYLE) -> Iterator[tuple[str, Style]]:
    """Yield every non-empty literal in ``fragment`` with its effective style.

    The walk is depth-first, so runs come out in display order.
    """
    if isinstance(fragment, TextRun):
        if fragment.text:
            yield fragment.text, inherited
    elif isinstance(fragment, Styled):
        yield from iter_runs(fragment.child, fragment.style.merge(inherited))
    elif isinstance(fragment, Concat):
        for part in fragment.parts:
            yield from iter_runs(part, inherited)
    else:
        raise TypeError(f"Not a text fragment: {fragment!r}")


def plain_text(fragment: Fragment) -> str:
    """Return the text of ``fragment`` with all styling removed."""
    return "".join(text for text, _ in iter_runs(fragment))


def find_click_actions(fragment: Fragment) -> list[str]:
    """Return the command of every click action in ``fragment``, in display order."""
    commands: list[str] = []

    def _walk(node: Fragment) -> None:
        if isinstance(node, Styled):
            if node.style.click is not None:
                commands.append(node.style.click.command)
            _walk(node.child)
        elif isinstance(node, Concat):
            for part in node.parts:
                _walk(part)

    _walk(fragment)
    return commands
