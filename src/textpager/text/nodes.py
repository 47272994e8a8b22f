"""Styled fragment definitions for textpager.

Every fragment is a frozen dataclass so that fragment trees are
immutable and hashable.  The ``Fragment`` union type covers the three
node variants; downstream code should use ``isinstance`` checks to
dispatch.

A fragment tree is a pure value: it knows nothing about terminals,
chat clients or any other output backend.  Renderers in
``textpager.render`` turn it into something displayable.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


class Colour(Enum):
    """Semantic colour roles.

    Roles are resolved to concrete colours by the renderer in use, so the
    same fragment can be shown in a terminal or sent to a chat client.
    """

    PLAIN = auto()
    INFO = auto()
    HEADING = auto()
    ERROR = auto()
    COMMAND = auto()
    DISABLED = auto()


@dataclass(frozen=True, slots=True)
class ClickAction:
    """Issue ``command`` verbatim when the styled text is activated."""

    command: str

    def __str__(self) -> str:
        return self.command


@dataclass(frozen=True, slots=True)
class Style:
    """Formatting attributes applied to a fragment.

    Every attribute is optional; ``None`` means "inherit from the
    enclosing fragment".

    Parameters
    ----------
    colour:
        Semantic colour role of the text.
    bold:
        Weight of the text.
    italic:
        Slant of the text.
    hover:
        Fragment shown when the pointer rests on the text.
    click:
        Action issued when the text is activated.
    """

    colour: Colour | None = None
    bold: bool | None = None
    italic: bool | None = None
    hover: "Fragment | None" = None
    click: ClickAction | None = None

    @property
    def is_empty(self) -> bool:
        """Return True if no attribute is set."""
        return self == EMPTY_STYLE

    def merge(self, parent: "Style") -> "Style":
        """Return this style with unset attributes taken from ``parent``."""
        return Style(
            colour=self.colour if self.colour is not None else parent.colour,
            bold=self.bold if self.bold is not None else parent.bold,
            italic=self.italic if self.italic is not None else parent.italic,
            hover=self.hover if self.hover is not None else parent.hover,
            click=self.click if self.click is not None else parent.click,
        )


EMPTY_STYLE = Style()


# ---------------------------------------------------------------------------
# Fragment nodes
# ---------------------------------------------------------------------------


class _Composable:
    """Concatenation operators shared by every fragment node."""

    __slots__ = ()

    def append(self, other: "Fragment | str") -> "Fragment":
        """Return a new fragment with ``other`` after this one."""
        return concat(self, other)  # type: ignore[arg-type]

    def __add__(self, other: "Fragment | str") -> "Fragment":
        return concat(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class TextRun(_Composable):
    """A literal run of text."""

    text: str


@dataclass(frozen=True, slots=True)
class Styled(_Composable):
    """Applies ``style`` to ``child`` and everything inside it."""

    child: "Fragment"
    style: Style = field(default=EMPTY_STYLE)


@dataclass(frozen=True, slots=True)
class Concat(_Composable):
    """An ordered concatenation of fragments."""

    parts: tuple["Fragment", ...] = ()


Fragment = Union[TextRun, Styled, Concat]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def empty() -> Fragment:
    """Return a fragment with no content."""
    return Concat(())


def _coerce(part: Fragment | str) -> Fragment:
    if isinstance(part, str):
        return TextRun(part)
    if isinstance(part, (TextRun, Styled, Concat)):
        return part
    raise TypeError(f"Cannot use {type(part).__name__} as a text fragment")


def concat(*parts: Fragment | str) -> Fragment:
    """Concatenate ``parts`` in order.

    Strings are wrapped in ``TextRun`` nodes, nested ``Concat`` nodes are
    flattened and empty runs are dropped.  A single remaining part is
    returned as-is.
    """
    flat: list[Fragment] = []
    for part in parts:
        node = _coerce(part)
        if isinstance(node, Concat):
            flat.extend(node.parts)
        elif isinstance(node, TextRun) and not node.text:
            continue
        else:
            flat.append(node)
    if len(flat) == 1:
        return flat[0]
    return Concat(tuple(flat))


def styled(fragment: Fragment | str, style: Style | Colour | None = None) -> Fragment:
    """Wrap ``fragment`` in ``style``; a bare ``Colour`` is shorthand for a colour-only style."""
    node = _coerce(fragment)
    if isinstance(style, Colour):
        style = Style(colour=style)
    if style is None or style.is_empty:
        return node
    return Styled(node, style)


def literal(text: str, style: Style | Colour | None = None) -> Fragment:
    """Return a literal run of ``text``, optionally styled."""
    return styled(TextRun(text), style)
