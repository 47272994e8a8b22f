"""Split a collection into pages of styled text with navigation controls.

A ``Pager`` is built for a single command invocation: it holds the
items, a transformer that renders one item, and the command used to
build the "jump to page" click actions.  Commands that use a pager take
the page number as their last argument, so the navigation buttons can
re-issue ``"<command> <page>"``.

Usage
-----
::

    from textpager.pager import CollectingSink, Pager
    from textpager.text import literal

    pager = Pager("/players list", "Players", players, lambda p: literal(p.name))
    sink = CollectingSink()
    pager.send_page(2, sink)
"""
from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Collection
from typing import Generic, Protocol, TypeVar, runtime_checkable

from textpager.pager.errors import (
    NON_POSITIVE_PAGE_MESSAGE,
    TOO_FEW_PAGES_MESSAGE,
    InvalidPageError,
    InvalidPagerArgumentError,
)
from textpager.text.format import format_list
from textpager.text.nodes import ClickAction, Colour, Fragment, Style, concat, literal

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10

# Fixed-width footer text: both brackets, the four buttons and the
# indicator punctuation.  Only the two page numbers vary in width.
_FOOTER_FIXED_WIDTH = 37
_FOOTER_OPEN = "============["
_FOOTER_CLOSE = "]============"

ElementTransformer = Callable[[T], Fragment]
"""Converts one paged item into the fragment shown for it."""


@runtime_checkable
class MessageSink(Protocol):
    """Anything that can receive a rendered document."""

    def deliver(self, document: Fragment) -> None: ...


class CollectingSink:
    """A sink that keeps every delivered document in ``delivered``."""

    def __init__(self) -> None:
        self.delivered: list[Fragment] = []

    def deliver(self, document: Fragment) -> None:
        self.delivered.append(document)


def total_pages(item_count: int, page_size: int) -> int:
    """Return the number of pages needed to show ``item_count`` items.

    Zero items need zero pages.
    """
    return -(-item_count // page_size)


class Pager(Generic[T]):
    """Renders pages of a collection as header, body and footer.

    Parameters
    ----------
    command:
        The command that produced the listing.  Navigation buttons issue
        ``"<command> <page>"``.
    header_text:
        Heading shown above the body; ``None`` or ``""`` omits the header.
    items:
        The items being paged.  The collection is referenced, not copied,
        and must not change while the pager is in use.
    transformer:
        Converts an item into the fragment shown for it.
    page_size:
        Items per page.

    Raises
    ------
    InvalidPagerArgumentError
        If ``command`` is blank or ``page_size`` is not a positive integer.
    """

    def __init__(
        self,
        command: str,
        header_text: str | None,
        items: Collection[T],
        transformer: ElementTransformer[T],
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if not isinstance(command, str) or not command.strip():
            raise InvalidPagerArgumentError("command", command, "must be a non-blank string")
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            raise InvalidPagerArgumentError("page_size", page_size, "must be a positive integer")
        self._command = command
        self._header_text = header_text
        self._items = items
        self._transformer = transformer
        self._page_size = page_size
        logger.debug(
            "Created pager for %r: %d item(s), %d per page",
            command,
            len(items),
            page_size,
        )

    @property
    def command(self) -> str:
        return self._command

    @property
    def header_text(self) -> str | None:
        return self._header_text

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        """Return the number of pages this pager has."""
        return total_pages(len(self._items), self._page_size)

    def pages(self) -> range:
        """Return the range of valid page numbers."""
        return range(1, self.total_pages + 1)

    def page_command(self, page: int) -> str:
        """Return the command that shows ``page``."""
        return f"{self._command} {page}"

    def __repr__(self) -> str:
        return (
            f"Pager(command={self._command!r}, header_text={self._header_text!r}, "
            f"items={len(self._items)}, page_size={self._page_size})"
        )

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def header(self) -> Fragment | None:
        """Return the heading line, centred over the footer, or ``None``.

        The heading is ``<pad>[<header_text>]<pad>``; odd-length text gets
        a trailing space so the brackets sit evenly, and padding shorter
        than three characters is dropped.
        """
        if not self._header_text:
            return None

        text = self._header_text
        header_length = 2 + len(text)
        if len(text) % 2 == 1:
            text += " "
            header_length += 1

        footer_length = _FOOTER_FIXED_WIDTH + 2 * len(str(self.total_pages))
        padding_length = (footer_length - header_length) // 2
        pad = "=" * padding_length if padding_length > 2 else ""

        return concat(
            literal(f"{pad}[", Colour.INFO),
            literal(text, Colour.HEADING),
            literal(f"]{pad}", Colour.INFO),
        )

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def body(self, page: int) -> Fragment:
        """Return the transformed items of ``page``, one per line.

        A page past the end has an empty body.

        Raises
        ------
        InvalidPageError
            If ``page`` is below 1.
        """
        if page < 1:
            raise InvalidPageError(page)
        start = (page - 1) * self._page_size
        page_items = itertools.islice(self._items, start, start + self._page_size)
        return format_list(self._transformer(item) for item in page_items)

    # ------------------------------------------------------------------
    # Footer
    # ------------------------------------------------------------------

    def footer(self, page: int) -> Fragment:
        """Return the navigation bar for ``page``.

        Buttons that would leave the valid range are greyed out and carry
        no hover text or click action.
        """
        total = self.total_pages
        return concat(
            literal(_FOOTER_OPEN, Colour.INFO),
            self._first_prev_buttons(page),
            self._page_indicator(page, total),
            self._next_last_buttons(page, total),
            literal(_FOOTER_CLOSE, Colour.INFO),
        )

    def _first_prev_buttons(self, page: int) -> Fragment:
        enabled = page != 1
        return concat(
            self._nav_button("«", "First Page", 1, enabled),
            self._nav_button("< ", "Previous Page", page - 1, enabled),
        )

    def _next_last_buttons(self, page: int, total: int) -> Fragment:
        enabled = page != total
        return concat(
            self._nav_button(" > ", "Next Page", page + 1, enabled),
            self._nav_button("» ", "Last Page", total, enabled),
        )

    @staticmethod
    def _page_indicator(page: int, total: int) -> Fragment:
        total_text = str(total)
        page_text = str(page).rjust(len(total_text))
        return literal(f"({page_text}/{total_text})", Colour.HEADING)

    def _nav_button(self, label: str, hover_text: str, target: int, enabled: bool) -> Fragment:
        if not enabled:
            return literal(label, Colour.DISABLED)
        return literal(
            label,
            Style(
                colour=Colour.COMMAND,
                hover=literal(hover_text, Colour.INFO),
                click=ClickAction(self.page_command(target)),
            ),
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_page(self, page: int) -> Fragment:
        """Render ``page`` as header, body and footer.

        No range check is made against the last page: a page past the end
        renders with an empty body and a footer for the real page count.

        Raises
        ------
        InvalidPageError
            If ``page`` is below 1.
        """
        parts: list[Fragment | str] = []
        header = self.header()
        if header is not None:
            parts.extend((header, "\n"))
        parts.extend((self.body(page), "\n", self.footer(page)))
        logger.debug("Rendered page %d of %d for %r", page, self.total_pages, self._command)
        return concat(*parts)

    def send_page(self, page: int, sink: MessageSink) -> bool:
        """Deliver ``page`` to ``sink``, or an error message if it does not exist.

        Returns
        -------
        bool
            ``True`` if the page was delivered, ``False`` if an error
            message was delivered instead.
        """
        if page < 1:
            message = NON_POSITIVE_PAGE_MESSAGE
        elif page > self.total_pages:
            message = TOO_FEW_PAGES_MESSAGE
        else:
            sink.deliver(self.render_page(page))
            return True

        logger.debug(
            "Rejected page %d for %r (%d page(s) available)",
            page,
            self._command,
            self.total_pages,
        )
        sink.deliver(literal(message, Colour.ERROR))
        return False
