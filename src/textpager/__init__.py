"""textpager — paginate styled, interactive text output.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import textpager
    from textpager.pager import CollectingSink
    from textpager.text import Colour, literal

    pager = textpager.paginate(
        ["alpha", "beta", "gamma"],
        lambda name: literal(name, Colour.INFO),
        command="/names",
        header_text="Names",
        page_size=2,
    )
    pager.total_pages
    2

    sink = CollectingSink()
    pager.send_page(2, sink)

    textpager.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, TypeVar

from textpager.pager.pager import DEFAULT_PAGE_SIZE

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from textpager.pager.pager import ElementTransformer, Pager

T = TypeVar("T")


def paginate(
    items: Collection[T],
    transformer: "ElementTransformer[T]",
    *,
    command: str,
    header_text: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> "Pager[T]":
    """Build a ``Pager`` over ``items``.

    Parameters
    ----------
    items:
        The items to page, in display order.
    transformer:
        Converts one item into the fragment shown for it.
    command:
        The command that re-displays the listing; navigation buttons
        issue ``"<command> <page>"``.
    header_text:
        Optional heading shown above each page.
    page_size:
        Items per page.

    Returns
    -------
    Pager
        A pager ready to render or send pages.

    Raises
    ------
    textpager.pager.InvalidPagerArgumentError
        If ``command`` is blank or ``page_size`` is below 1.
    """
    from textpager.pager.pager import Pager

    return Pager(command, header_text, items, transformer, page_size=page_size)


def total_pages(item_count: int, page_size: int) -> int:
    """Return the number of pages needed to show ``item_count`` items.

    Parameters
    ----------
    item_count:
        Number of items being paged.
    page_size:
        Items per page.

    Returns
    -------
    int
        ``ceil(item_count / page_size)``; zero when there are no items.
    """
    from textpager.pager.pager import total_pages as _total_pages

    return _total_pages(item_count, page_size)


__all__ = [
    "__version__",
    "paginate",
    "total_pages",
]
