"""Pager module.

Exports the ``Pager`` class, the page-count helper, the sink contract
and the pager error types.
"""
from __future__ import annotations

from textpager.pager.errors import (
    NON_POSITIVE_PAGE_MESSAGE,
    TOO_FEW_PAGES_MESSAGE,
    InvalidPageError,
    InvalidPagerArgumentError,
    PagerError,
)
from textpager.pager.pager import (
    DEFAULT_PAGE_SIZE,
    CollectingSink,
    ElementTransformer,
    MessageSink,
    Pager,
    total_pages,
)

__all__ = [
    "Pager",
    "ElementTransformer",
    "MessageSink",
    "CollectingSink",
    "DEFAULT_PAGE_SIZE",
    "total_pages",
    "PagerError",
    "InvalidPagerArgumentError",
    "InvalidPageError",
    "TOO_FEW_PAGES_MESSAGE",
    "NON_POSITIVE_PAGE_MESSAGE",
]
