"""Error types for the pager.

Out-of-range page requests made through ``Pager.send_page`` are not
errors: they are reported to the user through the sink.  The exceptions
here cover misuse of the API by the calling code.
"""
from __future__ import annotations

TOO_FEW_PAGES_MESSAGE = "There aren't that many pages"
NON_POSITIVE_PAGE_MESSAGE = "Page numbers start at 1"


class PagerError(Exception):
    """Base class for all pager errors."""


class InvalidPagerArgumentError(PagerError, ValueError):
    """Raised when a pager is constructed with an unusable argument."""

    def __init__(self, argument: str, value: object, reason: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid pager argument {argument}={value!r}: {reason}")


class InvalidPageError(PagerError, ValueError):
    """Raised when a page below 1 is rendered directly."""

    def __init__(self, page: int) -> None:
        self.page = page
        super().__init__(f"Cannot render page {page}: {NON_POSITIVE_PAGE_MESSAGE.lower()}")
