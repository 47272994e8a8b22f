"""Shared test fixtures for textpager.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import string
from collections.abc import Callable

import pytest

from textpager.pager import Pager
from textpager.text import Fragment, literal


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "textpager"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def letters() -> list[str]:
    """The 26 uppercase letters A..Z."""
    return list(string.ascii_uppercase)


@pytest.fixture()
def make_pager(letters: list[str]) -> Callable[..., Pager[str]]:
    """Return a factory for pagers over ``letters`` with the ``/letters`` command."""

    def _make(
        items: list[str] | None = None,
        header_text: str | None = "Letters",
        page_size: int = 10,
    ) -> Pager[str]:
        return Pager(
            "/letters",
            header_text,
            letters if items is None else items,
            _letter_fragment,
            page_size=page_size,
        )

    return _make


def _letter_fragment(letter: str) -> Fragment:
    return literal(letter)
