"""Base class shared by every output renderer."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from rich.text import Text

from textpager.config import PagerConfig
from textpager.text.nodes import Fragment


class FragmentRenderer(ABC):
    """Base class for renderers.

    Parameters
    ----------
    config:
        Settings for renderers that depend on them; defaults are used
        when omitted.
    """

    name: ClassVar[str] = ""

    def __init__(self, config: PagerConfig | None = None) -> None:
        self._config = config if config is not None else PagerConfig()

    @abstractmethod
    def render(self, fragment: Fragment) -> str | Text:
        """Render ``fragment`` for display."""
