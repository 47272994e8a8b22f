"""Output backends for styled fragments.

A renderer turns a fragment tree into something a display can use:

- ``rich``  -> ``rich.text.Text`` for terminal output, colours taken from
  the configured theme
- ``plain`` -> the bare text
- ``json``  -> chat-component JSON
- ``yaml``  -> chat-component YAML

``ConsoleSink`` connects a renderer to a Rich console so a ``Pager`` can
deliver pages straight to the terminal.
"""
from __future__ import annotations

from rich.console import Console
from rich.style import Style as RichStyle
from rich.text import Text

from textpager.render.base import FragmentRenderer
from textpager.render.registry import RendererRegistry
from textpager.text.format import iter_runs, plain_text
from textpager.text.nodes import Fragment, Style
from textpager.text.serializer import FragmentSerializer


renderer_registry = RendererRegistry()


@renderer_registry.register("rich")
class RichRenderer(FragmentRenderer):
    """Renders to ``rich.text.Text``.

    Click commands and hover text have no terminal equivalent; they are
    kept in the span style's ``meta`` under ``"command"`` and ``"hover"``
    for applications that handle mouse events.
    """

    name = "rich"

    def render(self, fragment: Fragment) -> Text:
        text = Text()
        for run, style in iter_runs(fragment):
            text.append(run, style=self._rich_style(style))
        return text

    def _rich_style(self, style: Style) -> RichStyle:
        base = RichStyle()
        if style.colour is not None:
            base = RichStyle.parse(self._config.theme.style_for(style.colour))
        meta: dict[str, str] = {}
        if style.click is not None:
            meta["command"] = style.click.command
        if style.hover is not None:
            meta["hover"] = plain_text(style.hover)
        return base + RichStyle(bold=style.bold, italic=style.italic, meta=meta or None)


@renderer_registry.register("plain")
class PlainRenderer(FragmentRenderer):
    """Renders to unstyled text."""

    name = "plain"

    def render(self, fragment: Fragment) -> str:
        return plain_text(fragment)


@renderer_registry.register("json")
class JsonRenderer(FragmentRenderer):
    """Renders to an indented chat-component JSON document."""

    name = "json"

    def render(self, fragment: Fragment) -> str:
        return FragmentSerializer().to_json(fragment, indent=2)


@renderer_registry.register("yaml")
class YamlRenderer(FragmentRenderer):
    """Renders to a chat-component YAML document."""

    name = "yaml"

    def render(self, fragment: Fragment) -> str:
        return FragmentSerializer().to_yaml(fragment)


class ConsoleSink:
    """Delivers documents to a Rich console through ``renderer``."""

    def __init__(self, console: Console, renderer: FragmentRenderer) -> None:
        self._console = console
        self._renderer = renderer

    def deliver(self, document: Fragment) -> None:
        output = self._renderer.render(document)
        if isinstance(output, Text):
            self._console.print(output)
        else:
            self._console.print(output, markup=False, emoji=False, highlight=False, soft_wrap=True)
