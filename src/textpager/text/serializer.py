"""Chat-component serialization for styled fragments.

Fragments are exported in the JSON component form understood by game
chat clients: every node becomes a mapping with a ``"text"`` key, style
attributes become ``"color"``, ``"bold"``, ``"italic"``,
``"hoverEvent"`` and ``"clickEvent"`` keys, and children go into
``"extra"``.  The same plain dict/list structure is dumped to JSON or
YAML.

Usage
-----
::

    from textpager.text.serializer import FragmentSerializer

    serializer = FragmentSerializer()
    data = serializer.to_dict(fragment)
    json_text = serializer.to_json(fragment)
"""
from __future__ import annotations

import json

import yaml

from textpager.text.nodes import Colour, Concat, Fragment, Style, Styled, TextRun

_CHAT_COLOURS: dict[Colour, str] = {
    Colour.PLAIN: "reset",
    Colour.INFO: "gold",
    Colour.HEADING: "dark_aqua",
    Colour.ERROR: "red",
    Colour.COMMAND: "aqua",
    Colour.DISABLED: "dark_gray",
}


class FragmentSerializer:
    """Converts fragment trees into chat-component dicts, JSON and YAML.

    Attributes left unset on a style are omitted from the output so that
    the receiving client applies its own inheritance.
    """

    def to_dict(self, fragment: Fragment) -> dict[str, object]:
        """Serialize ``fragment`` to a JSON-compatible component dict."""
        if isinstance(fragment, TextRun):
            return {"text": fragment.text}
        if isinstance(fragment, Styled):
            return self._styled_to_dict(fragment)
        if isinstance(fragment, Concat):
            return self._with_extra({"text": ""}, fragment.parts)
        raise TypeError(f"Not a text fragment: {fragment!r}")

    def to_json(self, fragment: Fragment, indent: int | None = None) -> str:
        """Serialize ``fragment`` to a JSON string."""
        return json.dumps(self.to_dict(fragment), indent=indent, ensure_ascii=False)

    def to_yaml(self, fragment: Fragment) -> str:
        """Serialize ``fragment`` to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(fragment),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _styled_to_dict(self, fragment: Styled) -> dict[str, object]:
        child = fragment.child
        if isinstance(child, TextRun):
            component: dict[str, object] = {"text": child.text}
        elif isinstance(child, Concat):
            component = self._with_extra({"text": ""}, child.parts)
        else:
            component = self._with_extra({"text": ""}, (child,))
        component.update(self._style_to_dict(fragment.style))
        return component

    def _with_extra(
        self, component: dict[str, object], parts: tuple[Fragment, ...]
    ) -> dict[str, object]:
        if parts:
            component["extra"] = [self.to_dict(part) for part in parts]
        return component

    def _style_to_dict(self, style: Style) -> dict[str, object]:
        data: dict[str, object] = {}
        if style.colour is not None:
            data["color"] = _CHAT_COLOURS[style.colour]
        if style.bold is not None:
            data["bold"] = style.bold
        if style.italic is not None:
            data["italic"] = style.italic
        if style.hover is not None:
            data["hoverEvent"] = {
                "action": "show_text",
                "contents": self.to_dict(style.hover),
            }
        if style.click is not None:
            data["clickEvent"] = {
                "action": "run_command",
                "value": style.click.command,
            }
        return data
