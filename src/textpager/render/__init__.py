"""Render module.

Exports the renderer base class, the built-in renderers, the default
registry and the console sink.
"""
from __future__ import annotations

from textpager.render.base import FragmentRenderer
from textpager.render.registry import (
    RendererAlreadyRegisteredError,
    RendererNotFoundError,
    RendererRegistry,
)
from textpager.render.renderers import (
    ConsoleSink,
    JsonRenderer,
    PlainRenderer,
    RichRenderer,
    YamlRenderer,
    renderer_registry,
)

__all__ = [
    "FragmentRenderer",
    "RichRenderer",
    "PlainRenderer",
    "JsonRenderer",
    "YamlRenderer",
    "ConsoleSink",
    "RendererRegistry",
    "RendererNotFoundError",
    "RendererAlreadyRegisteredError",
    "renderer_registry",
]
