"""Name-keyed registry of fragment renderers.

Renderers register under a short name (``"rich"``, ``"json"`` ...) so the
CLI and embedding code can pick an output backend by name and get back a
renderer configured with the active ``PagerConfig``.

Installed packages contribute renderers by declaring entry-points under
the "textpager.renderers" group::

    [project.entry-points."textpager.renderers"]
    html = "my_package.renderers:HtmlRenderer"

Those are imported the first time the registry is asked for a renderer
or for its names, never at import time.

Example
-------
::

    from textpager.render import FragmentRenderer, renderer_registry

    @renderer_registry.register("upper")
    class UpperRenderer(FragmentRenderer):
        def render(self, fragment):
            return plain_text(fragment).upper()

    renderer = renderer_registry.create("upper", config)
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable

from textpager.config import PagerConfig
from textpager.render.base import FragmentRenderer

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "textpager.renderers"

RendererClass = type[FragmentRenderer]


class RendererNotFoundError(KeyError):
    """Raised when a requested renderer name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.renderer_name = name
        self.available = available
        super().__init__(
            f"No renderer named {name!r}. "
            f"Available renderers: {', '.join(available) or '(none)'}."
        )


class RendererAlreadyRegisteredError(ValueError):
    """Raised when two renderers claim the same name."""

    def __init__(self, name: str) -> None:
        self.renderer_name = name
        super().__init__(f"A renderer named {name!r} is already registered.")


def _summary(cls: RendererClass) -> str:
    return (cls.__doc__ or "").strip().split("\n", 1)[0]


class RendererRegistry:
    """Maps output format names to renderer classes.

    Parameters
    ----------
    group:
        Entry-point group scanned for installed renderers.
    """

    def __init__(self, group: str = ENTRYPOINT_GROUP) -> None:
        self._group = group
        self._classes: dict[str, RendererClass] = {}
        self._installed_loaded = False

    def register(self, name: str) -> Callable[[RendererClass], RendererClass]:
        """Class decorator adding a renderer under ``name``.

        Raises
        ------
        RendererAlreadyRegisteredError
            If ``name`` is already taken.
        TypeError
            If the decorated class is not a ``FragmentRenderer``.
        """

        def decorator(cls: RendererClass) -> RendererClass:
            if name in self._classes:
                raise RendererAlreadyRegisteredError(name)
            if not _is_renderer_class(cls):
                raise TypeError(f"{cls!r} cannot render as {name!r}: not a FragmentRenderer subclass.")
            self._classes[name] = cls
            logger.debug("Renderer %r provided by %s", name, cls.__qualname__)
            return cls

        return decorator

    def create(self, name: str, config: PagerConfig | None = None) -> FragmentRenderer:
        """Instantiate the renderer registered as ``name`` with ``config``.

        Raises
        ------
        RendererNotFoundError
            If neither a built-in nor an installed renderer uses ``name``.
        """
        self._load_installed()
        cls = self._classes.get(name)
        if cls is None:
            raise RendererNotFoundError(name, self.names())
        return cls(config)

    def names(self) -> list[str]:
        """Return every available renderer name, sorted."""
        self._load_installed()
        return sorted(self._classes)

    def summaries(self) -> list[tuple[str, str]]:
        """Return ``(name, first docstring line)`` for each renderer."""
        return [(name, _summary(self._classes[name])) for name in self.names()]

    def __contains__(self, name: object) -> bool:
        self._load_installed()
        return name in self._classes

    def _load_installed(self) -> None:
        if self._installed_loaded:
            return
        self._installed_loaded = True
        for ep in importlib.metadata.entry_points(group=self._group):
            if ep.name in self._classes:
                logger.debug("Installed renderer %r shadowed by a built-in; ignored.", ep.name)
                continue
            cls = _import_renderer(ep)
            if cls is not None:
                self._classes[ep.name] = cls
                logger.debug("Installed renderer %r from %s", ep.name, ep.value)


def _is_renderer_class(obj: object) -> bool:
    return isinstance(obj, type) and issubclass(obj, FragmentRenderer)


def _import_renderer(ep: importlib.metadata.EntryPoint) -> RendererClass | None:
    try:
        obj = ep.load()
    except Exception:
        logger.exception("Could not import renderer %r (%s); ignored.", ep.name, ep.value)
        return None
    if not _is_renderer_class(obj):
        logger.warning("Entry-point %r (%s) is not a FragmentRenderer; ignored.", ep.name, ep.value)
        return None
    return obj
