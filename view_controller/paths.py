"""Dotted path resolution against an ambient namespace.

A path like ``"document.body"`` or ``"views.greeting"`` is resolved by
looking up the first segment among the registered roots and then walking
the remaining segments. Each step tries a mapping lookup, then item
access, then an attribute. Paths whose first segment is not a registered
root are treated as ``package.module.attr`` and imported, unless the
namespace was created with ``allow_imports=False``.
"""

import importlib
import logging
from collections.abc import Mapping
from typing import Any, Optional

logger = logging.getLogger(__name__)

_MISSING = object()


def _step(obj: Any, name: str) -> Any:
    """Resolve one path segment on ``obj``, or return _MISSING."""
    if isinstance(obj, Mapping):
        return obj.get(name, _MISSING)
    # Registries expose their entries by item, ahead of their own methods
    if hasattr(obj, "__getitem__") and not isinstance(obj, (str, bytes)):
        try:
            return obj[name]
        except (KeyError, IndexError, TypeError):
            pass
    return getattr(obj, name, _MISSING)


def _walk(obj: Any, parts: list[str]) -> Any:
    for part in parts:
        obj = _step(obj, part)
        if obj is _MISSING or obj is None:
            return _MISSING
    return obj


class Namespace:
    """Named roots that dotted paths are resolved against."""

    def __init__(self, allow_imports: bool = True):
        self.allow_imports = allow_imports
        self._roots: dict[str, Any] = {}

    def register(self, name: str, value: Any) -> None:
        """Register (or replace) a root."""
        if name in self._roots and self._roots[name] is not value:
            logger.debug(f"Replacing namespace root: {name}")
        self._roots[name] = value

    def unregister(self, name: str) -> None:
        self._roots.pop(name, None)

    def roots(self) -> list[str]:
        return list(self._roots.keys())

    def get_path(self, path: str) -> Optional[Any]:
        """Resolve a dotted path; returns None when nothing is reachable there."""
        if not isinstance(path, str) or not path:
            return None

        parts = path.split(".")
        if any(not p for p in parts):
            return None

        if parts[0] in self._roots:
            value = _walk(self._roots[parts[0]], parts[1:])
        elif self.allow_imports:
            value = self._import_path(parts)
        else:
            value = _MISSING

        return None if value is _MISSING else value

    @staticmethod
    def _import_path(parts: list[str]) -> Any:
        """Import the longest module prefix of ``parts`` and walk the rest."""
        for i in range(len(parts), 0, -1):
            module_name = ".".join(parts[:i])
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
            return _walk(module, parts[i:])
        return _MISSING


# Global namespace instances
_namespace: Optional[Namespace] = None
_restricted_namespace: Optional[Namespace] = None


def get_namespace() -> Namespace:
    """Get the global namespace, with the default roots registered."""
    global _namespace
    if _namespace is None:
        _namespace = Namespace()
        _register_default_roots(_namespace)
    return _namespace


def get_restricted_namespace() -> Namespace:
    """Get the global namespace that never imports modules, for untrusted paths."""
    global _restricted_namespace
    if _restricted_namespace is None:
        _restricted_namespace = Namespace(allow_imports=False)
        _register_default_roots(_restricted_namespace)
    return _restricted_namespace


def _register_default_roots(namespace: Namespace) -> None:
    from .display import get_document
    from .views.kinds import get_kind_registry
    from .views.registry import get_view_registry

    namespace.register("document", get_document())
    namespace.register("kinds", get_kind_registry())
    namespace.register("views", get_view_registry())


def reset_namespace() -> None:
    """Drop the global namespaces; the next lookup rebuilds them."""
    global _namespace, _restricted_namespace
    _namespace = None
    _restricted_namespace = None
