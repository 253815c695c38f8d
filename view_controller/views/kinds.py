"""Kind factory — synthesizes View subclasses from view definitions.

Follows the registry pattern used across the package:
- In-memory dict keyed by kind name
- Global singleton via get_kind_registry()
- Only kinds from named definitions are registered, reachable through the
  namespace as ``kinds.<name>``; anonymous kinds live only as long as the
  controllers using them
"""

import logging
from typing import Any, Optional

from .. import config
from ..uid import make_uid
from .base import View
from .schemas import ViewDefinition

logger = logging.getLogger(__name__)


def make_view_name() -> str:
    """Generate a process-unique kind name for an otherwise anonymous view."""
    return make_uid(config.VIEW_NAME_PREFIX)


def is_view_kind(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, View)


def make_kind(definition: ViewDefinition, namespace: Any = None) -> type[View]:
    """Create a View subclass from a definition.

    The base class comes from ``definition.kind`` resolved as a dotted
    path, or is View itself. A nameless definition gets a generated name;
    the definition object is not modified.

    Raises:
        ValueError: If the base kind does not resolve to a View subclass
    """
    base: Any = View
    if definition.kind:
        if namespace is None:
            from ..paths import get_namespace

            namespace = get_namespace()
        base = namespace.get_path(definition.kind)
        if not is_view_kind(base):
            raise ValueError(f"Base kind '{definition.kind}' is not a view kind")

    name = definition.name or make_view_name()
    attrs: dict[str, Any] = dict(definition.properties)
    attrs.update(
        {
            "__module__": __name__,
            "__doc__": definition.description or None,
            "kind_name": name,
            "tag": definition.tag,
            "classes": definition.classes,
            "template": definition.template,
            "definition": definition,
        }
    )
    kind = type(name, (base,), attrs)

    if definition.name:
        get_kind_registry().register(kind)
    logger.debug(f"Created kind {name} from {base.get_kind_name()}")
    return kind


class KindRegistry:
    """Registry of synthesized view kinds, keyed by kind name."""

    def __init__(self):
        self._kinds: dict[str, type[View]] = {}

    def register(self, kind: type[View]) -> None:
        name = kind.get_kind_name()
        if name in self._kinds and self._kinds[name] is not kind:
            logger.warning(f"Kind {name} redefined")
        self._kinds[name] = kind

    def get(self, name: str) -> Optional[type[View]]:
        return self._kinds.get(name)

    def __getitem__(self, name: str) -> type[View]:
        return self._kinds[name]

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def list_names(self) -> list[str]:
        return sorted(self._kinds.keys())

    def clear(self) -> None:
        self._kinds.clear()


# Global registry instance
_registry: Optional[KindRegistry] = None


def get_kind_registry() -> KindRegistry:
    """Get the global kind registry instance."""
    global _registry
    if _registry is None:
        _registry = KindRegistry()
    return _registry
