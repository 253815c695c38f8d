"""Descriptor and render-target resolution.

Both resolvers return a Resolved/Unresolved result instead of raising, so
the controller decides where the ConfigurationError surfaces.
"""

import logging
from typing import Any

from pydantic import ValidationError

from ..display import Document, Node
from ..errors import ConfigurationError, Resolution, Resolved, Unresolved
from ..paths import Namespace
from ..views.base import View
from ..views.kinds import is_view_kind, make_kind, make_view_name
from ..views.schemas import ViewDefinition

logger = logging.getLogger(__name__)


def _invalid_view(owner_name: str, reason: str) -> Unresolved:
    error = ConfigurationError(f"{owner_name} cannot initialize without a valid view defined ({reason})")
    logger.error(str(error))
    return Unresolved(error)


def _kind_from_definition(definition: Any, owner_name: str, namespace: Namespace) -> Resolution[type[View]]:
    try:
        if not isinstance(definition, ViewDefinition):
            definition = ViewDefinition.model_validate(definition)
        return Resolved(make_kind(definition, namespace=namespace))
    except (ValidationError, ValueError) as e:
        return _invalid_view(owner_name, f"invalid view definition: {e}")


def resolve_view_kind(descriptor: Any, owner_name: str, namespace: Namespace) -> Resolution[type[View]]:
    """Turn a view descriptor into a view class.

    - a class is returned unchanged
    - a dict or ViewDefinition is synthesized into a new kind
    - a string is resolved as a dotted path; a view class found there gets
      a generated ``kind_name`` if it has none of its own, a definition
      found there is synthesized
    """
    if isinstance(descriptor, type):
        return Resolved(descriptor)

    if isinstance(descriptor, (dict, ViewDefinition)):
        return _kind_from_definition(descriptor, owner_name, namespace)

    if isinstance(descriptor, str):
        value = namespace.get_path(descriptor)
        if value is None:
            return _invalid_view(owner_name, f"'{descriptor}' does not resolve")
        if isinstance(value, (dict, ViewDefinition)):
            return _kind_from_definition(value, owner_name, namespace)
        if not is_view_kind(value):
            return _invalid_view(owner_name, f"'{descriptor}' is not a view kind")
        if not value.__dict__.get("kind_name"):
            value.kind_name = make_view_name()
        return Resolved(value)

    return _invalid_view(owner_name, f"unsupported descriptor {descriptor!r}")


def resolve_render_target(
    descriptor: Any, owner_name: str, document: Document, namespace: Namespace
) -> Resolution[Node]:
    """Turn a render target descriptor into a display-tree node.

    A node is used as-is; a string is tried as a node id first and then as
    a dotted path.
    """
    if isinstance(descriptor, Node):
        return Resolved(descriptor)

    target = document.by_id(descriptor)
    if target is None and isinstance(descriptor, str):
        found = namespace.get_path(descriptor)
        if isinstance(found, Node):
            target = found
    if target is not None:
        return Resolved(target)

    error = ConfigurationError(f"{owner_name} cannot find the render target: {descriptor}")
    logger.error(str(error))
    return Unresolved(error)
