"""View definition schemas — declarative view structures.

A ViewDefinition describes a view's shape (tag, classes, template and
default properties) instead of naming a Python class. The kind factory
turns it into a View subclass.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .base import View

VIEW_KEY_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")

# Set on every synthesized kind, so properties may not use them
_RESERVED_PROPERTIES = {"definition"}


class ViewDefinition(BaseModel):
    """Declarative specification of a view kind."""

    # Identity
    view_key: Optional[str] = Field(
        default=None,
        description="Registry key (snake_case). Required for definitions stored in the registry.",
    )
    name: Optional[str] = Field(
        default=None,
        description="Kind name of the synthesized class. A unique name is generated when absent.",
    )
    description: str = Field(default="")

    # Structure
    kind: Optional[str] = Field(
        default=None,
        description="Dotted path of the base view kind (default: the plain View)",
    )
    tag: str = Field(default="div", description="Element tag of the view's node")
    classes: str = Field(default="", description="Space separated CSS classes")
    template: str = Field(
        default="",
        description="Jinja2 template for the node content. "
        "Receives `view` and `controller`.",
    )
    properties: dict[str, Any] = Field(
        default_factory=dict,
        description="Default attribute values for instances of the kind",
    )

    status: str = Field(default="active", description="'active' or 'deprecated'")

    @field_validator("view_key")
    @classmethod
    def check_view_key(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not VIEW_KEY_PATTERN.match(value):
            raise ValueError(f"view_key must be snake_case, got '{value}'")
        return value

    @field_validator("properties")
    @classmethod
    def check_properties(cls, value: dict[str, Any]) -> dict[str, Any]:
        clashes = sorted(
            k for k in value
            if k.startswith("_") or k in _RESERVED_PROPERTIES or hasattr(View, k)
        )
        if clashes:
            raise ValueError(f"properties shadow view attributes: {clashes}")
        return value


class ViewSummary(BaseModel):
    """Lightweight view definition listing."""

    view_key: str
    name: Optional[str] = None
    description: str = ""
    kind: Optional[str] = None
    tag: str = "div"
    status: str = "active"
