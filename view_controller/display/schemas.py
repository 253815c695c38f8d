"""
Display tree schemas for View Controller

Serializable snapshots of the display tree, for the API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class NodeSummary(BaseModel):
    """Snapshot of a display-tree node and its descendants."""

    id: Optional[str] = Field(default=None, description="Node id attribute, if any")
    tag: str = Field(..., description="Element tag name")
    classes: str = Field(default="", description="Space separated CSS classes")
    children: list["NodeSummary"] = Field(default_factory=list)


NodeSummary.model_rebuild()
