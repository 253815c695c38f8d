"""Controller API schemas — requests and snapshots of managed controllers."""

from typing import Optional, Union

from pydantic import BaseModel, Field

from ..views.schemas import ViewDefinition

ViewDescriptor = Union[str, ViewDefinition]


class ControllerCreateRequest(BaseModel):
    """Create a ViewController from a dotted path or an inline definition."""

    view: ViewDescriptor = Field(
        ...,
        description="Dotted path (e.g. 'views.greeting') or an inline view definition",
    )
    render_target: Optional[str] = Field(
        default=None,
        description="Node id or dotted path (default: the configured render target)",
    )
    render: bool = Field(default=False, description="Render immediately after creation")


class RenderIntoRequest(BaseModel):
    target: str = Field(..., description="Node id or dotted path of the new render target")


class ResetRequest(BaseModel):
    view: Optional[ViewDescriptor] = Field(
        default=None,
        description="New view descriptor; the saved descriptor is reused when omitted",
    )


class ControllerSnapshot(BaseModel):
    """State of a managed controller."""

    controller_id: str
    kind_name: str
    state: str
    view_kind: Optional[str] = None
    view_id: Optional[str] = None
    rendered: bool = False
    render_target: str
    html: Optional[str] = Field(default=None, description="HTML of the view's node, when placed")
