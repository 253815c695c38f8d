"""API routes for managed view controllers.

Each controller created here owns one view. Paths sent by clients are resolved
against the registered roots only, never imported. Configuration errors
(unresolvable view or render target) are reported as 422, lifecycle
misuse as 409.
"""

import logging

from fastapi import APIRouter, HTTPException

from view_controller.controllers import ViewController
from view_controller.controllers import store
from view_controller.controllers.schemas import (
    ControllerCreateRequest,
    ControllerSnapshot,
    RenderIntoRequest,
    ResetRequest,
)
from view_controller.errors import ConfigurationError, ViewLifecycleError
from view_controller.paths import get_restricted_namespace

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/controllers", tags=["controllers"])


def _snapshot(controller_id: str, controller: ViewController) -> ControllerSnapshot:
    view = controller.current_view
    rendered = view is not None and view.has_node()
    return ControllerSnapshot(
        controller_id=controller_id,
        kind_name=controller.get_kind_name(),
        state=controller.state.value,
        view_kind=view.get_kind_name() if view is not None else None,
        view_id=view.id if view is not None else None,
        rendered=rendered,
        render_target=str(controller.render_target_descriptor),
        html=view.node.to_html() if rendered else None,
    )


def _get_or_404(controller_id: str) -> ViewController:
    controller = store.get_controller(controller_id)
    if controller is None:
        raise HTTPException(
            status_code=404,
            detail=f"Controller '{controller_id}' not found",
        )
    return controller


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, ConfigurationError):
        return HTTPException(status_code=422, detail=str(e))
    return HTTPException(status_code=409, detail=str(e))


@router.get("", response_model=list[ControllerSnapshot])
async def list_controllers():
    """List managed controllers."""
    return [_snapshot(cid, c) for cid, c in store.list_controllers()]


@router.post("", response_model=ControllerSnapshot, status_code=201)
async def create_controller(request: ControllerCreateRequest):
    """Create a controller (and its view), optionally rendering it."""
    try:
        controller = ViewController(
            view=request.view,
            render_target=request.render_target,
            namespace=get_restricted_namespace(),
        )
        if request.render:
            controller.render()
    except (ConfigurationError, ViewLifecycleError) as e:
        raise _to_http_error(e)

    controller_id = store.add_controller(controller)
    return _snapshot(controller_id, controller)


@router.get("/{controller_id}", response_model=ControllerSnapshot)
async def get_controller(controller_id: str):
    """Get the state of a managed controller."""
    return _snapshot(controller_id, _get_or_404(controller_id))


@router.post("/{controller_id}/render", response_model=ControllerSnapshot)
async def render_controller(controller_id: str):
    """Render the controller's view into its render target."""
    controller = _get_or_404(controller_id)
    try:
        controller.render()
    except (ConfigurationError, ViewLifecycleError) as e:
        raise _to_http_error(e)
    return _snapshot(controller_id, controller)


@router.post("/{controller_id}/render-into", response_model=ControllerSnapshot)
async def render_controller_into(controller_id: str, request: RenderIntoRequest):
    """Change the controller's render target and render into it."""
    controller = _get_or_404(controller_id)
    try:
        controller.render_into(request.target)
    except (ConfigurationError, ViewLifecycleError) as e:
        raise _to_http_error(e)
    return _snapshot(controller_id, controller)


@router.post("/{controller_id}/reset", response_model=ControllerSnapshot)
async def reset_controller(controller_id: str, request: ResetRequest):
    """Destroy the controller's view and create a new one."""
    controller = _get_or_404(controller_id)
    try:
        controller.reset_view(request.view)
    except (ConfigurationError, ViewLifecycleError) as e:
        raise _to_http_error(e)
    return _snapshot(controller_id, controller)


@router.delete("/{controller_id}")
async def destroy_controller(controller_id: str):
    """Destroy a controller and its view."""
    controller = _get_or_404(controller_id)
    controller.destroy()
    store.remove_controller(controller_id)
    logger.info(f"Destroyed controller {controller_id}")
    return {"destroyed": controller_id}
