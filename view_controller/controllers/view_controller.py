"""ViewController — a controller that owns exactly one view.

The controller creates its view when it is constructed, renders it into a
render target on request, can destroy and recreate it (reset), and destroys
it before tearing itself down. The view only holds a weak reference back.

Usage:
    class InboxController(ViewController):
        view = "views.inbox"
        render_target = "main"

    controller = InboxController()
    controller.render()
"""

import logging
from enum import Enum
from typing import Any, ClassVar, Optional

from .. import config
from ..display import Document, Node, get_document
from ..errors import ConfigurationError, ViewLifecycleError
from ..paths import Namespace, get_namespace
from ..views.base import View
from .base import Controller
from .resolvers import resolve_render_target, resolve_view_kind

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LIVE = "live"
    DESTROYED = "destroyed"


class ViewController(Controller):
    """Controller owning a single view instance and its lifecycle.

    Class attributes give the defaults for instances:
        view: view descriptor (a View subclass, a view definition as a dict
            or ViewDefinition, or a dotted path string)
        render_target: node id or dotted path of the node the view is
            rendered into
    """

    view: ClassVar[Any] = None
    render_target: ClassVar[Any] = config.DEFAULT_RENDER_TARGET

    def __init__(
        self,
        view: Any = None,
        render_target: Any = None,
        document: Optional[Document] = None,
        namespace: Optional[Namespace] = None,
        **props: Any,
    ):
        self.document = document or get_document()
        self.namespace = namespace or get_namespace()
        self.state = ViewState.UNINITIALIZED
        self.current_view: Optional[View] = None
        self.saved_descriptor: Any = None
        self._view_descriptor = view if view is not None else type(self).view
        self._render_target_descriptor = render_target if render_target is not None else type(self).render_target
        self._view_kind: Optional[type[View]] = None
        self._render_target: Optional[Node] = None
        super().__init__(**props)

    # -- Descriptors --

    @property
    def view_descriptor(self) -> Any:
        return self._view_descriptor

    @view_descriptor.setter
    def view_descriptor(self, value: Any) -> None:
        if value is not self._view_descriptor:
            self._view_descriptor = value
            self.saved_descriptor = value
            self.invalidate_view_kind()

    @property
    def render_target_descriptor(self) -> Any:
        return self._render_target_descriptor

    @render_target_descriptor.setter
    def render_target_descriptor(self, value: Any) -> None:
        if value is not self._render_target_descriptor:
            self._render_target_descriptor = value
            self.invalidate_render_target()

    # -- Memoized resolutions --

    def invalidate_view_kind(self) -> None:
        """Forget the resolved view kind; the next resolution starts from view_descriptor."""
        self._view_kind = None

    def invalidate_render_target(self) -> None:
        """Forget the resolved render target node."""
        self._render_target = None

    def get_view_kind(self) -> type[View]:
        """The view class for the current view_descriptor, resolved once.

        Raises:
            ConfigurationError: If the descriptor can't be resolved
        """
        if self._view_kind is None:
            self._view_kind = resolve_view_kind(
                self._view_descriptor, self.get_kind_name(), self.namespace
            ).unwrap()
        return self._view_kind

    def get_render_target(self) -> Node:
        """The display-tree node for the current render_target_descriptor, resolved once.

        Raises:
            ConfigurationError: If no node is found for the descriptor
        """
        if self._render_target is None:
            self._render_target = resolve_render_target(
                self._render_target_descriptor, self.get_kind_name(), self.document, self.namespace
            ).unwrap()
        return self._render_target

    # -- Lifecycle --

    def on_constructed(self) -> None:
        super().on_constructed()
        # No view is created unless both resolve
        self.get_view_kind()
        self.get_render_target()
        self._create_view()

    def _create_view(self) -> None:
        """Instantiate the view from view_descriptor. Override for special behaviors."""
        kind = self.get_view_kind()
        self.saved_descriptor = self._view_descriptor
        self.current_view = kind(bubble_target=self)
        self.state = ViewState.LIVE
        logger.debug(f"{self.get_kind_name()} created view {self.current_view!r}")

    def reset_view(self, new_descriptor: Any = None) -> View:
        """Destroy the current view and create a new one.

        With ``new_descriptor`` the new view is built from it, and it becomes
        the descriptor for later resets; otherwise the saved descriptor is
        reused. Assigning view_descriptor also replaces the saved
        descriptor. The new kind is resolved before the old view is
        destroyed, so a bad descriptor leaves the controller unchanged.

        Raises:
            ViewLifecycleError: If there is no live view to reset
            ConfigurationError: If the descriptor can't be resolved
        """
        if self.state is not ViewState.LIVE or self.current_view is None:
            raise ViewLifecycleError(
                f"{self.get_kind_name()} cannot reset its view while {self.state.value}"
            )

        previous_descriptor = self._view_descriptor
        previous_kind = self._view_kind
        previous_saved = self.saved_descriptor
        self.view_descriptor = new_descriptor if new_descriptor is not None else self.saved_descriptor
        try:
            self.get_view_kind()
        except ConfigurationError:
            self._view_descriptor = previous_descriptor
            self._view_kind = previous_kind
            self.saved_descriptor = previous_saved
            raise

        old_view = self.current_view
        self.current_view = None
        old_view.destroy()
        self._create_view()
        logger.info(f"{self.get_kind_name()} reset view {old_view!r} -> {self.current_view!r}")
        return self.current_view

    def destroy(self) -> None:
        """Destroy the view, then the controller itself."""
        if self.state is ViewState.DESTROYED:
            logger.warning(f"{self.get_kind_name()} destroyed more than once")
            return
        if self.current_view is not None:
            self.current_view.destroy()
            self.current_view = None
        self.state = ViewState.DESTROYED
        self.invalidate_render_target()
        super().destroy()

    # -- Rendering --

    def render(self) -> View:
        """Render the view into the render target.

        A view already placed in the render target is re-rendered in place
        rather than inserted a second time. A view placed anywhere else is
        moved into the render target.

        Raises:
            ViewLifecycleError: If the controller has no live view
            ConfigurationError: If the render target can't be resolved
        """
        if self.state is not ViewState.LIVE or self.current_view is None:
            raise ViewLifecycleError(
                f"{self.get_kind_name()} cannot render while {self.state.value}"
            )
        view = self.current_view
        target = self.get_render_target()
        if view.has_node() and view.node.parent is target:
            view.render()
        else:
            view.render_into(target)
        return view

    def render_into(self, target: Any) -> View:
        """Make ``target`` the render target for this and later renders, then render."""
        if self.state is not ViewState.LIVE:
            raise ViewLifecycleError(
                f"{self.get_kind_name()} cannot render while {self.state.value}"
            )
        self.render_target_descriptor = target
        return self.render()
