"""Base View kind.

A View owns at most one display-tree node. Its content comes from a Jinja2
template rendered against the view and its controller. The controller is
held through a weak reference: the controller owns the view, never the
other way round.
"""

import logging
import weakref
from typing import Any, ClassVar, Optional

from jinja2 import Environment, BaseLoader, TemplateError

from ..display import Node
from ..errors import ViewLifecycleError
from ..uid import make_uid

logger = logging.getLogger(__name__)

_env = Environment(loader=BaseLoader(), autoescape=True)


class View:
    """A renderable object owned by a controller.

    Subclasses customize ``tag``, ``classes`` and ``template``, or override
    ``generate_content()`` for output a template can't express.
    """

    kind_name: ClassVar[Optional[str]] = None
    tag: ClassVar[str] = "div"
    classes: ClassVar[str] = ""
    template: ClassVar[str] = ""

    def __init__(self, bubble_target: Any = None, **props: Any):
        for name, value in props.items():
            setattr(self, name, value)
        self._bubble_target = weakref.ref(bubble_target) if bubble_target is not None else None
        self.id = make_uid(f"{self.get_kind_name()}_")
        self.node: Optional[Node] = None
        self.destroyed = False

    def __repr__(self) -> str:
        return f"<{self.get_kind_name()} id={self.id}>"

    @classmethod
    def get_kind_name(cls) -> str:
        return cls.kind_name or cls.__name__

    @property
    def bubble_target(self) -> Any:
        """The owning controller, or None once it is gone."""
        return self._bubble_target() if self._bubble_target is not None else None

    # -- Rendering --

    def has_node(self) -> bool:
        """Whether the view is currently placed in a display tree."""
        return self.node is not None and self.node.parent is not None

    def generate_content(self) -> str:
        if not self.template:
            return ""
        try:
            return _env.from_string(self.template).render(
                view=self, controller=self.bubble_target
            )
        except TemplateError as e:
            raise ValueError(f"Template rendering error for {self.get_kind_name()}: {e}")

    def render(self) -> "View":
        """Re-render the content of the view's existing node in place."""
        self._check_live("render")
        if not self.has_node():
            logger.debug(f"{self!r} has no node to render in place")
            return self
        self.node.content = self.generate_content()
        return self

    def render_into(self, target: Node) -> "View":
        """Build a fresh node for the view and append it to ``target``."""
        self._check_live("render into a target")
        if self.node is not None:
            self.node.remove()
        self.node = Node(tag=self.tag, id=self.id, classes=self.classes)
        self.node.content = self.generate_content()
        target.append(self.node)
        logger.debug(f"Inserted {self!r} into {target!r}")
        return self

    # -- Events --

    def bubble(self, event: str, **data: Any) -> bool:
        """Send an event to the owning controller. Returns whether it was handled."""
        target = self.bubble_target
        if self.destroyed or target is None:
            return False
        return target.dispatch_event(event, self, **data)

    # -- Teardown --

    def destroy(self) -> None:
        """Detach the view's node and drop the controller reference."""
        if self.destroyed:
            return
        if self.node is not None:
            self.node.remove()
            self.node = None
        self._bubble_target = None
        self.destroyed = True
        logger.debug(f"Destroyed view {self!r}")

    def _check_live(self, action: str) -> None:
        if self.destroyed:
            raise ViewLifecycleError(f"Cannot {action}: {self!r} has been destroyed")
