"""Generic controller base.

Construction order for every controller:
1. keyword properties are assigned
2. ``on_constructed()`` runs, exactly once
3. each mixin in ``mixins`` is applied to the instance

Subclasses that need state before their own ``on_constructed()`` body runs
override the hook and call ``super().on_constructed()`` where they want it.
"""

import logging
from typing import Any, Callable, ClassVar, Optional

logger = logging.getLogger(__name__)

Mixin = Callable[["Controller"], None]


class Controller:
    """Base class for controllers."""

    kind_name: ClassVar[Optional[str]] = None

    # Applied in order after on_constructed()
    mixins: ClassVar[tuple[Mixin, ...]] = ()

    # Event name -> name of the method handling it
    handlers: ClassVar[dict[str, str]] = {}

    def __init__(self, **props: Any):
        self.destroyed = False
        for name, value in props.items():
            setattr(self, name, value)
        self.on_constructed()
        self._init_mixins()

    @classmethod
    def get_kind_name(cls) -> str:
        return cls.kind_name or cls.__name__

    def on_constructed(self) -> None:
        """Extension point, called once after base construction and before mixins."""

    def _init_mixins(self) -> None:
        for mixin in self.mixins:
            mixin(self)

    def dispatch_event(self, event: str, sender: Any, **data: Any) -> bool:
        """Run the handler mapped to ``event``. Returns whether one ran."""
        method_name = self.handlers.get(event)
        if method_name is None:
            logger.debug(f"{self.get_kind_name()} has no handler for '{event}'")
            return False
        getattr(self, method_name)(sender, **data)
        return True

    def destroy(self) -> None:
        self.destroyed = True
        logger.debug(f"Destroyed controller {self.get_kind_name()}")
