"""In-memory store of controllers managed through the API.

Controllers live only in this process; destroying one removes it.
"""

import logging
import threading
import uuid
from typing import Optional

from .view_controller import ViewController

logger = logging.getLogger(__name__)

_controllers: dict[str, ViewController] = {}
_lock = threading.Lock()


def add_controller(controller: ViewController) -> str:
    controller_id = uuid.uuid4().hex[:12]
    with _lock:
        _controllers[controller_id] = controller
    logger.info(f"Registered controller {controller_id} ({controller.get_kind_name()})")
    return controller_id


def get_controller(controller_id: str) -> Optional[ViewController]:
    with _lock:
        return _controllers.get(controller_id)


def list_controllers() -> list[tuple[str, ViewController]]:
    with _lock:
        return list(_controllers.items())


def remove_controller(controller_id: str) -> Optional[ViewController]:
    with _lock:
        return _controllers.pop(controller_id, None)


def clear_controllers() -> None:
    """Destroy and forget every managed controller."""
    with _lock:
        controllers = list(_controllers.values())
        _controllers.clear()
    for controller in controllers:
        controller.destroy()
