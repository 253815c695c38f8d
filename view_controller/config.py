"""Runtime configuration read from environment variables."""

import os
from pathlib import Path

DEFAULT_RENDER_TARGET = os.environ.get("VIEW_CONTROLLER_RENDER_TARGET", "document.body")

VIEW_NAME_PREFIX = os.environ.get("VIEW_CONTROLLER_VIEW_NAME_PREFIX", "_view_controller_view_")

DEFINITIONS_DIR = Path(
    os.environ.get(
        "VIEW_CONTROLLER_DEFINITIONS_DIR",
        str(Path(__file__).parent / "views" / "definitions"),
    )
)

LOG_LEVEL = os.environ.get("VIEW_CONTROLLER_LOG_LEVEL", "INFO").upper()
