import shutil
import sys
from pathlib import Path

import pytest

# Ensure project root is importable (so `import view_controller...` works without installing)
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from view_controller.controllers import store
from view_controller.display import get_document, reset_document
from view_controller.paths import get_namespace, reset_namespace
from view_controller.views.kinds import get_kind_registry
from view_controller.views.registry import ViewRegistry, set_view_registry

SAMPLE_DEFINITIONS = _project_root / "view_controller" / "views" / "definitions"


def _reset_globals(definitions_dir: Path) -> None:
    reset_document()
    set_view_registry(ViewRegistry(definitions_dir))
    get_kind_registry().clear()
    reset_namespace()


@pytest.fixture(autouse=True)
def fresh_globals(tmp_path):
    """Give every test its own document, namespace and copy of the sample definitions."""
    definitions_dir = tmp_path / "definitions"
    shutil.copytree(SAMPLE_DEFINITIONS, definitions_dir)
    _reset_globals(definitions_dir)
    yield definitions_dir
    store.clear_controllers()
    _reset_globals(definitions_dir)


@pytest.fixture
def document():
    return get_document()


@pytest.fixture
def namespace():
    return get_namespace()
