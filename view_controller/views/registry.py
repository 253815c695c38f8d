"""View registry — loads and serves view definitions from JSON/YAML files.

- One definition per file in the definitions/ directory (*.json, *.yaml, *.yml)
- Lazy loading with _loaded guard
- In-memory dict keyed by view_key
- Global singleton via get_view_registry()
- CRUD with file persistence
- Item access, so ``views.<view_key>`` paths resolve to definitions
"""

import json
import logging
from pathlib import Path
from typing import Optional

import yaml

from .. import config
from .schemas import VIEW_KEY_PATTERN, ViewDefinition, ViewSummary

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


class ViewRegistry:
    """Registry of view definitions loaded from definition files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            definitions_dir = config.DEFINITIONS_DIR
        self.definitions_dir = definitions_dir
        self._views: dict[str, ViewDefinition] = {}
        self._file_map: dict[str, Path] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all view definitions from the definitions directory."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(f"View definitions directory not found: {self.definitions_dir}")
            self._loaded = True
            return

        for def_file in sorted(self.definitions_dir.iterdir()):
            if def_file.suffix not in (".json",) + _YAML_SUFFIXES:
                continue
            try:
                with open(def_file, "r") as f:
                    if def_file.suffix in _YAML_SUFFIXES:
                        data = yaml.safe_load(f)
                    else:
                        data = json.load(f)
                view = ViewDefinition.model_validate(data)
                if not view.view_key:
                    raise ValueError("missing view_key")
                self._views[view.view_key] = view
                self._file_map[view.view_key] = def_file
                logger.debug(f"Loaded view: {view.view_key}")
            except Exception as e:
                logger.error(f"Failed to load view from {def_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._views)} view definitions")

    def get(self, view_key: str) -> Optional[ViewDefinition]:
        """Get a view definition by key."""
        self.load()
        return self._views.get(view_key)

    def __getitem__(self, view_key: str) -> ViewDefinition:
        self.load()
        return self._views[view_key]

    def __contains__(self, view_key: object) -> bool:
        self.load()
        return view_key in self._views

    def list_all(self) -> list[ViewDefinition]:
        """List all view definitions."""
        self.load()
        return list(self._views.values())

    def list_summaries(self, status: Optional[str] = None) -> list[ViewSummary]:
        """List view summaries, optionally filtered by status."""
        self.load()
        views = self._views.values()
        if status:
            views = [v for v in views if v.status == status]
        return [
            ViewSummary(
                view_key=v.view_key,
                name=v.name,
                description=v.description,
                kind=v.kind,
                tag=v.tag,
                status=v.status,
            )
            for v in sorted(views, key=lambda v: v.view_key)
        ]

    def list_keys(self) -> list[str]:
        """List all view keys."""
        self.load()
        return list(self._views.keys())

    def count(self) -> int:
        """Get total number of views."""
        self.load()
        return len(self._views)

    def save(self, view_key: str, view: ViewDefinition) -> bool:
        """Save a view definition to its file (JSON unless it was loaded from YAML)."""
        self.load()

        if not VIEW_KEY_PATTERN.match(view_key):
            logger.error(f"Refusing to save view with invalid key: {view_key!r}")
            return False

        def_file = self._file_map.get(view_key, self.definitions_dir / f"{view_key}.json")

        try:
            self.definitions_dir.mkdir(parents=True, exist_ok=True)

            with open(def_file, "w") as f:
                if def_file.suffix in _YAML_SUFFIXES:
                    yaml.safe_dump(view.model_dump(), f, sort_keys=False)
                else:
                    json.dump(view.model_dump(), f, indent=2)
                    f.write("\n")

            self._views[view_key] = view
            self._file_map[view_key] = def_file

            logger.info(f"Saved view: {view_key} -> {def_file}")
            return True

        except Exception as e:
            logger.error(f"Failed to save view {view_key}: {e}")
            return False

    def delete(self, view_key: str) -> bool:
        """Delete a view definition."""
        self.load()

        if view_key not in self._views:
            return False

        def_file = self._file_map.get(view_key, self.definitions_dir / f"{view_key}.json")

        try:
            if def_file.exists():
                def_file.unlink()

            del self._views[view_key]
            self._file_map.pop(view_key, None)

            logger.info(f"Deleted view: {view_key}")
            return True

        except Exception as e:
            logger.error(f"Failed to delete view {view_key}: {e}")
            return False

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._views.clear()
        self._file_map.clear()
        self.load()


# Global registry instance
_registry: Optional[ViewRegistry] = None


def get_view_registry() -> ViewRegistry:
    """Get the global view registry instance."""
    global _registry
    if _registry is None:
        _registry = ViewRegistry()
        _registry.load()
    return _registry


def set_view_registry(registry: Optional[ViewRegistry]) -> None:
    """Replace the global view registry (None resets it to the default)."""
    global _registry
    _registry = registry
