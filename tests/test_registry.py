import json

from view_controller.views.registry import ViewRegistry
from view_controller.views.schemas import ViewDefinition


def test_loads_json_and_yaml(fresh_globals):
    registry = ViewRegistry(fresh_globals)

    assert sorted(registry.list_keys()) == ["greeting", "status_panel"]
    assert registry["status_panel"].tag == "aside"
    assert "greeting" in registry
    assert registry.count() == 2


def test_invalid_files_are_skipped(fresh_globals):
    (fresh_globals / "broken.json").write_text("{not json")
    (fresh_globals / "keyless.json").write_text(json.dumps({"name": "Keyless"}))
    (fresh_globals / "notes.txt").write_text("ignored")

    registry = ViewRegistry(fresh_globals)
    assert registry.count() == 2


def test_missing_directory(tmp_path):
    registry = ViewRegistry(tmp_path / "absent")
    assert registry.list_all() == []


def test_save_delete_reload(fresh_globals):
    registry = ViewRegistry(fresh_globals)
    view = ViewDefinition(view_key="footer", tag="footer", template="(c)")

    assert registry.save("footer", view)
    assert (fresh_globals / "footer.json").exists()

    registry.reload()
    assert registry.get("footer").template == "(c)"

    assert registry.delete("footer")
    assert not (fresh_globals / "footer.json").exists()
    assert registry.get("footer") is None
    assert not registry.delete("footer")


def test_save_keeps_yaml_format(fresh_globals):
    registry = ViewRegistry(fresh_globals)
    view = registry.get("status_panel").model_copy(update={"classes": "status"})

    assert registry.save("status_panel", view)
    registry.reload()
    assert registry.get("status_panel").classes == "status"
    assert not (fresh_globals / "status_panel.json").exists()


def test_summaries_filter_by_status(fresh_globals):
    registry = ViewRegistry(fresh_globals)
    registry.save("old", ViewDefinition(view_key="old", status="deprecated"))

    active = registry.list_summaries(status="active")
    assert [s.view_key for s in active] == ["greeting", "status_panel"]
    assert len(registry.list_summaries()) == 3


def test_save_rejects_keys_outside_definitions_dir(fresh_globals):
    registry = ViewRegistry(fresh_globals)
    view = ViewDefinition(template="x")

    assert not registry.save("../escaped", view)
    assert not (fresh_globals.parent / "escaped.json").exists()
    assert registry.get("../escaped") is None
