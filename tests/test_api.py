import sys

import pytest
from fastapi.testclient import TestClient

from view_controller.api.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def _create(client, **body):
    r = client.post("/v1/controllers", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_root_and_health(client):
    assert client.get("/").json()["service"] == "View Controller API"
    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["views_loaded"] == 2


def test_view_definition_crud(client):
    r = client.get("/v1/views")
    assert [v["view_key"] for v in r.json()] == ["greeting", "status_panel"]

    new_view = {"view_key": "footer", "tag": "footer", "template": "bye"}
    assert client.post("/v1/views", json=new_view).status_code == 201
    assert client.post("/v1/views", json=new_view).status_code == 409
    assert client.get("/v1/views/footer").json()["template"] == "bye"

    r = client.put("/v1/views/footer", json={**new_view, "view_key": "other"})
    assert r.status_code == 400
    r = client.put("/v1/views/footer", json={**new_view, "template": "later"})
    assert r.json()["template"] == "later"

    assert client.delete("/v1/views/footer").json() == {"deleted": "footer"}
    assert client.get("/v1/views/footer").status_code == 404


def test_create_and_render_controller(client):
    created = _create(client, view="views.greeting")
    assert created["state"] == "live"
    assert created["view_kind"] == "GreetingView"
    assert created["rendered"] is False
    assert created["render_target"] == "document.body"

    cid = created["controller_id"]
    rendered = client.post(f"/v1/controllers/{cid}/render").json()
    assert rendered["rendered"] is True
    assert "Hello, world!" in rendered["html"]

    client.post(f"/v1/controllers/{cid}/render")
    html = client.get("/v1/document/html").text
    assert html.count(rendered["view_id"]) == 1


def test_inline_definition(client):
    created = _create(client, view={"tag": "p", "template": "inline"}, render=True)
    assert created["view_kind"].startswith("_view_controller_view_")
    assert created["html"].endswith(">inline</p>")


def test_configuration_errors_are_422(client):
    r = client.post("/v1/controllers", json={"view": "views.unknown"})
    assert r.status_code == 422
    assert "cannot initialize without a valid view defined" in r.json()["detail"]

    r = client.post("/v1/controllers", json={"view": "views.greeting", "render_target": "nowhere"})
    assert r.status_code == 422
    assert r.json()["detail"] == "ViewController cannot find the render target: nowhere"


def test_render_into_and_reset(client):
    cid = _create(client, view="views.greeting", render=True)["controller_id"]

    r = client.post(f"/v1/controllers/{cid}/render-into", json={"target": "missing"})
    assert r.status_code == 422

    r = client.post(f"/v1/controllers/{cid}/reset", json={"view": "views.status_panel"})
    assert r.json()["view_kind"] == "StatusPanelView"
    assert r.json()["rendered"] is False

    r = client.post(f"/v1/controllers/{cid}/reset", json={})
    assert r.json()["view_kind"] == "StatusPanelView"

    r = client.post(f"/v1/controllers/{cid}/reset", json={"view": "views.unknown"})
    assert r.status_code == 422
    assert client.get(f"/v1/controllers/{cid}").json()["view_kind"] == "StatusPanelView"


def test_destroy_controller(client):
    cid = _create(client, view="views.greeting", render=True)["controller_id"]

    assert client.delete(f"/v1/controllers/{cid}").json() == {"destroyed": cid}
    assert client.get(f"/v1/controllers/{cid}").status_code == 404
    assert client.get("/v1/controllers").json() == []
    assert client.get("/v1/document").json()["children"][0]["children"] == []


@pytest.mark.parametrize(
    "body",
    [
        {"view": "this.s"},
        {"view": "views.greeting", "render_target": "this.s"},
    ],
)
def test_client_paths_are_never_imported(client, monkeypatch, body):
    monkeypatch.delitem(sys.modules, "this", raising=False)

    r = client.post("/v1/controllers", json=body)

    assert r.status_code == 422
    assert "this" not in sys.modules


def test_inline_definition_cannot_shadow_view_methods(client):
    r = client.post("/v1/controllers", json={"view": {"properties": {"destroy": 1}}})
    assert r.status_code == 422
    assert client.get("/v1/controllers").json() == []


@pytest.mark.parametrize("view_key", ["../x", "a/b", "Greeting", ""])
def test_view_key_must_be_snake_case(client, fresh_globals, view_key):
    r = client.post("/v1/views", json={"view_key": view_key, "template": "x"})

    assert r.status_code == 422
    assert not (fresh_globals.parent / "x.json").exists()
    assert client.get("/v1/views").status_code == 200
    assert len(client.get("/v1/views").json()) == 2
