from types import SimpleNamespace

import pytest

from view_controller.controllers.resolvers import resolve_render_target, resolve_view_kind
from view_controller.display import Node
from view_controller.errors import ConfigurationError, Resolved, Unresolved
from view_controller.views.base import View
from view_controller.views.kinds import get_kind_registry
from view_controller.views.schemas import ViewDefinition


class CardView(View):
    tag = "article"


@pytest.fixture
def app_namespace(namespace):
    app = SimpleNamespace(views=SimpleNamespace(Card=CardView), title="not a view")
    namespace.register("app", app)
    return namespace


def test_class_returned_unchanged(namespace):
    result = resolve_view_kind(CardView, "Owner", namespace)
    assert isinstance(result, Resolved)
    assert result.unwrap() is CardView


def test_named_definition_registered_as_kind(namespace):
    result = resolve_view_kind({"name": "BannerView", "tag": "header"}, "Owner", namespace)

    kind = result.unwrap()
    assert kind.kind_name == "BannerView"
    assert kind.tag == "header"
    assert issubclass(kind, View)
    assert get_kind_registry().get("BannerView") is kind
    assert namespace.get_path("kinds.BannerView") is kind


def test_definition_model_accepted(namespace):
    definition = ViewDefinition(template="hi", properties={"size": 3})
    kind = resolve_view_kind(definition, "Owner", namespace).unwrap()

    assert kind.size == 3
    assert kind.definition is definition
    assert definition.name is None


def test_definition_with_base_kind(app_namespace):
    kind = resolve_view_kind({"kind": "app.views.Card", "classes": "wide"}, "Owner", app_namespace).unwrap()

    assert issubclass(kind, CardView)
    assert kind.tag == "div"
    assert kind.classes == "wide"


def test_definition_with_bad_base_kind(app_namespace):
    result = resolve_view_kind({"kind": "app.title"}, "Owner", app_namespace)
    assert isinstance(result, Unresolved)
    assert "Owner" in str(result.error)


def test_invalid_definition_is_unresolved(namespace):
    result = resolve_view_kind({"tag": ["not", "a", "string"]}, "Owner", namespace)
    assert not result.ok
    with pytest.raises(ConfigurationError, match="Owner cannot initialize"):
        result.unwrap()


def test_definition_shadowing_view_method_is_unresolved(namespace):
    result = resolve_view_kind({"properties": {"destroy": 1}}, "Owner", namespace)
    assert isinstance(result, Unresolved)


def test_path_to_class(app_namespace):
    assert resolve_view_kind("app.views.Card", "Owner", app_namespace).unwrap() is CardView


def test_path_to_importable_class(namespace):
    kind = resolve_view_kind("tests.test_resolvers.CardView", "Owner", namespace).unwrap()
    assert kind is CardView


def test_path_to_non_view(app_namespace):
    result = resolve_view_kind("app.title", "Owner", app_namespace)
    assert not result.ok
    assert "not a view kind" in str(result.error)


def test_unresolvable_path(namespace):
    result = resolve_view_kind("no_such_package.nothing.here", "Owner", namespace)
    assert not result.ok
    assert "Owner" in str(result.error)


@pytest.mark.parametrize("descriptor", [None, 3, 4.5, ["a"]])
def test_unsupported_descriptors(namespace, descriptor):
    result = resolve_view_kind(descriptor, "Owner", namespace)
    assert isinstance(result, Unresolved)
    assert "Owner cannot initialize without a valid view defined" in str(result.error)


# -- Render targets --


def test_target_node_used_as_is(document, namespace):
    node = Node(id="floating")
    assert resolve_render_target(node, "Owner", document, namespace).unwrap() is node


def test_target_by_id(document, namespace):
    node = document.body.append(Node(id="main"))
    assert resolve_render_target("main", "Owner", document, namespace).unwrap() is node


def test_target_by_path(document, namespace):
    assert resolve_render_target("document.body", "Owner", document, namespace).unwrap() is document.body


def test_target_id_checked_before_path(document, namespace):
    node = document.body.append(Node(id="document.body"))
    assert resolve_render_target("document.body", "Owner", document, namespace).unwrap() is node


def test_target_path_must_reach_node(document, app_namespace):
    result = resolve_render_target("app.title", "Owner", document, app_namespace)
    assert not result.ok


def test_unresolvable_target_names_descriptor(document, namespace):
    result = resolve_render_target("sidebar", "Owner", document, namespace)
    assert not result.ok
    assert str(result.error) == "Owner cannot find the render target: sidebar"
