"""Tests for the element factory."""

import pytest

from domweave.core import InvalidTagError, Settings, ValidationError
from domweave.dom import Document, UiNode
from domweave.elements import ElementConfig, ElementFactory, create, parse_config


# ============================================================================
# Basic creation
# ============================================================================

@pytest.mark.unit
def test_create_plain_element(factory, parent):
    """Creates a bare node and appends it."""
    node = factory.create(parent, {"tag": "div"})

    assert node.tag == "div"
    assert node.parent is parent
    assert parent.contains(node)
    assert len(node.class_list) == 0
    assert node.dataset == {}
    assert dict(node.attributes) == {}
    assert node.properties == {}


@pytest.mark.unit
def test_create_appends_last(factory, parent):
    first = factory.create(parent, {"tag": "li"})
    second = factory.create(parent, {"tag": "li"})
    assert parent.children == (first, second)


@pytest.mark.unit
def test_create_classes_index_and_data(factory, parent):
    """Classes, index and data sources land on the node."""
    node = factory.create(
        parent,
        {"tag": "span", "classSpec": "a b", "dataSpec": "x:1 y:2", "positionIndex": 5},
    )

    assert set(node.class_list) == {"a", "b"}
    assert node.dataset == {"index": "5", "x": "1", "y": "2"}


@pytest.mark.unit
def test_create_accepts_snake_case_keys(factory, parent):
    node = factory.create(
        parent,
        {"tag": "span", "class_spec": "a", "data_spec": "k:v", "position_index": "3"},
    )
    assert list(node.class_list) == ["a"]
    assert node.dataset == {"index": "3", "k": "v"}


@pytest.mark.unit
def test_create_with_config_model(factory, parent):
    config = ElementConfig(tag="p", class_spec="lead", attributes={"lang": "en"})
    node = factory.create(parent, config)
    assert node.tag == "p"
    assert node.get_attribute("lang") == "en"


@pytest.mark.unit
def test_create_malformed_data_tokens(factory, parent):
    node = factory.create(parent, {"tag": "div", "dataSpec": "k: v:"})
    assert node.dataset == {}


@pytest.mark.unit
def test_create_zero_index_applied_by_default(factory, parent):
    node = factory.create(parent, {"tag": "li", "positionIndex": 0})
    assert node.dataset["index"] == "0"


@pytest.mark.unit
def test_create_zero_index_skipped_in_legacy_mode(document, parent):
    legacy = ElementFactory(document=document, settings=Settings(skip_zero_index=True))
    node = legacy.create(parent, {"tag": "li", "positionIndex": 0})
    assert "index" not in node.dataset


@pytest.mark.unit
def test_create_event_handlers(factory, parent):
    seen = []
    node = factory.create(parent, {"tag": "button", "eventHandlers": {"click": seen.append}})

    event = node.dispatch_event("click", detail=1)

    assert seen == [event]
    assert event.target is node


# ============================================================================
# Validation failures
# ============================================================================

@pytest.mark.unit
def test_create_invalid_tag_leaves_parent_untouched(factory, parent):
    """Bogus tag raises before the parent gains a child."""
    before = len(parent.child_nodes)

    with pytest.raises(InvalidTagError):
        factory.create(parent, {"tag": "bogus", "classSpec": "a"})

    assert len(parent.child_nodes) == before


@pytest.mark.unit
def test_create_missing_tag(factory, parent):
    with pytest.raises(InvalidTagError):
        factory.create(parent, {"classSpec": "a"})
    assert parent.child_nodes == ()


@pytest.mark.unit
def test_create_rejects_unknown_keys(factory, parent):
    """Config is closed: arbitrary properties go under 'properties'."""
    with pytest.raises(ValidationError):
        factory.create(parent, {"tag": "div", "colour": "red"})
    assert parent.child_nodes == ()


@pytest.mark.unit
def test_parse_config_passthrough():
    config = ElementConfig(tag="div")
    assert parse_config(config) is config


@pytest.mark.unit
def test_config_is_frozen():
    config = ElementConfig(tag="div")
    with pytest.raises(Exception):
        config.tag = "span"


# ============================================================================
# Ordering
# ============================================================================

@pytest.mark.unit
def test_properties_override_attributes(factory, parent):
    """Properties are applied after attributes and win on collision."""
    node = factory.create(
        parent,
        {"tag": "div", "attributes": {"id": "from-attr"}, "properties": {"id": "from-prop"}},
    )
    assert node.id == "from-prop"
    assert node.get_attribute("id") == "from-prop"


@pytest.mark.unit
def test_class_name_property_overrides_class_spec(factory, parent):
    node = factory.create(
        parent, {"tag": "div", "classSpec": "a b", "properties": {"class_name": "c"}}
    )
    assert list(node.class_list) == ["c"]


@pytest.mark.unit
def test_class_attribute_overrides_class_spec(factory, parent):
    """Generic attributes follow classes; a class attribute replaces classSpec."""
    node = factory.create(
        parent, {"tag": "div", "classSpec": "a", "attributes": {"class": "z"}}
    )
    assert list(node.class_list) == ["z"]


@pytest.mark.unit
def test_node_fully_configured_before_attach(document):
    """The node is attached last: observed state at attach time is complete."""
    observed = {}

    class RecordingParent(UiNode):
        def append_child(self, child):
            observed["classes"] = list(child.class_list)
            observed["dataset"] = dict(child.dataset)
            observed["listeners"] = len(child.listeners("click"))
            return super().append_child(child)

    parent = RecordingParent("div")
    factory = ElementFactory(document=document, settings=Settings())
    factory.create(
        parent,
        {"tag": "a", "classSpec": "x", "dataSpec": "k:v", "eventHandlers": {"click": print}},
    )

    assert observed == {"classes": ["x"], "dataset": {"k": "v"}, "listeners": 1}


@pytest.mark.unit
def test_create_uses_parent_document(factory):
    other = Document()
    node = factory.create(other.body, {"tag": "div"})
    assert node.owner_document is other


# ============================================================================
# Module-level create
# ============================================================================

@pytest.mark.unit
def test_module_create_with_keywords(parent):
    node = create(parent, tag="em", class_spec="note")
    assert node.tag == "em"
    assert node.parent is parent


@pytest.mark.unit
def test_module_create_rejects_mixed_arguments(parent):
    with pytest.raises(TypeError):
        create(parent, {"tag": "em"}, class_spec="note")
