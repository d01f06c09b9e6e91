"""Tests for HTML rendering."""

import pytest

from domweave.dom import TextNode, UiNode, to_html
from domweave.dom.render import dataset_attribute_name


@pytest.mark.unit
def test_render_facets(factory, parent):
    node = factory.create(
        parent,
        {
            "tag": "span",
            "classSpec": "a b",
            "positionIndex": 2,
            "dataSpec": "userId:7",
            "attributes": {"title": 'say "hi"'},
        },
    )
    node.style["fontWeight"] = "bold"
    node.text_content = "<x> & y"

    assert to_html(node) == (
        '<span class="a b" title="say &quot;hi&quot;" data-index="2" data-user-id="7" '
        'style="font-weight: bold;">&lt;x&gt; &amp; y</span>'
    )


@pytest.mark.unit
def test_render_nested_and_void():
    root = UiNode("p")
    root.append_child(TextNode("a"))
    root.append_child(UiNode("wbr"))
    image = root.append_child(UiNode("img"))
    image.set_attribute("alt", "")
    image.hidden = True

    assert to_html(root) == "<p>a<wbr><img alt hidden></p>"


@pytest.mark.unit
def test_render_skips_properties_and_events():
    node = UiNode("div")
    node.set_property("model", object())
    node.add_event_listener("click", print)
    assert to_html(node) == "<div></div>"


@pytest.mark.unit
def test_dataset_attribute_name():
    assert dataset_attribute_name("index") == "data-index"
    assert dataset_attribute_name("fooBarBaz") == "data-foo-bar-baz"


@pytest.mark.unit
def test_render_rejects_other_objects():
    with pytest.raises(TypeError):
        to_html("div")
