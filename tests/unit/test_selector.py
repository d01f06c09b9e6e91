"""Tests for selector parsing and document queries."""

import pytest

from domweave.core import SelectorError
from domweave.dom import Document, parse_selector


@pytest.fixture
def page():
    """
    body
      ul#menu.nav
        li.item[data-state=open]  "One"
        li.item.active            "Two"
          a[href=/two]
      p.item
    """
    document = Document()
    ul = document.create_element("ul")
    ul.id = "menu"
    ul.class_list.add("nav")
    document.body.append_child(ul)

    first = document.create_element("li")
    first.class_list.add("item")
    first.set_attribute("data-state", "open")
    first.text_content = "One"
    ul.append_child(first)

    second = document.create_element("li")
    second.class_list.add("item", "active")
    ul.append_child(second)

    link = document.create_element("a")
    link.set_attribute("href", "/two")
    second.append_child(link)

    paragraph = document.create_element("p")
    paragraph.class_list.add("item")
    document.body.append_child(paragraph)

    return document, ul, first, second, link, paragraph


@pytest.mark.unit
def test_simple_selectors(page):
    document, ul, first, second, link, paragraph = page

    assert document.query_selector("#menu") is ul
    assert document.query_selector_all(".item") == [first, second, paragraph]
    assert document.query_selector_all("li") == [first, second]
    assert document.query_selector("a") is link


@pytest.mark.unit
def test_compound_selectors(page):
    document, ul, first, second, link, paragraph = page

    assert document.query_selector_all("li.item.active") == [second]
    assert document.query_selector_all("ul#menu.nav") == [ul]
    assert document.query_selector_all("[data-state]") == [first]
    assert document.query_selector_all('[data-state="open"]') == [first]
    assert document.query_selector_all("[data-state=closed]") == []
    assert document.query_selector_all("a[href='/two']") == [link]


@pytest.mark.unit
def test_combinators(page):
    document, ul, first, second, link, paragraph = page

    assert document.query_selector_all("ul a") == [link]
    assert document.query_selector_all("ul > a") == []
    assert document.query_selector_all("ul > li > a") == [link]
    assert document.query_selector_all("body > .item") == [paragraph]


@pytest.mark.unit
def test_selector_groups(page):
    document, ul, first, second, link, paragraph = page
    assert document.query_selector_all("p, a") == [link, paragraph]


@pytest.mark.unit
def test_universal_selector(page):
    document, ul, *_ = page
    assert document.query_selector_all("ul > *") == list(ul.children)


@pytest.mark.unit
def test_node_scoped_queries(page):
    document, ul, first, second, link, paragraph = page

    assert ul.query_selector_all(".item") == [first, second]
    assert ul.query_selector("ul") is None
    assert second.matches("li.active")
    assert not first.matches("li.active")


@pytest.mark.unit
def test_document_lookups(page):
    document, ul, first, second, link, paragraph = page

    assert document.get_element_by_id("menu") is ul
    assert document.get_element_by_id("nope") is None
    assert document.get_elements_by_class_name("item active") == [second]
    assert document.get_elements_by_class_name("  ") == []
    assert document.get_elements_by_tag_name("LI") == [first, second]
    assert len(document.get_elements_by_tag_name("*")) == 8


@pytest.mark.unit
@pytest.mark.parametrize("selector", ["", "   ", "div >", "> div", "a,,b", "div!", "[x", "#"])
def test_bad_selectors(selector):
    with pytest.raises(SelectorError):
        parse_selector(selector)


@pytest.mark.unit
@pytest.mark.parametrize("selector", ["#x*", "[a]div"])
def test_type_selector_must_lead(selector):
    with pytest.raises(SelectorError):
        parse_selector(selector)


@pytest.mark.unit
def test_selector_error_from_query(page):
    document, *_ = page
    with pytest.raises(SelectorError):
        document.query_selector("ul >")


@pytest.mark.unit
def test_parse_is_cached():
    assert parse_selector("li.item") is parse_selector("li.item")
