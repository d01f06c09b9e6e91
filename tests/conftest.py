"""Pytest configuration and fixtures."""

import os

import pytest

from domweave.core import Settings, get_settings
from domweave.dom import Document
from domweave.elements import ElementFactory


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["DOMWEAVE_LOG_LEVEL"] = "DEBUG"
    os.environ.pop("DOMWEAVE_SKIP_ZERO_INDEX", None)
    get_settings.cache_clear()


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings()


@pytest.fixture
def document():
    """Fresh document per test."""
    return Document()


@pytest.fixture
def parent(document):
    """A div attached to the document body, like the browser test harness."""
    node = document.create_element("div")
    document.body.append_child(node)
    return node


@pytest.fixture
def factory(document, settings):
    """Element factory bound to the test document."""
    return ElementFactory(document=document, settings=settings)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_blueprint():
    """Sample blueprint JSON using both component forms."""
    return """{
  "tag": "section",
  "id": "counter",
  "class": "card",
  "children": [
    {"h1#title": "Counter"},
    {
      "tag": "span",
      "id": "count",
      "class": "value",
      "data": "role:display",
      "text": "0"
    },
    {
      "button#increment": {
        "class": "btn primary",
        "type": "button",
        "@click": "increment",
        "children": ["+1"]
      }
    }
  ]
}"""
