"""Element Factory - validated construction of configured nodes."""

from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..core import Settings, ValidationError, get_logger, get_settings
from ..dom import Document, UiNode
from .appliers import (
    apply_attributes,
    apply_classes,
    apply_data_sources,
    apply_event_handlers,
    apply_index,
    apply_properties,
)
from .tags import HtmlTag, validate

logger = get_logger(__name__)


class ElementConfig(BaseModel):
    """Configuration for one element. Accepts snake_case or camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    tag: str = Field(..., description="Element kind, e.g. 'div'")
    class_spec: str | None = Field(default=None, description="Space-separated class tokens")
    position_index: int | str | None = Field(default=None, description="Stored as dataset['index']")
    data_spec: str | None = Field(default=None, description="Space-separated key:value tokens")
    attributes: dict[str, Any] = Field(default_factory=dict)
    properties: dict[str, Any] = Field(default_factory=dict)
    event_handlers: dict[str, Callable[..., Any]] = Field(default_factory=dict)


def parse_config(config: "ElementConfig | Mapping[str, Any]") -> ElementConfig:
    """
    Coerce a mapping into an ElementConfig.

    Raises:
        ValidationError: If the mapping has unknown keys or wrongly typed facets
    """
    if isinstance(config, ElementConfig):
        return config
    try:
        return ElementConfig.model_validate(dict(config))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid element config: {e}") from e


class ElementFactory:
    """
    Builds configured nodes and attaches them to a parent.

    Application order is fixed: tag validation, classes, index, data
    sources, attributes, properties, event handlers, then attachment. A node
    is never visible under its parent until fully configured.
    """

    def __init__(self, document: Document | None = None, settings: Settings | None = None) -> None:
        self.document = document or Document()
        self.settings = settings or get_settings()

    def create(self, parent: UiNode, config: ElementConfig | Mapping[str, Any]) -> UiNode:
        """
        Create a node from ``config`` and append it as the last child of ``parent``.

        Args:
            parent: Live parent node
            config: ElementConfig or an equivalent mapping

        Returns:
            The attached node

        Raises:
            InvalidTagError: If the tag is not recognised (nothing is created)
            ValidationError: If the config mapping is malformed
        """
        raw_tag = config.tag if isinstance(config, ElementConfig) else config.get("tag")
        tag: HtmlTag = validate(raw_tag)
        element_config = parse_config(config)

        document = parent.owner_document or self.document
        node = document.create_element(tag.value)

        apply_classes(node, element_config.class_spec)
        apply_index(node, element_config.position_index, skip_zero=self.settings.skip_zero_index)
        apply_data_sources(node, element_config.data_spec)
        apply_attributes(node, element_config.attributes)
        apply_properties(node, element_config.properties)
        apply_event_handlers(node, element_config.event_handlers)

        parent.append_child(node)

        logger.debug(
            "element_created",
            tag=tag.value,
            parent=parent,
            classes=len(node.class_list),
            dataset=len(node.dataset),
            events=len(element_config.event_handlers),
        )
        return node


_default_factory: ElementFactory | None = None


def get_factory() -> ElementFactory:
    """Get the shared default factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ElementFactory()
    return _default_factory


def create(
    parent: UiNode,
    config: ElementConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> UiNode:
    """
    Create a configured node under ``parent`` using the default factory.

    Either pass a config object/mapping or keyword options::

        create(body, {"tag": "span", "classSpec": "a b"})
        create(body, tag="span", class_spec="a b")
    """
    if config is None:
        config = options
    elif options:
        raise TypeError("Pass either a config or keyword options, not both")
    return get_factory().create(parent, config)


__all__ = ["ElementConfig", "ElementFactory", "create", "get_factory", "parse_config"]
