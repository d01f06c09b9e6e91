"""Blueprint Builder - nested element configs to node trees."""

from typing import Any, Callable, Mapping

from returns.result import Failure, Result, Success

from ..core import (
    BlueprintError,
    InvalidTagError,
    JSONParseError,
    LogContext,
    Settings,
    ValidationError,
    ValidationResult,
    extract_json,
    get_logger,
    validate_json_depth,
    validate_json_size,
)
from ..dom import Document, Node, UiNode
from ..elements import ElementFactory, get_factory

logger = get_logger(__name__)

EXPLICIT_KEYS = frozenset(
    {"tag", "id", "class", "index", "data", "text", "attributes", "properties", "on", "children"}
)
COMPACT_PASSTHROUGH = frozenset({"class", "index", "data", "text", "properties", "children"})


class BlueprintBuilder:
    """Builds node trees from blueprint documents.

    Supported component forms:
    - Explicit: ``{"tag": "button", "id": "save", "class": "primary",
      "on": {"click": "save"}, "children": [...]}``
    - Compact: ``{"button#save": {"class": "primary", "@click": "save"}}``;
      a string body is the element's text, ``on`` merges with ``@event`` keys,
      other scalar keys become attributes
    - Plain strings become text nodes

    Handler names are resolved against ``handlers``. Unknown names are
    skipped with a warning. Every element is created through the element
    factory, so per-node ordering guarantees hold. The parent only receives
    the new roots once the whole blueprint has been built.
    """

    def __init__(
        self,
        factory: ElementFactory | None = None,
        handlers: Mapping[str, Callable[..., Any]] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.factory = factory or get_factory()
        self.settings = settings or self.factory.settings
        self.handlers = dict(handlers or {})
        self._created = 0

    def load(self, blueprint: str | Mapping[str, Any] | list[Any]) -> Any:
        """
        Parse (if needed) and check blueprint limits.

        Args:
            blueprint: JSON text, a component mapping, or a list of components

        Returns:
            Parsed blueprint data

        Raises:
            ValidationError: If the JSON text exceeds the size limit
            BlueprintError: If the JSON is unparseable or nested too deeply
        """
        if isinstance(blueprint, str):
            validate_json_size(blueprint, self.settings.max_blueprint_size, "Blueprint")
            try:
                data = extract_json(blueprint, repair=True)
            except JSONParseError as e:
                logger.error("json_parse_failed", error=str(e))
                raise BlueprintError(f"Invalid JSON: {e}") from e
        else:
            data = blueprint

        try:
            validate_json_depth(data, self.settings.max_blueprint_depth)
        except ValidationError as e:
            raise BlueprintError(str(e)) from e
        return data

    def build(self, parent: UiNode, blueprint: str | Mapping[str, Any] | list[Any]) -> list[Node]:
        """
        Build a blueprint and append its root nodes to ``parent``.

        Returns:
            The appended root nodes, in order
        """
        data = self.load(blueprint)
        components = data if isinstance(data, list) else [data]
        self._created = 0

        with LogContext(blueprint_parent=parent.tag):
            document = parent.owner_document or self.factory.document
            staging = document.create_element("template")
            self._build_components(staging, components, "$")

            roots = list(staging.child_nodes)
            for node in roots:
                parent.append_child(node)

            logger.info("blueprint_built", roots=len(roots), elements=self._created)
        return roots

    @property
    def created(self) -> int:
        """Elements created by the last build."""
        return self._created

    def _build_components(self, parent: UiNode, components: list[Any], path: str) -> None:
        for i, component in enumerate(components):
            self._build_component(parent, component, f"{path}[{i}]")

    def _build_component(self, parent: UiNode, component: Any, path: str) -> None:
        if isinstance(component, str):
            document = parent.owner_document or self.factory.document
            parent.append_child(document.create_text_node(component))
            return

        if isinstance(component, Mapping):
            if "tag" in component:
                self._build_explicit(parent, component, path)
                return
            if not component:
                raise BlueprintError(f"{path}: empty component")
            for key, body in component.items():
                self._build_compact(parent, key, body, f"{path}.{key}")
            return

        raise BlueprintError(f"{path}: expected a string or an object, got {type(component).__name__}")

    def _build_compact(self, parent: UiNode, key: str, body: Any, path: str) -> None:
        """Expand ``{"tag#id": {...}}`` into the explicit form."""
        tag, _, element_id = key.partition("#")

        if body is None:
            body = {}
        elif isinstance(body, str):
            body = {"text": body}
        elif not isinstance(body, Mapping):
            raise BlueprintError(f"{path}: expected an object or string body")

        explicit: dict[str, Any] = {"tag": tag}
        if element_id:
            explicit["id"] = element_id

        attributes: dict[str, Any] = {}
        events: dict[str, Any] = {}
        for name, value in body.items():
            if name.startswith("@"):
                events[name[1:]] = value
            elif name in COMPACT_PASSTHROUGH:
                explicit[name] = value
            elif name == "attributes":
                attributes.update(self._mapping(value, f"{path}.attributes"))
            elif name == "on":
                events.update(self._mapping(value, f"{path}.on"))
            elif isinstance(value, (Mapping, list)):
                raise BlueprintError(f"{path}.{name}: attribute values must be scalars")
            elif value is True:
                # Boolean attribute
                attributes[name] = ""
            elif value is not False and value is not None:
                attributes[name] = value

        if attributes:
            explicit["attributes"] = attributes
        if events:
            explicit["on"] = events

        self._build_explicit(parent, explicit, path)

    def _build_explicit(self, parent: UiNode, component: Mapping[str, Any], path: str) -> None:
        unknown = set(component) - EXPLICIT_KEYS
        if unknown:
            raise BlueprintError(f"{path}: unknown keys {sorted(unknown)}")

        attributes = dict(self._mapping(component.get("attributes"), f"{path}.attributes"))
        if component.get("id"):
            attributes["id"] = component["id"]

        properties = dict(self._mapping(component.get("properties"), f"{path}.properties"))
        if "text" in component:
            properties["text_content"] = component["text"]

        config = {
            "tag": component["tag"],
            "class_spec": component.get("class"),
            "position_index": component.get("index"),
            "data_spec": component.get("data"),
            "attributes": attributes,
            "properties": properties,
            "event_handlers": self._resolve_handlers(component.get("on"), path),
        }

        try:
            node = self.factory.create(parent, config)
        except InvalidTagError:
            logger.error("blueprint_invalid_tag", path=path, tag=component["tag"])
            raise
        except ValidationError as e:
            raise BlueprintError(f"{path}: {e}") from e
        self._created += 1

        children = component.get("children") or []
        if not isinstance(children, list):
            raise BlueprintError(f"{path}.children: expected a list")
        self._build_components(node, children, f"{path}.children")

    def _resolve_handlers(self, spec: Any, path: str) -> dict[str, Callable[..., Any]]:
        resolved: dict[str, Callable[..., Any]] = {}
        for event_type, ref in self._mapping(spec, f"{path}.on").items():
            if callable(ref):
                resolved[event_type] = ref
            elif isinstance(ref, str) and ref in self.handlers:
                resolved[event_type] = self.handlers[ref]
            else:
                logger.warning("unknown_handler", path=path, event_type=event_type, handler=ref)
        return resolved

    @staticmethod
    def _mapping(value: Any, path: str) -> Mapping[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise BlueprintError(f"{path}: expected an object, got {type(value).__name__}")
        return value


def build_blueprint(
    parent: UiNode,
    blueprint: str | Mapping[str, Any] | list[Any],
    handlers: Mapping[str, Callable[..., Any]] | None = None,
) -> list[Node]:
    """
    Convenience function to build a blueprint under ``parent``.

    Args:
        parent: Node receiving the blueprint's root nodes
        blueprint: JSON text, a component mapping, or a list of components
        handlers: Event handler lookup for string handler references

    Returns:
        The appended root nodes
    """
    builder = BlueprintBuilder(handlers=handlers)
    return builder.build(parent, blueprint)


def validate_blueprint(
    blueprint: str | Mapping[str, Any] | list[Any],
    handlers: Mapping[str, Callable[..., Any]] | None = None,
) -> Result[int, ValidationResult]:
    """
    Dry-run a blueprint against a scratch document (Result pattern version).

    Returns:
        Success with the number of elements the blueprint creates, or
        Failure with the validation error
    """
    document = Document()
    factory = ElementFactory(document=document, settings=get_factory().settings)
    builder = BlueprintBuilder(factory=factory, handlers=handlers)
    try:
        builder.build(document.body, blueprint)
    except InvalidTagError as e:
        return Failure(ValidationResult(str(e), field="tag", value=e.tag))
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
    return Success(builder.created)
