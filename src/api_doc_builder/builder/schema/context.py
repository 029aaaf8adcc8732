"""Resolves every schema of a document exactly once.

``initialize`` scans all routes and registers each schema source it finds.
After that, builders only read: ``schema_for_use_site`` returns what to
embed at a parameter, body or header, and ``component_section`` returns the
named schemas for ``components.schemas``.
"""

import copy
import typing
from typing import Any, Iterable

import structlog

from api_doc_builder.builder.route.collector import RouteMeta
from api_doc_builder.builder.schema.generator import ResolvedSchema
from api_doc_builder.config import DocumentConfig
from api_doc_builder.data.documentation import (
    Header,
    MultipartBody,
    Response,
    RouteDocumentation,
    SimpleBody,
)
from api_doc_builder.data.schema_source import ExplicitSchema, NativeType, RemoteReference, safe_component_name
from api_doc_builder.errors import SchemaNotRegisteredError

logger = structlog.get_logger(__name__)

COMPONENT_PREFIX = "#/components/schemas/"

Source = NativeType | ExplicitSchema | RemoteReference


def is_primitive(schema: dict | None) -> bool:
    """A schema with a declared elementary type, or a union of such (``int | None``)."""
    if not schema:
        return False
    variants = schema.get("anyOf") or schema.get("oneOf")
    if variants and "type" not in schema:
        return all(is_primitive(variant) for variant in variants)
    kind = schema.get("type")
    return kind is not None and kind not in ("object", "array")


def is_primitive_array(schema: dict | None) -> bool:
    """An array whose items are, recursively, primitive."""
    if not schema or schema.get("type") != "array":
        return False
    items = schema.get("items")
    return is_primitive(items) or is_primitive_array(items)


def is_reference(schema: dict) -> bool:
    return set(schema) == {"$ref"}


def reference(identity: str) -> dict:
    return {"$ref": COMPONENT_PREFIX + identity}


def wrap_array(schema: dict) -> dict:
    return {"type": "array", "items": schema}


def registry_key(source: NativeType) -> Any:
    """The declared type itself, or its qualified name when it is unhashable."""
    try:
        hash(source.type)
    except TypeError:
        return source.key
    return source.type


class SchemaContext:
    """Deduplicating registry of resolved schemas for one generation pass."""

    def __init__(self, config: DocumentConfig):
        self.config = config
        # Native schemas are keyed by the declared type, so same-named types stay apart.
        self._schemas: dict[Any, ResolvedSchema] = {}
        self._component_names: dict[Any, str] = {}
        self._custom_schemas: dict[str, ResolvedSchema] = {}

    def initialize(
        self, routes: Iterable[RouteMeta], default_error_response: Response | None = None
    ) -> "SchemaContext":
        """Register every schema used by the routes and the default error response."""
        for route in routes:
            self._scan_documentation(route.documentation)
        response = default_error_response or self.config.default_unauthorized_response
        if response is not None:
            self._scan_response(response)
        logger.info("schemas_resolved", native=len(self._schemas), custom=len(self._custom_schemas))
        return self

    # scan

    def _scan_documentation(self, documentation: RouteDocumentation) -> None:
        if documentation.body is not None:
            self._scan_body(documentation.body)
        for parameter in documentation.parameters or []:
            self.resolve(parameter.type)
        for response in (documentation.responses or {}).values():
            self._scan_response(response)

    def _scan_response(self, response: Response) -> None:
        for header in response.headers.values():
            self._scan_header(header)
        if response.body is not None:
            self._scan_body(response.body)

    def _scan_body(self, body: SimpleBody | MultipartBody) -> None:
        if isinstance(body, SimpleBody):
            self.resolve(body.type)
            return
        for part in body.parts:
            self.resolve(part.type)
            for header in part.headers.values():
                self._scan_header(header)

    def _scan_header(self, header: Header) -> None:
        if header.type is not None:
            self.resolve(header.type)

    # resolve

    def resolve(self, source: Source) -> ResolvedSchema:
        """Resolve a source, generating its schema on first sight only."""
        if isinstance(source, NativeType):
            resolved = self._resolve_native(source)
        elif isinstance(source, ExplicitSchema):
            resolved = self._resolve_explicit(source)
        else:
            resolved = self._resolve_remote(source)
        if source.array:
            return ResolvedSchema(root=wrap_array(resolved.root), definitions=resolved.definitions)
        return resolved

    def _resolve_native(self, source: NativeType) -> ResolvedSchema:
        key = registry_key(source)
        if key not in self._schemas:
            replacement = self.config.type_overrides.get(source.type, source.type)
            self._schemas[key] = self._provide(replacement)
            self._component_names[key] = self._unique_component_name(source)
        return self._schemas[key]

    def _unique_component_name(self, source: NativeType) -> str:
        """The short name, or the qualified name when the short one is taken."""
        taken = set(self._component_names.values()) | set(self._custom_schemas)
        name = source.identity
        if name not in taken:
            return name
        name = base = safe_component_name(source.key)
        suffix = 2
        while name in taken:
            name = f"{base}_{suffix}"
            suffix += 1
        logger.warning("component_name_collision", type=source.key, component=name)
        return name

    def component_name(self, source: Source) -> str:
        """The key under ``components.schemas`` for a registered source."""
        if isinstance(source, NativeType):
            name = self._component_names.get(registry_key(source))
            if name is None:
                raise SchemaNotRegisteredError(source.identity)
            return name
        return source.schema_id

    def _resolve_explicit(self, source: ExplicitSchema) -> ResolvedSchema:
        schema_id = source.schema_id
        if schema_id not in self._custom_schemas:
            provided = self.config.schemas.get(schema_id, source.raw)
            if provided is None:
                logger.warning("custom_schema_missing", schema_id=schema_id)
                self._custom_schemas[schema_id] = ResolvedSchema(root={})
            else:
                self._custom_schemas[schema_id] = self._provide(provided)
        return self._custom_schemas[schema_id]

    def _resolve_remote(self, source: RemoteReference) -> ResolvedSchema:
        if source.schema_id not in self._custom_schemas:
            self._custom_schemas[source.schema_id] = ResolvedSchema(root={"type": "object", "$ref": source.url})
        return self._custom_schemas[source.schema_id]

    def _provide(self, value: Any) -> ResolvedSchema:
        """Turn a raw schema, a type or a zero-arg provider into a ResolvedSchema."""
        if isinstance(value, dict):
            return ResolvedSchema(root=copy.deepcopy(value))
        if isinstance(value, type) or typing.get_origin(value) is not None or value is Any:
            return self.config.schema_generator(value)
        if callable(value):
            return self._provide(value())
        return self.config.schema_generator(value)

    # read

    def lookup(self, source: Source) -> ResolvedSchema:
        """The resolved schema of an already registered source."""
        if isinstance(source, NativeType):
            resolved = self._schemas.get(registry_key(source))
        else:
            resolved = self._custom_schemas.get(source.schema_id)
        if resolved is None:
            raise SchemaNotRegisteredError(source.identity)
        return resolved

    def schema_for_use_site(self, source: Source) -> dict:
        """The schema to embed where the source is used: inline or a $ref."""
        resolved = self.lookup(source)
        root = resolved.root
        if isinstance(source, RemoteReference):
            schema = reference(self.component_name(source))
        elif is_primitive(root) or is_primitive_array(root):
            schema = copy.deepcopy(root)
        elif isinstance(source, NativeType) and is_reference(root):
            schema = dict(root)
        else:
            schema = reference(self.component_name(source))
        if source.array:
            return wrap_array(schema)
        return schema

    def component_section(self) -> dict[str, dict]:
        """Named schemas for ``components.schemas``."""
        section: dict[str, dict] = {}
        for key, resolved in self._schemas.items():
            root = resolved.root
            if is_primitive(root) or is_primitive_array(root):
                continue
            self._add_definitions(section, resolved.definitions)
            if not is_reference(root):
                section[self._component_names[key]] = root
        for schema_id, resolved in self._custom_schemas.items():
            self._add_definitions(section, resolved.definitions)
            section[schema_id] = resolved.root
        return section

    def _add_definitions(self, section: dict[str, dict], definitions: dict[str, dict]) -> None:
        for name, schema in definitions.items():
            if name in section and section[name] != schema:
                logger.warning("definition_conflict", component=name)
            section[name] = schema
