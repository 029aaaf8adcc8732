"""Assembles the OpenAPI document from a route tree and a config."""

import structlog

from api_doc_builder.builder.example.context import ExampleContext
from api_doc_builder.builder.openapi.common import compact, external_docs
from api_doc_builder.builder.openapi.components import ComponentsBuilder
from api_doc_builder.builder.openapi.content import ContentBuilder, RequestBodyBuilder
from api_doc_builder.builder.openapi.header import HeaderBuilder
from api_doc_builder.builder.openapi.info import InfoBuilder
from api_doc_builder.builder.openapi.operation import OperationBuilder
from api_doc_builder.builder.openapi.parameter import ParameterBuilder
from api_doc_builder.builder.openapi.paths import PathsBuilder
from api_doc_builder.builder.openapi.response import ResponseBuilder, ResponsesBuilder
from api_doc_builder.builder.openapi.security import SecuritySchemesBuilder
from api_doc_builder.builder.openapi.server import ServerBuilder
from api_doc_builder.builder.openapi.tag import TagBuilder
from api_doc_builder.builder.route.collector import RouteCollector, RouteMeta
from api_doc_builder.builder.schema.context import SchemaContext
from api_doc_builder.config import DocumentConfig
from api_doc_builder.data.route_tree import RouteNode

logger = structlog.get_logger(__name__)


class OpenApiBuilder:
    """Builds the document for already collected routes.

    Each call to ``build`` uses a fresh SchemaContext, so a builder can be
    reused when the route tree changes.
    """

    def __init__(self, config: DocumentConfig):
        self.config = config

    def build(self, routes: list[RouteMeta]) -> dict:
        schema_context = SchemaContext(self.config).initialize(routes)
        example_context = ExampleContext(self.config)

        header_builder = HeaderBuilder(schema_context)
        content_builder = ContentBuilder(schema_context, example_context, header_builder)
        operation_builder = OperationBuilder(
            ParameterBuilder(schema_context),
            RequestBodyBuilder(content_builder),
            ResponsesBuilder(ResponseBuilder(header_builder, content_builder)),
        )
        components_builder = ComponentsBuilder(schema_context, example_context, SecuritySchemesBuilder())

        document = compact({
            "openapi": self.config.openapi,
            "info": InfoBuilder().build(self.config.info),
            "externalDocs": external_docs(self.config.external_docs_url, self.config.external_docs_description),
            "servers": [ServerBuilder().build(server) for server in self.config.servers] or None,
            "tags": TagBuilder().build_all(self.config.tags, routes) or None,
            "paths": PathsBuilder(operation_builder).build(routes),
            "components": components_builder.build(self.config) or None,
        })
        logger.info("document_built", paths=len(document["paths"]), routes=len(routes))
        return document


def collect_routes(root: RouteNode, config: DocumentConfig | None = None) -> list[RouteMeta]:
    return RouteCollector().collect(root, config or DocumentConfig())


def build_document(root: RouteNode, config: DocumentConfig | None = None) -> dict:
    """Collect the routes below ``root`` and build their OpenAPI document."""
    config = config or DocumentConfig()
    routes = RouteCollector().collect(root, config)
    return OpenApiBuilder(config).build(routes)
