"""Walks the route tree and collects every documented endpoint."""

import structlog
from pydantic import BaseModel, ConfigDict

from api_doc_builder.builder.route.merger import RouteDocumentationMerger
from api_doc_builder.config import DocumentConfig
from api_doc_builder.data.documentation import RouteDocumentation
from api_doc_builder.data.route_tree import RouteNode, SelectorKind

logger = structlog.get_logger(__name__)


class RouteMeta(BaseModel):
    """One documented endpoint: method, URL template and effective docs."""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    segments: tuple[str, ...] = ()
    protected: bool = False
    documentation: RouteDocumentation


def build_path(segments: list[str] | tuple[str, ...]) -> str:
    """Join segments into a template with one leading and no trailing slash."""
    parts = [part for segment in segments for part in segment.split("/") if part]
    return "/" + "/".join(parts)


class RouteCollector:
    """Collects RouteMeta for every method node, in pre-order."""

    def __init__(self, merger: RouteDocumentationMerger | None = None):
        self.merger = merger or RouteDocumentationMerger()

    def collect(self, root: RouteNode, config: DocumentConfig) -> list[RouteMeta]:
        routes: dict[tuple[str, str], RouteMeta] = {}
        self._walk(root, config, (), [], False, routes)
        logger.info("routes_collected", count=len(routes))
        return list(routes.values())

    def _walk(
        self,
        node: RouteNode,
        config: DocumentConfig,
        segments: tuple[str, ...],
        groups: list[RouteDocumentation],
        protected: bool,
        routes: dict[tuple[str, str], RouteMeta],
    ) -> None:
        if node.kind is SelectorKind.METHOD:
            self._add_route(node, config, segments, groups, protected, routes)
        else:
            segment = node.render_segment()
            if segment:
                segments = segments + tuple(part for part in segment.split("/") if part)
            if node.documentation is not None:
                groups = [*groups, node.documentation]
            if node.kind is SelectorKind.AUTHENTICATE:
                protected = True

        for child in node.children:
            self._walk(child, config, segments, groups, protected, routes)

    def _add_route(
        self,
        node: RouteNode,
        config: DocumentConfig,
        segments: tuple[str, ...],
        groups: list[RouteDocumentation],
        protected: bool,
        routes: dict[tuple[str, str], RouteMeta],
    ) -> None:
        method = (node.method or "").upper()
        path = build_path(segments)
        documentation = self.merger.merge(config, groups, node.documentation, protected)

        if documentation.hidden:
            return
        if config.path_filter is not None and not config.path_filter(method, path):
            return

        key = (method, path)
        if key in routes:
            # Last one wins; the route keeps its first position.
            logger.warning("duplicate_route", method=method, path=path)
        routes[key] = RouteMeta(
            method=method,
            path=path,
            segments=segments,
            protected=bool(documentation.protected),
            documentation=documentation,
        )
