"""The route tree as seen by the document builder.

The tree belongs to the hosting web framework. Adapters translate the
framework's routing nodes into ``RouteNode`` values; the builder only
reads them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .documentation import RouteDocumentation

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE")


class SelectorKind(str, Enum):
    METHOD = "method"
    LITERAL = "literal"
    PARAMETER = "parameter"
    OPTIONAL_PARAMETER = "optional_parameter"
    WILDCARD = "wildcard"
    TAILCARD = "tailcard"
    TRANSPARENT = "transparent"
    AUTHENTICATE = "authenticate"


# Kinds that group routes without adding to the URL.
TRANSPARENT_KINDS = (SelectorKind.TRANSPARENT, SelectorKind.AUTHENTICATE)


class RouteNode(BaseModel):
    """One node of the route tree."""

    kind: SelectorKind
    segment: str = ""
    method: str | None = None
    documentation: RouteDocumentation | None = None
    children: list[RouteNode] = []

    def render_segment(self) -> str:
        """Render this node's contribution to the URL template ("" for none)."""
        if self.kind is SelectorKind.LITERAL:
            return self.segment
        if self.kind in (SelectorKind.PARAMETER, SelectorKind.OPTIONAL_PARAMETER, SelectorKind.TAILCARD):
            return "{" + self.segment + "}"
        if self.kind is SelectorKind.WILDCARD:
            return self.segment or "*"
        return ""


RouteNode.model_rebuild()


def root(*children: RouteNode, documentation: RouteDocumentation | None = None) -> RouteNode:
    """The routing root: a literal node with an empty segment."""
    return RouteNode(kind=SelectorKind.LITERAL, documentation=documentation, children=list(children))


def path(template: str, *children: RouteNode, documentation: RouteDocumentation | None = None) -> RouteNode:
    """Build a chain of nodes for a template like ``api/v1/{id}``.

    Documentation is attached to the deepest node of the chain.
    """
    segments = [s for s in template.split("/") if s] or [""]
    node = RouteNode(
        kind=_segment_kind(segments[-1]),
        segment=_segment_name(segments[-1]),
        documentation=documentation,
        children=list(children),
    )
    for segment in reversed(segments[:-1]):
        node = RouteNode(kind=_segment_kind(segment), segment=_segment_name(segment), children=[node])
    return node


def group(*children: RouteNode, documentation: RouteDocumentation | None = None) -> RouteNode:
    return RouteNode(kind=SelectorKind.TRANSPARENT, documentation=documentation, children=list(children))


def authenticate(*children: RouteNode, documentation: RouteDocumentation | None = None) -> RouteNode:
    return RouteNode(kind=SelectorKind.AUTHENTICATE, documentation=documentation, children=list(children))


def method(name: str, documentation: RouteDocumentation | None = None) -> RouteNode:
    name = name.upper()
    if name not in HTTP_METHODS:
        raise ValueError(f"Unknown HTTP method: {name}")
    return RouteNode(kind=SelectorKind.METHOD, method=name, documentation=documentation)


def _segment_kind(segment: str) -> SelectorKind:
    if segment == "*":
        return SelectorKind.WILDCARD
    if segment.startswith("{") and segment.endswith("}"):
        inner = segment[1:-1]
        if inner.endswith("..."):
            return SelectorKind.TAILCARD
        if inner.endswith("?"):
            return SelectorKind.OPTIONAL_PARAMETER
        return SelectorKind.PARAMETER
    return SelectorKind.LITERAL


def _segment_name(segment: str) -> str:
    if segment.startswith("{") and segment.endswith("}"):
        return segment[1:-1].rstrip("?").removesuffix("...")
    return segment
