"""Import route trees and configs from ``package.module:attribute`` targets."""

import importlib
from typing import Any

from api_doc_builder.config import DocumentConfig
from api_doc_builder.data.route_tree import RouteNode
from api_doc_builder.errors import RouteTreeLoadError


def import_target(target: str) -> Any:
    """Import ``module:attribute``; callables are called with no arguments."""
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise RouteTreeLoadError(f"Target must look like 'package.module:attribute', got '{target}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise RouteTreeLoadError(f"Cannot import module '{module_name}': {e}") from e

    value = module
    for name in attribute.split("."):
        try:
            value = getattr(value, name)
        except AttributeError as e:
            raise RouteTreeLoadError(f"'{module_name}' has no attribute '{attribute}'") from e

    if callable(value) and not isinstance(value, type):
        value = value()
    return value


def load_route_tree(target: str) -> RouteNode:
    value = import_target(target)
    if not isinstance(value, RouteNode):
        raise RouteTreeLoadError(f"'{target}' is a {type(value).__name__}, not a RouteNode")
    return value


def load_config_object(target: str) -> DocumentConfig:
    value = import_target(target)
    if not isinstance(value, DocumentConfig):
        raise RouteTreeLoadError(f"'{target}' is a {type(value).__name__}, not a DocumentConfig")
    return value
