import structlog

from api_doc_builder.builder.openapi.operation import OperationBuilder
from api_doc_builder.builder.route.collector import RouteMeta

logger = structlog.get_logger(__name__)


class PathsBuilder:
    """Groups routes by path, then by lowercase method."""

    def __init__(self, operation_builder: OperationBuilder):
        self.operation_builder = operation_builder

    def build(self, routes: list[RouteMeta]) -> dict[str, dict]:
        paths: dict[str, dict] = {}
        operation_ids: set[str] = set()
        for route in routes:
            operation_id = route.documentation.operation_id
            if operation_id is not None:
                if operation_id in operation_ids:
                    logger.warning("duplicate_operation_id", operation_id=operation_id, path=route.path)
                operation_ids.add(operation_id)
            paths.setdefault(route.path, {})[route.method.lower()] = self.operation_builder.build(route)
        return paths
