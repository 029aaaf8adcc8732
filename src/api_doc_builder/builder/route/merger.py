"""Merges a route's documentation with everything it inherits."""

from api_doc_builder.config import DocumentConfig
from api_doc_builder.data.documentation import RouteDocumentation

UNAUTHORIZED = "401"


class RouteDocumentationMerger:
    """Builds the effective documentation record of a route.

    Precedence, nearest wins: config defaults, then each ancestor group from
    the root down, then the route itself. A field only overrides when it is
    set. Responses are merged per status code.
    """

    def merge(
        self,
        config: DocumentConfig,
        groups: list[RouteDocumentation],
        own: RouteDocumentation | None,
        protected: bool = False,
    ) -> RouteDocumentation:
        merged = config.defaults
        for documentation in [*groups, own]:
            if documentation is not None:
                merged = self.overlay(merged, documentation)
        return self._apply_security_defaults(config, merged, protected)

    def overlay(self, base: RouteDocumentation, documentation: RouteDocumentation) -> RouteDocumentation:
        """Apply the fields set in ``documentation`` on top of ``base``."""
        updates = {}
        for name in RouteDocumentation.model_fields:
            value = getattr(documentation, name)
            if value is None:
                continue
            if name == "responses":
                value = {**(base.responses or {}), **value}
            updates[name] = value
        return base.model_copy(update=updates)

    def _apply_security_defaults(
        self, config: DocumentConfig, documentation: RouteDocumentation, protected: bool
    ) -> RouteDocumentation:
        if documentation.protected is not None:
            secured = documentation.protected
        else:
            secured = protected or config.secure_all_routes

        updates = {"protected": secured}
        if secured:
            if config.default_security_scheme_name and documentation.security is None:
                updates["security"] = [config.default_security_scheme_name]
            responses = documentation.responses or {}
            if config.default_unauthorized_response is not None and UNAUTHORIZED not in responses:
                updates["responses"] = {**responses, UNAUTHORIZED: config.default_unauthorized_response}
        return documentation.model_copy(update=updates)
