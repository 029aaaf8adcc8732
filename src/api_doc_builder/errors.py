"""Exception classes for document generation."""


class ApiDocError(Exception):
    """Base error for api-doc-builder."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SchemaNotRegisteredError(ApiDocError):
    """A use site asked for a schema that the scan phase never registered.

    This is an internal contract violation: the scan in
    ``SchemaContext.initialize`` missed a location that carries a schema.
    """

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"Could not retrieve schema for type '{identity}'")


class ConfigError(ApiDocError):
    """The document configuration could not be loaded."""


class RouteTreeLoadError(ApiDocError):
    """A route tree (or config object) could not be imported."""
