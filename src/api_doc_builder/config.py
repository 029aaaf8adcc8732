"""Document configuration.

``DocumentConfig`` is built once, before generation starts, and never
changes afterwards. Plain values can come from a YAML file; callables
(schema generator, path filter, schema providers) can only be set in code.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from api_doc_builder.builder.schema.generator import ResolvedSchema, generate_schema
from api_doc_builder.data.documentation import Example, Response, RouteDocumentation
from api_doc_builder.errors import ConfigError


class Contact(BaseModel):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(BaseModel):
    name: str
    url: str | None = None
    identifier: str | None = None


class Info(BaseModel):
    """The document's info block. Only ``title`` is required by OpenAPI."""

    title: str = "API"
    version: str = "latest"
    description: str | None = None
    summary: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None


class Server(BaseModel):
    url: str
    description: str | None = None


class Tag(BaseModel):
    name: str
    description: str | None = None
    external_docs_url: str | None = None
    external_docs_description: str | None = None


class AuthType(str, Enum):
    API_KEY = "apiKey"
    HTTP = "http"
    OAUTH2 = "oauth2"
    OPENID_CONNECT = "openIdConnect"
    MUTUAL_TLS = "mutualTLS"


class AuthKeyLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class SecurityScheme(BaseModel):
    name: str
    type: AuthType
    scheme: str | None = None  # basic / bearer / ... for http
    bearer_format: str | None = None
    location: AuthKeyLocation | None = None  # apiKey only
    key_name: str | None = None  # apiKey only
    open_id_connect_url: str | None = None
    flows: dict | None = None
    description: str | None = None


class DocumentConfig(BaseModel):
    """Everything the builder needs besides the route tree."""

    model_config = ConfigDict(frozen=True)

    openapi: str = "3.1.0"
    info: Info = Info()
    servers: list[Server] = []
    external_docs_url: str | None = None
    external_docs_description: str | None = None
    tags: list[Tag] = []
    security_schemes: list[SecurityScheme] = []
    default_security_scheme_name: str | None = None
    default_unauthorized_response: Response | None = None
    # Apply the security defaults to every route not explicitly marked
    # ``protected=False``; when off, only protected routes get them.
    secure_all_routes: bool = True
    defaults: RouteDocumentation = RouteDocumentation()
    # Shared schemas by id: a raw schema dict, a type, or a zero-arg provider.
    schemas: dict[str, Any] = {}
    examples: dict[str, Example] = {}
    # Replacements for root types: another type or a raw schema dict.
    type_overrides: dict[Any, Any] = {}
    schema_generator: Callable[[Any], ResolvedSchema] = generate_schema
    path_filter: Callable[[str, str], bool] | None = None


def load_config(file_path: Path) -> DocumentConfig:
    """Load a DocumentConfig from a YAML (or JSON) file."""
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {file_path} must contain a mapping")

    try:
        return DocumentConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {file_path}: {e}") from e
