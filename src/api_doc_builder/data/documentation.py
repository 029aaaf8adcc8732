"""Documentation records attached to route-tree nodes.

A record on a method node documents that route. A record on any other node
is a group default for every route below it. Every field of
``RouteDocumentation`` is optional: ``None`` means "not set here, inherit".
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .schema_source import SchemaSource, schema_source


class ParameterLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    PATH = "path"


class Example(BaseModel):
    """An example value, inline or shared by name in the document config."""

    value: Any = None
    summary: str | None = None
    description: str | None = None
    external_value: str | None = None


# An inline example, or the name of a shared example.
ExampleRef = Union[Example, str]


class Header(BaseModel):
    """A response or multipart-part header."""

    type: SchemaSource | None = None
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    explode: bool | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        if value is None:
            return value
        return schema_source(value)


class RequestParameter(BaseModel):
    """A query, header or path parameter."""

    name: str
    location: ParameterLocation
    type: SchemaSource
    description: str | None = None
    required: bool = False
    deprecated: bool | None = None
    allow_empty_value: bool | None = None
    explode: bool | None = None
    allow_reserved: bool | None = None
    example: Any = None

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        return schema_source(value)


class SimpleBody(BaseModel):
    """A request or response body with a single schema."""

    kind: Literal["simple"] = "simple"
    type: SchemaSource
    description: str | None = None
    required: bool | None = None
    media_types: list[str] = []
    examples: dict[str, ExampleRef] = {}

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        return schema_source(value)


class MultipartPart(BaseModel):
    """One named section of a multipart body."""

    name: str
    type: SchemaSource
    required: bool = False
    media_types: list[str] = []
    headers: dict[str, Header] = {}

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        return schema_source(value)


class MultipartBody(BaseModel):
    kind: Literal["multipart"] = "multipart"
    parts: list[MultipartPart] = []
    description: str | None = None
    required: bool | None = None
    media_types: list[str] = []


Body = Annotated[Union[SimpleBody, MultipartBody], Field(discriminator="kind")]


class Response(BaseModel):
    """A response for one status code."""

    description: str = ""
    body: Body | None = None
    headers: dict[str, Header] = {}


class RouteDocumentation(BaseModel):
    """Documentation for a route, or defaults for a group of routes."""

    model_config = ConfigDict(frozen=True)

    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    parameters: list[RequestParameter] | None = None
    body: Body | None = None
    responses: dict[str, Response] | None = None
    security: list[str] | None = None
    deprecated: bool | None = None
    hidden: bool | None = None
    protected: bool | None = None
    external_docs_url: str | None = None
    external_docs_description: str | None = None

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_strings(cls, value):
        # Accept 200, HTTPStatus.OK or "200" as keys.
        if not isinstance(value, dict):
            return value
        return {_status_key(code): response for code, response in value.items()}


def _status_key(code: Any) -> str:
    if isinstance(code, Enum):
        code = code.value
    return str(code)
