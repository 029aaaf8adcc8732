from http import HTTPStatus
from typing import Optional, Union

import pytest
from pydantic import BaseModel, ValidationError

from api_doc_builder.data.documentation import (
    Example,
    ParameterLocation,
    RequestParameter,
    Response,
    RouteDocumentation,
    SimpleBody,
)
from api_doc_builder.data.route_tree import SelectorKind, authenticate, group, method, path, root
from api_doc_builder.data.schema_source import (
    ExplicitSchema,
    NativeType,
    RemoteReference,
    array_of,
    schema_source,
    type_identity,
    type_key,
)


class Pet(BaseModel):
    id: int
    name: str


class TestTypeIdentity:
    def test_class_name(self):
        assert type_identity(Pet) == "Pet"
        assert type_identity(int) == "int"

    def test_generic_alias(self):
        assert type_identity(list[Pet]) == "list_Pet"
        assert type_identity(dict[str, int]) == "dict_str_int"

    def test_union_names(self):
        assert type_identity(int | None) == "int_or_None"
        assert type_identity(Optional[int]) == "int_or_None"
        assert type_identity(Union[Pet, str]) == "Pet_or_str"


class TestTypeKey:
    def test_qualified_name(self):
        assert type_key(Pet) == f"{__name__}.Pet"
        assert type_key(int) == "builtins.int"

    def test_generic_alias(self):
        assert type_key(list[Pet]) == f"builtins.list[{__name__}.Pet]"

    def test_same_name_different_keys(self):
        class Pet(BaseModel):
            other: str

        assert type_identity(Pet) == "Pet"
        assert type_key(Pet) != type_key(globals()["Pet"])


class TestSchemaSource:
    def test_bare_type_becomes_native(self):
        source = schema_source(Pet)
        assert isinstance(source, NativeType)
        assert source.identity == "Pet"
        assert source.array is False

    def test_sources_pass_through(self):
        explicit = ExplicitSchema(schema_id="Error")
        assert schema_source(explicit) is explicit

    def test_array_of_keeps_identity(self):
        source = array_of(Pet)
        assert source.array is True
        assert source.identity == "Pet"

    def test_remote_identity_is_id(self):
        source = RemoteReference(schema_id="Geo", url="https://example.com/geo.json")
        assert source.identity == "Geo"

    def test_sources_are_immutable(self):
        source = ExplicitSchema(schema_id="Error")
        with pytest.raises(ValidationError):
            source.schema_id = "Other"


class TestDocumentation:
    def test_parameter_type_coerced(self):
        p = RequestParameter(name="id", location="path", type=int)
        assert p.location is ParameterLocation.PATH
        assert isinstance(p.type, NativeType)
        assert p.required is False

    def test_body_type_from_tagged_dict(self):
        body = SimpleBody(type={"kind": "explicit", "schema_id": "Error"})
        assert isinstance(body.type, ExplicitSchema)

    def test_status_codes_normalized(self):
        doc = RouteDocumentation(responses={200: Response(description="ok"), HTTPStatus.NOT_FOUND: Response()})
        assert set(doc.responses) == {"200", "404"}

    def test_unset_fields_are_none(self):
        doc = RouteDocumentation()
        assert doc.tags is None
        assert doc.security is None
        assert doc.responses is None

    def test_example_ref_by_name_or_inline(self):
        body = SimpleBody(type=str, examples={"shared": "pet", "inline": Example(value="x")})
        assert body.examples["shared"] == "pet"
        assert body.examples["inline"].value == "x"


class TestRouteTreeHelpers:
    def test_path_builds_chain(self):
        node = path("api/v1/{id}", method("GET"))
        assert node.kind is SelectorKind.LITERAL
        assert node.segment == "api"
        leaf = node.children[0].children[0]
        assert leaf.kind is SelectorKind.PARAMETER
        assert leaf.segment == "id"
        assert leaf.children[0].method == "GET"

    def test_segment_kinds(self):
        assert path("*").kind is SelectorKind.WILDCARD
        assert path("{id?}").kind is SelectorKind.OPTIONAL_PARAMETER
        assert path("{rest...}").kind is SelectorKind.TAILCARD
        assert path("{rest...}").segment == "rest"

    def test_rendered_segments(self):
        assert path("{id}").render_segment() == "{id}"
        assert path("{id?}").render_segment() == "{id}"
        assert path("*").render_segment() == "*"
        assert group().render_segment() == ""
        assert authenticate().render_segment() == ""
        assert root().render_segment() == ""

    def test_method_normalized(self):
        assert method("post").method == "POST"

    def test_unknown_method_rejected(self):
        with pytest.raises(ValueError):
            method("FETCH")
