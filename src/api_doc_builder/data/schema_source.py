"""Schema sources: what a schema is generated from.

A source is one of three tagged variants:

- ``NativeType``: a Python type, handed to the schema generator.
- ``ExplicitSchema``: a named, caller-supplied schema object.
- ``RemoteReference``: a named pointer to a schema in an external document.

Each carries an ``array`` modifier. The identity of a source ignores that
modifier, so ``Pet`` and ``Pet[]`` share a single registry entry.
"""

import re
import types
import typing
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_UNION_ORIGINS = (typing.Union, types.UnionType)


def type_identity(tp: Any) -> str:
    """Return a short, component-safe name for a Python type.

    ``Pet`` -> ``Pet``, ``list[Pet]`` -> ``list_Pet``,
    ``dict[str, int]`` -> ``dict_str_int``, ``int | None`` -> ``int_or_None``.
    Distinct types may share a short name; see ``type_key``.
    """
    origin = typing.get_origin(tp)
    if origin in _UNION_ORIGINS:
        return "_or_".join(type_identity(arg) for arg in typing.get_args(tp))
    if origin is not None:
        parts = [_type_name(origin)] + [type_identity(arg) for arg in typing.get_args(tp)]
        return "_".join(parts)
    return _type_name(tp)


def type_key(tp: Any) -> str:
    """Return the fully qualified name of a type, unique per declared type.

    ``users.models.Item`` and ``orders.models.Item`` get different keys.
    """
    origin = typing.get_origin(tp)
    if origin is not None:
        args = ", ".join(type_key(arg) for arg in typing.get_args(tp))
        return f"{type_key(origin)}[{args}]"
    qualname = getattr(tp, "__qualname__", None)
    if qualname is None:
        return repr(tp)
    return f"{getattr(tp, '__module__', '')}.{qualname}"


def _type_name(tp: Any) -> str:
    if tp is type(None):
        return "None"
    name = getattr(tp, "__name__", None) or str(tp)
    return _UNSAFE_CHARS.sub("_", name)


def safe_component_name(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name)


class NativeType(BaseModel):
    """A schema generated from a Python type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["native"] = "native"
    type: Any
    array: bool = False

    @property
    def identity(self) -> str:
        return type_identity(self.type)

    @property
    def key(self) -> str:
        return type_key(self.type)


class ExplicitSchema(BaseModel):
    """A schema supplied by the caller under a fixed id.

    ``raw`` is used when the document configuration has no shared schema
    registered under ``schema_id``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["explicit"] = "explicit"
    schema_id: str
    raw: dict | None = None
    array: bool = False

    @property
    def identity(self) -> str:
        return self.schema_id


class RemoteReference(BaseModel):
    """A schema living in an external document, referenced by URL."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["remote"] = "remote"
    schema_id: str
    url: str
    array: bool = False

    @property
    def identity(self) -> str:
        return self.schema_id


SchemaSource = Annotated[
    Union[NativeType, ExplicitSchema, RemoteReference],
    Field(discriminator="kind"),
]

SOURCE_TYPES = (NativeType, ExplicitSchema, RemoteReference)


def schema_source(value: Any) -> Any:
    """Coerce a declared type into a schema source.

    Sources pass through and dicts are left for pydantic to validate as a
    tagged source. Anything else is treated as a Python type.
    """
    if isinstance(value, SOURCE_TYPES) or isinstance(value, dict):
        return value
    return NativeType(type=value)


def array_of(value: Any) -> NativeType | ExplicitSchema | RemoteReference:
    """Return the array-wrapped variant of a source (or of a bare type)."""
    source = schema_source(value)
    if isinstance(source, dict):
        raise ValueError("array_of() needs a schema source or a type, not a raw dict")
    return source.model_copy(update={"array": True})
