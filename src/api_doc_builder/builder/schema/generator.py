"""Default raw-schema generator, backed by pydantic's JSON schema support."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter

REF_TEMPLATE = "#/components/schemas/{model}"


@dataclass(frozen=True)
class ResolvedSchema:
    """A root schema plus the named definitions it refers to."""

    root: dict
    definitions: dict[str, dict] = field(default_factory=dict)


def generate_schema(tp: Any) -> ResolvedSchema:
    """Generate the JSON schema for a Python type.

    Nested models end up in ``definitions`` and are referenced from the
    root through ``#/components/schemas/<name>``.
    """
    if tp is Any or tp is object:
        return ResolvedSchema(root={})
    schema = TypeAdapter(tp).json_schema(ref_template=REF_TEMPLATE)
    definitions = schema.pop("$defs", {})
    return ResolvedSchema(root=schema, definitions=definitions)
