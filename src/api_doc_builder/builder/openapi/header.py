from api_doc_builder.builder.openapi.common import compact
from api_doc_builder.builder.schema.context import SchemaContext
from api_doc_builder.data.documentation import Header


class HeaderBuilder:
    def __init__(self, schema_context: SchemaContext):
        self.schema_context = schema_context

    def build(self, header: Header) -> dict:
        schema = None
        if header.type is not None:
            schema = self.schema_context.schema_for_use_site(header.type)
        return compact({
            "description": header.description,
            "required": header.required,
            "deprecated": header.deprecated,
            "schema": schema,
            "explode": header.explode,
        })

    def build_all(self, headers: dict[str, Header]) -> dict[str, dict] | None:
        if not headers:
            return None
        return {name: self.build(header) for name, header in headers.items()}
