from api_doc_builder.builder.openapi.common import compact
from api_doc_builder.builder.schema.context import SchemaContext
from api_doc_builder.data.documentation import ParameterLocation, RequestParameter


class ParameterBuilder:
    def __init__(self, schema_context: SchemaContext):
        self.schema_context = schema_context

    def build(self, parameter: RequestParameter) -> dict:
        return compact({
            "name": parameter.name,
            "in": parameter.location.value,
            "description": parameter.description,
            # Path parameters are always required.
            "required": parameter.required or parameter.location is ParameterLocation.PATH,
            "deprecated": parameter.deprecated,
            "allowEmptyValue": parameter.allow_empty_value,
            "explode": parameter.explode,
            "allowReserved": parameter.allow_reserved,
            "schema": self.schema_context.schema_for_use_site(parameter.type),
            "example": parameter.example,
        })
