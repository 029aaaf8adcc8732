from api_doc_builder.builder.example.context import ExampleContext
from api_doc_builder.builder.openapi.common import compact
from api_doc_builder.builder.openapi.security import SecuritySchemesBuilder
from api_doc_builder.builder.schema.context import SchemaContext
from api_doc_builder.config import DocumentConfig


class ComponentsBuilder:
    def __init__(
        self,
        schema_context: SchemaContext,
        example_context: ExampleContext,
        security_schemes_builder: SecuritySchemesBuilder,
    ):
        self.schema_context = schema_context
        self.example_context = example_context
        self.security_schemes_builder = security_schemes_builder

    def build(self, config: DocumentConfig) -> dict:
        return compact({
            "schemas": self.schema_context.component_section() or None,
            "securitySchemes": self.security_schemes_builder.build(config.security_schemes) or None,
            "examples": self.example_context.component_section() or None,
        })
