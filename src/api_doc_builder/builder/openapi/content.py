"""Media-type content of request and response bodies."""

from api_doc_builder.builder.example.context import ExampleContext
from api_doc_builder.builder.openapi.common import compact
from api_doc_builder.builder.openapi.header import HeaderBuilder
from api_doc_builder.builder.schema.context import SchemaContext
from api_doc_builder.data.documentation import MultipartBody, SimpleBody

APPLICATION_JSON = "application/json"
TEXT_PLAIN = "text/plain"
MULTIPART_FORM_DATA = "multipart/form-data"


class ContentBuilder:
    def __init__(self, schema_context: SchemaContext, example_context: ExampleContext, header_builder: HeaderBuilder):
        self.schema_context = schema_context
        self.example_context = example_context
        self.header_builder = header_builder

    def build(self, body: SimpleBody | MultipartBody) -> dict[str, dict]:
        if isinstance(body, SimpleBody):
            return self._build_simple(body)
        return self._build_multipart(body)

    def _build_simple(self, body: SimpleBody) -> dict[str, dict]:
        media_type = compact({
            "schema": self.schema_context.schema_for_use_site(body.type),
            "examples": self.example_context.examples(body.examples) or None,
        })
        media_types = body.media_types or [self._default_media_type(body)]
        return {name: dict(media_type) for name in media_types}

    def _default_media_type(self, body: SimpleBody) -> str:
        root = self.schema_context.lookup(body.type).root
        if not body.type.array and root.get("type") == "string":
            return TEXT_PLAIN
        return APPLICATION_JSON

    def _build_multipart(self, body: MultipartBody) -> dict[str, dict]:
        properties = {}
        required = []
        encoding = {}
        for part in body.parts:
            properties[part.name] = self.schema_context.schema_for_use_site(part.type)
            if part.required:
                required.append(part.name)
            if part.media_types or part.headers:
                encoding[part.name] = compact({
                    "contentType": ", ".join(part.media_types) or None,
                    "headers": self.header_builder.build_all(part.headers),
                })

        schema = compact({
            "type": "object",
            "properties": properties,
            "required": required or None,
        })
        media_type = compact({"schema": schema, "encoding": encoding or None})
        media_types = body.media_types or [MULTIPART_FORM_DATA]
        return {name: dict(media_type) for name in media_types}


class RequestBodyBuilder:
    def __init__(self, content_builder: ContentBuilder):
        self.content_builder = content_builder

    def build(self, body: SimpleBody | MultipartBody) -> dict:
        return compact({
            "description": body.description,
            "required": body.required,
            "content": self.content_builder.build(body),
        })
