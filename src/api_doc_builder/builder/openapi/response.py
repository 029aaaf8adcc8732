from api_doc_builder.builder.openapi.common import compact
from api_doc_builder.builder.openapi.content import ContentBuilder
from api_doc_builder.builder.openapi.header import HeaderBuilder
from api_doc_builder.data.documentation import Response


class ResponseBuilder:
    def __init__(self, header_builder: HeaderBuilder, content_builder: ContentBuilder):
        self.header_builder = header_builder
        self.content_builder = content_builder

    def build(self, response: Response) -> dict:
        content = None
        if response.body is not None:
            content = self.content_builder.build(response.body)
        return compact({
            "description": response.description,
            "headers": self.header_builder.build_all(response.headers),
            "content": content,
        })


class ResponsesBuilder:
    def __init__(self, response_builder: ResponseBuilder):
        self.response_builder = response_builder

    def build(self, responses: dict[str, Response]) -> dict[str, dict]:
        return {code: self.response_builder.build(response) for code, response in responses.items()}
