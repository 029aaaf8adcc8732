from api_doc_builder.builder.openapi.common import compact, external_docs
from api_doc_builder.builder.openapi.content import RequestBodyBuilder
from api_doc_builder.builder.openapi.parameter import ParameterBuilder
from api_doc_builder.builder.openapi.response import ResponsesBuilder
from api_doc_builder.builder.openapi.security import security_requirements
from api_doc_builder.builder.route.collector import RouteMeta


class OperationBuilder:
    def __init__(
        self,
        parameter_builder: ParameterBuilder,
        request_body_builder: RequestBodyBuilder,
        responses_builder: ResponsesBuilder,
    ):
        self.parameter_builder = parameter_builder
        self.request_body_builder = request_body_builder
        self.responses_builder = responses_builder

    def build(self, route: RouteMeta) -> dict:
        documentation = route.documentation
        parameters = [self.parameter_builder.build(p) for p in documentation.parameters or []]
        request_body = None
        if documentation.body is not None:
            request_body = self.request_body_builder.build(documentation.body)
        return compact({
            "tags": documentation.tags or None,
            "summary": documentation.summary,
            "description": documentation.description,
            "externalDocs": external_docs(documentation.external_docs_url, documentation.external_docs_description),
            "operationId": documentation.operation_id,
            "parameters": parameters or None,
            "requestBody": request_body,
            # OpenAPI requires at least an empty responses object.
            "responses": self.responses_builder.build(documentation.responses or {}),
            "deprecated": documentation.deprecated,
            "security": security_requirements(documentation.security),
        })
