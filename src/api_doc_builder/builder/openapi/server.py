from api_doc_builder.builder.openapi.common import compact
from api_doc_builder.config import Server


class ServerBuilder:
    def build(self, server: Server) -> dict:
        return compact({"url": server.url, "description": server.description})
