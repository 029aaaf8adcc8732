from api_doc_builder.builder.openapi.common import compact, external_docs
from api_doc_builder.builder.route.collector import RouteMeta
from api_doc_builder.config import Tag


class TagBuilder:
    def build(self, tag: Tag) -> dict:
        return compact({
            "name": tag.name,
            "description": tag.description,
            "externalDocs": external_docs(tag.external_docs_url, tag.external_docs_description),
        })

    def build_all(self, tags: list[Tag], routes: list[RouteMeta]) -> list[dict]:
        """Declared tags in config order, then undeclared route tags in first-use order."""
        result = [self.build(tag) for tag in tags]
        known = {tag.name for tag in tags}
        for route in routes:
            for name in route.documentation.tags or []:
                if name not in known:
                    known.add(name)
                    result.append({"name": name})
        return result
