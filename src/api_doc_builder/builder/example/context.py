"""Inline and shared examples."""

import structlog

from api_doc_builder.config import DocumentConfig
from api_doc_builder.data.documentation import Example, ExampleRef

logger = structlog.get_logger(__name__)

COMPONENT_PREFIX = "#/components/examples/"


def build_example(example: Example) -> dict:
    result = {
        "summary": example.summary,
        "description": example.description,
        "value": example.value,
        "externalValue": example.external_value,
    }
    return {k: v for k, v in result.items() if v is not None}


class ExampleContext:
    """Resolves example references against the shared examples of the config."""

    def __init__(self, config: DocumentConfig):
        self.shared = config.examples

    def example(self, ref: ExampleRef) -> dict | None:
        """Example object for a use site: inline, or a $ref to a shared example."""
        if isinstance(ref, str):
            if ref not in self.shared:
                logger.warning("shared_example_missing", name=ref)
                return None
            return {"$ref": COMPONENT_PREFIX + ref}
        return build_example(ref)

    def examples(self, refs: dict[str, ExampleRef]) -> dict[str, dict]:
        result = {}
        for name, ref in refs.items():
            example = self.example(ref)
            if example is not None:
                result[name] = example
        return result

    def component_section(self) -> dict[str, dict]:
        return {name: build_example(example) for name, example in self.shared.items()}
