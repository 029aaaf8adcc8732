"""Render the finished document as JSON or YAML."""

import json
from pathlib import Path

import yaml


class _NoAliasDumper(yaml.SafeDumper):
    # Inherited docs share objects between operations; write them out in full.
    def ignore_aliases(self, data):
        return True


def to_json(document: dict) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False, default=str)


def to_yaml(document: dict) -> str:
    return yaml.dump(document, Dumper=_NoAliasDumper, sort_keys=False, allow_unicode=True)


def detect_output_format(file_path: Path) -> str:
    """'yaml' for .yaml/.yml outputs, 'json' otherwise."""
    if file_path.suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"


def render(document: dict, fmt: str) -> str:
    if fmt == "yaml":
        return to_yaml(document)
    return to_json(document)
