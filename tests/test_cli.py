import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from api_doc_builder.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def fixture_modules(monkeypatch):
    monkeypatch.syspath_prepend(str(FIXTURES))


class TestCliBuild:
    def test_build_json_with_config_object(self, tmp_path):
        output = tmp_path / "openapi.json"
        runner = CliRunner()
        result = runner.invoke(main, [
            "build", "petstore_app:routes",
            "-o", str(output),
            "-c", "petstore_app:config",
        ])

        assert result.exit_code == 0, result.output
        assert "Documented 4 routes" in result.output
        document = json.loads(output.read_text())
        assert document["info"]["title"] == "Petstore"
        assert "/api/v1/pets/{petId}" in document["paths"]

    def test_build_yaml_with_config_file(self, tmp_path):
        output = tmp_path / "docs" / "openapi.yaml"
        runner = CliRunner()
        result = runner.invoke(main, [
            "build", "petstore_app:routes",
            "-o", str(output),
            "-c", str(FIXTURES / "config.yaml"),
        ])

        assert result.exit_code == 0, result.output
        document = yaml.safe_load(output.read_text())
        assert document["info"]["version"] == "2.0.0"
        assert document["servers"] == [{"url": "https://petstore.example.com", "description": "Production"}]
        assert document["components"]["examples"]["rex"]["value"] == {"id": 1, "name": "Rex"}

    def test_format_overrides_suffix(self, tmp_path):
        output = tmp_path / "openapi.txt"
        runner = CliRunner()
        result = runner.invoke(main, ["build", "petstore_app:routes", "-o", str(output), "--format", "yaml"])

        assert result.exit_code == 0, result.output
        assert yaml.safe_load(output.read_text())["openapi"] == "3.1.0"

    def test_bad_target(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["build", "petstore_app:not_a_tree", "-o", str(tmp_path / "x.json")])

        assert result.exit_code != 0
        assert "not a RouteNode" in result.output

    def test_missing_module(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["build", "no_such_module:routes", "-o", str(tmp_path / "x.json")])

        assert result.exit_code != 0
        assert "Cannot import module" in result.output

    def test_malformed_target(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["build", "petstore_app", "-o", str(tmp_path / "x.json")])

        assert result.exit_code != 0
        assert "module:attribute" in result.output


class TestCliRoutes:
    def test_lists_routes(self):
        runner = CliRunner()
        result = runner.invoke(main, ["routes", "petstore_app:routes"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "GET /",
            "GET /api/v1/pets",
            "POST /api/v1/pets",
            "GET /api/v1/pets/{petId}",
        ]
