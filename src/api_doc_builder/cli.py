"""CLI entry point for api-doc-builder."""

import logging
from pathlib import Path

import click

from api_doc_builder.builder.openapi.document import OpenApiBuilder
from api_doc_builder.builder.route.collector import RouteCollector
from api_doc_builder.config import DocumentConfig, load_config
from api_doc_builder.errors import ApiDocError
from api_doc_builder.loader import load_config_object, load_route_tree
from api_doc_builder.log import setup_logging
from api_doc_builder.serialize import detect_output_format, render


def _load_config(config: str | None) -> DocumentConfig:
    """Load config from a YAML file, or from a 'module:attribute' object."""
    if config is None:
        return DocumentConfig()
    path = Path(config)
    if path.exists() or ":" not in config:
        return load_config(path)
    return load_config_object(config)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log progress and warnings at INFO level.")
def main(verbose: bool):
    """API Doc Builder: generate OpenAPI documents from route trees."""
    setup_logging(logging.INFO if verbose else logging.WARNING)


@main.command()
@click.argument("target")
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the document.")
@click.option("-c", "--config", default=None, help="Config YAML file or 'module:attribute' DocumentConfig.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format.")
def build(target: str, output: Path, config: str | None, fmt: str):
    """Build the OpenAPI document for the route tree at TARGET (module:attribute)."""
    try:
        document_config = _load_config(config)
        root = load_route_tree(target)
        routes = RouteCollector().collect(root, document_config)
        document = OpenApiBuilder(document_config).build(routes)
    except ApiDocError as e:
        raise click.ClickException(e.message) from e

    if fmt == "auto":
        fmt = detect_output_format(output)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render(document, fmt), encoding="utf-8")
    click.echo(f"Documented {len(routes)} routes in {output}")


@main.command()
@click.argument("target")
@click.option("-c", "--config", default=None, help="Config YAML file or 'module:attribute' DocumentConfig.")
def routes(target: str, config: str | None):
    """List the routes that would be documented for TARGET."""
    try:
        document_config = _load_config(config)
        root = load_route_tree(target)
        collected = RouteCollector().collect(root, document_config)
    except ApiDocError as e:
        raise click.ClickException(e.message) from e

    for route in collected:
        click.echo(f"{route.method} {route.path}")
