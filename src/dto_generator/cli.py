"""Command-line interface for the DTO generator."""

import logging
import sys
import click
from pathlib import Path
from typing import Optional
from . import __version__
from .config import DEFAULT_NAMESPACE, DEFAULT_ROOT_NAME, GeneratorConfig
from .generator import DtoGenerator
from .renderers import JsonDescriptionRenderer
from .types import CaseMode


@click.group()
@click.version_option(version=__version__)
def main():
    """DTO Generator - Infer data-class models from sample JSON."""
    pass


@main.command()
@click.option('--json', 'json_text', help='The JSON document to use')
@click.option('--json-file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='File containing the JSON document')
@click.option('--namespace', '-n', default=DEFAULT_NAMESPACE,
              help=f'Namespace the classes are generated in (default: {DEFAULT_NAMESPACE})')
@click.option('--casing', '-c', default=CaseMode.NONE.value,
              help=f"Field casing: {', '.join(mode.value for mode in CaseMode)} (default: none)")
@click.option('--getters', is_flag=True, help='Generate getters')
@click.option('--setters', is_flag=True, help='Generate setters')
@click.option('--all', 'all_accessors', is_flag=True, help='Generate getters and setters')
@click.option('--dates', is_flag=True, help='Type date-like strings as dates')
@click.option('--root-name', default=DEFAULT_ROOT_NAME,
              help=f'Name the root class is derived from (default: {DEFAULT_ROOT_NAME})')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def generate(json_text: Optional[str], json_file: Optional[Path], namespace: str, casing: str,
             getters: bool, setters: bool, all_accessors: bool, dates: bool,
             root_name: str, verbose: bool):
    """Generate class descriptions from JSON given inline, as a file, or on stdin."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if json_text is None:
        if json_file is not None:
            json_text = json_file.read_text(encoding='utf-8')
        else:
            json_text = sys.stdin.read()

    config = GeneratorConfig.from_options(
        namespace=namespace,
        casing=casing,
        getters=getters,
        setters=setters,
        all=all_accessors,
        dates=dates,
        root_name=root_name
    )

    result = DtoGenerator(config).generate(json_text)

    if not result.success:
        click.echo("❌ Generation failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        if result.suggested_action:
            click.echo(f"💡 {result.suggested_action}", err=True)
        sys.exit(1)

    for diagnostic in result.diagnostics:
        click.echo(f"⚠️  {diagnostic.location}: {diagnostic.message}", err=True)

    click.echo(JsonDescriptionRenderer().render_document(result.classes))


if __name__ == '__main__':
    main()
