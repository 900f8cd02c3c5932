from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from apisplit import __version__
from apisplit.codegen.diagnostics import DiagnosticCollector
from apisplit.codegen.schema_loader import SchemaLoader
from apisplit.codegen.translator import TypesFileTranslator
from apisplit.config import DocumentConfig, get_config
from apisplit.exceptions import ApiSplitError, ConfigurationError

console = Console()
app = typer.Typer(
    name='apisplit',
    help='Split the reusable types of an OpenAPI document into one file each',
    no_args_is_help=True,
)


def _documents(
    source: str | None,
    config: str | None,
    namespace: str | None,
    imports: list[str] | None,
    extension: str | None,
) -> list[DocumentConfig]:
    if source is None:
        return get_config(config).documents

    if config is not None:
        raise ConfigurationError(
            '--config cannot be combined with SOURCE', config_path=config
        )

    options = {
        'source': source,
        'namespace': namespace,
        'additional_imports': imports or [],
    }
    if extension:
        options['file_extension'] = extension
    return [DocumentConfig(**options)]


@app.command()
def plan(
    source: Annotated[
        str | None,
        typer.Argument(help='Path or URL of the OpenAPI document'),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option(
            '--config',
            '-c',
            help='Path to configuration file (YAML, JSON or TOML), '
            'only used when SOURCE is not given',
        ),
    ] = None,
    namespace: Annotated[
        str | None,
        typer.Option('--namespace', '-n', help='Root namespace of the generated files'),
    ] = None,
    imports: Annotated[
        list[str] | None,
        typer.Option('--import', '-i', help='Additional import, may be repeated'),
    ] = None,
    extension: Annotated[
        str | None,
        typer.Option('--ext', help='Extension of the generated file names'),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option('--verbose', '-v', help='Also list dropped declarations'),
    ] = False,
) -> None:
    """Show the files that would be generated for a document.

    Without SOURCE, the documents of the configuration file are used.

    Examples:
        apisplit plan ./openapi.yaml
        apisplit plan ./openapi.yaml --namespace API -i Foundation
        apisplit plan --config apisplit.yaml
    """
    try:
        documents = _documents(source, config, namespace, imports, extension)
        loader = SchemaLoader()

        for document_config in documents:
            diagnostics = DiagnosticCollector()
            document = loader.load(document_config.source)
            files = TypesFileTranslator(
                document_config, diagnostics=diagnostics
            ).translate_file(document)

            table = Table(title=document_config.source)
            table.add_column('File')
            table.add_column('Declaration', style='dim')
            for file in files:
                declaration = file.contents.code_blocks[0].item
                table.add_row(file.name, type(declaration).__name__)
            console.print(table)

            if verbose:
                for diagnostic in diagnostics:
                    console.print(f'[yellow]{escape(str(diagnostic))}[/yellow]')

            console.print(f'[green]{len(files)} files planned[/green]')

    except (ApiSplitError, ValidationError) as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of apisplit."""
    console.print(f'apisplit version: {__version__}')


if __name__ == '__main__':
    app()
