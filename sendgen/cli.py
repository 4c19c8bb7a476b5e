import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from sendgen.codegen.codegen import Codegen
from sendgen.config import get_config
from sendgen.exceptions import SendgenError

console = Console()
app = typer.Typer(
    name='sendgen',
    help='Generate request Send methods from a request/response model',
    no_args_is_help=True,
)


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Generate Send methods for every configured target.

    If no config file is specified, will look for sendgen.yaml or
    sendgen.yml in the current directory, then [tool.sendgen] in
    pyproject.toml.

    Examples:
        sendgen generate
        sendgen generate --config my-config.yaml
        sendgen generate -c config.json -v
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        settings = get_config(config)

        for target in settings.targets:
            with Progress(
                SpinnerColumn(),
                TextColumn('[progress.description]{task.description}'),
                console=console,
            ) as progress:
                task = progress.add_task(
                    f'Generating code for {target.source} in {target.output}...',
                    total=None,
                )

                path = Codegen(target, settings.template).generate()

                progress.update(
                    task, description=f'Code generation completed for {target.source}!'
                )
            console.print(f'[dim]Generated file:[/dim] {path}')

        console.print('Successfully generated code')

    except SendgenError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of sendgen."""
    from sendgen import __version__

    console.print(f'sendgen version: {__version__}')


if __name__ == '__main__':
    app()
