"""CLI entry point for tlgen"""

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from tlgen.constants import DEFAULT_ENTRYPOINT, DEFAULT_NETWORK, DEFAULT_PORT
from tlgen.exceptions import TLGenError

app = typer.Typer(
    name="tlgen",
    help="Traefik Label Generator - interactive docker-compose label builder",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr, keeping stdout for the labels"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def handle_tlgen_error(error: TLGenError, exit_code: int = 1):
    """Handle tlgen errors with Rich formatting

    Args:
        error: tlgen exception to handle
        exit_code: Exit code to use
    """
    if error.help_text:
        panel_content = f"{escape(error.message)}\n\n[bold cyan]Help:[/bold cyan]\n{escape(error.help_text)}"
    else:
        panel_content = escape(error.message)

    panel = Panel(
        panel_content,
        title="[bold red]Error[/bold red]",
        border_style="red",
        expand=False
    )

    console.print(panel)
    raise typer.Exit(exit_code)


def handle_cancelled(exit_code: int = 130):
    """Handle Ctrl-C or end of input during the wizard"""
    console.print("\n[yellow]Cancelled[/yellow]")
    raise typer.Exit(exit_code)


def handle_unexpected_error(error: Exception, exit_code: int = 1):
    """Handle unexpected errors with Rich formatting

    Args:
        error: Exception to handle
        exit_code: Exit code to use
    """
    error_text = Text()
    error_text.append("✗ Unexpected Error: ", style="bold red")
    error_text.append(str(error))

    console.print(error_text)
    console.print(f"[dim]Error type: {type(error).__name__}[/dim]")
    console.print("\n[dim]Stack trace:[/dim]")
    console.print(
        "".join(traceback.format_exception(type(error), error, error.__traceback__)),
        style="dim",
        markup=False,
        highlight=False,
    )

    raise typer.Exit(exit_code)


@app.command()
def generate(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write labels to this file without asking"),
    entrypoint: str = typer.Option(DEFAULT_ENTRYPOINT, "--entrypoint", help="Default entrypoint"),
    port: str = typer.Option(DEFAULT_PORT, "--port", help="Default container port"),
    network: str = typer.Option(DEFAULT_NETWORK, "--network", help="Default docker network"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    """Build Traefik labels through interactive prompts"""
    from tlgen.commands.generate import GenerateCommand, build_defaults

    setup_logging(verbose)

    try:
        defaults = build_defaults(entrypoint, port, network)
        generate_cmd = GenerateCommand(console, defaults, output=output)
        generate_cmd.execute()

    except TLGenError as e:
        handle_tlgen_error(e)
    except KeyboardInterrupt:
        handle_cancelled()
    except Exception as e:
        handle_unexpected_error(e)


@app.command()
def version():
    """Display CLI version"""
    import importlib.metadata

    try:
        cli_version = importlib.metadata.version("tlgen")
    except importlib.metadata.PackageNotFoundError:
        from tlgen import __version__
        cli_version = __version__

    console.print(f"tlgen version: [green]{cli_version}[/green]")


if __name__ == "__main__":
    app()
