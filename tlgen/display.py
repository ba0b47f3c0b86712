"""UI/Display layer for the label generator"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tlgen.exceptions import LabelWriteError
from tlgen.models.config import LabelConfig


class LabelReporter:
    """All coloured terminal output goes through here"""

    def __init__(self, console: Optional[Console] = None):
        """Initialize reporter

        Args:
            console: Rich console instance
        """
        self.console = console or Console()

    def render_header(self) -> None:
        self.console.rule("[bold blue]Traefik Label Generator[/bold blue]")
        self.console.print("[dim]Builds Traefik labels for a docker-compose service[/dim]\n")

    def section(self, title: str, hint: Optional[str] = None) -> None:
        """Start a numbered wizard section"""
        self.console.print(f"\n[bold cyan]{title}[/bold cyan]")
        if hint:
            self.console.print(f"[dim]   {hint}[/dim]")

    def success(self, message: str) -> None:
        self.console.print(f"[green]   ✓ {escape(message)}[/green]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]   ✗ {escape(message)}[/red]")

    def info(self, message: str) -> None:
        self.console.print(f"[yellow]   ℹ {escape(message)}[/yellow]")

    def hint(self, message: str) -> None:
        self.console.print(f"\n[dim]   {escape(message)}[/dim]")

    def render_preview(self, config: LabelConfig) -> None:
        """Render collected configuration as a table"""
        table = Table(title="Configuration Preview")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Namespace", escape(config.namespace))
        table.add_row("Network", escape(config.network))
        table.add_row("Entrypoints", escape(config.entrypoints))
        table.add_row("Port", escape(config.port))
        table.add_row("Rule", escape(config.rule))

        if config.service_name:
            table.add_row("Service", escape(config.service_name))

        if config.middlewares:
            table.add_row("Middlewares", escape(config.middlewares))

        self.console.print()
        self.console.print(table)

    def render_labels(self, block: str) -> None:
        """Print the label block unwrapped so it can be copied as-is"""
        self.console.print()
        self.console.rule("[bold green]Traefik labels[/bold green]")
        self.console.print(block, markup=False, highlight=False, soft_wrap=True)
        self.console.rule(style="green")

    def render_saved(self, path: str) -> None:
        self.console.print(f"\n[green]✓[/green] Output saved to: {escape(path)}")

    def render_save_failed(self, error: LabelWriteError) -> None:
        """Report a failed save; generation itself already succeeded"""
        self.console.print(f"\n[red]✗ Could not save file:[/red] {escape(error.reason)}")
        if error.help_text:
            self.console.print(f"[dim]{escape(error.help_text)}[/dim]")

    def render_done(self) -> None:
        self.console.print("\n[bold blue]✓ Done![/bold blue]")
