"""Generate command implementation"""

import logging
from pathlib import Path
from typing import List, Optional, TextIO

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from tlgen.core.labels import generate_labels, render_block
from tlgen.display import LabelReporter
from tlgen.exceptions import InvalidDefaultError, LabelWriteError
from tlgen.models.config import PORT_HELP, WizardDefaults
from tlgen.prompter import Prompter
from tlgen.workflows.wizard import LabelWizard
from tlgen.writer import write_labels

logger = logging.getLogger(__name__)


def build_defaults(entrypoint: str, port: str, network: str) -> WizardDefaults:
    """Validate CLI overrides into WizardDefaults

    Raises:
        InvalidDefaultError: If an override fails validation
    """
    options = {"entrypoint": entrypoint, "port": port, "network": network}
    try:
        return WizardDefaults(**options)
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        expected = PORT_HELP if field == "port" else "non-empty value"
        raise InvalidDefaultError(field, options.get(field, ""), expected) from e


class GenerateCommand:
    """Run the wizard, show the labels and optionally save them"""

    def __init__(
        self,
        console: Console,
        defaults: Optional[WizardDefaults] = None,
        output: Optional[Path] = None,
        stream: Optional[TextIO] = None,
    ):
        """Initialize generate command

        Args:
            console: Rich console for output
            defaults: Answers for blank input
            output: Write here without asking when set
            stream: Optional input stream, stdin when omitted
        """
        self.console = console
        self.defaults = defaults or WizardDefaults()
        self.output = output
        self.prompter = Prompter(console, stream=stream)
        self.reporter = LabelReporter(console)

    def execute(self) -> List[str]:
        """Execute generate workflow

        Returns:
            Generated label lines
        """
        self.reporter.render_header()

        wizard = LabelWizard(self.prompter, self.reporter, self.defaults)
        config = wizard.run()
        self.reporter.render_preview(config)

        lines = generate_labels(config)
        logger.debug("Generated %d labels for namespace %s", len(lines), config.namespace)
        self.reporter.render_labels(render_block(lines))

        target = self._resolve_target()
        if target:
            self._save(lines, target)

        self.reporter.render_done()
        return lines

    def _resolve_target(self) -> Optional[str]:
        """Output path from the CLI, or asked interactively"""
        if self.output:
            return str(self.output)

        if not self.prompter.confirm("\n[cyan]💾 Save output to file?[/cyan]"):
            return None

        return self.prompter.ask(
            f"[cyan]   File name[/cyan] [dim](default: {escape(self.defaults.output_file)})[/dim]",
            default=self.defaults.output_file,
        )

    def _save(self, lines: List[str], target: str) -> None:
        """Write labels; a failure is reported, not raised"""
        try:
            path = write_labels(lines, target)
        except LabelWriteError as e:
            logger.debug("Save failed: %s", e.reason)
            self.reporter.render_save_failed(e)
            return

        self.reporter.render_saved(str(path))
