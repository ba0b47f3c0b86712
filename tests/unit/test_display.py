"""Unit tests for terminal output"""

import io

from rich.console import Console

from tlgen.core.labels import generate_labels, render_block
from tlgen.display import LabelReporter
from tlgen.exceptions import LabelWriteError
from tlgen.models.config import LabelConfig


def make_reporter(width: int = 40):
    console = Console(file=io.StringIO(), width=width, color_system=None)
    return LabelReporter(console), console


def test_labels_not_wrapped():
    """Test long label lines survive a narrow terminal intact"""
    reporter, console = make_reporter(width=40)
    config = LabelConfig(
        namespace="api",
        network="hasanNet",
        rule="Host(`very-long-subdomain.example.com`) && PathPrefix(`/api/v1`)",
        port="8080",
        entrypoints="websecure",
    )
    lines = generate_labels(config)

    reporter.render_labels(render_block(lines))

    out = console.file.getvalue()
    for line in lines:
        assert line in out


def test_preview_optional_rows():
    """Test service and middlewares rows only when set"""
    reporter, console = make_reporter(width=200)
    config = LabelConfig(
        namespace="api",
        network="hasanNet",
        rule="Host(`a.com`)",
        port="80",
        entrypoints="web",
    )

    reporter.render_preview(config)

    out = console.file.getvalue()
    assert "Namespace" in out
    assert "Service" not in out
    assert "Middlewares" not in out


def test_markup_in_values_is_escaped():
    """Test user values with brackets are printed literally"""
    reporter, console = make_reporter(width=200)

    reporter.success("Using service: [bold]svc[/bold]")

    assert "[bold]svc[/bold]" in console.file.getvalue()


def test_save_failed_message():
    """Test write errors show the reason"""
    reporter, console = make_reporter(width=200)

    reporter.render_save_failed(LabelWriteError("/nope/labels.yml", "No such file or directory"))

    out = console.file.getvalue()
    assert "Could not save file" in out
    assert "No such file or directory" in out
