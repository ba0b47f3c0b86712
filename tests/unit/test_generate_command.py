"""Unit tests for the generate command"""

import io

import pytest
from rich.console import Console

from tlgen.commands.generate import GenerateCommand, build_defaults
from tlgen.exceptions import InvalidDefaultError

DEFAULT_RUN = ["api", "api.example.com", "", "", "", "", "", "", ""]


def answers(*lines: str) -> io.StringIO:
    return io.StringIO("".join(f"{line}\n" for line in lines))


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestBuildDefaults:
    """Test CLI override validation"""

    def test_valid_overrides(self):
        """Test overrides land in WizardDefaults"""
        defaults = build_defaults("websecure", "443", "proxy")

        assert defaults.entrypoint == "websecure"
        assert defaults.port == "443"
        assert defaults.network == "proxy"

    @pytest.mark.parametrize("port", ["0", "65536", "abc", ""])
    def test_invalid_port(self, port):
        """Test a bad port override is rejected"""
        with pytest.raises(InvalidDefaultError) as exc_info:
            build_defaults("web", port, "hasanNet")

        assert exc_info.value.field == "port"
        assert exc_info.value.value == port

    def test_empty_network(self):
        """Test an empty network override is rejected"""
        with pytest.raises(InvalidDefaultError) as exc_info:
            build_defaults("web", "80", "")

        assert exc_info.value.field == "network"


class TestGenerateCommand:
    """Test generate command flow"""

    def test_returns_labels_without_saving(self, console, tmp_path, monkeypatch):
        """Test declining the save question writes nothing"""
        monkeypatch.chdir(tmp_path)
        cmd = GenerateCommand(console, stream=answers(*DEFAULT_RUN, "n"))

        lines = cmd.execute()

        assert len(lines) == 5
        assert list(tmp_path.iterdir()) == []
        assert '      - "traefik.enable=true"' in console.file.getvalue()

    def test_save_default_file_name(self, console, tmp_path, monkeypatch):
        """Test blank file name saves to traefik-labels.yml"""
        monkeypatch.chdir(tmp_path)
        cmd = GenerateCommand(console, stream=answers(*DEFAULT_RUN, "y", ""))

        lines = cmd.execute()

        saved = tmp_path / "traefik-labels.yml"
        assert saved.read_text().splitlines() == ["    labels:"] + lines

    def test_save_custom_file_name(self, console, tmp_path):
        """Test a typed file name is used"""
        target = tmp_path / "custom.yml"
        cmd = GenerateCommand(console, stream=answers(*DEFAULT_RUN, "y", str(target)))

        cmd.execute()

        assert target.exists()

    def test_output_option_skips_questions(self, console, tmp_path):
        """Test a preset output path is written without asking"""
        target = tmp_path / "labels.yml"
        cmd = GenerateCommand(console, output=target, stream=answers(*DEFAULT_RUN))

        cmd.execute()

        assert target.read_text().startswith("    labels:\n")
        assert "Save output to file" not in console.file.getvalue()

    def test_write_failure_is_reported(self, console, tmp_path):
        """Test a failed write is reported and does not raise"""
        target = tmp_path / "missing" / "labels.yml"
        cmd = GenerateCommand(console, output=target, stream=answers(*DEFAULT_RUN))

        lines = cmd.execute()

        out = console.file.getvalue()
        assert len(lines) == 5
        assert "Could not save file" in out
        assert "Done" in out
