"""Unit tests for label file writing"""

import pytest

from tlgen.exceptions import LabelWriteError
from tlgen.writer import write_labels

LINES = [
    '      - "traefik.enable=true"',
    '      - "traefik.docker.network=hasanNet"',
]


def test_writes_block(tmp_path):
    """Test header and lines are written verbatim"""
    target = tmp_path / "labels.yml"

    path = write_labels(LINES, target)

    assert path == target
    assert target.read_text(encoding="utf-8") == "    labels:\n" + "\n".join(LINES)


def test_overwrites_existing_file(tmp_path):
    """Test existing content is replaced"""
    target = tmp_path / "labels.yml"
    target.write_text("old content\nmore\n")

    write_labels(LINES, str(target))

    assert "old content" not in target.read_text()


def test_missing_directory(tmp_path):
    """Test OS errors become LabelWriteError"""
    target = tmp_path / "missing" / "labels.yml"

    with pytest.raises(LabelWriteError) as exc_info:
        write_labels(LINES, target)

    assert exc_info.value.path == str(target)
    assert exc_info.value.reason
    assert isinstance(exc_info.value.__cause__, OSError)


def test_directory_as_target(tmp_path):
    """Test writing onto a directory fails cleanly"""
    with pytest.raises(LabelWriteError):
        write_labels(LINES, tmp_path)


def test_rejected_file_name(tmp_path):
    """Test names the OS layer refuses (embedded NUL) become LabelWriteError"""
    target = tmp_path / "a\x00b.yml"

    with pytest.raises(LabelWriteError) as exc_info:
        write_labels(LINES, target)

    assert exc_info.value.reason
    assert isinstance(exc_info.value.__cause__, ValueError)
