"""Persist generated labels"""

import logging
from pathlib import Path
from typing import List, Union

from tlgen.core.labels import render_block
from tlgen.exceptions import LabelWriteError

logger = logging.getLogger(__name__)


def write_labels(lines: List[str], path: Union[str, Path]) -> Path:
    """Write the label block to a file, replacing existing content

    Args:
        lines: Output of generate_labels
        path: Target file

    Returns:
        Path that was written

    Raises:
        LabelWriteError: If the file cannot be written
    """
    target = Path(path)
    try:
        target.write_text(render_block(lines), encoding="utf-8")
    except (OSError, ValueError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise LabelWriteError(str(target), reason) from e

    logger.info("Wrote %d labels to %s", len(lines), target)
    return target
