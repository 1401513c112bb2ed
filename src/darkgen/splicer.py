"""Replace the auto-generated region of the target stylesheet."""
from __future__ import annotations

import logging
import re
from pathlib import Path

from darkgen.errors import FileError

logger = logging.getLogger(__name__)

# From the line holding the begin marker through the line holding the end marker.
REGION_RE = re.compile(r".*begin auto-generated[\s\S]+end auto-generated.*")


def splice(text: str, generated: str) -> tuple[str, bool]:
    """Replace the marker region of *text* with *generated*.

    Returns the new text and whether a region was found. *generated* is
    inserted literally.
    """
    result, count = REGION_RE.subn(lambda _: generated, text, count=1)
    return result, count > 0


def splice_file(path: Path | str, generated: str) -> bool:
    """Splice *generated* into the file at *path* in place.

    The file is only rewritten when it contains both markers. Returns whether
    it was rewritten.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise FileError(f"Cannot read {path}: {exc}", path=str(path), cause=exc) from exc

    result, found = splice(text, generated)
    if not found:
        logger.warning("No auto-generated markers in %s; file left unchanged", path)
        return False

    try:
        path.write_text(result, encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise FileError(f"Cannot write {path}: {exc}", path=str(path), cause=exc) from exc
    logger.info("Updated %s", path)
    return True
