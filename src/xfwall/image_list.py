"""
Image list file loading.

A list file is UTF-8 text with one image path per line. Lines starting
with '#' (after trimming) are comments; every other line, blank ones
included, is a candidate.
"""

import logging
from pathlib import Path
from typing import List, Union

from .exceptions import ImageListError

logger = logging.getLogger(__name__)


def parse_image_list(text: str) -> List[str]:
    """Strip comments from list-file text, keeping trimmed lines in order."""
    lines = [line.strip() for line in text.splitlines()]
    return [line for line in lines if not line.startswith("#")]


def load_image_list(path: Union[str, Path]) -> List[str]:
    """
    Load candidate image paths from a list file.

    Args:
        path: Path to the list file

    Returns:
        Candidate paths in file order (duplicates and blanks kept)

    Raises:
        ImageListError: If the file cannot be opened, read or decoded
    """
    list_path = Path(path).expanduser()
    try:
        text = list_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ImageListError(f"Cannot read image list {list_path}: {e}") from e

    candidates = parse_image_list(text)
    logger.debug(f"Loaded {len(candidates)} candidates from {list_path}")
    return candidates
