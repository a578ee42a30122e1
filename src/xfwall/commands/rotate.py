"""Rotation commands.

Pool rotation from the saved list file and explicit image assignment.
"""

import logging

from ..assigner import split_tokens
from ..rotation import RotationReport
from ..session import DesktopSession

logger = logging.getLogger(__name__)


def print_report(report: RotationReport) -> None:
    """Print every write and failure of a rotation run."""
    for write in report.writes:
        print(f"{write.slot}: {write.image}")
    for failure in report.failures:
        print(f"Failed {failure}")


def rotate_backdrops(session: DesktopSession) -> RotationReport:
    """
    Cycle backdrops from the saved list file.

    In single mode only the selected workspace of each monitor changes;
    otherwise every workspace does.
    """
    report = session.orchestrator().rotate_from_saved(session.snapshot)
    print_report(report)
    return report


def set_images(session: DesktopSession, images: str, repeat: bool = False) -> RotationReport:
    """
    Map ':'-separated image files onto (monitor, workspace) slots.

    Slots are ordered as shown by the query command. An empty entry
    leaves its slot untouched; with repeat the list wraps around until
    every slot has an image.
    """
    tokens = split_tokens(images)
    if not any(tokens):
        logger.warning("No image files given, nothing to set")

    report = session.orchestrator().apply_explicit(session.snapshot, tokens, repeat=repeat)
    print_report(report)
    return report
