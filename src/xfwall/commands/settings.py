"""Settings commands: saved list file and backdrop mode."""

import logging
from pathlib import Path
from typing import Optional

from ..exceptions import ImageListError, ListValidationError, NoImageError, XfwallError
from ..image_list import load_image_list
from ..rotation import RotationReport
from ..session import DesktopSession
from .rotate import rotate_backdrops

logger = logging.getLogger(__name__)


def _print_current_list(session: DesktopSession) -> None:
    try:
        print(f"Current list file is : {session.store.get_list_path()}")
    except XfwallError as e:
        print(f"Could not get list, {e}")


def set_list(session: DesktopSession, list_file: str, rotate: bool = False) -> Optional[RotationReport]:
    """
    Save a new list file after checking it names at least one existing image.

    Args:
        session: Desktop session
        list_file: Path to the list file
        rotate: Cycle backdrops from the new list afterwards

    Raises:
        ImageListError: If the list file cannot be read
        ListValidationError: If no listed image exists
    """
    _print_current_list(session)

    list_path = Path(list_file).expanduser()
    if not list_path.is_file():
        raise ImageListError(f"List file not found: {list_path}")

    candidates = load_image_list(list_path)
    try:
        found = session.selector.pick(candidates)
    except NoImageError as e:
        raise ListValidationError(
            f"List file {list_path} does not name any existing image file"
        ) from e
    logger.debug(f"List file {list_path} validated, found {found}")

    saved = str(list_path.resolve())
    print(f"Setting list = {saved}")
    session.store.set_list_path(saved)

    if rotate:
        return rotate_backdrops(session)
    return None


def set_backdrop_mode(
    session: DesktopSession,
    single: bool,
    workspace: Optional[int] = None,
    rotate: bool = False,
) -> Optional[RotationReport]:
    """
    Switch between one backdrop for all workspaces and one per workspace.

    A workspace index outside the discovered range is reported and left
    unchanged; the mode flag is still written.

    Args:
        session: Desktop session
        single: True for single-workspace mode
        workspace: Workspace whose backdrop is used in single mode
        rotate: Cycle backdrops under the new mode afterwards
    """
    workspace_count = session.snapshot.workspace_count
    if workspace is not None and not 0 <= workspace < workspace_count:
        print(
            f"Workspace index ({workspace}) outside valid range "
            f"[0..{workspace_count}). Not changing it."
        )
        workspace = None

    session.store.set_backdrop_mode(single, workspace)

    if rotate:
        session.refresh()
        return rotate_backdrops(session)
    return None
