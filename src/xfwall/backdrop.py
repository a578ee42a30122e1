"""
Backdrop property access on the xfce4-desktop channel.

Handles the named backdrop properties: per-slot images, the saved list
file and the single-workspace mode.
"""

import logging
from typing import Optional

from .topology import (
    BACKDROP_PREFIX,
    SINGLE_WORKSPACE_MODE,
    SINGLE_WORKSPACE_NUMBER,
    Slot,
)
from .xfconf import XfconfClient

# Legacy single-property list setting from pre-4.12 XFCE
LIST_PATH_PROPERTY = f"{BACKDROP_PREFIX}/monitor0/image-path"


def image_property(slot: Slot) -> str:
    """Property path holding the backdrop image of a slot."""
    return f"{BACKDROP_PREFIX}/monitor{slot.monitor}/workspace{slot.workspace}/last-image"


class BackdropStore:
    """
    Reads and writes backdrop settings through an XfconfClient.

    Responsibilities:
    - Per-slot backdrop image
    - Saved list file path
    - Single/per-workspace backdrop mode
    """

    def __init__(self, client: XfconfClient) -> None:
        self.client = client
        self.logger = logging.getLogger(__name__)

    def get_image(self, slot: Slot) -> str:
        """Current backdrop image of a slot."""
        return self.client.get_string(image_property(slot))

    def set_image(self, slot: Slot, image: str) -> None:
        """
        Set the backdrop image of a slot.

        Raises:
            TransportError: If the write fails
        """
        self.client.set(image_property(slot), image)
        self.logger.info(f"Set {slot}: {image}")

    def get_list_path(self) -> str:
        """Saved list file path."""
        return self.client.get_string(LIST_PATH_PROPERTY)

    def set_list_path(self, list_path: str) -> None:
        """Save the list file path."""
        self.client.set(LIST_PATH_PROPERTY, list_path)
        self.logger.info(f"Saved list file: {list_path}")

    def set_backdrop_mode(self, single: bool, workspace: Optional[int] = None) -> None:
        """
        Write the single-workspace mode flag, and the workspace number if given.

        The resolved topology is not updated; callers refresh it.
        """
        self.client.set(SINGLE_WORKSPACE_MODE, single)
        if workspace is not None:
            self.client.set(SINGLE_WORKSPACE_NUMBER, workspace)
        self.logger.info(
            f"Backdrop mode set to {'single' if single else 'separate'}"
            + (f", workspace {workspace}" if workspace is not None else "")
        )
