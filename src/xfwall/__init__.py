"""
xfwall - Backdrop list rotation for XFCE desktops.

Emulates the backdrop 'list' behaviour of pre-4.12 XFCE: cycle random
images from a list file across every monitor and workspace, or map
explicit images onto (monitor, workspace) pairs, through xfconf.
"""

__version__ = "0.1.0"

from .config import Config, XfconfConfig, RotationConfig, LoggingConfig
from .xfconf import XfconfClient, XfconfTransport
from .topology import (
    Slot,
    SingleWorkspace,
    PerWorkspace,
    TopologySnapshot,
    TopologyResolver,
)
from .image_list import load_image_list
from .selector import ImageSelector
from .assigner import assign, split_tokens, rotate_from_pool
from .backdrop import BackdropStore
from .rotation import RotationOrchestrator, RotationReport, SlotWrite, SlotFailure
from .session import DesktopSession

__all__ = [
    "Config",
    "XfconfConfig",
    "RotationConfig",
    "LoggingConfig",
    "XfconfClient",
    "XfconfTransport",
    "Slot",
    "SingleWorkspace",
    "PerWorkspace",
    "TopologySnapshot",
    "TopologyResolver",
    "load_image_list",
    "ImageSelector",
    "assign",
    "split_tokens",
    "rotate_from_pool",
    "BackdropStore",
    "RotationOrchestrator",
    "RotationReport",
    "SlotWrite",
    "SlotFailure",
    "DesktopSession",
]
