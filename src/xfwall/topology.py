"""
Monitor and workspace topology discovery from the xfce4-desktop channel.

Monitors are found by scanning the flat property namespace for
color-style keys; the workspace count comes from the last-image keys of
the first monitor; the backdrop mode from the single-workspace properties.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple, Union

from .exceptions import NoTopologyError, SchemaError, TransportError
from .xfconf import XfconfClient

logger = logging.getLogger(__name__)

BACKDROP_PREFIX = "/backdrop/screen0"
SINGLE_WORKSPACE_MODE = "/backdrop/single-workspace-mode"
SINGLE_WORKSPACE_NUMBER = "/backdrop/single-workspace-number"

_MONITOR_PATTERN = re.compile(
    re.escape(BACKDROP_PREFIX) + r"/monitor([^/]+)/workspace([^/]+)/color-style$"
)


class Slot(NamedTuple):
    """A (monitor, workspace) pair owning one backdrop image."""
    monitor: str
    workspace: int

    def __str__(self) -> str:
        return f"monitor{self.monitor}, workspace-{self.workspace}"


@dataclass(frozen=True)
class SingleWorkspace:
    """Rotation targets only one workspace index on every monitor."""
    index: int = 0


@dataclass(frozen=True)
class PerWorkspace:
    """Rotation targets every workspace independently."""


BackdropMode = Union[SingleWorkspace, PerWorkspace]


@dataclass(frozen=True)
class TopologySnapshot:
    """
    Point-in-time record of discovered monitors, workspaces and backdrop mode.

    Never mutated; TopologyResolver.refresh() produces a new snapshot.
    """
    monitors: Tuple[str, ...]
    workspace_count: int
    mode: BackdropMode = SingleWorkspace(0)

    @property
    def single_mode(self) -> bool:
        return isinstance(self.mode, SingleWorkspace)

    def slots(self) -> List[Slot]:
        """All slots in canonical order: monitor-major, workspace-minor."""
        return [
            Slot(monitor, workspace)
            for monitor in self.monitors
            for workspace in range(self.workspace_count)
        ]

    def active_workspaces(self) -> List[int]:
        """Workspace indices targeted by pool rotation under the current mode."""
        if isinstance(self.mode, SingleWorkspace):
            return [self.mode.index]
        return list(range(self.workspace_count))

    def active_slots(self) -> List[Slot]:
        """Slots targeted by pool rotation, in canonical order."""
        workspaces = self.active_workspaces()
        return [Slot(monitor, workspace) for monitor in self.monitors for workspace in workspaces]


def extract_monitors(property_keys: List[str]) -> Tuple[str, ...]:
    """
    Extract monitor identifiers from color-style property paths.

    Returns:
        Sorted, deduplicated monitor identifiers
    """
    found = set()
    for key in property_keys:
        match = _MONITOR_PATTERN.search(key)
        if match:
            found.add(match.group(1))
    return tuple(sorted(found))


def count_workspaces(property_keys: List[str], monitor: str) -> int:
    """Count distinct workspace indices with a last-image property for a monitor."""
    pattern = re.compile(
        re.escape(f"{BACKDROP_PREFIX}/monitor{monitor}/workspace") + r"(\d+)/last-image$"
    )
    indices = set()
    for key in property_keys:
        match = pattern.search(key)
        if match:
            indices.add(int(match.group(1)))
    return len(indices)


class TopologyResolver:
    """
    Resolve TopologySnapshot values from the configuration service.

    Usage:
        resolver = TopologyResolver(client)
        snapshot = resolver.resolve()
    """

    def __init__(self, client: XfconfClient) -> None:
        self.client = client

    def resolve(self) -> TopologySnapshot:
        """
        Discover monitors, workspace count and backdrop mode.

        Raises:
            NoTopologyError: If no monitor is found
            TransportError: If the property listing fails
        """
        keys = self.client.list_properties(BACKDROP_PREFIX)
        monitors = extract_monitors(keys)

        if not monitors:
            raise NoTopologyError(
                "Could not get XFCE desktop and workspace configuration: "
                f"no monitor/workspace properties under {BACKDROP_PREFIX} "
                f"on channel {self.client.channel}"
            )

        # Every monitor is assumed to expose the same number of workspaces
        workspace_count = count_workspaces(keys, monitors[0])
        mode = self._resolve_mode()

        snapshot = TopologySnapshot(
            monitors=monitors,
            workspace_count=workspace_count,
            mode=mode,
        )
        logger.info(
            f"Resolved {len(monitors)} monitors {list(monitors)}, "
            f"{workspace_count} workspaces, mode {mode}"
        )
        return snapshot

    def refresh(self) -> TopologySnapshot:
        """Resolve again, returning a new snapshot."""
        return self.resolve()

    def _resolve_mode(self) -> BackdropMode:
        """Read single-workspace mode; both properties are optional."""
        try:
            single = self.client.get_bool(SINGLE_WORKSPACE_MODE)
            number = self.client.get_int(SINGLE_WORKSPACE_NUMBER)
        except (SchemaError, TransportError) as e:
            logger.debug(f"Single workspace properties unavailable ({e}), using workspace 0")
            return SingleWorkspace(0)

        if not single:
            return PerWorkspace()
        return SingleWorkspace(max(number, 0))
