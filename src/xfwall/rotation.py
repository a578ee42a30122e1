"""
Rotation orchestration.

Runs list loading, image selection and slot writes for one rotation,
recording per-slot failures without stopping at the first one.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Sequence, Union

from .assigner import assign, rotate_from_pool
from .backdrop import BackdropStore
from .exceptions import TransportError, XfwallError
from .image_list import load_image_list
from .selector import ImageSelector
from .topology import Slot, TopologySnapshot

logger = logging.getLogger(__name__)


class RotationPhase(Enum):
    """Phases of a single rotation run."""
    IDLE = "idle"
    LOADING_POOL = "loading-pool"
    SELECTING = "selecting"
    WRITING = "writing"
    DONE = "done"


@dataclass(frozen=True)
class SlotWrite:
    """A backdrop image written to a slot."""
    slot: Slot
    image: str


@dataclass(frozen=True)
class SlotFailure:
    """A slot that could not be updated, with the underlying cause."""
    slot: Slot
    error: XfwallError

    def __str__(self) -> str:
        return f"{self.slot}: {self.error}"


@dataclass
class RotationReport:
    """Outcome of one run: every successful write and every failure."""
    writes: List[SlotWrite] = field(default_factory=list)
    failures: List[SlotFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True only when no slot failed."""
        return not self.failures

    def __len__(self) -> int:
        return len(self.writes) + len(self.failures)


class RotationOrchestrator:
    """
    Sequences list loading, selection and writes for backdrop rotation.

    Usage:
        orchestrator = RotationOrchestrator(store, selector)
        report = orchestrator.rotate(snapshot, "~/backdrops.list")
    """

    def __init__(self, store: BackdropStore, selector: ImageSelector) -> None:
        self.store = store
        self.selector = selector
        self.phase = RotationPhase.IDLE

    def _enter(self, phase: RotationPhase) -> None:
        logger.debug(f"Rotation phase: {self.phase.value} -> {phase.value}")
        self.phase = phase

    def rotate(self, snapshot: TopologySnapshot, list_path: Union[str, Path]) -> RotationReport:
        """
        Rotate backdrops of all active slots from a list file.

        Raises:
            ImageListError: If the list file cannot be read
        """
        self.phase = RotationPhase.IDLE
        report = RotationReport()

        self._enter(RotationPhase.LOADING_POOL)
        pool = load_image_list(list_path)

        self._enter(RotationPhase.SELECTING)
        for pick in rotate_from_pool(snapshot, pool, self.selector):
            if pick.error is not None:
                logger.warning(f"Failed {pick.slot}: {pick.error}")
                report.failures.append(SlotFailure(pick.slot, pick.error))
                continue

            self._enter(RotationPhase.WRITING)
            self._write(report, pick.slot, pick.image)
            self._enter(RotationPhase.SELECTING)

        self._enter(RotationPhase.DONE)
        logger.info(f"Rotation finished: {len(report.writes)} written, {len(report.failures)} failed")
        return report

    def rotate_from_saved(self, snapshot: TopologySnapshot) -> RotationReport:
        """
        Rotate using the list file saved in the desktop configuration.

        Raises:
            PropertyNotFoundError: If no list file has been saved
            TransportError: If the list path cannot be read
            ImageListError: If the list file cannot be read
        """
        return self.rotate(snapshot, self.store.get_list_path())

    def apply_explicit(
        self,
        snapshot: TopologySnapshot,
        tokens: Sequence[str],
        repeat: bool = False,
    ) -> RotationReport:
        """Write explicitly given images to slots by canonical position."""
        report = RotationReport()
        for slot, image in assign(tokens, snapshot.slots(), repeat=repeat):
            self._write(report, slot, image)
        return report

    def _write(self, report: RotationReport, slot: Slot, image: str) -> None:
        try:
            self.store.set_image(slot, image)
        except TransportError as e:
            logger.warning(f"Failed {slot}: {e}")
            report.failures.append(SlotFailure(slot, e))
        else:
            report.writes.append(SlotWrite(slot, image))
