"""
Mapping of images onto (monitor, workspace) slots.

Explicit assignment pairs caller tokens with slots by position: token i
always targets slot i in canonical order. An empty token leaves its slot
untouched but still uses up the position, so ':::xyz.jpg' sets only the
fourth slot.

Pool rotation samples an image independently for every active slot.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .exceptions import NoImageError
from .selector import ImageSelector
from .topology import Slot, TopologySnapshot

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = ":"


def split_tokens(text: str) -> List[str]:
    """Split a colon-delimited image sequence, keeping empty tokens."""
    return text.split(TOKEN_SEPARATOR)


def join_tokens(parts: Sequence[str]) -> str:
    """Join several colon-delimited arguments into one sequence."""
    return TOKEN_SEPARATOR.join(parts)


def assign(tokens: Sequence[str], slots: Sequence[Slot], repeat: bool = False) -> List[Tuple[Slot, str]]:
    """
    Pair image tokens with slots by position.

    Args:
        tokens: Image tokens; empty strings mark untouched slots
        slots: Slots in canonical order
        repeat: Cycle the tokens so that every slot gets one

    Returns:
        (slot, image) pairs with non-empty images, in slot order
    """
    if repeat and tokens:
        source = itertools.cycle(tokens)
    else:
        source = iter(tokens)

    return [(slot, token) for token, slot in zip(source, slots) if token]


@dataclass(frozen=True)
class SlotPick:
    """Sampled image for one slot, or the reason none could be picked."""
    slot: Slot
    image: Optional[str] = None
    error: Optional[NoImageError] = None


def rotate_from_pool(
    snapshot: TopologySnapshot,
    pool: Sequence[str],
    selector: ImageSelector,
) -> Iterator[SlotPick]:
    """
    Sample an image for every active slot, independently.

    Images may repeat across slots. Picks are produced lazily in
    canonical slot order; a selector failure becomes a failed pick
    rather than an exception.
    """
    for slot in snapshot.active_slots():
        try:
            image = selector.pick(pool)
        except NoImageError as e:
            logger.debug(f"No image for {slot}: {e}")
            yield SlotPick(slot=slot, error=e)
        else:
            yield SlotPick(slot=slot, image=image)
