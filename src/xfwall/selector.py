"""
Random image selection with existence retry.
"""

import logging
import os
import random
from typing import Callable, Iterable, Optional

from .exceptions import NoImageError

logger = logging.getLogger(__name__)


class ImageSelector:
    """
    Pick an existing image uniformly at random from a candidate pool.

    Candidates that no longer exist are dropped for the rest of the call
    and the draw is repeated over what remains, so every distinct
    candidate is probed at most once per pick.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.exists = exists

    @classmethod
    def seeded(cls, seed: Optional[int]) -> 'ImageSelector':
        """Create a selector with a seeded random source."""
        return cls(rng=random.Random(seed))

    def pick(self, candidates: Iterable[str]) -> str:
        """
        Pick one existing image.

        Args:
            candidates: Candidate paths (duplicates allowed)

        Returns:
            A candidate confirmed to exist at call time

        Raises:
            NoImageError: If no candidate exists
        """
        remaining = sorted(set(candidates))

        while remaining:
            index = self.rng.randrange(len(remaining))
            candidate = remaining[index]
            if self.exists(candidate):
                return candidate
            logger.debug(f"Discarding missing image candidate: {candidate!r}")
            del remaining[index]

        raise NoImageError("Could not pick an image from the list")
