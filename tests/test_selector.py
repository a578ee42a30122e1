"""Tests for random image selection with existence retry."""

import random

import pytest

from xfwall.exceptions import NoImageError
from xfwall.selector import ImageSelector

from conftest import ScriptedRandom


class TestImageSelector:
    """Test ImageSelector.pick()."""

    def test_returns_existing_member(self, image_files):
        selector = ImageSelector(rng=random.Random(7))

        picked = selector.pick(image_files + ["/nonexistent/a.jpg"])

        assert picked in image_files

    def test_empty_pool_fails_immediately(self):
        probes = []
        selector = ImageSelector(exists=lambda p: probes.append(p) or True)

        with pytest.raises(NoImageError):
            selector.pick([])

        assert probes == []

    def test_all_missing_probes_each_distinct_candidate_once(self):
        probes = []
        selector = ImageSelector(
            rng=random.Random(3),
            exists=lambda p: probes.append(p) or False,
        )

        with pytest.raises(NoImageError):
            selector.pick(["c.jpg", "a.jpg", "b.jpg", "a.jpg", ""])

        assert sorted(probes) == ["", "a.jpg", "b.jpg", "c.jpg"]

    def test_missing_candidate_removed_before_redraw(self):
        # Sorted pool: ["a.jpg", "b.jpg", "c.jpg"]; draw b (missing), then c
        rng = ScriptedRandom([1, 1])
        selector = ImageSelector(rng=rng, exists=lambda p: p != "b.jpg")

        picked = selector.pick(["c.jpg", "b.jpg", "a.jpg"])

        assert picked == "c.jpg"
        assert rng.calls == [3, 2]

    def test_duplicates_collapsed_before_draw(self):
        rng = ScriptedRandom([0])
        selector = ImageSelector(rng=rng, exists=lambda p: True)

        assert selector.pick(["x.jpg", "x.jpg", "x.jpg"]) == "x.jpg"
        assert rng.calls == [1]

    def test_blank_candidates_are_discarded(self):
        rng = ScriptedRandom([0, 0])
        selector = ImageSelector(rng=rng, exists=lambda p: p != "")

        assert selector.pick(["", "/tmp/x.jpg"]) == "/tmp/x.jpg"

    def test_seeded_selectors_agree(self, image_files):
        first = ImageSelector.seeded(1234).pick(image_files)
        second = ImageSelector.seeded(1234).pick(image_files)

        assert first == second
