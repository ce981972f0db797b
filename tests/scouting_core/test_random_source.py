"""
Tests for the RandomSource draw helpers.

Draws are steered with ScriptedRandomSource so each helper's arithmetic
can be checked exactly; SeededRandomSource is checked for replayability.
"""

import math

import pytest

from mocks.scripted_random_source import ScriptedRandomSource
from scouting_core.random_source import RandomSource, SeededRandomSource


class TestNextInt:
    """Tests for RandomSource.next_int."""

    def test_zero_draw_returns_minimum(self):
        """Test that a draw of 0.0 returns the lower bound."""
        rng = ScriptedRandomSource(values=[0.0])
        assert rng.next_int(3, 7) == 3

    def test_high_draw_returns_maximum(self):
        """Test that the range is inclusive of the upper bound."""
        rng = ScriptedRandomSource(values=[0.999])
        assert rng.next_int(3, 7) == 7

    def test_midpoint_draw(self):
        """Test that 0.5 on [1, 4] floors to 3."""
        rng = ScriptedRandomSource(values=[0.5])
        assert rng.next_int(1, 4) == 3

    def test_equal_bounds(self):
        """Test that min == max always returns that value."""
        rng = ScriptedRandomSource(values=[0.73])
        assert rng.next_int(5, 5) == 5

    def test_inverted_bounds_raise(self):
        """Test that min > max raises ValueError."""
        rng = ScriptedRandomSource()
        with pytest.raises(ValueError, match="must be <="):
            rng.next_int(6, 2)


class TestPick:
    """Tests for pick and pick_weighted."""

    def test_pick_uses_index_draw(self):
        """Test that pick indexes with next_int over the sequence."""
        rng = ScriptedRandomSource(values=[0.0, 0.99])
        items = ["a", "b", "c"]
        assert rng.pick(items) == "a"
        assert rng.pick(items) == "c"

    def test_pick_empty_raises(self):
        """Test that picking from an empty sequence raises."""
        with pytest.raises(ValueError, match="must not be empty"):
            ScriptedRandomSource().pick([])

    def test_weighted_zero_draw_returns_first(self):
        """Test that r = 0 selects the first item."""
        rng = ScriptedRandomSource(values=[0.0])
        assert rng.pick_weighted([("x", 1.0), ("y", 3.0)]) == "x"

    def test_weighted_threshold(self):
        """Test that the threshold walks weights in order."""
        # total 4, threshold 2.0: x consumes 1.0, y reaches 0 at 3.0
        rng = ScriptedRandomSource(values=[0.5])
        assert rng.pick_weighted([("x", 1.0), ("y", 3.0)]) == "y"

    def test_weighted_skips_zero_weight_items(self):
        """Test that zero-weight items are never chosen past r = 0."""
        rng = ScriptedRandomSource(values=[0.3])
        assert rng.pick_weighted([("x", 0.0), ("y", 2.0)]) == "y"

    def test_weighted_zero_draw_skips_leading_zero_weight(self):
        """Test that r = 0 never selects a zero-weight first item."""
        rng = ScriptedRandomSource(values=[0.0, 0.0])
        assert rng.pick_weighted([("x", 0.0), ("y", 2.0)]) == "y"
        assert rng.pick_weighted([("x", 0.0), ("y", 2.0), ("z", 0.0)]) == "y"

    def test_weighted_high_draw_skips_trailing_zero_weight(self):
        """Test that a draw near 1 lands on the last weighted item."""
        rng = ScriptedRandomSource(values=[0.99])
        assert rng.pick_weighted([("x", 1.0), ("y", 0.0)]) == "x"

    def test_weighted_negative_weight_raises(self):
        """Test that a negative weight raises ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            ScriptedRandomSource().pick_weighted([("x", -1.0)])

    def test_weighted_zero_total_raises(self):
        """Test that all-zero weights raise ValueError."""
        with pytest.raises(ValueError, match="total weight"):
            ScriptedRandomSource().pick_weighted([("x", 0.0), ("y", 0.0)])


class TestShuffleAndChance:
    """Tests for shuffle, chance and gaussian."""

    def test_shuffle_does_not_mutate_input(self):
        """Test that shuffle returns a new list."""
        items = [1, 2, 3, 4]
        result = ScriptedRandomSource(values=[0.0, 0.0, 0.0]).shuffle(items)
        assert items == [1, 2, 3, 4]
        assert sorted(result) == items

    def test_shuffle_with_zero_draws(self):
        """Test the Fisher-Yates order when every swap targets index 0."""
        # i=3 swap(3,0): [4,2,3,1]; i=2 swap(2,0): [3,2,4,1]; i=1 swap(1,0): [2,3,4,1]
        result = ScriptedRandomSource(values=[0.0, 0.0, 0.0]).shuffle([1, 2, 3, 4])
        assert result == [2, 3, 4, 1]

    def test_shuffle_consumes_len_minus_one_draws(self):
        """Test that shuffling n items takes n - 1 draws."""
        rng = ScriptedRandomSource()
        rng.shuffle(list(range(6)))
        assert rng.uniform_draws == 5

    def test_chance_is_strict_less_than(self):
        """Test that chance(p) is True only when r < p."""
        rng = ScriptedRandomSource(values=[0.25, 0.25])
        assert rng.chance(0.3) is True
        assert rng.chance(0.25) is False

    def test_chance_out_of_range_raises(self):
        """Test that a probability outside [0, 1] raises."""
        with pytest.raises(ValueError, match="probability"):
            ScriptedRandomSource().chance(1.5)

    def test_box_muller_gaussian(self):
        """Test the base-class gaussian against the Box-Muller formula."""

        class FixedSource(RandomSource):
            def __init__(self, values):
                self.values = list(values)

            def random(self):
                return self.values.pop(0)

        rng = FixedSource([0.0, 0.5, 0.25])
        # u1 = 0.0 is redrawn; u1 = 0.5, u2 = 0.25 gives cos(pi/2) = 0
        value = rng.gaussian(10.0, 2.0)
        expected = 10.0 + math.sqrt(-2.0 * math.log(0.5)) * math.cos(2.0 * math.pi * 0.25) * 2.0
        assert value == pytest.approx(expected)


class TestSeededRandomSource:
    """Tests for SeededRandomSource."""

    def test_same_seed_same_stream(self):
        """Test that equal seeds produce identical draws."""
        a = SeededRandomSource(seed=7)
        b = SeededRandomSource(seed=7)
        assert [a.next_int(0, 100) for _ in range(20)] == [b.next_int(0, 100) for _ in range(20)]

    def test_reseed_restarts_stream(self):
        """Test that reseed replays the stream from the start."""
        rng = SeededRandomSource(seed=3)
        first = [rng.random() for _ in range(5)]
        rng.reseed(3)
        assert [rng.random() for _ in range(5)] == first
        assert rng.seed == 3

    def test_draws_in_unit_interval(self, rng):
        """Test that random() stays in [0, 1)."""
        for _ in range(200):
            value = rng.random()
            assert 0.0 <= value < 1.0
