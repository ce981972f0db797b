"""
Deterministic random source consumed by the engine.

The engine never owns its randomness: every operation that needs a draw
takes a RandomSource argument, and callers route all draws for a tick
through one instance. Replaying the same seed with the same inputs then
reproduces identical output.

RandomSource implements every draw in terms of a single abstract
random() method returning a float in [0, 1). SeededRandomSource adapts
the standard library's random.Random to that interface.
"""

import math
import random
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """
    Abstract random source.

    Subclasses must implement:
    - random(): uniform float in [0, 1)

    All other draws are derived from random() so that any subclass
    (seeded, scripted for tests, replayed from a log) stays consistent.
    """

    @abstractmethod
    def random(self) -> float:
        """
        Draw a uniform float.

        Returns:
            Float in [0, 1)
        """
        pass

    def next_int(self, minimum: int, maximum: int) -> int:
        """
        Draw a uniform integer in the inclusive range [minimum, maximum].

        Raises:
            ValueError: If minimum > maximum
        """
        if minimum > maximum:
            raise ValueError(f"next_int: min ({minimum}) must be <= max ({maximum})")
        return minimum + int(math.floor(self.random() * (maximum - minimum + 1)))

    def next_float(self, minimum: float, maximum: float) -> float:
        """
        Draw a uniform float in [minimum, maximum).

        Raises:
            ValueError: If minimum > maximum
        """
        if minimum > maximum:
            raise ValueError(f"next_float: min ({minimum}) must be <= max ({maximum})")
        return minimum + self.random() * (maximum - minimum)

    def pick(self, items: Sequence[T]) -> T:
        """
        Pick one element uniformly.

        Raises:
            ValueError: If items is empty
        """
        if len(items) == 0:
            raise ValueError("pick: items must not be empty")
        return items[self.next_int(0, len(items) - 1)]

    def pick_weighted(self, items: Sequence[Tuple[T, float]]) -> T:
        """
        Pick one element with probability proportional to its weight.

        Args:
            items: Sequence of (item, weight) pairs, weights non-negative

        Raises:
            ValueError: If items is empty, a weight is negative,
                        or the total weight is not positive
        """
        if len(items) == 0:
            raise ValueError("pick_weighted: items must not be empty")

        total_weight = 0.0
        for _, weight in items:
            if weight < 0:
                raise ValueError(f"pick_weighted: weight must be non-negative, got {weight}")
            total_weight += weight

        if total_weight <= 0:
            raise ValueError("pick_weighted: total weight must be positive")

        threshold = self.random() * total_weight
        last_eligible = None
        for item, weight in items:
            # Zero-weight items are never picked
            if weight == 0:
                continue
            last_eligible = item
            threshold -= weight
            if threshold <= 0:
                return item

        # Floating-point remainder falls through to the last weighted item
        return last_eligible

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """
        Return a shuffled copy of items (Fisher-Yates). The input is not mutated.
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.next_int(0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def gaussian(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        """Draw from a normal distribution using the Box-Muller transform."""
        u1 = self.random()
        while u1 == 0.0:
            u1 = self.random()
        u2 = self.random()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return mean + z * stddev

    def chance(self, probability: float) -> bool:
        """
        Return True with the given probability.

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"chance: probability must be in [0, 1], got {probability}")
        return self.random() < probability


class SeededRandomSource(RandomSource):
    """
    RandomSource backed by random.Random.

    Example:
        >>> rng = SeededRandomSource(seed=42)
        >>> rng.next_int(1, 6)
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def random(self) -> float:
        return self._random.random()

    def reseed(self, seed: int) -> None:
        """Restart the stream from a new seed."""
        self.seed = seed
        self._random.seed(seed)
