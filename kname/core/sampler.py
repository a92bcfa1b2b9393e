"""Uniform random sampling over candidate records."""

import random
from typing import List, Optional, Sequence, TypeVar

from .exceptions import EmptyResultError, InsufficientCandidatesError

T = TypeVar("T")


class Sampler:
    """Draws records from a candidate list with or without replacement."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the sampler.

        Args:
            seed: Seed for a private random.Random, for reproducible draws
            rng: Explicit random source; takes precedence over seed
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def draw_one(self, candidates: Sequence[T]) -> T:
        """Pick one candidate with probability 1/len(candidates)."""
        if not candidates:
            raise EmptyResultError("No names match the given filter criteria")
        return candidates[self.rng.randrange(len(candidates))]

    def draw_many(self, candidates: Sequence[T], count: int, unique: bool = True) -> List[T]:
        """
        Draw count candidates.

        Args:
            candidates: Candidate pool, left untouched
            count: Number of draws
            unique: Sample without replacement when True

        Returns:
            List of count drawn candidates
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return []
        if not candidates:
            raise EmptyResultError("No names match the given filter criteria")

        if not unique:
            size = len(candidates)
            return [candidates[self.rng.randrange(size)] for _ in range(count)]

        if count > len(candidates):
            raise InsufficientCandidatesError(count, len(candidates))

        # Swap-remove on a private copy: O(1) per draw, order not preserved
        pool = list(candidates)
        result = []
        for _ in range(count):
            index = self.rng.randrange(len(pool))
            result.append(pool[index])
            pool[index] = pool[-1]
            pool.pop()

        return result
