"""Discount and reservation ID generation behind an injectable random source."""

import random
from typing import Optional, Protocol, Sequence, TypeVar

from hotelsim.config import DEFAULT_POLICY, HotelPolicy

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the simulator relies on."""

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def make_random_source(seed: Optional[int] = None) -> random.Random:
    """Create a random source, seeded for reproducible runs when a seed is given."""
    return random.Random(seed)


class Generator:
    """Draws discount tiers and reservation IDs from a random source.

    Reservation IDs are drawn independently and are not checked against IDs
    already in use.
    """

    def __init__(self, rng: RandomSource, policy: HotelPolicy = DEFAULT_POLICY) -> None:
        self.rng = rng
        self.policy = policy

    def random_discount(self) -> float:
        """Pick one of the discount tiers uniformly."""
        return self.rng.choice(self.policy.discount_tiers)

    def random_reservation_id(self) -> int:
        """Draw a reservation ID uniformly from the configured range."""
        return self.rng.randint(self.policy.min_reservation_id, self.policy.max_reservation_id)

    def pick(self, candidates: Sequence[T]) -> T:
        """Pick one candidate uniformly.

        Raises:
            ValueError: If there are no candidates
        """
        if not candidates:
            raise ValueError("Cannot pick from an empty sequence")
        return self.rng.choice(candidates)
