"""Hotel policy settings shared by every component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HotelPolicy:
    """Numeric ranges and constants that shape a simulated hotel.

    All ranges are inclusive on both ends.
    """

    min_rooms: int = 40
    max_rooms: int = 300
    single_price_range: tuple[int, int] = (80, 100)
    double_price_range: tuple[int, int] = (120, 150)
    discount_tiers: tuple[float, ...] = (0.00, 0.10, 0.20)
    breakfast_factor: float = 0.95
    min_nights: int = 1
    max_nights: int = 30
    min_reservation_id: int = 10000
    max_reservation_id: int = 99999
    currency: str = "EUR"

    def __post_init__(self) -> None:
        if self.min_rooms % 2 or self.max_rooms % 2:
            raise ValueError("Room count bounds must be even")
        if self.min_rooms < 2 or self.min_rooms > self.max_rooms:
            raise ValueError(f"Invalid room count range: {self.min_rooms}-{self.max_rooms}")
        if not self.discount_tiers:
            raise ValueError("At least one discount tier is required")


DEFAULT_POLICY = HotelPolicy()
