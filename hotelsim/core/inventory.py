"""Room inventory: the single source of truth for booking state."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from hotelsim.config import DEFAULT_POLICY, HotelPolicy
from hotelsim.core.errors import (
    CategoryMismatch,
    InvalidRoomNumber,
    ReservationError,
    RoomAlreadyOccupied,
)
from hotelsim.core.randomness import RandomSource

logger = logging.getLogger(__name__)


class RoomCategory(Enum):
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Reservation:
    """Booking payload held by an occupied room.

    The total price is derived from these inputs, never stored.
    """

    reservation_id: int
    guest_name: str
    nights: int
    discount_rate: float
    includes_breakfast: bool


@dataclass
class Room:
    """One physical room. ``reservation`` is None while the room is vacant."""

    number: int
    category: RoomCategory
    base_price: float
    reservation: Optional[Reservation] = None

    @property
    def is_occupied(self) -> bool:
        return self.reservation is not None


class Inventory:
    """Ordered collection of all rooms, numbered from 1.

    The first half of the rooms (by number) are singles, the rest doubles.
    """

    def __init__(self, rooms: list[Room]) -> None:
        expected = list(range(1, len(rooms) + 1))
        if [room.number for room in rooms] != expected:
            raise ValueError("Rooms must be numbered contiguously from 1")
        self._rooms = rooms

    @classmethod
    def create(cls, total_rooms: int, single_price: float, double_price: float) -> "Inventory":
        """Build an all-vacant inventory split evenly between singles and doubles.

        Args:
            total_rooms: Number of rooms, must be even and positive
            single_price: Per-night rate shared by every single room
            double_price: Per-night rate shared by every double room

        Raises:
            ValueError: If total_rooms is not a positive even number
        """
        if total_rooms <= 0 or total_rooms % 2:
            raise ValueError(f"Total rooms must be a positive even number, got {total_rooms}")
        half = total_rooms // 2
        rooms = [
            Room(number, RoomCategory.SINGLE, single_price)
            if number <= half
            else Room(number, RoomCategory.DOUBLE, double_price)
            for number in range(1, total_rooms + 1)
        ]
        return cls(rooms)

    @property
    def total_rooms(self) -> int:
        return len(self._rooms)

    @property
    def single_count(self) -> int:
        return sum(1 for room in self._rooms if room.category is RoomCategory.SINGLE)

    @property
    def double_count(self) -> int:
        return self.total_rooms - self.single_count

    def base_price(self, category: RoomCategory) -> Optional[float]:
        """Per-night rate of a category, or None if the hotel has no such room."""
        for room in self._rooms:
            if room.category is category:
                return room.base_price
        return None

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)

    def contains(self, room_number: int) -> bool:
        return 1 <= room_number <= self.total_rooms

    def get_room(self, room_number: int) -> Room:
        """Look up a room by number.

        Raises:
            InvalidRoomNumber: If the number is outside 1..total_rooms
        """
        if not self.contains(room_number):
            raise InvalidRoomNumber(room_number)
        return self._rooms[room_number - 1]

    def check_availability(self, room_number: int, required: Optional[RoomCategory] = None) -> Room:
        """Validate that a room can be booked and return it.

        Args:
            room_number: Room to check
            required: Category the room must have, if any

        Raises:
            InvalidRoomNumber: If the room does not exist
            CategoryMismatch: If the room is not of the required category
            RoomAlreadyOccupied: If the room already holds a reservation
        """
        room = self.get_room(room_number)
        if required is not None and room.category is not required:
            raise CategoryMismatch(room_number, required.value)
        if room.is_occupied:
            raise RoomAlreadyOccupied(room_number)
        return room

    def is_available(self, room_number: int, required: Optional[RoomCategory] = None) -> bool:
        try:
            self.check_availability(room_number, required)
        except ReservationError as e:
            logger.debug("Room %s unavailable: %s", room_number, e.message)
            return False
        return True

    def list_available(self, category: RoomCategory) -> list[int]:
        """Vacant room numbers of a category, ascending."""
        return [
            room.number
            for room in self._rooms
            if room.category is category and not room.is_occupied
        ]

    def occupied_rooms(self) -> list[Room]:
        return [room for room in self._rooms if room.is_occupied]

    def commit(self, room_number: int, reservation: Reservation) -> None:
        """Mark a room occupied.

        Availability is not re-checked here; callers validate first.
        """
        room = self.get_room(room_number)
        room.reservation = reservation
        logger.info(
            "Committed reservation %s to room %s (%s)",
            reservation.reservation_id,
            room_number,
            room.category.value,
        )


def initialize_inventory(rng: RandomSource, policy: HotelPolicy = DEFAULT_POLICY) -> Inventory:
    """Create a randomly sized and priced hotel.

    The room count is an even number within the policy range, split in half.
    One price is drawn per category and shared by every room of it.
    """
    total_rooms = 2 * rng.randint(policy.min_rooms // 2, policy.max_rooms // 2)
    single_price = rng.randint(*policy.single_price_range)
    double_price = rng.randint(*policy.double_price_range)
    inventory = Inventory.create(total_rooms, single_price, double_price)
    logger.info(
        "Initialized %d rooms (single %d/night, double %d/night)",
        total_rooms,
        single_price,
        double_price,
    )
    return inventory
