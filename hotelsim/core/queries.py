"""Read-only views over the inventory."""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from hotelsim.config import DEFAULT_POLICY, HotelPolicy
from hotelsim.core.inventory import Inventory, Reservation, Room, RoomCategory
from hotelsim.core.pricing import final_price


class ReservationRecord(NamedTuple):
    """An occupied room together with its recomputed total."""

    room: Room
    reservation: Reservation
    total: float


@dataclass(frozen=True)
class AvailableRooms:
    singles: list[int]
    doubles: list[int]

    @property
    def single_count(self) -> int:
        return len(self.singles)

    @property
    def double_count(self) -> int:
        return len(self.doubles)

    def for_category(self, category: RoomCategory) -> list[int]:
        return self.singles if category is RoomCategory.SINGLE else self.doubles


def list_available_rooms(inventory: Inventory) -> AvailableRooms:
    return AvailableRooms(
        singles=inventory.list_available(RoomCategory.SINGLE),
        doubles=inventory.list_available(RoomCategory.DOUBLE),
    )


class QueryService:
    """Lists and searches reservations held in an inventory.

    Results always come back in ascending room-number order.
    """

    def __init__(self, inventory: Inventory, policy: HotelPolicy = DEFAULT_POLICY) -> None:
        self.inventory = inventory
        self.policy = policy

    def _record(self, room: Room, reservation: Reservation) -> ReservationRecord:
        total = final_price(
            room.base_price,
            reservation.nights,
            reservation.discount_rate,
            reservation.includes_breakfast,
            self.policy.breakfast_factor,
        )
        return ReservationRecord(room, reservation, total)

    def list_all_reservations(self) -> list[ReservationRecord]:
        return [
            self._record(room, room.reservation)
            for room in self.inventory.occupied_rooms()
            if room.reservation is not None
        ]

    def find_by_id(self, reservation_id: int) -> Optional[ReservationRecord]:
        """Find the reservation with the given ID.

        IDs are not guaranteed unique; the lowest-numbered room wins.
        """
        for room in self.inventory.occupied_rooms():
            if room.reservation is not None and room.reservation.reservation_id == reservation_id:
                return self._record(room, room.reservation)
        return None

    def find_by_name(self, fragment: str) -> list[ReservationRecord]:
        """Case-insensitive substring search on guest names.

        An empty fragment matches every reservation.
        """
        needle = fragment.lower()
        return [
            self._record(room, room.reservation)
            for room in self.inventory.occupied_rooms()
            if room.reservation is not None and needle in room.reservation.guest_name.lower()
        ]

    def list_available_rooms(self) -> AvailableRooms:
        return list_available_rooms(self.inventory)
