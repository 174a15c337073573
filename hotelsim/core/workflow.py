"""Reservation workflow.

One call to ``ReservationWorkflow.run`` walks a single reservation attempt:

    category -> room selection -> availability check -> guest details
    -> discount -> breakfast -> price -> reservation ID -> confirmation

Nothing is written to the inventory until the user confirms.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from hotelsim.config import DEFAULT_POLICY, HotelPolicy
from hotelsim.core.errors import (
    NoRoomsOfRequestedType,
    ReservationError,
    RoomAlreadyOccupied,
)
from hotelsim.core.inventory import Inventory, Reservation, RoomCategory
from hotelsim.core.pricing import final_price
from hotelsim.core.queries import AvailableRooms, list_available_rooms
from hotelsim.core.randomness import Generator

logger = logging.getLogger(__name__)


class AssignmentMode(Enum):
    SYSTEM = 1
    MANUAL = 2


class FailureReason(Enum):
    NO_ROOMS_OF_TYPE = "no_rooms_of_type"
    ROOM_UNAVAILABLE = "room_unavailable"
    INVALID_SELECTION = "invalid_selection"

    @classmethod
    def from_error(cls, error: ReservationError) -> "FailureReason":
        if isinstance(error, NoRoomsOfRequestedType):
            return cls.NO_ROOMS_OF_TYPE
        if isinstance(error, RoomAlreadyOccupied):
            return cls.ROOM_UNAVAILABLE
        return cls.INVALID_SELECTION


@dataclass(frozen=True)
class Success:
    reservation_id: int
    room_number: int


@dataclass(frozen=True)
class Cancelled:
    pass


@dataclass(frozen=True)
class Failed:
    reason: FailureReason
    message: str


Outcome = Union[Success, Cancelled, Failed]


@dataclass(frozen=True)
class Quote:
    """Everything shown to the user before confirmation."""

    room_number: int
    category: RoomCategory
    base_price: float
    guest_name: str
    nights: int
    discount_rate: float
    includes_breakfast: bool
    reservation_id: int
    total: float

    def to_reservation(self) -> Reservation:
        return Reservation(
            reservation_id=self.reservation_id,
            guest_name=self.guest_name,
            nights=self.nights,
            discount_rate=self.discount_rate,
            includes_breakfast=self.includes_breakfast,
        )


class Interaction(ABC):
    """User-facing side of a reservation attempt.

    Implementations must only return validated values: ``choose`` never
    returns a number outside ``[low, high]``.
    """

    @abstractmethod
    def choose(self, prompt: str, low: int, high: int) -> int:
        pass

    @abstractmethod
    def ask_text(self, prompt: str) -> str:
        pass

    @abstractmethod
    def ask_confirmation(self, prompt: str) -> bool:
        pass

    @abstractmethod
    def notify(self, message: str) -> None:
        pass

    @abstractmethod
    def show_available(self, available: AvailableRooms) -> None:
        pass

    @abstractmethod
    def show_quote(self, quote: Quote) -> None:
        pass


class ReservationWorkflow:
    """Creates reservations against an inventory."""

    def __init__(
        self,
        inventory: Inventory,
        generator: Generator,
        policy: HotelPolicy = DEFAULT_POLICY,
    ) -> None:
        self.inventory = inventory
        self.generator = generator
        self.policy = policy

    def select_room(
        self,
        category: RoomCategory,
        mode: AssignmentMode,
        manual_number: Optional[int] = None,
    ) -> int:
        """Pick the room to book.

        Args:
            category: Requested room category
            mode: Whether the system assigns a room or the user names one
            manual_number: Room chosen by the user in manual mode

        Returns:
            The selected room number (not yet validated in manual mode)

        Raises:
            NoRoomsOfRequestedType: If system mode finds no vacant room
            ValueError: If manual mode has no room number
        """
        if mode is AssignmentMode.SYSTEM:
            candidates = list_available_rooms(self.inventory).for_category(category)
            if not candidates:
                raise NoRoomsOfRequestedType(category.value)
            return self.generator.pick(candidates)
        if manual_number is None:
            raise ValueError("Manual mode requires a room number")
        return manual_number

    def validate_nights(self, nights: int) -> None:
        if not self.policy.min_nights <= nights <= self.policy.max_nights:
            raise ValueError(
                f"Nights must be between {self.policy.min_nights} and {self.policy.max_nights}"
            )

    def build_quote(
        self,
        room_number: int,
        guest_name: str,
        nights: int,
        discount_rate: float,
        includes_breakfast: bool,
        reservation_id: int,
    ) -> Quote:
        self.validate_nights(nights)
        room = self.inventory.get_room(room_number)
        total = final_price(
            room.base_price,
            nights,
            discount_rate,
            includes_breakfast,
            self.policy.breakfast_factor,
        )
        return Quote(
            room_number=room.number,
            category=room.category,
            base_price=room.base_price,
            guest_name=guest_name,
            nights=nights,
            discount_rate=discount_rate,
            includes_breakfast=includes_breakfast,
            reservation_id=reservation_id,
            total=total,
        )

    def commit(self, quote: Quote) -> Success:
        self.inventory.commit(quote.room_number, quote.to_reservation())
        return Success(quote.reservation_id, quote.room_number)

    def quick_book(self, room_number: int, guest_name: str, nights: int) -> Reservation:
        """Book a room directly with a random discount and no breakfast.

        Raises:
            InvalidRoomNumber: If the room does not exist
            RoomAlreadyOccupied: If the room is taken; nothing is changed
            ValueError: If nights is out of range
        """
        self.inventory.check_availability(room_number)
        self.validate_nights(nights)
        reservation = Reservation(
            reservation_id=self.generator.random_reservation_id(),
            guest_name=guest_name,
            nights=nights,
            discount_rate=self.generator.random_discount(),
            includes_breakfast=False,
        )
        self.inventory.commit(room_number, reservation)
        return reservation

    def run(self, interaction: Interaction) -> Outcome:
        """Drive one reservation attempt through the interaction.

        Returns:
            Success with the new reservation ID, Cancelled when the user
            declines, or Failed when no suitable room could be selected
        """
        try:
            outcome = self._run(interaction)
        except ReservationError as e:
            logger.debug("Reservation attempt rejected for room %s: %s", e.room_number, e.message)
            interaction.notify(f"Error: {e.message}")
            outcome = Failed(FailureReason.from_error(e), e.message)
        logger.info("Reservation attempt finished: %s", outcome)
        return outcome

    def _run(self, interaction: Interaction) -> Outcome:
        interaction.notify(
            "Select room type:\n"
            "1. Single room (1 person)\n"
            "2. Double room (2 persons)"
        )
        choice = interaction.choose("Enter choice (1-2): ", 1, 2)
        category = RoomCategory.SINGLE if choice == 1 else RoomCategory.DOUBLE

        interaction.show_available(list_available_rooms(self.inventory))

        interaction.notify(
            "\nBooking method:\n"
            "1. Let system assign a random available room\n"
            "2. Choose a specific room number"
        )
        mode = AssignmentMode(interaction.choose("Enter choice (1-2): ", 1, 2))
        manual_number = None
        if mode is AssignmentMode.MANUAL:
            total = self.inventory.total_rooms
            manual_number = interaction.choose(f"Enter room number to book (1-{total}): ", 1, total)
        room_number = self.select_room(category, mode, manual_number)
        if mode is AssignmentMode.SYSTEM:
            interaction.notify(f"System assigned room: {room_number}")

        self.inventory.check_availability(room_number, category)

        guest_name = interaction.ask_text("Enter guest name")
        nights = interaction.choose(
            f"Enter number of nights ({self.policy.min_nights}-{self.policy.max_nights}): ",
            self.policy.min_nights,
            self.policy.max_nights,
        )
        discount_rate = self.generator.random_discount()

        interaction.notify(
            "\nAdd breakfast to reservation? (5% discount on total price)\n"
            "1. Yes, include breakfast (5% discount)\n"
            "2. No, skip breakfast"
        )
        includes_breakfast = interaction.choose("Enter choice (1-2): ", 1, 2) == 1
        if includes_breakfast:
            interaction.notify("Breakfast discount applied!")

        quote = self.build_quote(
            room_number,
            guest_name,
            nights,
            discount_rate,
            includes_breakfast,
            self.generator.random_reservation_id(),
        )
        interaction.show_quote(quote)

        if not interaction.ask_confirmation("Confirm reservation? (1=Yes, 2=No)"):
            interaction.notify("Reservation cancelled.")
            return Cancelled()

        success = self.commit(quote)
        interaction.notify(
            "\nReservation confirmed!\n"
            f"Your reservation ID is: {success.reservation_id}\n"
            "Please save this number for future reference."
        )
        return success
