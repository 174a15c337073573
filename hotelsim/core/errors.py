"""Reservation errors.

All of these are recoverable: the menu loop reports the message and carries on.
"""

from typing import Optional


class ReservationError(ValueError):
    """Base class for reservation failures."""

    def __init__(self, message: str, room_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.room_number = room_number


class InvalidRoomNumber(ReservationError):
    """Room number is outside the inventory."""

    def __init__(self, room_number: int) -> None:
        super().__init__("Invalid room number!", room_number)


class CategoryMismatch(ReservationError):
    """Room exists but is not of the requested category."""

    def __init__(self, room_number: int, required: str) -> None:
        super().__init__(f"Room {room_number} is not a {required} room!", room_number)
        self.required = required


class RoomAlreadyOccupied(ReservationError):
    """Room already holds a reservation."""

    def __init__(self, room_number: int) -> None:
        super().__init__(f"Room {room_number} is already booked!", room_number)


class NoRoomsOfRequestedType(ReservationError):
    """System assignment found no vacant room of the requested category."""

    def __init__(self, category: str) -> None:
        super().__init__(f"No available {category} rooms!")
        self.category = category
