"""Text rendering for console output."""

from hotelsim.core.inventory import Inventory, RoomCategory
from hotelsim.core.queries import AvailableRooms, ReservationRecord
from hotelsim.core.workflow import Quote

ROOMS_PER_LINE = 10
RULE = "------------------------------------"


def format_money(amount: float, currency: str = "EUR") -> str:
    return f"{amount:.2f} {currency}"


def format_percent(rate: float) -> str:
    """Render a fraction as a percentage, e.g. 0.1 -> '10%'."""
    return f"{rate * 100:g}%"


def format_room_columns(numbers: list[int], per_line: int = ROOMS_PER_LINE) -> str:
    """Lay out room numbers right-aligned, ``per_line`` to a row."""
    if not numbers:
        return "None"
    rows = [numbers[i : i + per_line] for i in range(0, len(numbers), per_line)]
    return "\n".join("".join(f"{number:4d}" for number in row) for row in rows)


def format_available(available: AvailableRooms) -> str:
    return "\n".join(
        [
            "\n======== AVAILABLE ROOMS ========",
            "Single rooms available:",
            format_room_columns(available.singles),
            "",
            "Double rooms available:",
            format_room_columns(available.doubles),
            "",
            f"Summary: {available.single_count} single rooms, "
            f"{available.double_count} double rooms available.",
        ]
    )


def format_quote(quote: Quote, currency: str = "EUR") -> str:
    breakfast = "Yes (5% discount applied)" if quote.includes_breakfast else "No"
    return "\n".join(
        [
            "\n======== RESERVATION SUMMARY ========",
            f"Reservation ID: {quote.reservation_id}",
            f"Guest: {quote.guest_name}",
            f"Room: {quote.room_number} ({quote.category.label})",
            f"Nights: {quote.nights}",
            f"Base price: {quote.base_price:g} {currency}/night",
            f"Discount: {format_percent(quote.discount_rate)}",
            f"Breakfast: {breakfast}",
            f"Total price: {format_money(quote.total, currency)}",
            "====================================",
        ]
    )


def format_record(record: ReservationRecord, currency: str = "EUR", detailed: bool = False) -> str:
    """Render one reservation.

    The detailed form (used by the full listing) adds the discount lines.
    """
    room, reservation, total = record
    lines = [
        f"Room: {room.number}",
        f"Reservation ID: {reservation.reservation_id}",
        f"Guest: {reservation.guest_name}",
        f"Type: {room.category.label}",
        f"Nights: {reservation.nights}",
        f"Breakfast: {'Yes' if reservation.includes_breakfast else 'No'}",
        f"Total paid: {format_money(total, currency)}",
    ]
    if detailed:
        lines.append(f"Discount applied: {format_percent(reservation.discount_rate)}")
        if reservation.includes_breakfast:
            lines.append("+ Additional 5% breakfast discount")
    return "\n".join(lines)


def format_inventory_summary(inventory: Inventory, currency: str = "EUR") -> str:
    single_price = inventory.base_price(RoomCategory.SINGLE)
    double_price = inventory.base_price(RoomCategory.DOUBLE)
    return "\n".join(
        [
            f"Initializing hotel with {inventory.total_rooms} rooms...",
            f"Single rooms: {inventory.single_count} (Price: {single_price:g} {currency}/night)",
            f"Double rooms: {inventory.double_count} (Price: {double_price:g} {currency}/night)",
        ]
    )
