"""Show vacant rooms grouped by category."""

from hotelsim.commands.base import BaseCommand
from hotelsim.commands.registry import register_command


@register_command
class AvailableRoomsCommand(BaseCommand):
    name = "available-rooms"
    label = "Display available rooms"
    order = 4

    def execute(self) -> None:
        self.session.interaction.show_available(self.session.queries.list_available_rooms())
