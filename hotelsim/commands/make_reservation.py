"""Make a new reservation."""

from hotelsim.commands.base import BaseCommand
from hotelsim.commands.registry import register_command


@register_command
class MakeReservationCommand(BaseCommand):
    """Run the interactive reservation workflow once."""

    name = "make-reservation"
    label = "Make a new reservation"
    order = 1

    def execute(self) -> None:
        self.echo("\n======== NEW RESERVATION ========")
        self.session.workflow.run(self.session.interaction)
