"""List every current reservation."""

from hotelsim.commands.base import BaseCommand
from hotelsim.commands.registry import register_command
from hotelsim.utils.formatting import RULE, format_record


@register_command
class ViewReservationsCommand(BaseCommand):
    """Print all reservations in room order with their recomputed totals."""

    name = "view-reservations"
    label = "View all reservations"
    order = 2

    def execute(self) -> None:
        self.echo("\n======== ALL RESERVATIONS ========")
        records = self.session.queries.list_all_reservations()
        if not records:
            self.echo("No reservations found.")
            return
        for record in records:
            self.echo(format_record(record, self.session.policy.currency, detailed=True))
            self.echo(RULE)
