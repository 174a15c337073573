"""Search reservations by ID or guest name."""

from hotelsim.commands.base import BaseCommand
from hotelsim.commands.registry import register_command
from hotelsim.utils.formatting import RULE, format_record


@register_command
class SearchReservationCommand(BaseCommand):
    """Look up a reservation by its ID, or by a fragment of the guest name."""

    name = "search-reservation"
    label = "Search for a reservation"
    order = 3

    def execute(self) -> None:
        self.echo("\n======== SEARCH RESERVATION ========")
        self.echo("Search by:\n1. Reservation ID\n2. Guest name")
        if self.choose("Enter choice (1-2): ", 1, 2) == 1:
            self._search_by_id()
        else:
            self._search_by_name()

    def _search_by_id(self) -> None:
        policy = self.session.policy
        reservation_id = self.choose(
            "Enter reservation ID: ", policy.min_reservation_id, policy.max_reservation_id
        )
        record = self.session.queries.find_by_id(reservation_id)
        if record is None:
            self.echo("No reservations found.")
            return
        self.echo("\nReservation found:")
        self.echo(format_record(record, policy.currency))

    def _search_by_name(self) -> None:
        fragment = self.session.interaction.ask_text("Enter guest name to search")
        records = self.session.queries.find_by_name(fragment)
        if not records:
            self.echo("No reservations found.")
            return
        self.echo("\nReservations found:")
        for record in records:
            self.echo(RULE)
            self.echo(format_record(record, self.session.policy.currency))
