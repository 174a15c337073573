"""Click-backed interaction surface for the interactive session."""

import click

from hotelsim.config import DEFAULT_POLICY, HotelPolicy
from hotelsim.core.queries import AvailableRooms
from hotelsim.core.workflow import Interaction, Quote
from hotelsim.utils.formatting import format_available, format_quote

CONFIRM_ANSWERS = ("1", "y", "yes")


def get_validated_input(prompt: str, low: int, high: int) -> int:
    """Prompt until the user enters an integer within ``[low, high]``.

    click re-asks on non-numeric and out-of-range input, so an invalid value
    is never returned.
    """
    return click.prompt(
        prompt.rstrip().rstrip(":"),
        type=click.IntRange(low, high),
        prompt_suffix=": ",
    )


def get_text(prompt: str) -> str:
    """Read a line of free text. Empty input is allowed."""
    return click.prompt(prompt, default="", show_default=False, prompt_suffix=": ")


class ClickInteraction(Interaction):
    """Interaction implemented with click prompts and echo."""

    def __init__(self, policy: HotelPolicy = DEFAULT_POLICY) -> None:
        self.policy = policy

    def choose(self, prompt: str, low: int, high: int) -> int:
        return get_validated_input(prompt, low, high)

    def ask_text(self, prompt: str) -> str:
        return get_text(prompt)

    def ask_confirmation(self, prompt: str) -> bool:
        answer = click.prompt(prompt, default="", show_default=False, prompt_suffix=": ")
        return answer.strip().lower() in CONFIRM_ANSWERS

    def notify(self, message: str) -> None:
        click.echo(message)

    def show_available(self, available: AvailableRooms) -> None:
        click.echo(format_available(available))

    def show_quote(self, quote: Quote) -> None:
        click.echo(format_quote(quote, self.policy.currency))
