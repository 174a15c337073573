"""CLI entry point for hotelsim."""

import logging
from typing import Optional

import click

from hotelsim import __version__
from hotelsim.commands.registry import discover_and_register_commands, menu_commands, run_command
from hotelsim.config import DEFAULT_POLICY
from hotelsim.core.inventory import initialize_inventory
from hotelsim.core.randomness import make_random_source
from hotelsim.session import Session
from hotelsim.utils.console import ClickInteraction, get_validated_input
from hotelsim.utils.formatting import format_inventory_summary

# Dynamically discover and import all menu command modules
discover_and_register_commands()

BANNER = (
    "========================================\n"
    "      HOTEL ROOM RESERVATION SYSTEM\n"
    "========================================\n"
)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--seed",
    type=int,
    default=None,
    envvar="HOTELSIM_SEED",
    help="Seed for the random source, for reproducible runs.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    envvar="HOTELSIM_VERBOSE",
    help="Enable debug logging.",
)
@click.pass_context
def main(ctx: click.Context, seed: Optional[int], verbose: bool) -> None:
    """hotelsim - in-memory hotel room reservation simulator.

    Every run starts a freshly generated hotel; nothing is saved on exit.
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["seed"] = seed


def render_menu() -> str:
    lines = ["\n============ MAIN MENU ============"]
    commands = menu_commands()
    for position, command_class in enumerate(commands, start=1):
        lines.append(f"{position}. {command_class.label}")
    lines.append(f"{len(commands) + 1}. Exit program")
    lines.append("===================================")
    return "\n".join(lines)


def run_session(session: Session) -> None:
    """Main menu loop. Returns when the user picks the exit option."""
    commands = menu_commands()
    exit_choice = len(commands) + 1
    while True:
        click.echo(render_menu())
        choice = get_validated_input(f"Enter your choice (1-{exit_choice}): ", 1, exit_choice)
        if choice == exit_choice:
            click.echo("\nThank you for using the Hotel Reservation System!")
            return
        run_command(commands[choice - 1].name, session)


@main.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Start an interactive reservation session."""
    rng = make_random_source(ctx.obj["seed"])
    click.echo(BANNER)
    session = Session.create(ClickInteraction(DEFAULT_POLICY), rng=rng, policy=DEFAULT_POLICY)
    click.echo(format_inventory_summary(session.inventory, DEFAULT_POLICY.currency))
    click.echo("Room initialization completed successfully!\n")
    run_session(session)


@main.command()
@click.pass_context
def inventory(ctx: click.Context) -> None:
    """Print the hotel configuration a seed produces, then exit."""
    hotel = initialize_inventory(make_random_source(ctx.obj["seed"]), DEFAULT_POLICY)
    click.echo(format_inventory_summary(hotel, DEFAULT_POLICY.currency))
