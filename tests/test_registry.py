"""Tests for the menu command registry."""

import pytest

from hotelsim.commands.base import BaseCommand
from hotelsim.commands.registry import (
    discover_and_register_commands,
    get_command,
    menu_commands,
    register_command,
)


class TestRegistry:
    """Tests for command registration and lookup."""

    def test_menu_order(self) -> None:
        discover_and_register_commands()
        names = [command_class.name for command_class in menu_commands()]
        assert names == [
            "make-reservation",
            "view-reservations",
            "search-reservation",
            "available-rooms",
        ]

    def test_unknown_command(self) -> None:
        with pytest.raises(ValueError, match="Unknown command: nope"):
            get_command("nope")

    def test_missing_name(self) -> None:
        class Nameless(BaseCommand):
            order = 99

            def execute(self) -> None:
                pass

        with pytest.raises(ValueError, match="must have a 'name' attribute"):
            register_command(Nameless)

    def test_menu_slot_clash(self) -> None:
        discover_and_register_commands()

        class Clashing(BaseCommand):
            name = "clashing"
            label = "Clash"
            order = 1

            def execute(self) -> None:
                pass

        with pytest.raises(ValueError, match="Menu position 1 already taken"):
            register_command(Clashing)
