"""Tests for the click interaction surface."""

from typing import Any, Callable

import click
import pytest
from click.testing import CliRunner

from hotelsim.core.queries import AvailableRooms
from hotelsim.utils.console import ClickInteraction, get_text, get_validated_input


def run_with_input(func: Callable[[], Any], input_text: str) -> tuple[Any, Any]:
    """Invoke ``func`` inside a throwaway click command and capture its result."""
    captured: dict[str, Any] = {}

    @click.command()
    def command() -> None:
        captured["value"] = func()

    result = CliRunner().invoke(command, [], input=input_text)
    return result, captured.get("value")


class TestGetValidatedInput:
    """Tests for get_validated_input()."""

    def test_accepts_in_range(self) -> None:
        result, value = run_with_input(lambda: get_validated_input("Pick (1-3): ", 1, 3), "2\n")
        assert result.exit_code == 0
        assert value == 2

    def test_reprompts_until_valid(self) -> None:
        result, value = run_with_input(
            lambda: get_validated_input("Pick (1-3): ", 1, 3), "x\n4\n0\n3\n"
        )
        assert value == 3
        assert result.output.count("Error:") == 3

    def test_prompt_text(self) -> None:
        result, _ = run_with_input(lambda: get_validated_input("Pick (1-3): ", 1, 3), "1\n")
        assert "Pick (1-3): " in result.output


class TestGetText:
    def test_free_text(self) -> None:
        _, value = run_with_input(lambda: get_text("Name"), "Zoë O'Brien\n")
        assert value == "Zoë O'Brien"

    def test_empty_allowed(self) -> None:
        _, value = run_with_input(lambda: get_text("Name"), "\n")
        assert value == ""


class TestClickInteraction:
    @pytest.mark.parametrize(
        "answer,expected",
        [("1", True), ("yes", True), ("Y", True), ("2", False), ("", False), ("no", False)],
    )
    def test_confirmation(self, answer: str, expected: bool) -> None:
        interaction = ClickInteraction()
        _, value = run_with_input(lambda: interaction.ask_confirmation("Confirm?"), answer + "\n")
        assert value is expected

    def test_show_available(self) -> None:
        interaction = ClickInteraction()
        result, _ = run_with_input(
            lambda: interaction.show_available(AvailableRooms([1, 2], [3])), ""
        )
        assert "Summary: 2 single rooms, 1 double rooms available." in result.output
