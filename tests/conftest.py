"""Pytest configuration and shared fixtures for hotelsim tests."""

import random
from typing import Any, Optional, Sequence

import pytest

from hotelsim.core.inventory import Inventory
from hotelsim.core.queries import AvailableRooms
from hotelsim.core.randomness import Generator
from hotelsim.core.workflow import Interaction, Quote, ReservationWorkflow
from hotelsim.session import Session


class ScriptedRandom:
    """Deterministic random source returning pre-arranged values.

    Usage:
        rng = ScriptedRandom(ints=[12345], picks=[2])
        rng.randint(10000, 99999)  # -> 12345
        rng.choice([0.0, 0.1, 0.2])  # -> 0.2 (index 2)
    """

    def __init__(self, ints: Optional[list[int]] = None, picks: Optional[list[int]] = None):
        self.ints = list(ints or [])
        self.picks = list(picks or [])

    def randint(self, a: int, b: int) -> int:
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[self.picks.pop(0)]


class ScriptedInteraction(Interaction):
    """Interaction that replays scripted answers and records everything shown."""

    def __init__(self, answers: list[Any]):
        self.answers = list(answers)
        self.messages: list[str] = []
        self.available: list[AvailableRooms] = []
        self.quotes: list[Quote] = []
        self.prompts: list[tuple[str, int, int]] = []

    def choose(self, prompt: str, low: int, high: int) -> int:
        self.prompts.append((prompt, low, high))
        value = self.answers.pop(0)
        assert isinstance(value, int) and low <= value <= high, (
            f"scripted answer {value!r} invalid for {prompt!r}"
        )
        return value

    def ask_text(self, prompt: str) -> str:
        value = self.answers.pop(0)
        assert isinstance(value, str)
        return value

    def ask_confirmation(self, prompt: str) -> bool:
        value = self.answers.pop(0)
        assert isinstance(value, bool)
        return value

    def notify(self, message: str) -> None:
        self.messages.append(message)

    def show_available(self, available: AvailableRooms) -> None:
        self.available.append(available)

    def show_quote(self, quote: Quote) -> None:
        self.quotes.append(quote)

    @property
    def output(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture
def inventory() -> Inventory:
    """Four rooms: 1-2 single at 90/night, 3-4 double at 130/night."""
    return Inventory.create(4, 90, 130)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


def make_workflow(inventory: Inventory, rng: Any) -> ReservationWorkflow:
    return ReservationWorkflow(inventory, Generator(rng))


def make_session(inventory: Inventory, rng: Any, answers: list[Any]) -> Session:
    return Session.create(ScriptedInteraction(answers), rng=rng, inventory=inventory)
