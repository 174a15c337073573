"""Tests for Session wiring."""

import random

from hotelsim.core.inventory import Inventory
from hotelsim.session import Session
from tests.conftest import ScriptedInteraction


class TestSessionCreate:
    def test_services_share_inventory(self) -> None:
        session = Session.create(ScriptedInteraction([]), rng=random.Random(5))
        assert session.workflow.inventory is session.inventory
        assert session.queries.inventory is session.inventory

    def test_same_seed_same_hotel(self) -> None:
        first = Session.create(ScriptedInteraction([]), rng=random.Random(5)).inventory
        second = Session.create(ScriptedInteraction([]), rng=random.Random(5)).inventory
        assert first.total_rooms == second.total_rooms
        assert [r.base_price for r in first] == [r.base_price for r in second]

    def test_uses_given_inventory(self, inventory: Inventory) -> None:
        session = Session.create(ScriptedInteraction([]), inventory=inventory)
        assert session.inventory is inventory
