"""Process-wide context injected into every menu command."""

from dataclasses import dataclass
from typing import Optional

from hotelsim.config import DEFAULT_POLICY, HotelPolicy
from hotelsim.core.inventory import Inventory, initialize_inventory
from hotelsim.core.queries import QueryService
from hotelsim.core.randomness import Generator, RandomSource, make_random_source
from hotelsim.core.workflow import Interaction, ReservationWorkflow


@dataclass
class Session:
    """Owns the inventory and the services that operate on it."""

    inventory: Inventory
    workflow: ReservationWorkflow
    queries: QueryService
    interaction: Interaction
    policy: HotelPolicy = DEFAULT_POLICY

    @classmethod
    def create(
        cls,
        interaction: Interaction,
        rng: Optional[RandomSource] = None,
        policy: HotelPolicy = DEFAULT_POLICY,
        inventory: Optional[Inventory] = None,
    ) -> "Session":
        """Wire up a session.

        Args:
            interaction: User-facing surface for prompts and output
            rng: Random source; a fresh unseeded one when omitted
            policy: Hotel policy settings
            inventory: Pre-built inventory; randomly initialized when omitted
        """
        if rng is None:
            rng = make_random_source()
        if inventory is None:
            inventory = initialize_inventory(rng, policy)
        generator = Generator(rng, policy)
        return cls(
            inventory=inventory,
            workflow=ReservationWorkflow(inventory, generator, policy),
            queries=QueryService(inventory, policy),
            interaction=interaction,
            policy=policy,
        )
