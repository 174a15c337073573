"""Base class for all menu commands."""

from abc import ABC, abstractmethod

from hotelsim.session import Session


class BaseCommand(ABC):
    """Base class for all menu commands."""

    name: str  # e.g., "make-reservation"
    label: str  # menu text, e.g., "Make a new reservation"
    order: int  # position in the main menu, starting at 1

    def __init__(self, session: Session):
        """Initialize the command.

        Args:
            session: Session holding the inventory and services
        """
        self.session = session

    @abstractmethod
    def execute(self) -> None:
        """Run the command against the session.

        Reservation errors are reported to the user, never raised.
        """
        pass

    def echo(self, message: str) -> None:
        self.session.interaction.notify(message)

    def choose(self, prompt: str, low: int, high: int) -> int:
        return self.session.interaction.choose(prompt, low, high)
