"""Command registry for dispatching main menu choices."""

import importlib
import pkgutil
from pathlib import Path
from typing import Dict, Type

from hotelsim.commands.base import BaseCommand
from hotelsim.session import Session

_registry: Dict[str, Type[BaseCommand]] = {}


def register_command(command_class: Type[BaseCommand]) -> Type[BaseCommand]:
    """Register a command class.

    Args:
        command_class: The command class to register

    Returns:
        The same class, so this can be used as a decorator

    Raises:
        ValueError: If command_class lacks a name or clashes with another command's menu slot
    """
    if not hasattr(command_class, "name"):
        raise ValueError(f"Command class {command_class.__name__} must have a 'name' attribute")
    for other in _registry.values():
        if other.name != command_class.name and other.order == command_class.order:
            raise ValueError(
                f"Menu position {command_class.order} already taken by {other.name}"
            )
    _registry[command_class.name] = command_class
    return command_class


def get_command(name: str) -> Type[BaseCommand]:
    """Get a command class by name.

    Raises:
        ValueError: If command is not registered
    """
    if name not in _registry:
        raise ValueError(f"Unknown command: {name}")
    return _registry[name]


def menu_commands() -> list[Type[BaseCommand]]:
    """Registered commands in menu order."""
    return sorted(_registry.values(), key=lambda command_class: command_class.order)


def discover_and_register_commands() -> None:
    """Import every module in this package so their decorators register them."""
    commands_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(commands_dir)]):
        if module_info.name not in ("base", "registry") and not module_info.name.startswith("_"):
            importlib.import_module(f"hotelsim.commands.{module_info.name}")


def run_command(name: str, session: Session) -> None:
    """Instantiate and execute a registered command."""
    command_class = get_command(name)
    command_class(session).execute()
