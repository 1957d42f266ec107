"""
Command registry for command discovery and registration.
"""

import importlib
import inspect

from .base import Command, CommandGroup

COMMAND_MODULES = ("auth", "invoices", "contacts", "tags", "tools", "ratelimit")


class CommandRegistry:
    """Registry of top-level CLI commands, addressable by name or alias."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._command_groups: dict[str, CommandGroup] = {}

    def register_command(self, command: Command) -> None:
        """
        Register a single command instance.

        Raises:
            TypeError: If ``command`` is not a Command
            ValueError: If one of its names is already taken
        """
        if not isinstance(command, Command):
            raise TypeError(f"Expected Command instance, got {type(command)}")

        for name in command.names:
            if name in self._commands:
                raise ValueError(f"Command '{name}' is already registered")
            self._commands[name] = command

        if isinstance(command, CommandGroup):
            self._command_groups[command.name] = command

    def register_command_class(self, command_class: type[Command]) -> None:
        if not issubclass(command_class, Command):
            raise TypeError(f"Expected Command subclass, got {command_class}")
        self.register_command(command_class())

    def discover_commands_from_module(self, module_name: str) -> None:
        """Register every concrete CommandGroup defined in ``module_name``."""
        module = importlib.import_module(module_name)

        for _name, obj in inspect.getmembers(module, inspect.isclass):
            if not issubclass(obj, CommandGroup) or obj is CommandGroup:
                continue
            if inspect.isabstract(obj) or obj.__module__ != module.__name__:
                continue
            # Individual subcommands are registered by their parent groups
            if not self.has_command(obj.name):
                self.register_command_class(obj)

    def auto_discover_commands(self, package_name: str = "sevdesk.cli.commands") -> None:
        for module in COMMAND_MODULES:
            self.discover_commands_from_module(f"{package_name}.{module}")

    def get_command(self, name: str) -> Command:
        """
        Get a registered command by name or alias.

        Raises:
            KeyError: If command is not found
        """
        if name not in self._commands:
            raise KeyError(f"Command '{name}' not found")
        return self._commands[name]

    def get_command_groups(self) -> dict[str, CommandGroup]:
        return self._command_groups.copy()

    def get_primary_commands(self) -> list[Command]:
        """Unique commands in registration order, aliases excluded."""
        return [command for name, command in self._commands.items() if name == command.name]

    def has_command(self, name: str) -> bool:
        return name in self._commands

    def clear(self) -> None:
        self._commands.clear()
        self._command_groups.clear()


# Global command registry instance
registry = CommandRegistry()
