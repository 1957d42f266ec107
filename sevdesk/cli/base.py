"""
Command and command-group base classes for the sevdesk CLI.

A command declares its arguments and implements ``execute``; callers go
through ``run``, which refuses commands that need a client when none could be
built. A group lists its subcommand classes in ``commands``, mounts them as
argparse subparsers and dispatches to the one selected on the command line.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, Any, ClassVar, cast

from .display import Display

if TYPE_CHECKING:
    from .._client import SevDeskClient


class Command(ABC):
    """One CLI verb, e.g. ``invoices list``."""

    name: ClassVar[str] = ""
    aliases: ClassVar[tuple[str, ...]] = ()
    description: ClassVar[str] = ""
    requires_auth: ClassVar[bool] = True

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # abstract bases opt out by setting _base in their own body
        if cls.__dict__.get("_base"):
            return
        for attr in ("name", "description"):
            if not getattr(cls, attr):
                raise ValueError(f"Command class {cls.__name__} must define a '{attr}' attribute")

    @property
    def names(self) -> list[str]:
        return [self.name, *self.aliases]

    def add_arguments(self, parser: ArgumentParser) -> None:
        """Declare command-specific arguments; none by default."""

    @abstractmethod
    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        """Do the work and return the exit code.

        ``client`` is only ``None`` for commands with ``requires_auth = False``.
        """

    def run(self, args: Namespace, client: SevDeskClient | None = None) -> int:
        if self.requires_auth and client is None:
            Display().error("Authentication required")
            return 1
        return self.execute(args, cast("SevDeskClient", client))

    @staticmethod
    def display(args: Namespace) -> Display:
        """Display honouring the global ``--json`` flag."""
        return Display(as_json=getattr(args, "json", False))


class CommandGroup(Command):
    """A command whose verbs are subparsers, e.g. ``invoices`` → ``list``, ``get``."""

    _base = True
    commands: ClassVar[tuple[type[Command], ...]] = ()

    def __init__(self) -> None:
        self._subcommands = [command_class() for command_class in self.commands]

    @property
    def _selected_key(self) -> str:
        return f"{self.name}_command"

    def get_subcommands(self) -> list[Command]:
        return list(self._subcommands)

    def add_arguments(self, parser: ArgumentParser) -> None:
        subparsers = parser.add_subparsers(title=f"{self.name} commands", metavar="COMMAND")
        for command in self._subcommands:
            subparser = subparsers.add_parser(
                command.name, aliases=list(command.aliases), help=command.description
            )
            subparser.set_defaults(**{self._selected_key: command})
            command.add_arguments(subparser)

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        command = getattr(args, self._selected_key, None)
        if not isinstance(command, Command):
            available = ", ".join(c.name for c in self._subcommands)
            Display().error(f"Missing command for '{self.name}', choose one of: {available}")
            return 1
        return command.run(args, client)
