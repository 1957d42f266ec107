"""Account tool commands."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

from ..base import Command, CommandGroup

if TYPE_CHECKING:
    from ..._client import SevDeskClient


class BookkeepingVersionCommand(Command):
    name = "version"
    description = "Show the bookkeeping system version"

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        display = self.display(args)
        result = client.tools.get_bookkeeping_system_version()
        if args.json:
            display.json(result)
        else:
            display.message(f"Bookkeeping system version: {result['objects'].get('version')}")
        return 0


class ToolsCommandGroup(CommandGroup):
    name = "tools"
    description = "Account information"
    commands = (BookkeepingVersionCommand,)
