"""Tag commands for the sevdesk CLI."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING

from ..base import Command, CommandGroup

if TYPE_CHECKING:
    from ..._client import SevDeskClient

TAG_COLUMNS = ("id", "name", "create")


class ListTagsCommand(Command):
    name = "list"
    aliases = ("ls",)
    description = "List tags"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("--limit", type=int, default=100, help="Page size (default: 100)")

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        result = client.tags.list(limit=args.limit)
        self.display(args).objects(result["objects"], TAG_COLUMNS, title="Tags")
        return 0


class FindTagCommand(Command):
    name = "find"
    description = "Find a tag by its exact name"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("name", help="Tag name")

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        display = self.display(args)
        tag = client.tags.get_by_name(args.name)
        if tag is None:
            display.error(f"No tag named '{args.name}'")
            return 1
        display.objects([tag], TAG_COLUMNS, title="Tags")
        return 0


class TagsCommandGroup(CommandGroup):
    name = "tags"
    aliases = ("tag",)
    description = "Inspect tags"
    commands = (ListTagsCommand, FindTagCommand)
