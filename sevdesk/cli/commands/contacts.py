"""Contact commands for the sevdesk CLI."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING

from ..base import Command, CommandGroup

if TYPE_CHECKING:
    from ..._client import SevDeskClient

CONTACT_COLUMNS = ("id", "customerNumber", "name", "surename", "familyname", "category")
ADDRESS_COLUMNS = ("id", "name", "street", "zip", "city", "country")


class ListContactsCommand(Command):
    name = "list"
    aliases = ("ls",)
    description = "List contacts"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("--limit", type=int, default=20, help="Page size (default: 20)")
        parser.add_argument("--offset", type=int, help="Skip this many contacts")
        parser.add_argument(
            "--tag", action="append", dest="tags", metavar="TAG_ID", help="Filter by tag id"
        )

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        if args.tags:
            result = client.contacts.list_with_tags(args.tags)
        else:
            result = client.contacts.list(limit=args.limit, offset=args.offset)
        self.display(args).objects(result["objects"], CONTACT_COLUMNS, title="Contacts")
        return 0


class ContactAddressesCommand(Command):
    name = "addresses"
    description = "List addresses of a contact"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("id", help="Contact id")

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        result = client.contact_addresses.list(contact_id=args.id)
        self.display(args).objects(result["objects"], ADDRESS_COLUMNS, title="Addresses")
        return 0


class ContactsCommandGroup(CommandGroup):
    name = "contacts"
    aliases = ("contact",)
    description = "Inspect contacts"
    commands = (ListContactsCommand, ContactAddressesCommand)
