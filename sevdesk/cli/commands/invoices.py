"""Invoice commands for the sevdesk CLI."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, Any

from ..base import Command, CommandGroup

if TYPE_CHECKING:
    from ..._client import SevDeskClient

INVOICE_COLUMNS = ("id", "invoiceNumber", "invoiceDate", "status", "contact", "sumGross", "currency")


class ListInvoicesCommand(Command):
    name = "list"
    aliases = ("ls",)
    description = "List invoices"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("--limit", type=int, default=20, help="Page size (default: 20)")
        parser.add_argument("--offset", type=int, help="Skip this many invoices")
        parser.add_argument("--status", help="Filter by status code, e.g. 100 (draft), 200, 1000")
        parser.add_argument(
            "--tag", action="append", dest="tags", metavar="TAG_ID", help="Filter by tag id"
        )

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        if args.tags:
            result = client.invoices.list_with_tags(args.tags)
        else:
            query: dict[str, Any] = {}
            if args.status:
                query["status"] = args.status
            result = client.invoices.list(limit=args.limit, offset=args.offset, **query)

        self.display(args).objects(result["objects"], INVOICE_COLUMNS, title="Invoices")
        return 0


class GetInvoiceCommand(Command):
    name = "get"
    description = "Show one invoice"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("id", help="Invoice id")

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        display = self.display(args)
        result = client.invoices.get(args.id)
        display.objects(result["objects"], INVOICE_COLUMNS, title="Invoices")
        if not args.json:
            display.message(f"[dim]{client.urls.view_invoice_url(args.id)}[/dim]")
        return 0


class InvoiceXmlCommand(Command):
    name = "xml"
    description = "Print the e-invoice XML"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("id", help="Invoice id")

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        result = client.invoices.get_xml(args.id)
        # raw output, no markup processing
        self.display(args).console.out(result["objects"])
        return 0


class InvoicesCommandGroup(CommandGroup):
    name = "invoices"
    aliases = ("invoice",)
    description = "Inspect invoices"
    commands = (ListInvoicesCommand, GetInvoiceCommand, InvoiceXmlCommand)
