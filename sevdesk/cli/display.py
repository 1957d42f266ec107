"""
Rich rendering for CLI output: object tables and error diagnostics.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .._exceptions import RateLimitError, UnknownApiError


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, dict):
        # object references render as "Contact#123"
        if "id" in value and "objectName" in value:
            return f"{value['objectName']}#{value['id']}"
        return json.dumps(value, ensure_ascii=False)
    return str(value)


class Display:
    """Renders API payloads and failures to a rich console."""

    def __init__(self, console: Console | None = None, *, as_json: bool = False) -> None:
        self.console = console or Console()
        self.as_json = as_json

    def objects(
        self, objects: Sequence[Mapping[str, Any]], columns: Sequence[str], title: str
    ) -> None:
        """Print objects as a table (or raw JSON in ``--json`` mode)."""
        if self.as_json:
            self.json(list(objects))
            return
        if not objects:
            self.console.print(f"[dim]No {title.lower()} found.[/dim]")
            return

        table = Table(title=title, show_lines=False)
        for column in columns:
            table.add_column(column)
        for obj in objects:
            table.add_row(*(escape(_cell(obj.get(column))) for column in columns))
        self.console.print(table)

    def json(self, payload: Any) -> None:
        self.console.print_json(json.dumps(payload, ensure_ascii=False, default=str))

    def message(self, text: str) -> None:
        self.console.print(text)

    def error(self, text: str) -> None:
        self.console.print(f"[red]❌ {escape(text)}[/red]")

    def api_error(self, err: UnknownApiError) -> None:
        """Print every diagnostic an API error carries."""
        if isinstance(err, RateLimitError):
            self.rate_limit_error(err)
            return

        lines = [
            f"[bold]message:[/bold] {escape(err.message)}",
            f"[bold]status:[/bold] {err.status} {err.status_text or ''}".rstrip(),
        ]
        retry_after = (err.headers or {}).get("retry-after")
        if retry_after:
            lines.append(f"[bold]retry-after:[/bold] {retry_after}")
        lines.append("[bold]headers:[/bold]")
        lines.append(escape(json.dumps(err.headers or {}, indent=2)))
        lines.append("[bold]response body:[/bold]")
        body = err.response_body
        if not isinstance(body, str):
            body = json.dumps(body, indent=2, ensure_ascii=False)
        lines.append(escape(body))
        self.console.print(
            Panel("\n".join(lines), title="[red]❌ UnknownApiError[/red]", border_style="red")
        )

    def rate_limit_error(self, err: RateLimitError) -> None:
        body = err.rate_limit_body
        lines = [
            f"[bold]message:[/bold] {escape(err.message)}",
            f"[bold]retry after (seconds):[/bold] {err.retry_after}",
            f"[bold]code:[/bold] {escape(body['code'])}",
            f"[bold]reason:[/bold] {escape(body['reason'])}",
            f"[bold]recommendation:[/bold] {escape(body['recommendation'])}",
            f"[bold]contact:[/bold] {escape(body['contact'])}",
        ]
        self.console.print(
            Panel(
                "\n".join(lines),
                title="[yellow]⏳ RateLimitError[/yellow]",
                border_style="yellow",
            )
        )
