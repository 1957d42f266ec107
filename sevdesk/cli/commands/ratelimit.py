"""Rate-limit probe: hammer a cheap endpoint until sevDesk pushes back.

Useful for checking what the API reports once the account gets blocked
(retry-after, reason, contact). Requests are issued in parallel batches from
a thread pool.
"""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..._exceptions import UnknownApiError
from ..base import Command, CommandGroup

if TYPE_CHECKING:
    from ..._client import SevDeskClient

DEFAULT_TAG_NAME = "sevdesk-rate-limit-probe"


@dataclass
class ProbeResult:
    completed: int
    sent: int
    error: UnknownApiError | None = None


def run_probe(
    call: Callable[[], Any],
    *,
    max_requests: int,
    parallel: int,
    on_progress: Callable[[int], None] | None = None,
    log_every: int = 50,
) -> ProbeResult:
    """Invoke ``call`` up to ``max_requests`` times, ``parallel`` at a time.

    Stops after the first batch containing an API error and returns the first
    such error; every request of that batch is still counted. Any other
    exception is re-raised.
    """
    completed = 0
    sent = 0
    with ThreadPoolExecutor(max_workers=parallel) as pool:
        for offset in range(0, max_requests, parallel):
            batch_size = min(parallel, max_requests - offset)
            futures = [pool.submit(call) for _ in range(batch_size)]
            sent += batch_size
            first_error: UnknownApiError | None = None
            for future in futures:
                exc = future.exception()
                if exc is None:
                    completed += 1
                    if on_progress and (completed % log_every == 0 or completed == max_requests):
                        on_progress(completed)
                elif isinstance(exc, UnknownApiError):
                    first_error = first_error or exc
                else:
                    raise exc
            if first_error is not None:
                return ProbeResult(completed=completed, sent=sent, error=first_error)
    return ProbeResult(completed=completed, sent=sent)


class ProbeCommand(Command):
    name = "probe"
    description = "Send requests until the API rate limit is hit"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("--max-requests", type=int, default=5000, help="Default: 5000")
        parser.add_argument("--parallel", type=int, default=5, help="Requests per batch (default: 5)")
        parser.add_argument("--log-every", type=int, default=50, help="Progress interval")
        parser.add_argument("--tag", default=DEFAULT_TAG_NAME, help="Tag name to look up")

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        display = self.display(args)
        display.message(
            f"Sending up to {args.max_requests} requests ({args.parallel} in parallel, "
            f'tags.get_by_name("{args.tag}"))...'
        )
        display.message("[dim]Press Ctrl+C to stop early.[/dim]\n")

        result = run_probe(
            lambda: client.tags.get_by_name(args.tag),
            max_requests=args.max_requests,
            parallel=args.parallel,
            on_progress=lambda n: display.message(f"  {n} requests completed"),
            log_every=args.log_every,
        )

        if result.error is not None:
            display.api_error(result.error)
            display.message(
                f"Failed after {result.sent} request(s), {result.completed} succeeded."
            )
            return 1

        display.message(
            f"\n[green]Completed {result.completed} requests without hitting a limit.[/green]"
        )
        return 0


class RateLimitCommandGroup(CommandGroup):
    name = "ratelimit"
    description = "Rate-limit diagnostics"
    commands = (ProbeCommand,)
