"""
Main CLI entry point for the sevdesk client.
"""

import argparse
import logging
import sys

import requests
from rich.logging import RichHandler

from sevdesk import __version__

from .._client import SevDeskClient
from .._exceptions import AuthenticationError, SevDeskError, UnknownApiError
from ..auth.credentials import CredentialManager
from ..config import api_key_from_env
from .display import Display
from .registry import registry

CANCELLED_EXIT = 130  # POSIX: 128 + SIGINT (2)


def create_client(
    api_key: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
    profile: str = CredentialManager.DEFAULT_PROFILE,
) -> SevDeskClient:
    """Create a client from --api-key, then SEVDESK_API_KEY, then the keychain."""
    if not api_key and not api_key_from_env():
        api_key = CredentialManager(profile).get_api_key()
    return SevDeskClient(api_key=api_key, base_url=base_url, timeout=timeout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sevdesk",
        description="sevDesk API command-line client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--api-key", help="sevDesk API key (or set SEVDESK_API_KEY)")
    parser.add_argument("--base-url", help="Custom API base URL")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default: 5)")
    parser.add_argument("--profile", default=CredentialManager.DEFAULT_PROFILE, help="Key profile")
    parser.add_argument("--json", action="store_true", help="Print raw JSON instead of tables")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for command in registry.get_primary_commands():
        subparser = subparsers.add_parser(
            command.name, aliases=list(command.aliases), help=command.description
        )
        command.add_arguments(subparser)
    return parser


def _real_main(argv: list[str]) -> int:
    """Parse arguments, build the client and run the selected command."""
    registry.auto_discover_commands()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(show_path=False)]
        )

    display = Display(as_json=args.json)
    command = registry.get_command(args.command)

    client = None
    try:
        if command.requires_auth:
            client = create_client(args.api_key, args.base_url, args.timeout, args.profile)
        return command.run(args, client)
    except AuthenticationError as e:
        display.error(str(e))
        display.message("💡 Run 'sevdesk auth login' or set the SEVDESK_API_KEY environment variable")
        return 1
    except UnknownApiError as e:
        display.api_error(e)
        return 1
    except SevDeskError as e:
        display.error(str(e))
        return 1
    except requests.RequestException as e:
        display.error(f"Network error: {e}")
        return 1
    finally:
        if client is not None:
            client.close()


def main() -> None:
    """Console script entry point."""
    try:
        code = _real_main(sys.argv[1:])
    except KeyboardInterrupt:
        sys.stderr.write("\n✖ Cancelled by user\n")
        code = CANCELLED_EXIT
    raise SystemExit(code)


if __name__ == "__main__":
    main()
