"""Authentication commands: store, inspect and remove the API key."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
import getpass
from typing import TYPE_CHECKING

from ...auth.credentials import CredentialManager
from ...config import api_key_from_env
from ..base import Command, CommandGroup

if TYPE_CHECKING:
    from ..._client import SevDeskClient


class LoginCommand(Command):
    """Verify an API key and store it in the keychain."""

    name = "login"
    description = "Store an API key in the OS keychain"
    requires_auth = False

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("--key", help="API key (prompted for when omitted)")
        parser.add_argument(
            "--no-verify", action="store_true", help="Store the key without calling the API"
        )

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        from ..main import create_client

        display = self.display(args)
        api_key = args.key or args.api_key or getpass.getpass("sevDesk API key: ").strip()
        if not api_key:
            display.error("No API key entered")
            return 1

        if not args.no_verify:
            with create_client(api_key, args.base_url, args.timeout) as verifier:
                verifier.tools.get_bookkeeping_system_version()

        manager = CredentialManager(args.profile)
        if not manager.save_api_key(api_key):
            display.error("Could not store the API key in the keychain")
            return 1
        display.message(
            f"[green]✅ Stored API key {manager.mask(api_key)} for profile '{args.profile}'[/green]"
        )
        return 0


class LogoutCommand(Command):
    name = "logout"
    description = "Remove the stored API key"
    requires_auth = False

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        display = self.display(args)
        if CredentialManager(args.profile).delete_api_key():
            display.message(f"👋 Removed API key for profile '{args.profile}'")
        else:
            display.message(f"[dim]No API key stored for profile '{args.profile}'[/dim]")
        return 0


class StatusCommand(Command):
    name = "status"
    aliases = ("s",)
    description = "Show where the API key comes from"
    requires_auth = False

    def execute(self, args: Namespace, client: SevDeskClient) -> int:
        display = self.display(args)
        manager = CredentialManager(args.profile)

        if args.api_key:
            source, key = "--api-key", args.api_key
        elif api_key_from_env():
            source, key = "environment", api_key_from_env()
        else:
            source, key = "keychain", manager.get_api_key()

        if not key:
            display.error("Not authenticated")
            return 1
        display.message(f"🔑 API key {manager.mask(key)} (from {source})")
        return 0


class AuthCommandGroup(CommandGroup):
    """Authentication command group."""

    name = "auth"
    description = "Manage the stored sevDesk API key"
    requires_auth = False
    commands = (LoginCommand, LogoutCommand, StatusCommand)
