"""Credential storage for the sevdesk CLI."""

from .credentials import CredentialManager

__all__ = ["CredentialManager"]
