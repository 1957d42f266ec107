"""
API key storage using the OS keychain.

Keys are kept by ``keyring``:
- macOS: Keychain Access
- Windows: Credential Manager
- Linux: libsecret/KWallet
"""

from __future__ import annotations

import logging
import warnings

import keyring
import keyring.errors

logger = logging.getLogger(__name__)


class CredentialManager:
    """Per-profile API key storage in the OS keychain."""

    SERVICE_NAME = "sevdesk"
    DEFAULT_PROFILE = "default"

    def __init__(self, profile: str = DEFAULT_PROFILE):
        """
        Initialize credential manager.

        Args:
            profile: Profile name for multi-account support (default: "default")
        """
        self.profile = profile

    @property
    def _username(self) -> str:
        return f"{self.profile}_api_key"

    def save_api_key(self, api_key: str) -> bool:
        """
        Save API key to the keychain.

        Returns:
            True if saved successfully, False otherwise
        """
        if not api_key:
            return False
        try:
            keyring.set_password(self.SERVICE_NAME, self._username, api_key)
        except keyring.errors.KeyringError as e:
            warnings.warn(f"Failed to save API key: {e}", UserWarning, stacklevel=2)
            return False
        logger.debug("Saved API key for profile %s", self.profile)
        return True

    def get_api_key(self) -> str | None:
        """Stored API key for this profile, or None."""
        try:
            return keyring.get_password(self.SERVICE_NAME, self._username)
        except keyring.errors.KeyringError as e:
            warnings.warn(f"Failed to read API key: {e}", UserWarning, stacklevel=2)
            return None

    def delete_api_key(self) -> bool:
        """
        Remove the stored API key.

        Returns:
            True if a key was removed, False if none was stored or removal failed
        """
        try:
            keyring.delete_password(self.SERVICE_NAME, self._username)
        except keyring.errors.PasswordDeleteError:
            return False
        except keyring.errors.KeyringError as e:
            warnings.warn(f"Failed to delete API key: {e}", UserWarning, stacklevel=2)
            return False
        return True

    @staticmethod
    def mask(api_key: str) -> str:
        """Show only the last four characters of a key."""
        if len(api_key) <= 4:
            return "****"
        return f"{'*' * 8}{api_key[-4:]}"
