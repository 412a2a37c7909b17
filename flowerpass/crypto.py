"""
Keyed hash used to derive site passwords.

LEGAL NOTICE:
This module handles the master password. It must only be used for
legitimate personal password management on devices you own or administer.
"""

import logging
from typing import Optional, Protocol

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.backends import default_backend

logger = logging.getLogger(__name__)


class CollaboratorUnavailable(RuntimeError):
    """The keyed hash primitive cannot be used."""


class KeyedHash(Protocol):
    """Anything that turns (secret, message) into a fixed-length hex digest."""

    def digest(self, secret: str, message: str) -> str:
        ...


class HmacMd5:
    """HMAC-MD5 keyed hash, the primitive Flower Password is built on."""

    def __init__(self):
        """Initialize the hasher and make sure the backend accepts MD5."""
        self.backend = default_backend()
        try:
            hmac.HMAC(b"probe", hashes.MD5(), backend=self.backend)
        except UnsupportedAlgorithm as e:
            raise CollaboratorUnavailable(f"HMAC-MD5 is not supported by the crypto backend: {e}") from e

    def digest(self, secret: str, message: str) -> str:
        """
        Compute HMAC-MD5 with the secret as key and the message as data.

        Args:
            secret: The master password (HMAC key)
            message: The site key (HMAC data)

        Returns:
            32 lowercase hex characters
        """
        h = hmac.HMAC(secret.encode('utf-8'), hashes.MD5(), backend=self.backend)
        h.update(message.encode('utf-8'))
        return h.finalize().hex()


def load_default_hasher() -> KeyedHash:
    """Return the default keyed hash or raise CollaboratorUnavailable."""
    hasher = HmacMd5()
    logger.debug("HMAC-MD5 hasher loaded")
    return hasher


def require_hasher(hasher: Optional[KeyedHash]) -> KeyedHash:
    """Raise CollaboratorUnavailable if no hasher was provided."""
    if hasher is None:
        raise CollaboratorUnavailable("No keyed hash is available")
    return hasher
