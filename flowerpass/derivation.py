"""
Site password derivation: keyed hash, encode, truncate, flower rule.
"""

import logging
from typing import Optional, Union

from .codec import EncodingMode, encode, truncate, apply_flower_rule
from .crypto import KeyedHash, load_default_hasher, require_hasher

logger = logging.getLogger(__name__)


class PasswordDeriver:
    """Derives site passwords with an injected keyed hash."""

    def __init__(self, hasher: Optional[KeyedHash]):
        """
        Initialize the deriver.

        Args:
            hasher: Keyed hash used as HMAC(secret, site_key). None means the
                primitive is missing; derive() then raises CollaboratorUnavailable.
        """
        self.hasher = hasher

    def derive(self, secret: str, site_key: str, mode: Union[EncodingMode, str],
               length: Union[int, str]) -> Optional[str]:
        """
        Derive the password for one site.

        Args:
            secret: The master password
            site_key: Normalized site identifier
            mode: Output alphabet, or its persisted value
            length: Requested number of characters

        Returns:
            The derived password, or None when the secret or site key is empty

        Raises:
            CollaboratorUnavailable: If no keyed hash is available
            EncodingError: If the hash returned a digest that cannot be encoded
        """
        if not secret or not site_key:
            return None

        mode = EncodingMode.from_value(mode)
        length = int(length)
        hasher = require_hasher(self.hasher)

        hex_digest = hasher.digest(secret, site_key)
        code = encode(hex_digest, mode)
        code = truncate(code, length)
        return apply_flower_rule(code)


def derive_password(secret: str, site_key: str, mode: Union[EncodingMode, str],
                    length: Union[int, str], hasher: Optional[KeyedHash] = None) -> Optional[str]:
    """Derive a site password, using HMAC-MD5 unless a hasher is given."""
    if not secret or not site_key:
        return None
    if hasher is None:
        hasher = load_default_hasher()
    return PasswordDeriver(hasher).derive(secret, site_key, mode, length)
