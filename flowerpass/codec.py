"""
Turning a hex digest into the characters of a site password.
"""

import base64
import binascii
import string
from enum import Enum

from . import config


class EncodingError(ValueError):
    """The digest cannot be decoded into bytes."""


class EncodingMode(Enum):
    """Output alphabet of a derived password."""
    HEX_DIGEST = config.MODE_FLOWER
    COMPACT_BASE64 = config.MODE_BASE64

    @classmethod
    def from_value(cls, value) -> 'EncodingMode':
        """Parse a persisted mode value ("flower" or "base64")."""
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        raise ValueError(f"Unknown encoding mode: {value!r}")


def encode(hex_digest: str, mode: EncodingMode) -> str:
    """
    Encode a hex digest in the requested alphabet.

    HEX_DIGEST returns the digest unchanged. COMPACT_BASE64 reads each pair
    of hex characters as one byte and base64-encodes the bytes.

    Raises:
        EncodingError: If the digest has an odd length or is not hex
    """
    if mode is EncodingMode.HEX_DIGEST:
        return hex_digest
    if mode is EncodingMode.COMPACT_BASE64:
        if len(hex_digest) % 2:
            raise EncodingError(f"Hex digest has odd length {len(hex_digest)}")
        try:
            raw = binascii.unhexlify(hex_digest)
        except (binascii.Error, ValueError) as e:
            raise EncodingError(f"Digest is not valid hex: {e}") from e
        return base64.b64encode(raw).decode('ascii')
    raise ValueError(f"Unknown encoding mode: {mode!r}")


def truncate(code: str, length: int) -> str:
    """Return the first `length` characters; everything if shorter, "" if length <= 0."""
    if length <= 0:
        return ""
    return code[:length]


def apply_flower_rule(code: str) -> str:
    """
    Move a letter to the front of a code that starts with a digit.

    The first character is swapped with the first ASCII letter in the code.
    Codes that start with a non-digit, or contain no letter at all, are
    returned unchanged.
    """
    if not code or code[0] not in string.digits:
        return code

    for index, char in enumerate(code):
        if char in string.ascii_letters:
            chars = list(code)
            chars[0], chars[index] = chars[index], chars[0]
            return ''.join(chars)
    return code
