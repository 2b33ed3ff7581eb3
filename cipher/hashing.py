"""
Plain (unkeyed) digests rendered as Base64 text.
"""

import base64
import hashlib
from typing import Optional

from config import config


def _digest_b64(algorithm: str, source: str) -> str:
    digest = hashlib.new(algorithm, source.encode(config.HASH_ENCODING)).digest()
    return base64.b64encode(digest).decode("ascii")


def to_sha256(source: str, salt: Optional[str] = None) -> str:
    """
    Hash a string with SHA-256.

    Args:
        source: Text to hash
        salt: Optional suffix appended to the text before hashing

    Returns:
        Base64-encoded digest
    """
    if salt is not None:
        source = source + salt
    return _digest_b64("sha256", source)


def to_md5(source: str) -> str:
    """Hash a string with MD5 and return the Base64-encoded digest."""
    return _digest_b64("md5", source)
