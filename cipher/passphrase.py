"""
Passphrase derivation for the AES helpers.

Both the AES key and the IV are digests of the same passphrase, so the same
passphrase always yields the same pair. This matches the ciphertext produced
by earlier versions of the library and must not change.
"""

import hashlib
from dataclasses import dataclass


@dataclass(frozen=True)
class DerivedSecrets:
    """Key and IV derived from a single passphrase."""
    key: bytes
    iv: bytes

    def __repr__(self) -> str:
        return f"DerivedSecrets(key=<{len(self.key)} bytes>, iv=<{len(self.iv)} bytes>)"


class PassphraseDeriver:
    """Derives an AES-256 key and a CBC IV from a passphrase."""

    KEY_LEN = 32  # SHA-256 digest, AES-256 key
    IV_LEN = 16  # MD5 digest, AES block size
    ENCODING = "utf-8"

    @classmethod
    def derive(cls, passphrase: str) -> DerivedSecrets:
        """
        Derive the key and IV for a passphrase.

        Args:
            passphrase: The caller's passphrase (any string)

        Returns:
            DerivedSecrets with a 32-byte key and a 16-byte IV
        """
        secret = passphrase.encode(cls.ENCODING)

        key = hashlib.sha256(secret).digest()
        iv = hashlib.md5(secret).digest()

        return DerivedSecrets(key=key, iv=iv)


def derive_secrets(passphrase: str) -> DerivedSecrets:
    return PassphraseDeriver.derive(passphrase)
