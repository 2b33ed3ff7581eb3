"""
Cipher module for Po Helper.

Handles:
- Passphrase derivation (SHA-256 key, MD5 IV)
- String encryption (AES-256-CBC, PKCS#7, Base64 text)
- Plain digests (SHA-256, MD5) as Base64 text
"""

from .passphrase import PassphraseDeriver, DerivedSecrets, derive_secrets
from .aes import PassphraseCipher, encrypt_to_base64, decrypt_from_base64
from .hashing import to_sha256, to_md5

__all__ = [
    "PassphraseDeriver",
    "DerivedSecrets",
    "derive_secrets",
    "PassphraseCipher",
    "encrypt_to_base64",
    "decrypt_from_base64",
    "to_sha256",
    "to_md5",
]
