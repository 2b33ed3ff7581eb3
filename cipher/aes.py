"""
AES-256-CBC string encryption with a passphrase.

Ciphertext is exchanged as Base64 text:
    Base64(AES-256-CBC(PKCS7(utf8(plaintext)), key=SHA256(P), iv=MD5(P)))

Failures never raise. Wrong passphrase, corrupted or malformed input and
internal errors all return None; the cause is only written to the log.
"""

import base64
import binascii
import logging
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .passphrase import DerivedSecrets, PassphraseDeriver

logger = logging.getLogger(__name__)


class PassphraseCipher:
    """Encrypts and decrypts strings with a passphrase-derived AES key."""

    BLOCK_SIZE = 128  # bits
    ENCODING = "utf-8"

    @classmethod
    def derive(cls, passphrase: str) -> DerivedSecrets:
        """Derive the key/IV pair used by encrypt and decrypt."""
        return PassphraseDeriver.derive(passphrase)

    @classmethod
    def _cipher(cls, secrets: DerivedSecrets) -> Cipher:
        return Cipher(algorithms.AES(secrets.key), modes.CBC(secrets.iv))

    @classmethod
    def encrypt(cls, plaintext: str, passphrase: str) -> Optional[str]:
        """
        Encrypt a string and return the ciphertext as Base64.

        Args:
            plaintext: Text to encrypt (may be empty)
            passphrase: Passphrase the key and IV are derived from

        Returns:
            Base64 ciphertext, or None if encryption failed
        """
        try:
            secrets = cls.derive(passphrase)
            data = plaintext.encode(cls.ENCODING)

            padder = padding.PKCS7(cls.BLOCK_SIZE).padder()
            padded = padder.update(data) + padder.finalize()

            encryptor = cls._cipher(secrets).encryptor()
            ciphertext = encryptor.update(padded) + encryptor.finalize()

            return base64.b64encode(ciphertext).decode("ascii")

        except Exception as e:
            logger.warning(f"Encryption failed: {type(e).__name__}: {e}")
            return None

    @classmethod
    def decrypt(cls, ciphertext_b64: str, passphrase: str) -> Optional[str]:
        """
        Decrypt Base64 ciphertext produced by encrypt.

        Args:
            ciphertext_b64: Base64 ciphertext
            passphrase: Passphrase used for encryption

        Returns:
            The plaintext, or None if the input is malformed, the passphrase
            is wrong or decryption failed for any other reason
        """
        try:
            secrets = cls.derive(passphrase)
            ciphertext = base64.b64decode(ciphertext_b64, validate=True)

            decryptor = cls._cipher(secrets).decryptor()
            padded = decryptor.update(ciphertext) + decryptor.finalize()

            unpadder = padding.PKCS7(cls.BLOCK_SIZE).unpadder()
            data = unpadder.update(padded) + unpadder.finalize()

            return data.decode(cls.ENCODING)

        except binascii.Error as e:
            logger.warning(f"Decryption failed: malformed Base64 input ({e})")
            return None
        except Exception as e:
            logger.warning(f"Decryption failed: {type(e).__name__}: {e}")
            return None


def encrypt_to_base64(plaintext: str, passphrase: str) -> Optional[str]:
    """Encrypt plaintext with a passphrase. Returns None on failure."""
    return PassphraseCipher.encrypt(plaintext, passphrase)


def decrypt_from_base64(ciphertext_b64: str, passphrase: str) -> Optional[str]:
    """Decrypt Base64 ciphertext with a passphrase. Returns None on failure."""
    return PassphraseCipher.decrypt(ciphertext_b64, passphrase)
