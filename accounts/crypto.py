"""
Cryptography utilities for account credentials.

This module provides tools for encrypting and decrypting sensitive data
such as SMTP connection URLs with proper key management.
"""

import base64
import hashlib
from functools import lru_cache

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from django.conf import settings

from formsite_core.config import get_config
from formsite_core.utils.logging import ContextLogger

logger = ContextLogger(__name__)

FERNET_PREFIX = "gAAAAA"


@lru_cache(maxsize=8)
def derive_key(secret: bytes, salt: bytes) -> bytes:
    """Derive a Fernet key from ``secret`` and ``salt`` with PBKDF2-HMAC-SHA256."""
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=100000,
    )
    return base64.urlsafe_b64encode(kdf.derive(secret))


def get_encryption_key() -> bytes:
    """Return the configured encryption secret.

    Raises:
        ValueError: If no key is configured outside of DEBUG mode
    """
    key = get_config("ENCRYPTION_KEY")
    if key:
        return key.encode("utf-8") if isinstance(key, str) else key
    if settings.DEBUG:
        logger.warning("No encryption key configured, using insecure default")
        return b"insecure_dev_only_key_do_not_use_in_production!"
    raise ValueError("FIELD_ENCRYPTION_KEY must be configured")


def get_salt() -> bytes:
    salt = get_config("ENCRYPTION_SALT")
    if salt:
        return base64.b64decode(salt)
    # Stable per deployment so stored values stay readable across restarts
    return hashlib.sha256(settings.SECRET_KEY.encode("utf-8")).digest()[:16]


def fernet_token_length(size: int) -> int:
    """Length of the Fernet token for a plaintext of ``size`` bytes.

    A token is base64 of version (1), timestamp (8), IV (16), the
    PKCS7-padded ciphertext and the HMAC (32).
    """
    raw = 57 + 16 * (size // 16 + 1)
    return 4 * -(-raw // 3)


def get_fernet() -> Fernet:
    return Fernet(derive_key(get_encryption_key(), get_salt()))


def encrypt_value(value):
    """
    Encrypt a sensitive value.

    Args:
        value: String value to encrypt

    Returns:
        Fernet token as a string, or None for empty values
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.encode("utf-8")
    return get_fernet().encrypt(value).decode("utf-8")


def decrypt_value(encrypted_value):
    """
    Decrypt an encrypted value.

    Args:
        encrypted_value: Fernet token string

    Returns:
        Original string

    Raises:
        ValueError: If the token cannot be decrypted with the current key
    """
    if encrypted_value is None:
        return None
    try:
        return get_fernet().decrypt(encrypted_value.encode("utf-8")).decode("utf-8")
    except InvalidToken as e:
        logger.error("Decryption failed")
        raise ValueError("Unable to decrypt value") from e
