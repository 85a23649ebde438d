"""
Password hashing for stored user credentials.
"""
import logging

from passlib.context import CryptContext

from .config import settings

logger = logging.getLogger(__name__)

# Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
_context_options = {"schemes": ["pbkdf2_sha256"], "deprecated": "auto"}
if settings.PASSWORD_HASH_ROUNDS:
    _context_options["pbkdf2_sha256__rounds"] = settings.PASSWORD_HASH_ROUNDS

pwd_context = CryptContext(**_context_options)


def hash_password(password: str) -> str:
    """Return a salted one-way hash of the plaintext password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    A stored value that is not a recognised hash never matches.
    """
    if not hashed_password or pwd_context.identify(hashed_password) is None:
        logger.warning("Stored password is not a recognised hash")
        return False
    return pwd_context.verify(plain_password, hashed_password)
