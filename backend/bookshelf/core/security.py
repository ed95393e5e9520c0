"""
Password hashing utilities.
"""
from functools import lru_cache

from passlib.context import CryptContext

from bookshelf.config import get_settings


@lru_cache
def get_password_context() -> CryptContext:
    """Password hashing context using bcrypt."""
    settings = get_settings()
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.bcrypt_rounds,
    )


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    return get_password_context().hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.
    
    A stored value that is not a recognised hash never verifies, and
    neither does a password bcrypt refuses to hash.
    
    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against
        
    Returns:
        True if password matches, False otherwise
    """
    context = get_password_context()
    if not context.identify(hashed_password):
        return False
    try:
        return context.verify(plain_password, hashed_password)
    except ValueError:
        # bcrypt refuses some inputs outright (e.g. NUL bytes)
        return False
