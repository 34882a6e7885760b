"""Cryptography utilities (bcrypt)"""
from functools import lru_cache
from typing import Optional
import secrets
import bcrypt

from tuiter.config import settings


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash password with bcrypt (salted, cost from BCRYPT_ROUNDS)"""
    password_bytes = password.encode('utf-8')
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash. Malformed hashes never verify."""
    try:
        if isinstance(hashed_password, str):
            hashed_password = hashed_password.encode('utf-8')
        password_bytes = plain_password.encode('utf-8')
        return bcrypt.checkpw(password_bytes, hashed_password)
    except ValueError:
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """Throwaway hash that credential checks verify against when the username is unknown"""
    return hash_password(secrets.token_urlsafe(16))
