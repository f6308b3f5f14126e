"""Password hashing and verification utilities."""

from typing import Optional

from pwdlib import PasswordHash

# Argon2
password_hash = PasswordHash.recommended()

# Verified against when the account is unknown so both login failure paths cost the same
_DUMMY_HASH = password_hash.hash("zerobudget-timing-equalizer")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify plain password against hashed password (None means no such account)."""
    if hashed_password is None:
        password_hash.verify(plain_password, _DUMMY_HASH)
        return False
    return password_hash.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    """Hash password using Argon2."""
    return password_hash.hash(password)
