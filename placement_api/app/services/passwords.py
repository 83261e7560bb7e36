"""
Password helpers

One policy and one hashing scheme for every path that sets a password.
"""

from typing import Optional

import bcrypt

from placement_api.libs.result import Error, Result, Return

# bcrypt only reads this many bytes of input
PASSWORD_MAX_BYTES = 72

# Constant-time filler for lookups that found no account
DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(4))


def validate_new_password(password: str, min_length: int) -> Result[None]:
    if len(password) < min_length:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at least {min_length} characters long",
            )
        )
    if len(password.encode()) > PASSWORD_MAX_BYTES:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at most {PASSWORD_MAX_BYTES} bytes long",
            )
        )
    return Return.ok(None)


def hash_password(password: str, rounds: int) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds)).decode()


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    encoded = password.encode()
    # No stored hash can come from an over-long password
    if not password_hash or len(encoded) > PASSWORD_MAX_BYTES:
        bcrypt.checkpw(encoded[:PASSWORD_MAX_BYTES], DUMMY_HASH)
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode())
    except ValueError:
        # Malformed stored hash
        return False
