"""
AccountRef Value

Typed reference to the account that owns a recovery email.
"""

from dataclasses import dataclass

from .enums import AccountKind


@dataclass(frozen=True)
class AccountRef:
    """
    Tagged reference into one of the three account collections.

    kind selects the collection, key is the collection's identifying value
    (student ID, admin ID or organization username) and email is the
    recovery address the reference was resolved from.
    """

    kind: AccountKind
    key: str
    email: str
