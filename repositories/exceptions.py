"""
repositories/exceptions.py
---------------------------
Errors raised by the data access layer.
"""

import psycopg2

# Driver errors are propagated unchanged; this alias lets callers catch them
# without importing psycopg2 themselves.
StorageError = psycopg2.Error


class WaitlistError(Exception):
    """Base class for waitlist domain errors."""


class DuplicateEntryError(WaitlistError):
    """A uniqueness constraint on the waitlist table rejected an insert."""

    field: str = ""
    message: str = "This entry is already registered"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class DuplicateUsernameError(DuplicateEntryError):
    field = "twitter_username"
    message = "This Twitter username is already registered"


class DuplicateWalletError(DuplicateEntryError):
    field = "wallet_address"
    message = "This wallet address is already registered"
