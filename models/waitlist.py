"""
models/waitlist.py
------------------
Domain model for waitlist signups.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class WaitlistEntry:
    """
    A single signup pairing a Twitter handle with a wallet address.

    Attributes:
        twitter_username: Twitter handle, unique across the waitlist.
        wallet_address: Wallet address (up to 42 chars), unique across the waitlist.
        id: Database primary key (None until persisted).
        created_at: Timestamp assigned by the database on insert.
    """
    twitter_username: str
    wallet_address: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "WaitlistEntry":
        """Build an entry from an (id, twitter_username, wallet_address, created_at) row."""
        return cls(
            id=row[0],
            twitter_username=row[1],
            wallet_address=row[2],
            created_at=row[3],
        )

    def __str__(self) -> str:
        return f"#{self.id} @{self.twitter_username} | {self.wallet_address}"
