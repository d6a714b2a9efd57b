"""
services/waitlist_service.py
-----------------------------
Business logic for waitlist signups.
Turns repository results and duplicate errors into user-facing replies.
"""

from repositories.exceptions import DuplicateEntryError
from repositories.waitlist_repo import WaitlistRepository
from utils.logger import get_logger

logger = get_logger(__name__)

JOIN_USAGE = "Usage: /join <twitter_username> <wallet_address>"


class WaitlistService:
    """
    Handles waitlist signups and the public signup counter.

    Storage failures are not handled here; they propagate to the caller.
    """

    def __init__(self, repo: WaitlistRepository | None = None):
        self.repo = repo or WaitlistRepository()

    async def join(self, twitter_username: str, wallet_address: str) -> dict:
        """
        Register a Twitter handle and wallet address on the waitlist.

        Args:
            twitter_username: Handle as typed by the user, with or without '@'.
            wallet_address: Wallet address as typed by the user.

        Returns:
            Dict with 'success' and 'message' keys, plus 'entry' on success.
        """
        username = (twitter_username or "").strip().lstrip("@")
        wallet = (wallet_address or "").strip()
        if not username or not wallet:
            return {"success": False, "message": JOIN_USAGE}

        try:
            entry = await self.repo.insert(username, wallet)
        except DuplicateEntryError as e:
            return {"success": False, "message": str(e)}

        return {
            "success": True,
            "message": (
                f"✅ You're on the waitlist!\n"
                f"  🐦 Twitter: @{entry.twitter_username}\n"
                f"  👛 Wallet: {entry.wallet_address}\n"
                f"  🔖 Position: #{entry.id}"
            ),
            "entry": entry,
        }

    async def get_count(self) -> int:
        """Current number of signups (0 when the count cannot be read)."""
        return await self.repo.count()
