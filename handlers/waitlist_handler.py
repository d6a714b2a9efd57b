"""
handlers/waitlist_handler.py
-----------------------------
Handles /join and /count.
Delegates all logic to WaitlistService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from repositories.exceptions import StorageError
from services.waitlist_service import JOIN_USAGE, WaitlistService
from utils.logger import get_logger

logger = get_logger(__name__)
waitlist_service = WaitlistService()


async def join_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /join <twitter_username> <wallet_address>.
    Example: /join @alice 0x52908400098527886E0F7030069857D2E4169EE7
    """
    args = context.args or []
    if len(args) != 2:
        await update.message.reply_text(JOIN_USAGE)
        return

    try:
        result = await waitlist_service.join(args[0], args[1])
    except StorageError as e:
        logger.error(f"Waitlist signup failed for user {update.effective_user.id}: {e}")
        await update.message.reply_text("❌ Something went wrong, please try again later.")
        return

    await update.message.reply_text(result["message"])


async def count_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /count - show the number of signups."""
    total = await waitlist_service.get_count()
    await update.message.reply_text(f"👥 {total} people have joined the waitlist.")
