"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = (
    "🚀 Welcome to the waitlist!\n\n"
    "Commands:\n"
    "/join <twitter_username> <wallet_address> - join the waitlist\n"
    "/count - how many people have joined\n"
    "/help - show this message"
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show the welcome message."""
    user = update.effective_user
    if user:
        logger.info(f"User {user.id} started the bot.")
    await update.message.reply_text(HELP_TEXT)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command."""
    await update.message.reply_text(HELP_TEXT)
