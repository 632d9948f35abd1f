"""Outbound message transport over the Telegram Bot API."""
import logging

from telegram.constants import ParseMode
from telegram.error import TelegramError

logger = logging.getLogger(__name__)


class TelegramTransport:
    """Sends text messages to a chat; failures are logged and reported as False."""

    def __init__(self, bot):
        self.bot = bot

    async def send_message(self, user_id: int, text: str, formatted: bool = False) -> bool:
        try:
            await self.bot.send_message(
                chat_id=user_id,
                text=text,
                parse_mode=ParseMode.MARKDOWN if formatted else None,
            )
        except TelegramError as e:
            logger.warning("Failed to send message to %s: %s", user_id, e)
            return False
        return True
