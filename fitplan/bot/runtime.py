"""Bot process wiring: Telegram application, command handlers, transport and reminder scheduler."""
import logging
from zoneinfo import ZoneInfo

from telegram import Update
from telegram.ext import Application

from fitplan.api.dependencies import ProgramServices
from fitplan.bot.commands import ProgramCommands
from fitplan.notify.scheduler import NotificationScheduler
from fitplan.notify.transport import TelegramTransport

logger = logging.getLogger(__name__)


class BotRuntime:
    def __init__(self, token: str, services: ProgramServices, timezone: str):
        self.application = Application.builder().token(token).build()
        ProgramCommands(services.enrollment).register(self.application)
        self.scheduler = NotificationScheduler(
            services.repo,
            TelegramTransport(self.application.bot),
            self.application.job_queue,
            ZoneInfo(timezone),
        )

    async def start(self) -> None:
        await self.application.initialize()
        await self.application.start()
        await self.application.updater.start_polling(allowed_updates=Update.ALL_TYPES)
        logger.info("Telegram bot started")
        jobs = self.scheduler.start()
        logger.info("Reminder scheduler started with %d jobs", jobs)

    async def stop(self) -> None:
        self.scheduler.shutdown()
        if self.application.updater.running:
            await self.application.updater.stop()
        await self.application.stop()
        await self.application.shutdown()
        logger.info("Telegram bot stopped")
