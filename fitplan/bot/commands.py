"""Telegram command handlers: /start, /help, /generate, /regenerate."""
import asyncio
import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from fitplan.logic.program.enrollment import EnrollmentResult, EnrollmentService

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "Welcome to your Fitness Tracker!\n\n"
    "Use /generate to create your 8-week fitness plan with workouts and meals.\n\n"
    "You can view your progress in the mini-app."
)
HELP_TEXT = (
    "Available commands:\n"
    "/start - Start the bot and get information.\n"
    "/generate - Generate your 8-week fitness plan (first time setup).\n"
    "/regenerate - Reset and create a new fitness plan.\n"
    "/help - Show this help message."
)
ENROLLED_TEXT = "Your 8-week fitness plan has been generated! Check the mini-app to view your schedule."
ALREADY_ENROLLED_TEXT = "You already have a fitness plan. Use /regenerate if you want to start over."
REGENERATED_TEXT = "Your fitness plan has been reset and regenerated! Check the mini-app to view your updated schedule."


class ProgramCommands:
    def __init__(self, enrollment: EnrollmentService):
        self.enrollment = enrollment

    def register(self, app: Application) -> None:
        app.add_handler(CommandHandler("start", self.start))
        app.add_handler(CommandHandler("help", self.help))
        app.add_handler(CommandHandler("generate", self.generate))
        app.add_handler(CommandHandler("regenerate", self.regenerate))

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await update.message.reply_text(WELCOME_TEXT)

    async def help(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await update.message.reply_text(HELP_TEXT)

    async def generate(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        chat_id = update.effective_chat.id
        result = await asyncio.to_thread(self.enrollment.enroll, chat_id)
        if result is EnrollmentResult.ALREADY_ENROLLED:
            await update.message.reply_text(ALREADY_ENROLLED_TEXT)
        else:
            await update.message.reply_text(ENROLLED_TEXT)

    async def regenerate(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        chat_id = update.effective_chat.id
        await asyncio.to_thread(self.enrollment.regenerate, chat_id)
        await update.message.reply_text(REGENERATED_TEXT)
