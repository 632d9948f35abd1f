from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from fitplan.api.dependencies import get_services
from fitplan.api.routes import program, progress, reminders
from fitplan.bot.runtime import BotRuntime
from fitplan.events.delivery_log import DELIVERY_LOG
from fitplan.infra.Record_Store import StoreUnavailableError
from fitplan.utilities.config import BOT_TOKEN, TIMEZONE, CORS_ORIGINS

# Logging
logger = logging.getLogger("fitplan_app")

# Initialize FastAPI app
app = FastAPI(title="8-Week Fitness Program API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(program.router)
app.include_router(progress.router)
app.include_router(reminders.router)


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    logger.error("Record store unavailable during %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Record store unavailable"})


@app.on_event("startup")
async def _startup_bot():
    """Start the delivery log, then the Telegram bot and its reminder scheduler if a token is configured."""
    DELIVERY_LOG.start()
    if not BOT_TOKEN:
        logger.warning("BOT_TOKEN not set; Telegram bot and reminders are disabled.")
        return
    runtime = BotRuntime(BOT_TOKEN, get_services(), TIMEZONE)
    await runtime.start()
    app.state.bot_runtime = runtime


@app.on_event("shutdown")
async def _shutdown_bot():
    runtime = getattr(app.state, "bot_runtime", None)
    if runtime is not None:
        await runtime.stop()
        logger.info("Server shutting down")
