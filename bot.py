"""
Cart Screen Bot - Main Module

A Telegram bot that shows the user's shopping cart as an editable list
with totals and a checkout button.
Architecture: aiogram 3.x routers, polling mode.
"""
from __future__ import annotations

import asyncio
import signal
from types import FrameType

from aiogram import Bot, Dispatcher

from app.core.bootstrap import build_application
from app.core.config import load_settings
from logging_config import logger, setup_logging

# =============================================================================
# SIGNAL HANDLING
# =============================================================================

shutdown_event = asyncio.Event()


def signal_handler(sig: int, frame: FrameType | None) -> None:
    """Handle termination signals."""
    logger.info(f"Received signal {sig}, initiating shutdown...")
    shutdown_event.set()


# =============================================================================
# LIFECYCLE HOOKS
# =============================================================================


async def on_startup(bot: Bot) -> None:
    """Actions on bot startup."""
    try:
        await bot.delete_webhook(drop_pending_updates=True)
        logger.info("Polling mode activated")
    except Exception as e:
        logger.warning(f"Failed to delete webhook: {e}")


async def on_shutdown(bot: Bot) -> None:
    """Actions on bot shutdown."""
    await bot.session.close()
    logger.info("Bot stopped")


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


async def run_polling(bot: Bot, dp: Dispatcher) -> None:
    polling_task = asyncio.create_task(dp.start_polling(bot, handle_signals=False))
    shutdown_task = asyncio.create_task(shutdown_event.wait())

    done, _ = await asyncio.wait(
        {polling_task, shutdown_task}, return_when=asyncio.FIRST_COMPLETED
    )
    if shutdown_task in done:
        await dp.stop_polling()
    for task in (polling_task, shutdown_task):
        if not task.done():
            task.cancel()
    await asyncio.gather(polling_task, shutdown_task, return_exceptions=True)


async def main() -> None:
    """Main bot entry point."""
    settings = load_settings()
    setup_logging(settings.log_level)

    logger.info("=" * 50)
    logger.info("Starting Cart Screen Bot")
    logger.info(f"Default language: {settings.default_language}")
    logger.info(f"Currency: {settings.currency.symbol} ({settings.currency.position})")
    logger.info("=" * 50)

    bot, dp, _cart_storage = build_application(settings)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    await on_startup(bot)
    try:
        await run_polling(bot, dp)
    finally:
        await on_shutdown(bot)


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()
