import logging

from aiogram import Bot, Dispatcher

logger = logging.getLogger(__name__)


class PollingRuntime:
    """Long polling runtime"""

    async def startup(self, bot: Bot, dp: Dispatcher) -> None:
        # Polling and webhooks are mutually exclusive on Telegram's side
        await bot.delete_webhook()
        logger.info("Starting polling mode")

    async def run(self, bot: Bot, dp: Dispatcher) -> None:
        """Start long polling (blocking). Every update is handled in its own task."""
        await dp.start_polling(bot, handle_signals=True, close_bot_session=False)

    async def shutdown(self, bot: Bot, dp: Dispatcher) -> None:
        """Close bot session"""
        await bot.session.close()
