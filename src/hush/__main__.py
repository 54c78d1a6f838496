"""Entry point: run the voice moderation bot.

Runs in long polling mode by default, or in webhook mode when
``TELEGRAM_WEBHOOK_URL`` is set.
"""

import asyncio
import logging
import sys

from pydantic import ValidationError

from .bot import VoiceModerator, create_bot, create_dispatcher
from .config import Settings, get_settings
from .cooldown import InMemoryCooldownStore
from .runtime import BotRuntime, PollingRuntime, WebhookRuntime

logger = logging.getLogger("hush")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stdout)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        logger.critical("Invalid configuration: %s", e)
        raise SystemExit(1) from e


def _select_runtime(settings: Settings) -> BotRuntime:
    if settings.use_webhook:
        return WebhookRuntime(settings)
    return PollingRuntime()


async def run(settings: Settings) -> None:
    if not settings.reply_audio_path.is_file():
        logger.warning(
            "Reply audio %s not found, voice replies will fail",
            settings.reply_audio_path,
        )

    moderator = VoiceModerator(InMemoryCooldownStore(), settings.reply_audio_path)
    bot = create_bot(settings)
    dp = create_dispatcher(moderator)
    runtime = _select_runtime(settings)

    try:
        await runtime.startup(bot, dp)
        logger.info("Bot started")
        await runtime.run(bot, dp)
    finally:
        await moderator.wait_idle()
        await runtime.shutdown(bot, dp)
        logger.info(
            "Bot stopped after %d voice messages", moderator.messages_total
        )


def main() -> None:
    _setup_logging()
    settings = _load_settings()
    logging.getLogger().setLevel(settings.log_level)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
