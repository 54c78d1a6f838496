from aiogram import Bot, Dispatcher

from ..config import Settings
from .moderation import VoiceModerator, create_router


def create_bot(settings: Settings) -> Bot:
    """Create and configure Bot instance"""
    return Bot(token=settings.telegram_bot_token)


def create_dispatcher(moderator: VoiceModerator) -> Dispatcher:
    """Create Dispatcher with the voice moderation router"""
    dp = Dispatcher()
    dp.include_router(create_router(moderator))
    return dp
