from .core import create_bot, create_dispatcher
from .moderation import VoiceModerator, create_router

__all__ = ["VoiceModerator", "create_bot", "create_dispatcher", "create_router"]
