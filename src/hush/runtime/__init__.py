from .base import BotRuntime
from .webhook import WebhookRuntime
from .polling import PollingRuntime

__all__ = ["BotRuntime", "WebhookRuntime", "PollingRuntime"]
