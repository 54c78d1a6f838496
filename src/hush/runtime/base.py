from typing import Protocol

from aiogram import Bot, Dispatcher


class BotRuntime(Protocol):
    """Abstract interface for bot runtime modes (webhook, polling)"""

    async def startup(self, bot: Bot, dp: Dispatcher) -> None:
        """Runtime-specific startup (e.g., set webhook)"""
        ...

    async def run(self, bot: Bot, dp: Dispatcher) -> None:
        """Run the bot until it is stopped"""
        ...

    async def shutdown(self, bot: Bot, dp: Dispatcher) -> None:
        """Runtime-specific cleanup (e.g., delete webhook, close session)"""
        ...
