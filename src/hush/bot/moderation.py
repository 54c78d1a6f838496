"""Voice message moderation.

Every voice message is checked against the cooldown store. Messages from
restricted users are deleted; all voice messages get the canned audio reply.
Transport calls run in background tasks and their failures are only logged.
"""

import asyncio
import logging
from pathlib import Path

from aiogram import Bot, F, Router
from aiogram.exceptions import TelegramAPIError
from aiogram.types import FSInputFile, Message, ReplyParameters

from ..cooldown import CooldownStore, Decision

logger = logging.getLogger(__name__)


class VoiceModerator:
    def __init__(self, store: CooldownStore, reply_audio: Path) -> None:
        self.store = store
        self.reply_audio = reply_audio
        self.messages_total = 0
        self._tasks: set[asyncio.Task[None]] = set()

    async def handle(self, message: Message, bot: Bot) -> None:
        if message.voice is None:
            return

        self.messages_total += 1

        if message.from_user is None:
            logger.warning(
                "Voice message %s in chat %s has no sender, skipping",
                message.message_id,
                message.chat.id,
            )
            return

        decision = self.store.evaluate(
            message.from_user.id, int(message.date.timestamp())
        )
        logger.debug(
            "Voice message %s from user %s: %s",
            message.message_id,
            message.from_user.id,
            decision.value,
        )

        task = asyncio.create_task(self._respond(bot, message, decision))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    async def wait_idle(self) -> None:
        """Wait for all in-flight deletes and replies to finish."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _respond(self, bot: Bot, message: Message, decision: Decision) -> None:
        chat_id = message.chat.id

        if decision is Decision.ALREADY_RESTRICTED:
            try:
                await bot.delete_message(chat_id=chat_id, message_id=message.message_id)
                logger.info(
                    "Deleted voice message %s in chat %s", message.message_id, chat_id
                )
            except TelegramAPIError as e:
                logger.warning(
                    "Failed to delete message %s in chat %s: %s",
                    message.message_id,
                    chat_id,
                    e,
                )

        # Restricted users get the reply too, even though their message is gone
        try:
            await bot.send_voice(
                chat_id=chat_id,
                voice=FSInputFile(self.reply_audio),
                reply_parameters=ReplyParameters(
                    message_id=message.message_id,
                    allow_sending_without_reply=True,
                ),
            )
        except TelegramAPIError as e:
            logger.warning(
                "Failed to send voice reply to message %s in chat %s: %s",
                message.message_id,
                chat_id,
                e,
            )

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Unexpected error while responding to voice message", exc_info=exc)


def create_router(moderator: VoiceModerator) -> Router:
    router = Router(name="voice_moderation")
    router.message.register(moderator.handle, F.voice)
    return router
