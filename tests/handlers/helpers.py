"""Factories for real aiogram messages used in handler tests."""

from datetime import UTC, datetime

from aiogram.methods import DeleteMessage, SendVoice
from aiogram.types import Chat, Message, User, Voice

from .mocked_bot import MockedBot

CHAT_ID = -100123

# Reusable dummy Message result for staging SendVoice responses.
_DUMMY_MSG = Message(
    message_id=999,
    date=datetime.now(UTC),
    chat=Chat(id=CHAT_ID, type="supergroup"),
)


def make_bot() -> MockedBot:
    return MockedBot()


def stage_delete(bot: MockedBot, ok: bool = True) -> None:
    if ok:
        bot.add_result_for(DeleteMessage, ok=True, result=True)
    else:
        bot.add_result_for(
            DeleteMessage,
            ok=False,
            description="Bad Request: message can't be deleted",
            error_code=400,
        )


def stage_reply(bot: MockedBot, ok: bool = True) -> None:
    if ok:
        bot.add_result_for(SendVoice, ok=True, result=_DUMMY_MSG)
    else:
        bot.add_result_for(
            SendVoice,
            ok=False,
            description="Forbidden: bot was kicked from the supergroup chat",
            error_code=403,
        )


def make_voice_message(
    timestamp: int,
    user_id: int | None = 12345,
    message_id: int = 1,
) -> Message:
    return Message(
        message_id=message_id,
        date=datetime.fromtimestamp(timestamp, UTC),
        chat=Chat(id=CHAT_ID, type="supergroup"),
        from_user=(
            User(id=user_id, is_bot=False, first_name="Test")
            if user_id is not None
            else None
        ),
        voice=Voice(file_id="voice-file", file_unique_id="voice-unique", duration=3),
    )


def make_text_message(
    timestamp: int, user_id: int = 12345, message_id: int = 1
) -> Message:
    return Message(
        message_id=message_id,
        date=datetime.fromtimestamp(timestamp, UTC),
        chat=Chat(id=CHAT_ID, type="supergroup"),
        from_user=User(id=user_id, is_bot=False, first_name="Test"),
        text="hello",
    )
