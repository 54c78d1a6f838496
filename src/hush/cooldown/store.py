"""Per-user voice cooldown state.

Each user moves through ``Unseen -> Unrestricted -> Restricted``. Restricted is
terminal: the state lives in memory for the lifetime of the process and is
never reset.
"""

import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)

# Compared against Unix timestamps in seconds, so the effective window is
# 1,800,000 s (~500 hours), not 30 minutes.
COOLDOWN_WINDOW = 1000 * 60 * 30


class Decision(Enum):
    FIRST_SEEN = "first_seen"
    ALLOWED = "allowed"
    RESTRICT = "restrict"
    ALREADY_RESTRICTED = "already_restricted"


@dataclass
class UserStat:
    user_id: int
    latest_voice_timestamp: int
    has_restricted_voice: bool = False


class CooldownStore(Protocol):
    """Anything that can decide on a voice message from a user."""

    def evaluate(self, user_id: int, now: int) -> Decision:
        """Atomically read, decide and update the state of `user_id`."""
        ...


class InMemoryCooldownStore:
    """Process-local store guarded by a single lock. Not shared across workers."""

    def __init__(self, window: int = COOLDOWN_WINDOW) -> None:
        self.window = window
        self._stats: dict[int, UserStat] = {}
        self._lock = threading.Lock()

    def evaluate(self, user_id: int, now: int) -> Decision:
        with self._lock:
            stat = self._stats.get(user_id)

            if stat is None:
                self._stats[user_id] = UserStat(
                    user_id=user_id, latest_voice_timestamp=now
                )
                return Decision.FIRST_SEEN

            if stat.has_restricted_voice:
                return Decision.ALREADY_RESTRICTED

            # Server timestamps may go backwards; a negative delta is inside the window
            if now - stat.latest_voice_timestamp < self.window:
                stat.has_restricted_voice = True
                logger.info(
                    "Restricting voice for user %s (delta %ss)",
                    user_id,
                    now - stat.latest_voice_timestamp,
                )
                return Decision.RESTRICT

            stat.latest_voice_timestamp = now
            return Decision.ALLOWED

    def get(self, user_id: int) -> UserStat | None:
        """Return a copy of the stored entry, or None for an unseen user."""
        with self._lock:
            stat = self._stats.get(user_id)
            return replace(stat) if stat is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._stats)
