from .store import (
    COOLDOWN_WINDOW,
    CooldownStore,
    Decision,
    InMemoryCooldownStore,
    UserStat,
)

__all__ = [
    "COOLDOWN_WINDOW",
    "CooldownStore",
    "Decision",
    "InMemoryCooldownStore",
    "UserStat",
]
