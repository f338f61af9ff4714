"""Player experience points and levelling up."""

from __future__ import annotations

from dataclasses import dataclass

LEVEL_UP_SOUND = "levelup"
THRESHOLD_GROWTH = 1.5


@dataclass(frozen=True)
class LevelUpEvent:
    new_level: int


@dataclass
class Experience:
    """Collected experience, current level and the amount needed for the next one."""

    curr_experience: int = 0
    level: int = 0
    threshold: int = 0
    pick_distance: float = 0.0

    def update(self) -> LevelUpEvent | None:
        """Gain at most one level if enough experience is held."""
        if self.curr_experience < self.threshold:
            return None
        self.curr_experience -= self.threshold
        self.level += 1
        self.threshold = int(self.threshold * THRESHOLD_GROWTH)
        return LevelUpEvent(new_level=self.level)