"""
Pydantic schemas for hiscores lookups.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional, Tuple


class Stat(BaseModel):
    """One skill line from the hiscores. -1 marks an unparseable field."""
    model_config = ConfigDict(frozen=True)

    skill: str
    rank: int
    level: int
    xp: int

    @property
    def is_ranked(self) -> bool:
        return self.rank != -1


class Player(BaseModel):
    """A player's skills, in hiscores table order."""
    model_config = ConfigDict(frozen=True)

    name: str
    stats: Tuple[Stat, ...] = ()

    @property
    def skills(self) -> Tuple[str, ...]:
        return tuple(s.skill for s in self.stats)

    def stat(self, skill: str) -> Optional[Stat]:
        wanted = skill.lower()
        for s in self.stats:
            if s.skill.lower() == wanted:
                return s
        return None
