import pandas as pd

from Api_calls.schemas import Player

COLUMNS = ["player", "skill", "rank", "level", "xp"]


def player_to_dataframe(player: Player) -> pd.DataFrame:
    """One row per stat, in hiscores table order."""
    rows = [
        {
            "player": player.name,
            "skill": s.skill,
            "rank": s.rank,
            "level": s.level,
            "xp": s.xp,
        }
        for s in player.stats
    ]
    return pd.DataFrame(rows, columns=COLUMNS)
