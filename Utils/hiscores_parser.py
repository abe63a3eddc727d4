"""
Decoder for the plain-text hiscores format.

Each line of a response body is "<rank>,<level>,<xp>" and lines come in the
same order as SKILL_NAMES. Lines past the table are ignored.
"""

import re
from typing import List, Optional, Union

from Api_calls.schemas import Player, Stat
from Exceptions.hiscores_errors import DecodeFailed
from Utils.logging_config import get_logger

logger = get_logger("hiscores_parser")

SENTINEL = -1

# ASCII digits only, optional sign, no padding
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1

SKILL_NAMES = (
    "Overall",
    "Attack",
    "Defence",
    "Strength",
    "Hitpoints",
    "Ranged",
    "Prayer",
    "Magic",
    "Cooking",
    "Woodcutting",
    "Fletching",
    "Fishing",
    "Firemaking",
    "Crafting",
    "Smithing",
    "Mining",
    "Herblore",
    "Agility",
    "Thieving",
    "Slayer",
    "Farming",
    "Runecrafting",
    "Hunter",
    "Construction",
)


def _to_int(token: str) -> int:
    if not INT_PATTERN.fullmatch(token):
        return SENTINEL

    value = int(token)
    if not I64_MIN <= value <= I64_MAX:
        return SENTINEL
    return value


def parse_stat_line(skill: str, line: str) -> Optional[Stat]:
    """
    Parse one "rank,level,xp" line.

    Returns None when the line does not have exactly three fields.
    Fields that are not plain signed 64-bit integers become -1.
    """
    tokens = line.strip().split(",")
    if len(tokens) != 3:
        return None

    rank, level, xp = (_to_int(t) for t in tokens)
    return Stat(skill=skill, rank=rank, level=level, xp=xp)


def decode_player(body: Union[str, bytes], player: str) -> Player:
    """
    Build a Player from a hiscores response body.

    bytes are decoded as UTF-8; anything that cannot be read as text
    raises DecodeFailed.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeFailed(f"Hiscores body for {player} is not valid UTF-8", cause=e) from e

    if not isinstance(body, str):
        raise DecodeFailed(f"Hiscores body for {player} is not text: {type(body).__name__}")

    stats: List[Stat] = []

    for skill, line in zip(SKILL_NAMES, body.split("\n")):
        stat = parse_stat_line(skill, line)
        if stat is None:
            logger.debug(f"Skipping malformed line for {skill}: {line!r}")
            continue
        stats.append(stat)

    return Player(name=player, stats=tuple(stats))
