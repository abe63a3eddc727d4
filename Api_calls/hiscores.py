from enum import Enum

from Api_calls.schemas import Player
from Exceptions.hiscores_errors import PlayerNotFound, RequestFailed
from Utils.hiscores_parser import decode_player
from Utils.http import safe_get
from Utils.logging_config import get_logger

BASE_URL = "https://secure.runescape.com"

STANDARD_HIGH_SCORES = f"{BASE_URL}/m=hiscore_oldschool/index_lite.ws"
IRONMAN_HIGH_SCORES = f"{BASE_URL}/m=hiscore_oldschool_ironman/index_lite.ws"
HARDCORE_HIGH_SCORES = f"{BASE_URL}/m=hiscore_oldschool_hardcore_ironman/index_lite.ws"
ULTIMATE_HIGH_SCORES = f"{BASE_URL}/m=hiscore_oldschool_ultimate/index_lite.ws"

logger = get_logger("hiscores")


class HiscoreType(Enum):
    STANDARD = STANDARD_HIGH_SCORES
    IRONMAN = IRONMAN_HIGH_SCORES
    HARDCORE = HARDCORE_HIGH_SCORES
    ULTIMATE = ULTIMATE_HIGH_SCORES


def build_hiscores_url(base_url: str, player: str) -> str:
    """Append the player query parameter. The name is not percent-encoded."""
    return f"{base_url}?player={player}"


def _fetch_player(base_url: str, player: str) -> Player:
    url = build_hiscores_url(base_url, player)

    logger.info(f"Fetching hiscores for player={player} url={url}")

    try:
        resp = safe_get(url)
    except RequestFailed as e:
        if e.status_code == 404:
            logger.warning(f"Player not found: {player}")
            raise PlayerNotFound(player, url) from e
        logger.error(f"Hiscores request failed for player={player}: {e}")
        raise

    result = decode_player(resp.content, player)

    logger.info(f"Decoded {len(result.stats)} stats for player={player}")
    return result


def high_scores(player: str, hiscore_type: HiscoreType = HiscoreType.STANDARD) -> Player:
    """Look up a player on the given hiscores board."""
    return _fetch_player(hiscore_type.value, player)


def standard_high_scores(player: str) -> Player:
    return high_scores(player, HiscoreType.STANDARD)


def ironman_high_scores(player: str) -> Player:
    return high_scores(player, HiscoreType.IRONMAN)


def hardcore_high_scores(player: str) -> Player:
    return high_scores(player, HiscoreType.HARDCORE)


def ultimate_high_scores(player: str) -> Player:
    return high_scores(player, HiscoreType.ULTIMATE)
