from typing import Optional, Tuple, Union
from pydantic import BaseModel


GAME_KEYS: Tuple[str, ...] = ("wordle", "connections", "strands", "keyword")
GAMES_PER_DAY = len(GAME_KEYS)

Number = Union[int, float]


class RankRow(BaseModel):
    key: str  # canonical identity, see ranking.standing_key
    index: int  # position in the incoming standings list
    avg_points: float = 0.0
    total_points: float = 0.0


class LeaderboardRow(BaseModel):
    rank: Optional[int] = None
    name: str
    provider: Optional[str] = None
    games_played: Number = 0
    total_points: Number = 0
    avg_points: float = 0.0
