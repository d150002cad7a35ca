"""
Progress Models
Rank table and derived user progress.
"""
import math
from enum import Enum
from pydantic import BaseModel, Field


class RankName(str, Enum):
    """Learner rank tiers"""
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class Rank(BaseModel):
    """A rank tier unlocked after learning `min_words` words"""
    name: RankName
    icon: str
    min_words: int = Field(..., ge=0)

    class Config:
        use_enum_values = True
        frozen = True


RANKS: tuple[Rank, ...] = (
    Rank(name=RankName.BRONZE, icon="🥉", min_words=0),
    Rank(name=RankName.SILVER, icon="🥈", min_words=25),
    Rank(name=RankName.GOLD, icon="🥇", min_words=50),
    Rank(name=RankName.PLATINUM, icon="💎", min_words=100),
)


def validate_rank_table(ranks: tuple[Rank, ...]) -> None:
    """Raise ValueError unless thresholds start at 0 and strictly increase."""
    if not ranks:
        raise ValueError("Rank table is empty")
    if ranks[0].min_words != 0:
        raise ValueError("Lowest rank must start at 0 words")
    for lower, higher in zip(ranks, ranks[1:]):
        if higher.min_words <= lower.min_words:
            raise ValueError(
                f"Rank thresholds must strictly increase: "
                f"{lower.name}={lower.min_words}, {higher.name}={higher.min_words}"
            )


validate_rank_table(RANKS)


def rank_for(words_learned: int, ranks: tuple[Rank, ...] = RANKS) -> Rank:
    """Highest rank whose threshold is reached, falling back to the lowest."""
    for rank in reversed(ranks):
        if words_learned >= rank.min_words:
            return rank
    return ranks[0]


def calculate_accuracy(total_correct: int, total_answered: int) -> int:
    """Percentage of correct answers rounded half up, 0 when nothing was answered."""
    if total_answered <= 0:
        return 0
    return math.floor(total_correct * 100 / total_answered + 0.5)


class UserProgress(BaseModel):
    """Progress snapshot derived from the learned set and quiz counters"""
    words_learned: int = Field(default=0, ge=0)
    accuracy: int = Field(default=0, ge=0, le=100)
    rank: Rank = RANKS[0]

    class Config:
        frozen = True
