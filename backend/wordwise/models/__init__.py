"""
Pydantic Models Module
Contains data models for all entities in the application.
"""
from wordwise.models.vocabulary import Word, WordDifficulty, Quote, QuizQuestion, SwipeItem
from wordwise.models.progress import Rank, RankName, RANKS, UserProgress, rank_for, calculate_accuracy

__all__ = [
    "Word", "WordDifficulty", "Quote", "QuizQuestion", "SwipeItem",
    "Rank", "RankName", "RANKS", "UserProgress", "rank_for", "calculate_accuracy"
]
