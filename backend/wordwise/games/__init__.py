"""
Practice Games
Quiz and synonym swipe state machines used by the practice view.
"""
from wordwise.games.quiz import QuizSession, QuizPhase, QuizAnswer, star_rating
from wordwise.games.swipe import SwipeSession, SwipePhase, SwipeFeedback

__all__ = [
    "QuizSession", "QuizPhase", "QuizAnswer", "star_rating",
    "SwipeSession", "SwipePhase", "SwipeFeedback"
]
