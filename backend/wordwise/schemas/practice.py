"""
Practice Schemas
Request and response schemas for the practice games.
"""
from typing import Optional
from pydantic import BaseModel, Field


# ==================== REQUEST SCHEMAS ====================

class QuizAnswerRequest(BaseModel):
    """Option selected for the current quiz question."""
    option: str = Field(..., min_length=1, description="Selected option text")


class SwipeAnswerRequest(BaseModel):
    """Swipe direction for the current pair."""
    is_synonym: bool = Field(..., description="True for a synonym swipe, False otherwise")


# ==================== RESPONSE SCHEMAS ====================

class PracticeActivity(BaseModel):
    """Practice menu entry."""
    mode: str
    title: str
    description: str
    icon: str


class QuizQuestionContent(BaseModel):
    """Question as shown to the learner (no answer key)."""
    definition: str
    options: list[str]


class QuizAnswerContent(BaseModel):
    """Feedback for an answered question."""
    word: str
    selected_option: str
    correct_answer: str
    is_correct: bool


class QuizStateResponse(BaseModel):
    """Quiz view model."""
    phase: str = Field(..., description="loading, presenting, answered or complete")
    question_number: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)
    question: Optional[QuizQuestionContent] = None
    answer: Optional[QuizAnswerContent] = None
    score: int = 0
    stars: Optional[int] = Field(default=None, description="Star rating once complete")
    message: Optional[str] = None


class SwipeCard(BaseModel):
    """Word pair as shown to the learner."""
    word1: str
    word2: str


class SwipeStateResponse(BaseModel):
    """Swipe game view model."""
    phase: str = Field(..., description="loading, presenting, feedback or complete")
    round_number: int = Field(default=0, ge=0)
    total_rounds: int = Field(default=0, ge=0)
    card: Optional[SwipeCard] = None
    feedback: Optional[str] = Field(default=None, description="correct or incorrect")
    are_synonyms: Optional[bool] = Field(default=None, description="Revealed with feedback")
    score: int = 0
    message: Optional[str] = None


class PracticeResponse(BaseModel):
    """Practice zone view model."""
    mode: str = Field(..., description="menu, quiz or swipe")
    activities: list[PracticeActivity] = Field(default_factory=list)
    quiz: Optional[QuizStateResponse] = None
    swipe: Optional[SwipeStateResponse] = None
