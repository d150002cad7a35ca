"""
Vocabulary Models
Defines vocabulary word and practice content structures.
"""
from enum import Enum
from pydantic import BaseModel, Field, model_validator


class WordDifficulty(str, Enum):
    """Word difficulty level"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Word(BaseModel):
    """Vocabulary word. Identity is the case-sensitive `word` field."""
    word: str = Field(..., min_length=1)
    pronunciation: str = Field(..., description="Phonetic transcription")
    definition: str
    example: str = Field(..., description="Example sentence using the word")
    synonyms: list[str] = Field(default_factory=list)
    difficulty: WordDifficulty = WordDifficulty.MEDIUM

    class Config:
        use_enum_values = True
        frozen = True


class Quote(BaseModel):
    """Quote about words or language"""
    quote: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)

    class Config:
        frozen = True


class QuizQuestion(BaseModel):
    """Multiple-choice question asking for the word matching a definition"""
    word: str
    definition: str = Field(..., description="Definition posed as the question text")
    options: list[str]
    correct_answer: str

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_options(self) -> "QuizQuestion":
        if len(self.options) != 4:
            raise ValueError(f"Expected 4 options, got {len(self.options)}")
        if len(set(self.options)) != len(self.options):
            raise ValueError("Options must be distinct")
        if self.correct_answer not in self.options:
            raise ValueError("Correct answer must be one of the options")
        return self


class SwipeItem(BaseModel):
    """A word pair for the synonym swipe game"""
    word1: str = Field(..., min_length=1)
    word2: str = Field(..., min_length=1)
    are_synonyms: bool

    class Config:
        frozen = True
