"""
Learn Schemas
Response schemas for the flashcard deck.
"""
from typing import Optional
from pydantic import BaseModel, Field


class Flashcard(BaseModel):
    """Front (word, pronunciation) and back (definition, example, synonyms) of a card."""
    word: str
    pronunciation: str
    definition: str
    example: str
    synonyms: list[str]
    difficulty: str
    is_bookmarked: bool = False


class LearnResponse(BaseModel):
    """Flashcard deck view model."""
    status: str = Field(..., description="learning or completed")
    card: Optional[Flashcard] = None
    position: int = Field(default=0, ge=0, description="1-based position of the card, 0 when empty")
    total: int = Field(default=0, ge=0)
    has_previous: bool = False
    has_next: bool = False
    message: Optional[str] = None
