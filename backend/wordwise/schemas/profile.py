"""
Profile Schemas
Response schemas for the profile dashboard.
"""
from typing import Optional
from pydantic import BaseModel, Field

from wordwise.models.progress import Rank, UserProgress


class ProgressPoint(BaseModel):
    """Weekly progress sample."""
    week: str
    learned: int = Field(..., ge=0)
    accuracy: int = Field(..., ge=0, le=100)


class BookmarkedWord(BaseModel):
    word: str
    definition: str


class ProfileResponse(BaseModel):
    """Profile view model."""
    display_name: str
    rank: Rank
    stats: UserProgress
    progress_over_time: list[ProgressPoint] = Field(default_factory=list)
    bookmarked_words: list[BookmarkedWord] = Field(default_factory=list)
    message: Optional[str] = Field(default=None, description="Shown when there are no bookmarks")


class BookmarkResponse(BaseModel):
    """Result of a bookmark toggle."""
    word: str
    bookmarked: bool
