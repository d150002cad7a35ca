"""
Home Schemas
Response schema for the home dashboard.
"""
from typing import Optional
from pydantic import BaseModel, Field

from wordwise.models.progress import UserProgress
from wordwise.models.vocabulary import Quote, Word


class ActivityPoint(BaseModel):
    """Words learned on one weekday."""
    name: str = Field(..., description="Weekday label")
    words: int = Field(..., ge=0)


class HomeResponse(BaseModel):
    """Home dashboard view model."""
    greeting: str
    word_of_the_day: Optional[Word] = Field(default=None, description="None only while loading")
    quote: Optional[Quote] = Field(default=None, description="None when no quote is available")
    stats: UserProgress
    weekly_activity: list[ActivityPoint] = Field(default_factory=list)
    can_open_dictionary: bool = True
