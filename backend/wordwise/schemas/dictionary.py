"""
Dictionary Schemas
Request and response schemas for word lookup and the reverse dictionary.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from wordwise.models.vocabulary import Word


class DisplayState(str, Enum):
    """What a lookup screen is showing"""
    EMPTY = "empty"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


# ==================== REQUEST SCHEMAS ====================

class DictionaryLookupRequest(BaseModel):
    """Word to look up."""
    query: str = Field(default="", description="Word to look up")


class ReverseDictionaryRequest(BaseModel):
    """Description to find words for."""
    description: str = Field(default="", description="Definition or concept to search for")


# ==================== RESPONSE SCHEMAS ====================

class DictionaryResponse(BaseModel):
    """Dictionary lookup view model."""
    state: DisplayState
    query: str = ""
    word: Optional[Word] = None
    message: Optional[str] = None

    class Config:
        use_enum_values = True


class ReverseDictionaryResponse(BaseModel):
    """Reverse dictionary view model."""
    state: DisplayState
    description: str = ""
    words: list[str] = Field(default_factory=list)
    message: Optional[str] = None

    class Config:
        use_enum_values = True
