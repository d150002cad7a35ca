"""
Navigation Schemas
Response schemas for the view controller endpoints.
"""
from pydantic import BaseModel, Field


class NavItemResponse(BaseModel):
    """Bottom navigation entry."""
    id: str = Field(..., description="View identifier")
    label: str
    icon: str = Field(..., description="Icon name")
    active: bool = False


class NavigationResponse(BaseModel):
    """Current navigation state."""
    active_view: str
    dictionary_open: bool = False
    items: list[NavItemResponse]
