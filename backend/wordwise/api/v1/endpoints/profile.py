"""
Profile API Endpoints
Rank, stats and bookmarked words.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Path

from wordwise.core.dependencies import get_view_controller
from wordwise.schemas.profile import BookmarkResponse, ProfileResponse
from wordwise.views.controller import ViewController


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ProfileResponse)
async def get_profile(controller: ViewController = Depends(get_view_controller)):
    """Get the learner profile."""
    return await controller.profile.render()


@router.post("/bookmarks/{word}", response_model=BookmarkResponse)
async def toggle_bookmark(
    word: str = Path(..., description="Catalog word, case-sensitive"),
    controller: ViewController = Depends(get_view_controller)
):
    """Toggle a bookmark. Unknown words are rejected."""
    try:
        bookmarked = controller.profile.toggle_bookmark(word)
        return BookmarkResponse(word=word, bookmarked=bookmarked)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Word not found: {word}")
