"""
Learn API Endpoints
Flashcard deck over the words still to learn.
"""
import logging

from fastapi import APIRouter, Depends

from wordwise.core.dependencies import require_active_view
from wordwise.schemas.learn import LearnResponse
from wordwise.views.controller import ViewController, ViewId


logger = logging.getLogger(__name__)

router = APIRouter()

active_controller = require_active_view(ViewId.LEARN)


@router.get("", response_model=LearnResponse)
async def get_deck(controller: ViewController = Depends(active_controller)):
    """Current flashcard, or the completion message when every word is learned."""
    return await controller.learn.render()


@router.post("/next", response_model=LearnResponse)
async def next_card(controller: ViewController = Depends(active_controller)):
    """Move to the next card. Stays on the last card."""
    controller.learn.next()
    return await controller.learn.render()


@router.post("/previous", response_model=LearnResponse)
async def previous_card(controller: ViewController = Depends(active_controller)):
    """Move to the previous card. Stays on the first card."""
    controller.learn.previous()
    return await controller.learn.render()


@router.post("/mark-learned", response_model=LearnResponse)
async def mark_learned(controller: ViewController = Depends(active_controller)):
    """Mark the card on screen as learned and show the next one."""
    word = controller.learn.mark_current_learned()
    if word:
        logger.info(f"Marked as learned: {word}")
    return await controller.learn.render()


@router.post("/bookmark", response_model=LearnResponse)
async def toggle_bookmark(controller: ViewController = Depends(active_controller)):
    """Toggle the bookmark of the card on screen."""
    controller.learn.toggle_current_bookmark()
    return await controller.learn.render()
