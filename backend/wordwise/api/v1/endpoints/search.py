"""
Search API Endpoints
Reverse dictionary: find words that match a description.
"""
import logging

from fastapi import APIRouter, Depends

from wordwise.core.dependencies import require_active_view
from wordwise.schemas.dictionary import ReverseDictionaryRequest, ReverseDictionaryResponse
from wordwise.views.controller import ViewController, ViewId


logger = logging.getLogger(__name__)

router = APIRouter()

active_controller = require_active_view(ViewId.SEARCH)


@router.get("", response_model=ReverseDictionaryResponse)
async def get_search(controller: ViewController = Depends(active_controller)):
    """Last reverse dictionary result shown on the Search view."""
    return await controller.search.render()


@router.post("", response_model=ReverseDictionaryResponse)
async def search_words(
    request: ReverseDictionaryRequest,
    controller: ViewController = Depends(active_controller)
):
    """
    Find words for a description.

    Descriptions shorter than the configured minimum are rejected with a
    message and never reach the content service. Failures are reported in
    the response state, not as HTTP errors.
    """
    return await controller.search.search(request.description)
