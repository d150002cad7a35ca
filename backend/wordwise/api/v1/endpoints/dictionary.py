"""
Dictionary API Endpoints
Word lookup shown in the dictionary overlay.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from wordwise.core.dependencies import get_view_controller
from wordwise.schemas.dictionary import DictionaryLookupRequest, DictionaryResponse
from wordwise.views.controller import ViewController


logger = logging.getLogger(__name__)

router = APIRouter()


def _require_open(controller: ViewController) -> None:
    if not controller.dictionary_open:
        raise HTTPException(status_code=409, detail="Dictionary is not open")


@router.get("", response_model=DictionaryResponse)
async def get_dictionary(controller: ViewController = Depends(get_view_controller)):
    """Current state of the dictionary overlay."""
    _require_open(controller)
    return await controller.dictionary.render()


@router.post("/lookup", response_model=DictionaryResponse)
async def lookup_word(
    request: DictionaryLookupRequest,
    controller: ViewController = Depends(get_view_controller)
):
    """
    Look up a word.

    Not-found words, short queries and service failures are reported in
    the response state with a message.
    """
    _require_open(controller)
    try:
        return await controller.dictionary.lookup(request.query)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error looking up '{request.query}': {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to look up word: {str(e)}"
        )
