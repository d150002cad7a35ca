"""
Navigation API Endpoints
Switch between views and open or close the dictionary overlay.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from wordwise.core.dependencies import get_view_controller
from wordwise.core.errors import InvalidTransitionError
from wordwise.schemas.navigation import NavigationResponse
from wordwise.views.controller import ViewController, ViewId


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=NavigationResponse)
async def get_navigation(controller: ViewController = Depends(get_view_controller)):
    """Active view, overlay state and the bottom navigation items."""
    return controller.navigation_state()


@router.post("/dictionary/open", response_model=NavigationResponse)
async def open_dictionary(controller: ViewController = Depends(get_view_controller)):
    """
    Open the dictionary overlay.

    Only available from the Home view.
    """
    try:
        controller.open_dictionary()
        return controller.navigation_state()
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/dictionary/close", response_model=NavigationResponse)
async def close_dictionary(controller: ViewController = Depends(get_view_controller)):
    """Close the dictionary overlay and discard its state."""
    controller.close_dictionary()
    return controller.navigation_state()


@router.post("/{view_id}", response_model=NavigationResponse)
async def navigate(
    view_id: ViewId,
    controller: ViewController = Depends(get_view_controller)
):
    """
    Navigate to another view.

    Leaving a view resets it; navigating to the active view changes nothing.
    """
    try:
        controller.navigate(view_id)
        return controller.navigation_state()
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Error navigating to {view_id.value}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to navigate: {str(e)}"
        )
