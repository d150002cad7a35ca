"""
Home API Endpoints
Dashboard with daily content and learner stats.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from wordwise.core.dependencies import get_view_controller
from wordwise.schemas.home import HomeResponse
from wordwise.views.controller import ViewController


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HomeResponse)
async def get_home(controller: ViewController = Depends(get_view_controller)):
    """
    Get the home dashboard.

    Word and quote of the day come from the daily cache when it is fresh,
    otherwise from the content service.
    """
    try:
        return await controller.home.render()
    except Exception as e:
        logger.error(f"Error rendering home: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to load home: {str(e)}"
        )
