"""
FastAPI Dependencies
Dependency injection for the view controller and the change notifier.
"""
from fastapi import Depends, HTTPException, status

from wordwise.core.errors import InvalidTransitionError
from wordwise.core.websocket_manager import WebSocketManager, websocket_manager
from wordwise.views.controller import ViewController, ViewId, view_controller


def get_view_controller() -> ViewController:
    """
    Get the application's view controller.

    Tests swap it through app.dependency_overrides.
    """
    return view_controller


def require_active_view(view_id: ViewId):
    """
    Build a dependency that yields the controller only while view_id is active.

    Requests for a view that is not shown are refused with 409.
    """
    async def dependency(
        controller: ViewController = Depends(get_view_controller)
    ) -> ViewController:
        try:
            controller.require_active(view_id)
        except InvalidTransitionError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        return controller

    return dependency


def get_websocket_manager() -> WebSocketManager:
    """Get the WebSocket connection manager."""
    return websocket_manager
