"""
Notification API Endpoints
WebSocket pushing learner progress changes.
"""
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect

from wordwise.core.dependencies import get_view_controller, get_websocket_manager
from wordwise.core.websocket_manager import PROGRESS_NAMESPACE, WebSocketManager
from wordwise.views.controller import ViewController


logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/progress")
async def progress_websocket(
    websocket: WebSocket,
    client_id: Optional[str] = Query(default=None, description="Client identifier"),
    controller: ViewController = Depends(get_view_controller),
    manager: WebSocketManager = Depends(get_websocket_manager)
):
    """
    WebSocket endpoint for progress change notifications.

    Server messages:
    - connected: sent once after the handshake
    - progress_changed: sent after every learned word, bookmark or quiz answer
    - progress: reply to get_progress
    - pong: reply to ping

    Client messages:
    - get_progress: request the current stats
    - ping
    """
    client_id = client_id or uuid.uuid4().hex

    connected = await manager.connect(websocket, client_id, PROGRESS_NAMESPACE)
    if not connected:
        return

    try:
        while True:
            message = await websocket.receive_json()
            msg_type = message.get("type") if isinstance(message, dict) else None

            if msg_type == "get_progress":
                response = {
                    "type": "progress",
                    "progress": controller.progress.progress.model_dump()
                }
            elif msg_type == "ping":
                response = {"type": "pong"}
            else:
                response = {"type": "unknown", "message": f"Unknown message type: {msg_type}"}

            await manager.send_message(client_id, PROGRESS_NAMESPACE, response)

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected: client={client_id}")
        await manager.disconnect(client_id, PROGRESS_NAMESPACE, close=False)
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
        await manager.disconnect(client_id, PROGRESS_NAMESPACE)
