"""
WebSocket Manager
Manages WebSocket connections that receive progress change notifications.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from fastapi import WebSocket

from wordwise.core.progress_store import ProgressEvent

logger = logging.getLogger(__name__)

PROGRESS_NAMESPACE = "progress"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ConnectionInfo:
    """Information about a WebSocket connection."""
    websocket: WebSocket
    client_id: str
    connected_at: str = field(default_factory=_utc_now)
    namespace: str = PROGRESS_NAMESPACE


class WebSocketManager:
    """
    Manages WebSocket connections for the application.

    Supports:
    - Multiple namespaces
    - Client-specific connections
    - Broadcasting to namespaces
    """

    def __init__(self):
        # Connections by namespace and client_id
        self._connections: dict[str, dict[str, ConnectionInfo]] = {}

    async def connect(
        self,
        websocket: WebSocket,
        client_id: str,
        namespace: str = PROGRESS_NAMESPACE
    ) -> bool:
        """
        Accept a new WebSocket connection.

        Args:
            websocket: The WebSocket connection
            client_id: Client identifier
            namespace: Connection namespace

        Returns:
            True if connection successful
        """
        try:
            await websocket.accept()

            self._connections.setdefault(namespace, {})[client_id] = ConnectionInfo(
                websocket=websocket,
                client_id=client_id,
                namespace=namespace
            )
            logger.info(f"WebSocket connected: client={client_id}, namespace={namespace}")

            await self.send_message(client_id, namespace, {
                "type": "connected",
                "client_id": client_id,
                "timestamp": _utc_now()
            })
            return True

        except Exception as e:
            logger.error(f"WebSocket connection error: {e}")
            return False

    async def disconnect(self, client_id: str, namespace: str = PROGRESS_NAMESPACE, close: bool = True):
        """
        Forget a connection, closing the socket unless the peer already did.

        Args:
            client_id: Client identifier
            namespace: Connection namespace
            close: Whether to close the underlying socket
        """
        connection = self._connections.get(namespace, {}).pop(client_id, None)
        if connection is None:
            return
        if close:
            try:
                await connection.websocket.close()
            except RuntimeError as e:
                # Already closed by the peer
                logger.debug(f"WebSocket close ignored: {e}")
        logger.info(f"WebSocket disconnected: client={client_id}, namespace={namespace}")

    async def send_message(
        self,
        client_id: str,
        namespace: str,
        message: dict
    ) -> bool:
        """
        Send a message to a specific client.

        Returns:
            True if message sent successfully
        """
        connection = self.get_connection(client_id, namespace)
        if connection is None:
            return False
        try:
            await connection.websocket.send_json(message)
            return True
        except Exception as e:
            logger.error(f"WebSocket send error: {e}")
            return False

    async def broadcast(self, namespace: str, message: dict) -> int:
        """
        Broadcast a message to all connections in a namespace.

        Connections that fail to receive the message are dropped.

        Returns:
            Number of clients that received the message
        """
        connections = list(self._connections.get(namespace, {}).items())

        delivered = 0
        disconnected = []
        for client_id, connection in connections:
            try:
                await connection.websocket.send_json(message)
                delivered += 1
            except Exception as e:
                logger.warning(f"Broadcast to {client_id} failed: {e}")
                disconnected.append(client_id)

        for client_id in disconnected:
            await self.disconnect(client_id, namespace, close=False)
        return delivered

    def get_connection(
        self,
        client_id: str,
        namespace: str = PROGRESS_NAMESPACE
    ) -> Optional[ConnectionInfo]:
        """Get connection info for a client."""
        return self._connections.get(namespace, {}).get(client_id)

    def is_connected(self, client_id: str, namespace: str = PROGRESS_NAMESPACE) -> bool:
        """Check if a client is connected in a namespace."""
        return self.get_connection(client_id, namespace) is not None

    def get_active_connections(self, namespace: str = PROGRESS_NAMESPACE) -> list[str]:
        """Get list of client IDs with active connections in a namespace."""
        return list(self._connections.get(namespace, {}).keys())

    def get_stats(self) -> dict:
        """Get connection statistics."""
        stats = {
            "total_connections": 0,
            "namespaces": {}
        }
        for namespace, connections in self._connections.items():
            count = len(connections)
            stats["namespaces"][namespace] = count
            stats["total_connections"] += count
        return stats


# Singleton instance
websocket_manager = WebSocketManager()

# Strong references to scheduled broadcasts until they finish
_pending_broadcasts: set[asyncio.Task] = set()


# ==================== PROGRESS BROADCASTER ====================

def broadcast_progress_event(event: ProgressEvent, manager: WebSocketManager | None = None) -> None:
    """
    Progress store listener that pushes each change to the progress namespace.

    Store mutations run synchronously, so the broadcast is scheduled on the
    running loop. Without a running loop there is nobody to notify.
    """
    manager = manager or websocket_manager
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.debug(f"No running loop, skipping broadcast of {event.kind}")
        return
    task = loop.create_task(manager.broadcast(PROGRESS_NAMESPACE, event.to_dict()))
    _pending_broadcasts.add(task)
    task.add_done_callback(_pending_broadcasts.discard)
