"""
Base View
Abstract base class for all screens of the app.
Provides common interface, logging, and access to shared state and services.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from wordwise.config import Settings, get_settings
from wordwise.core.progress_store import ProgressStore
from wordwise.services.content_gateway import ContentGateway


class BaseView(ABC):
    """
    Abstract base class for all views.

    Each view:
    - Composes progress state and generated content into a view model
    - Receives the shared progress store by reference from the controller
    - Discards its transient state in on_leave()
    """

    def __init__(
        self,
        progress: ProgressStore,
        gateway: ContentGateway,
        settings: Settings | None = None
    ):
        """
        Initialize view with shared state and services.

        Args:
            progress: Learner progress owned by the view controller
            gateway: Content gateway for generated content
            settings: Application settings (uses singleton if not provided)
        """
        self.progress = progress
        self.gateway = gateway
        self.settings = settings or get_settings()

        self.logger = logging.getLogger(f"view.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """View name for logging and identification"""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """View description for documentation"""
        pass

    @abstractmethod
    async def render(self) -> BaseModel:
        """Build the current view model."""
        pass

    def on_leave(self) -> None:
        """Called when navigation leaves this view. Override to reset state."""
        pass

    def log_start(self, context: dict | None = None) -> None:
        """Log view action starting"""
        msg = f"[{self.name}] Starting"
        if context:
            msg += f" - Context: {context}"
        self.logger.info(msg)

    def log_complete(self, result: Any = None) -> None:
        """Log view action completed"""
        msg = f"[{self.name}] Complete"
        if result is not None:
            msg += f" - Result: {result}"
        self.logger.info(msg)

    def log_error(self, error: Exception, context: dict | None = None) -> None:
        """Log view error"""
        msg = f"[{self.name}] Error: {str(error)}"
        if context:
            msg += f" - Context: {context}"
        self.logger.error(msg, exc_info=True)

    def log_debug(self, message: str, data: Any = None) -> None:
        """Log debug information"""
        msg = f"[{self.name}] {message}"
        if data:
            msg += f" - Data: {data}"
        self.logger.debug(msg)
