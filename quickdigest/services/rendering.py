"""
Rendering surface abstraction.

Pipelines only talk to a ``Renderer``; they never know how (or whether) the
payload is displayed.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class Renderer(ABC):
    """Narrow interface to whatever displays pipeline output."""

    @abstractmethod
    def show_status(self, message: str) -> None:
        """Show a progress message (loading indicator)."""
        pass

    @abstractmethod
    def clear_status(self) -> None:
        """Hide the progress message."""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Show a user-facing error message."""
        pass

    @abstractmethod
    def render(self, payload: BaseModel) -> None:
        """Replace the displayed content with the given payload."""
        pass


class NullRenderer(Renderer):
    """Discards everything."""

    def show_status(self, message: str) -> None:
        pass

    def clear_status(self) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def render(self, payload: BaseModel) -> None:
        pass


class SnapshotRenderer(Renderer):
    """Keeps the latest status, error and payload in memory."""

    def __init__(self) -> None:
        self.status: Optional[str] = None
        self.error: Optional[str] = None
        self.payload: Optional[BaseModel] = None

    def show_status(self, message: str) -> None:
        self.status = message

    def clear_status(self) -> None:
        self.status = None

    def show_error(self, message: str) -> None:
        self.error = message

    def render(self, payload: BaseModel) -> None:
        self.payload = payload
        self.error = None
