"""Abstract base class for data source clients."""

from abc import ABC, abstractmethod
from typing import Any


class LookingGlassError(Exception):
    """Base class for failures fetching looking-glass data."""


class TransportError(LookingGlassError):
    """The request could not be completed (network error, HTTP error, timeout)."""


class UnexpectedContentTypeError(LookingGlassError):
    """The data source answered with something other than JSON."""

    def __init__(self, content_type: str):
        super().__init__(f"Unexpected content type: {content_type or 'none'}")
        self.content_type = content_type


class ApiStatusError(LookingGlassError):
    """The data source reported a non-ok status."""

    def __init__(self, status: Any):
        super().__init__(f"API returned status: {status}")
        self.status = status


class DataSource(ABC):
    """Abstract base class for looking-glass data source clients.

    All data source implementations should inherit from this class
    and implement the required methods.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Establish connection to the data source."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close connection to the data source."""
        pass

    async def __aenter__(self) -> "DataSource":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.disconnect()
