"""Base processor interface for stateless (request/response) endpoints."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List

from fastapi import Request
from pydantic import BaseModel


@dataclass
class StatelessAction:
    """
    Definition of a stateless API route backed by a processor method.

    Attributes:
        name: Short identifier used for logging and OpenAPI docs.
        path: FastAPI route path (e.g., "/api/balance").
        handler: Callable invoked with the raw inbound request.
        methods: HTTP methods to expose (defaults to GET and POST).
        response_model: Optional Pydantic model documented for the success body.
        summary: Optional OpenAPI summary.
        description: Optional longer description.
        tags: Optional OpenAPI tags.
        media_type: Optional override for response media type of byte payloads.
    """

    name: str
    path: str
    handler: Callable[[Request], Awaitable[Any] | Any]
    methods: tuple[str, ...] = ("GET", "POST")
    response_model: type[BaseModel] | None = None
    summary: str | None = None
    description: str | None = None
    tags: tuple[str, ...] | None = None
    media_type: str | None = None


class BaseProcessor(ABC):
    """Hook point for stateless services."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Processor/service name used for logging and metadata."""

    @property
    def version(self) -> str:
        """Optional semantic version string."""
        return "1.0.0"

    def get_stateless_actions(self) -> List[StatelessAction]:
        """
        Return the list of stateless actions provided by this processor.

        Override in subclasses to expose request/response endpoints.
        """
        return []
