"""
Transport Port - Contract every public operation uses to reach the server.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from ..domain.value_objects import Credential


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully specified HTTP request."""

    method: str
    uri: str
    body: Optional[str] = None
    credential: Optional[Credential] = None
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def is_mutation(self) -> bool:
        return self.method.upper() in ("POST", "PUT", "DELETE")


class TransportPort(ABC):
    """
    Executes requests.

    One attempt per call; no retries at this layer.
    """

    @abstractmethod
    def invoke(self, request: RequestDescriptor) -> Any:
        """
        Execute a request.

        Returns:
            Decoded JSON body, or None for an empty response

        Raises:
            TransportError: Network failure, non-2xx status or malformed JSON
        """
        ...
