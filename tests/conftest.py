"""Shared fixtures."""

import json
from typing import Any, Callable, Union

import pytest

from jiractl.application.operations import OperationContext
from jiractl.core.ports.config_provider import TrackerConfig
from jiractl.core.ports.transport import RequestDescriptor, TransportPort


Responder = Union[Any, Callable[[RequestDescriptor], Any]]


class FakeTransport(TransportPort):
    """
    Transport that records requests and answers from a route table.

    Routes map (method, path-suffix) to a payload, an exception to raise, or
    a callable taking the request.
    """

    def __init__(self, routes: dict[tuple[str, str], Responder] = None):
        self.routes = dict(routes or {})
        self.requests: list[RequestDescriptor] = []

    def invoke(self, request: RequestDescriptor) -> Any:
        self.requests.append(request)
        for (method, suffix), responder in self.routes.items():
            if method == request.method and request.uri.endswith(suffix):
                if isinstance(responder, Exception):
                    raise responder
                if callable(responder):
                    return responder(request)
                return responder
        raise AssertionError(f"Unexpected request: {request.method} {request.uri}")

    def body_of(self, index: int = -1) -> Any:
        body = self.requests[index].body
        return json.loads(body) if body is not None else None


@pytest.fixture
def config() -> TrackerConfig:
    return TrackerConfig(url="https://jira.example.com", username="bot", api_token="secret")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def ctx(config, transport) -> OperationContext:
    return OperationContext(config=config, transport=transport, dry_run=False)
