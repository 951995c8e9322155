"""
Jira API Client - Low-level HTTP client for Jira REST API.

This handles the raw HTTP communication with Jira. Public operations hand it
RequestDescriptors through the TransportPort interface.
"""

import logging
from typing import Any, Optional

import requests

from ...core.exceptions import (
    TransportError,
    AuthenticationError,
    flatten_error_payload,
    AccessDeniedError,
    NotFoundError,
)
from ...core.ports.config_provider import TrackerConfig
from ...core.ports.transport import RequestDescriptor, TransportPort


class JiraApiClient(TransportPort):
    """
    Low-level Jira REST API client.

    Handles authentication, request/response, and error handling.
    Exactly one attempt is made per request.
    """

    def __init__(
        self,
        config: TrackerConfig,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Jira client.

        Args:
            config: Tracker configuration (server URL, default credential)
            session: Optional pre-built requests session
        """
        self.config = config
        self.timeout = config.timeout
        self.logger = logging.getLogger("JiraApiClient")

        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        self._session = session or requests.Session()
        self._session.headers.update(self.headers)
        credential = config.credential
        if credential is not None:
            self._session.auth = credential.as_auth()

    # -------------------------------------------------------------------------
    # TransportPort Implementation
    # -------------------------------------------------------------------------

    def invoke(self, request: RequestDescriptor) -> Any:
        """
        Execute a request against Jira.

        Args:
            request: Fully specified request

        Returns:
            Decoded JSON, or None when the response body is empty

        Raises:
            TransportError: On network failure, HTTP error or malformed JSON
        """
        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if request.params:
            kwargs["params"] = request.params
        if request.body is not None:
            kwargs["data"] = request.body.encode("utf-8")
        if request.credential is not None:
            kwargs["auth"] = request.credential.as_auth()

        self.logger.debug(f"{request.method} {request.uri}")

        try:
            response = self._session.request(request.method, request.uri, **kwargs)
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Connection failed: {e}", cause=e)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out: {e}", cause=e)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}", cause=e)

        return self._handle_response(response, request)

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _handle_response(
        self,
        response: requests.Response,
        request: RequestDescriptor,
    ) -> Any:
        """Handle API response and errors."""
        status = response.status_code

        if response.ok:
            if not response.text:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise TransportError(
                    f"Malformed JSON in response to {request.method} {request.uri}",
                    status=status,
                    payload=response.text[:500],
                    cause=e,
                )

        payload = self._error_payload(response)
        self.logger.debug(f"{request.method} {request.uri} -> {status}")

        if status == 401:
            raise AuthenticationError(
                "Authentication failed. Check JIRA_USERNAME and JIRA_API_TOKEN.",
                status=status,
                payload=payload,
            )

        if status == 403:
            raise AccessDeniedError(
                f"Permission denied for {request.uri}",
                status=status,
                payload=payload,
            )

        if status == 404:
            raise NotFoundError(
                f"Not found: {request.uri}",
                status=status,
                payload=payload,
            )

        raise TransportError(
            f"API error {status}: {self._summarize(payload)}",
            status=status,
            payload=payload,
        )

    @staticmethod
    def _error_payload(response: requests.Response) -> Any:
        """Decoded JIRA error body, or the raw text when it is not JSON."""
        if not response.text:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text[:500]

    @staticmethod
    def _summarize(payload: Any) -> str:
        messages = flatten_error_payload(payload)
        if messages:
            return "; ".join(messages)
        return str(payload or "")
