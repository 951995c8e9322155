"""
Operation base - Context shared by all public operations.

The context is the explicit replacement for ambient configuration: it holds
the tracker config, the transport, the dry-run/confirmation gate and the sink
for non-terminating errors. Build one at process start and pass it in.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional

from ...core.exceptions import EmptyResultError, ErrorRecord, JiractlError
from ...core.domain.value_objects import Credential
from ...core.ports.config_provider import AppConfig, TrackerConfig
from ...core.ports.transport import TransportPort
from ...adapters.jira.client import JiraApiClient
from ...adapters.jira.request_builder import api_path, build_request


ConfirmCallback = Callable[[str, str], bool]


@dataclass
class OperationContext:
    """Explicit configuration and collaborators for one process."""

    config: TrackerConfig
    transport: TransportPort
    dry_run: bool = False
    confirm: Optional[ConfirmCallback] = None
    errors: list[ErrorRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.logger = logging.getLogger("OperationContext")

    @classmethod
    def from_config(
        cls,
        app_config: AppConfig,
        transport: Optional[TransportPort] = None,
        confirm: Optional[ConfirmCallback] = None,
    ) -> "OperationContext":
        """
        Build a context from loaded configuration.

        Args:
            app_config: Loaded application config
            transport: Transport to use (defaults to a JiraApiClient)
            confirm: Called as confirm(target, action) before each mutation
                when `run.confirm_changes` is set
        """
        if transport is None:
            transport = JiraApiClient(app_config.tracker)

        return cls(
            config=app_config.tracker,
            transport=transport,
            dry_run=app_config.run.dry_run,
            confirm=confirm if app_config.run.confirm_changes else None,
        )

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    def path(self, resource: str) -> str:
        return api_path(self.config, resource)

    def request(
        self,
        resource: str,
        *args: Any,
        method: str = "GET",
        body: Any = None,
        credential: Optional[Credential] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Build and invoke a request for an API resource template."""
        descriptor = build_request(
            self.config,
            self.path(resource),
            *args,
            method=method,
            body=body,
            credential=credential,
            params=params,
        )
        return self.transport.invoke(descriptor)

    # -------------------------------------------------------------------------
    # Confirmation gate
    # -------------------------------------------------------------------------

    def should_process(self, target: str, action: str) -> bool:
        """
        Decide whether a mutation may run.

        Returns False in dry-run mode or when the confirmation callback
        declines; the caller must then skip the network call.
        """
        if self.dry_run:
            self.logger.info(f"[DRY-RUN] Would {action}: {target}")
            return False
        if self.confirm is not None and not self.confirm(target, action):
            self.logger.info(f"Declined: {action}: {target}")
            return False
        return True

    # -------------------------------------------------------------------------
    # Non-terminating errors
    # -------------------------------------------------------------------------

    def write_error(
        self,
        category: str,
        message: str,
        target: Optional[str] = None,
        error_id: Optional[str] = None,
        exception: Optional[Exception] = None,
    ) -> ErrorRecord:
        """Record a non-terminating error and keep going."""
        record = ErrorRecord(
            category=category,
            message=message,
            target=target,
            error_id=error_id,
            exception=exception,
        )
        self.errors.append(record)
        self.logger.warning(str(record))
        return record


def require_result(data: Any, target: str) -> Any:
    """Return `data`, raising EmptyResultError when the server sent no body."""
    if data is None:
        raise EmptyResultError(f"Empty response for {target}")
    return data


def process_each(
    ctx: OperationContext,
    items: Iterable[Any],
    operation: Callable[..., Any],
    **kwargs: Any,
) -> list[Any]:
    """
    Run an operation once per input item, strictly in order.

    A JiractlError on one item is written as a non-terminating error and the
    next item is processed. Outputs are flattened; None is dropped.
    """
    outputs: list[Any] = []
    for item in items:
        try:
            result = operation(ctx, item, **kwargs)
        except JiractlError as e:
            ctx.write_error(
                category=type(e).__name__,
                message=e.message,
                target=str(item),
                exception=e,
            )
            continue

        if result is None:
            continue
        if isinstance(result, list):
            outputs.extend(result)
        else:
            outputs.append(result)
    return outputs
