"""
jiractl - Thin, typed operations over the Jira REST API.
"""

__version__ = "0.1.0"

from .core.exceptions import (
    JiractlError,
    ConfigurationError,
    InputValidationError,
    ResolutionError,
    EmptyResultError,
    TransportError,
    ErrorRecord,
)
from .core.domain import (
    Issue,
    User,
    Project,
    Version,
    EditMetaField,
    CreateMetaField,
    ServerInfo,
    RawResponse,
    Credential,
)
from .application.operations import OperationContext
