"""
Exit codes for the jiractl command line.
"""

from enum import IntEnum

from ..core.exceptions import (
    ConfigurationError,
    InputValidationError,
    JiractlError,
    ResolutionError,
    TransportError,
)


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    USAGE = 2
    CONFIG_ERROR = 3
    INPUT_ERROR = 4
    TRANSPORT_ERROR = 5
    PARTIAL_FAILURE = 6

    @classmethod
    def from_exception(cls, error: JiractlError) -> "ExitCode":
        if isinstance(error, ConfigurationError):
            return cls.CONFIG_ERROR
        if isinstance(error, (InputValidationError, ResolutionError)):
            return cls.INPUT_ERROR
        if isinstance(error, TransportError):
            return cls.TRANSPORT_ERROR
        return cls.ERROR
