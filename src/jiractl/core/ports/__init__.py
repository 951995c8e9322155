"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .transport import TransportPort, RequestDescriptor
from .config_provider import ConfigProviderPort, AppConfig, TrackerConfig, RunConfig

__all__ = [
    "TransportPort",
    "RequestDescriptor",
    "ConfigProviderPort",
    "AppConfig",
    "TrackerConfig",
    "RunConfig",
]
