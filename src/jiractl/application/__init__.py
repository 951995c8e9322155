"""
Application Layer - Public operations.

This layer contains:
- operations/: One function per Jira action plus the shared OperationContext
"""

from . import operations
from .operations import *

__all__ = list(operations.__all__)
