"""
CLI Module - Command Line Interface for jiractl.
"""

from .app import main, run, build_parser
from .exit_codes import ExitCode

__all__ = ["main", "run", "build_parser", "ExitCode"]
