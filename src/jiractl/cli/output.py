"""
Output - Console output formatting.

Records go to stdout as JSON so they can be piped; status messages go to
stderr with colors when attached to a terminal.
"""

import json
import sys
from typing import Any, Iterable, Optional, TextIO

from ..core.domain.entities import RawResponse, Record
from ..core.exceptions import ErrorRecord


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    YELLOW = "\033[33m"

    BG_YELLOW = "\033[43m"


class Symbols:
    """Unicode symbols for output."""

    CROSS = "✗"
    WARN = "⚠"
    GEAR = "⚙"


class Console:
    """Console output helper with colors and formatting."""

    def __init__(
        self,
        color: bool = True,
        verbose: bool = False,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.color = color and self.err.isatty()
        self.verbose = verbose

    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def _message(self, text: str = "") -> None:
        print(text, file=self.err)

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------

    def record(self, value: Any) -> None:
        """Print one output value as JSON."""
        if isinstance(value, Record):
            data = value.to_dict()
        elif isinstance(value, RawResponse):
            data = value.payload
        else:
            data = value
        print(json.dumps(data, indent=2, default=str), file=self.out)

    def records(self, values: Iterable[Any]) -> None:
        for value in values:
            self.record(value)

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    def error(self, text: str) -> None:
        """Print error message."""
        self._message(self._c(f"  {Symbols.CROSS} {text}", Colors.RED))

    def detail(self, text: str) -> None:
        """Print detail text (dimmed)."""
        self._message(self._c(f"    {text}", Colors.DIM))

    def error_records(self, errors: list[ErrorRecord]) -> None:
        """Print non-terminating errors collected during a run."""
        if not errors:
            return
        self._message()
        self.error(f"{len(errors)} error(s):")
        for record in errors[:10]:
            self.detail(str(record))
        if len(errors) > 10:
            self.detail(f"... and {len(errors) - 10} more")

    def dry_run_banner(self) -> None:
        """Print dry-run mode banner."""
        banner = f"  {Symbols.GEAR} DRY-RUN MODE - No changes will be made (use --execute)"
        if self.color:
            self._message(f"{Colors.BG_YELLOW}{Colors.BOLD}{banner}{Colors.RESET}")
        else:
            self._message(f"*** {banner} ***")

    def confirm(self, message: str) -> bool:
        """Ask for confirmation."""
        prompt = self._c(f"\n{Symbols.WARN} {message} (y/N): ", Colors.YELLOW)
        try:
            response = input(prompt).strip().lower()
            return response in ("y", "yes")
        except (EOFError, KeyboardInterrupt):
            self._message()
            return False
