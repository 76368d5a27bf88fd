"""
Error types for betwixt.

Every error raised by the library derives from ``BetwixtError``. Marker
pairing failures carry the positions of the offending markers so callers can
point at the exact spot in the input text.
"""

from typing import Optional


class BetwixtError(Exception):
    """Base exception for all betwixt errors."""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.message = message
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.position is not None:
            return f"[at {self.position}] {self.message}"
        return self.message


class ArgumentError(BetwixtError, ValueError):
    """
    Raised when a required argument is missing or empty.

    Always raised before any scanning starts, so no partial work is done.
    """

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.argument = argument
        super().__init__(message)

    def _format_message(self) -> str:
        if self.argument:
            return f"{self.message} (argument '{self.argument}')"
        return self.message


class OrderViolation(BetwixtError):
    """
    Raised when a closing marker appears before its opening marker.

    The library never swaps the markers on the caller's behalf: markers must
    be passed in textual order.
    """

    def __init__(
        self,
        open_marker: str,
        close_marker: str,
        open_position: int,
        close_position: int,
    ) -> None:
        self.open_marker = open_marker
        self.close_marker = close_marker
        self.open_position = open_position
        self.close_position = close_position
        super().__init__(
            "End string cannot appear earlier than beginning string",
            position=close_position,
        )

    def _format_message(self) -> str:
        return (
            f"[at {self.close_position}] {self.message}: "
            f"{self.close_marker!r} found before {self.open_marker!r} "
            f"(at {self.open_position})"
        )
