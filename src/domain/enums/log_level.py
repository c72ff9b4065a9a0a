"""Severity levels for stored log entries.

Values follow the level names written by the server log sink and sent by
the browser client, so filters can match stored rows verbatim.
"""

from enum import Enum


class LogLevel(str, Enum):
    """Stored log severity."""

    VERBOSE = "Verbose"
    DEBUG = "Debug"
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    FATAL = "Fatal"

    @classmethod
    def values(cls) -> list[str]:
        """Get all level values as strings."""
        return [level.value for level in cls]

    @classmethod
    def parse(cls, value: str) -> "LogLevel | None":
        """Case-insensitive lookup; None for unknown names."""
        wanted = value.casefold()
        for level in cls:
            if level.value.casefold() == wanted:
                return level
        return None
