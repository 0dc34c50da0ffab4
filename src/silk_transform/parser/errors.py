"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when source text cannot be split into balanced token groups.

    ``str(error)`` is ``"line:column: message"`` when the position is known.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{self.location}: {message}" if self.location else message)

    @property
    def location(self) -> str:
        """``"line:column"``, ``"line"`` or ``""`` depending on what is known."""
        if self.line is None:
            return ""
        if self.column is None:
            return str(self.line)
        return f"{self.line}:{self.column}"
