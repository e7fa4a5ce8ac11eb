"""
Table error hierarchy

Every parse failure carries the position of the offending line so that the
host can point the table author at it.
"""
from typing import Optional


class TableError(Exception):
    """
    Base class for errors raised while building a table

    Attributes:
        message: Human-readable error message
        source_id: Name of the table source (usually a file path)
        line_number: 1-based line number of the offending line
    """

    def __init__(
        self,
        message: str,
        source_id: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.source_id = source_id
        self.line_number = line_number

    @property
    def position(self) -> str:
        if self.line_number is None:
            return self.source_id or ""
        return f"{self.source_id or '<table>'}:{self.line_number}"

    def __str__(self):
        if self.position:
            return f"{self.message} ({self.position})"
        return self.message


class InvalidFormatError(TableError):
    """A line matches none of the table grammar forms."""

    def __init__(self, line: str, source_id: Optional[str] = None, line_number: Optional[int] = None):
        super().__init__(f"invalid format: {line!r}", source_id=source_id, line_number=line_number)
        self.line = line


class InvalidPatternError(TableError):
    """
    A pattern could not be compiled

    Raised by the pattern compiler without a position; the parser re-raises
    a positioned copy via at().
    """

    def __init__(
        self,
        pattern: str,
        detail: str,
        line: Optional[str] = None,
        source_id: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        super().__init__(
            f"invalid pattern /{pattern}/: {detail}",
            source_id=source_id,
            line_number=line_number,
        )
        self.pattern = pattern
        self.detail = detail
        self.line = line

    def at(self, line: str, source_id: Optional[str], line_number: int) -> "InvalidPatternError":
        return InvalidPatternError(self.pattern, self.detail, line, source_id, line_number)


class UnbalancedScopeError(TableError):
    """
    if/endif blocks do not balance

    Raised on an endif with no open block, or at end of input while a block
    is still open. In the latter case opened_at is the line of the innermost
    unclosed block.
    """

    def __init__(
        self,
        message: str,
        source_id: Optional[str] = None,
        line_number: Optional[int] = None,
        opened_at: Optional[int] = None,
    ):
        super().__init__(message, source_id=source_id, line_number=line_number)
        self.opened_at = opened_at
