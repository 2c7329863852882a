"""Location of a definition or reference in a source file."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Where a unit is defined or a reference occurs.

    Reports print it as file:line:column, the format editors and CI
    annotations understand.

    Attributes:
        file: Source file
        line: 1-based line
        column: 0-based column offset (0 when only the line is known)
    """

    file: Path
    line: int
    column: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    @property
    def position(self) -> tuple[int, int]:
        """(line, column) - sort key for references within one file."""
        return (self.line, self.column)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
