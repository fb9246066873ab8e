"""Lookup result type.

Every lookup returns a LookupResult so callers can tell a failed request
from a page that simply has no data. ``to_cell()`` collapses both to the
empty-string sentinel that spreadsheet formulas expect.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LookupStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class LookupResult:
    """Outcome of a single lookup.

    Attributes:
        status: ok, empty or error
        rows: Produced rows; a list, or a dict keyed by language in object mode
        error: The exception behind an error status
    """

    status: LookupStatus
    rows: list | dict = field(default_factory=list)
    error: Exception | None = None

    @classmethod
    def from_rows(cls, rows: list | dict) -> "LookupResult":
        """Build an ok or empty result depending on whether rows has content."""
        return cls(LookupStatus.OK if rows else LookupStatus.EMPTY, rows)

    @classmethod
    def empty(cls) -> "LookupResult":
        return cls(LookupStatus.EMPTY)

    @classmethod
    def failure(cls, error: Exception) -> "LookupResult":
        return cls(LookupStatus.ERROR, error=error)

    @property
    def ok(self) -> bool:
        return self.status is LookupStatus.OK

    @property
    def failed(self) -> bool:
        return self.status is LookupStatus.ERROR

    def to_cell(self) -> Any:
        """Return rows, or "" when there are none."""
        return self.rows if self.rows else ""
