"""Cursor over the competing completions of an ambiguous trigger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional


@dataclass(frozen=True)
class CyclingOption:
    """One candidate offered while disambiguating.

    Attributes:
        trigger: Catalog text of the candidate.
        content: Its payload.
        description: Optional label for display.
    """

    trigger: str
    content: Any = ""
    description: Optional[str] = None


class DisambiguationCursor:
    """Holds and cycles the ordered candidates of one ambiguous match.

    The owner of the editable surface creates one cursor per
    ``Ambiguous`` result and drops it on commit, cancel or loss of focus.
    Index moves wrap around in both directions.

    Args:
        options: Candidates in catalog order; the first is selected.
        potential_trigger: The trigger text that was typed.
        start: Offset of that text in the scanned input.
    """

    def __init__(
        self,
        options: Iterable[CyclingOption],
        *,
        potential_trigger: str = "",
        start: int = 0,
    ):
        self._options: List[CyclingOption] = list(options)
        self._index = 0
        self.potential_trigger = potential_trigger
        self.start = start

    @property
    def options(self) -> List[CyclingOption]:
        return list(self._options)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def is_empty(self) -> bool:
        return not self._options

    @property
    def end(self) -> int:
        """Offset just past the typed trigger."""
        return self.start + len(self.potential_trigger)

    def current(self) -> Optional[CyclingOption]:
        """Return the selected candidate, or ``None`` when there is none."""
        if not self._options:
            return None
        return self._options[self._index]

    def cycle_next(self) -> Optional[CyclingOption]:
        """Select and return the next candidate, wrapping to the first."""
        if not self._options:
            return None
        self._index = (self._index + 1) % len(self._options)
        return self._options[self._index]

    def cycle_previous(self) -> Optional[CyclingOption]:
        """Select and return the previous candidate, wrapping to the last."""
        if not self._options:
            return None
        self._index = (self._index - 1) % len(self._options)
        return self._options[self._index]

    def preview(self, count: int = 3) -> List[CyclingOption]:
        """Return up to *count* candidates that follow the current one."""
        size = len(self._options)
        if size <= 1 or count <= 0:
            return []
        shown = min(count, size - 1)
        return [self._options[(self._index + i) % size] for i in range(1, shown + 1)]

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        current = self.current()
        return (
            f"DisambiguationCursor({self.potential_trigger!r}, "
            f"{self._index + 1 if current else 0}/{len(self._options)})"
        )
