"""Classification results produced on every keystroke.

:class:`TriggerMatch` is a closed set of frozen dataclasses.  Each variant
fixes ``state`` and ``is_match`` at class level, so a result that claims to
be a match always carries the trigger, its content and the match end.
Every variant answers ``potential_trigger`` and ``possible_completions`` so
callers can read them without checking the type first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Optional, Tuple

from flextrigger.context.catalog import Trigger


class TriggerState(str, Enum):
    IDLE = "idle"
    TYPING = "typing"
    COMPLETE = "complete"
    AMBIGUOUS = "ambiguous"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class TriggerMatch:
    """Base of every classification result."""

    state: ClassVar[TriggerState]
    is_match: ClassVar[bool] = False


@dataclass(frozen=True)
class Idle(TriggerMatch):
    """Nothing trigger-like before the cursor."""

    state = TriggerState.IDLE

    @property
    def potential_trigger(self) -> Optional[str]:
        return None

    @property
    def possible_completions(self) -> List[str]:
        return []


@dataclass(frozen=True)
class NoMatch(TriggerMatch):
    """Typed text that can no longer become a trigger.

    Part of the closed state set for consumers that switch on
    :class:`TriggerState`; the flexible classifier reports ``Idle`` instead.
    """

    state = TriggerState.NO_MATCH

    @property
    def potential_trigger(self) -> Optional[str]:
        return None

    @property
    def possible_completions(self) -> List[str]:
        return []


@dataclass(frozen=True)
class Typing(TriggerMatch):
    """A strict prefix of one or more triggers that equals none of them.

    Never ambiguous, whatever the number of completions.
    """

    state = TriggerState.TYPING

    potential_trigger: str
    possible_completions: List[str] = field(default_factory=list)
    start: int = 0


@dataclass(frozen=True)
class Complete(TriggerMatch):
    """An exact trigger at the end of the input, not yet delimited.

    No longer trigger can still be reached, but nothing expands until a
    delimiter is typed.
    """

    state = TriggerState.COMPLETE

    potential_trigger: str
    start: int = 0

    @property
    def possible_completions(self) -> List[str]:
        return []


@dataclass(frozen=True)
class Ambiguous(TriggerMatch):
    """An exact trigger that is a strict prefix of a longer one.

    ``possible_completions`` includes the matched trigger itself and keeps
    catalog order.  ``candidates`` holds the matching catalog entries in the
    same order, so triggers that differ only in case keep their own content.
    """

    state = TriggerState.AMBIGUOUS

    potential_trigger: str
    possible_completions: List[str] = field(default_factory=list)
    start: int = 0
    candidates: Tuple[Trigger, ...] = field(default=(), compare=False, repr=False)

    @property
    def end(self) -> int:
        return self.start + len(self.potential_trigger)


@dataclass(frozen=True)
class Committed(TriggerMatch):
    """A delimited trigger to expand now.

    Attributes:
        trigger: Catalog text of the trigger (canonical casing).
        content: The trigger's payload.
        match_end: Index just past the trigger in the scanned text.
        start: Index of the first trigger character.
    """

    state = TriggerState.COMPLETE
    is_match = True

    trigger: str
    content: Any
    match_end: int
    start: int = 0

    @property
    def potential_trigger(self) -> str:
        return self.trigger

    @property
    def possible_completions(self) -> List[str]:
        return []


IDLE = Idle()
