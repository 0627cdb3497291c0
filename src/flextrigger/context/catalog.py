"""In-memory trigger catalog with length filtering and matching options.

The catalog is rebuilt by full replacement whenever the snippet set
changes.  Both the supplied set and the active (length-filtered) view are
immutable tuples swapped by reference, so a scan that already holds the
previous view is never affected by a concurrent replacement.
"""

from __future__ import annotations

import logging
import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_MAX_TRIGGER_LENGTH = 10


@dataclass(frozen=True)
class Trigger:
    """A literal trigger token and the content it expands to.

    Attributes:
        text: The trigger as registered (canonical casing).
        content: Opaque payload handed to the expansion step.
    """

    text: str
    content: Any = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Trigger":
        """Build a trigger from a ``{"trigger": ..., "content": ...}`` mapping."""
        return cls(text=data["trigger"], content=data.get("content", ""))

    def to_dict(self) -> dict:
        return {"trigger": self.text, "content": self.content}


TriggerLike = Union[Trigger, Mapping[str, Any]]


@dataclass(frozen=True)
class CatalogOptions:
    """Matching options shared by every lookup on a catalog.

    Attributes:
        max_trigger_length: Longest trigger kept in the active catalog.
        case_sensitive: Whether typed text must match the trigger casing.
    """

    max_trigger_length: int = DEFAULT_MAX_TRIGGER_LENGTH
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_trigger_length, bool) or not isinstance(self.max_trigger_length, int):
            raise ValueError(f"max_trigger_length must be an integer, got {self.max_trigger_length!r}")
        if self.max_trigger_length < 1:
            raise ValueError(f"max_trigger_length must be >= 1, got {self.max_trigger_length}")

    def fold(self, text: str) -> str:
        """Normalise *text* for comparison under the case mode."""
        return text if self.case_sensitive else text.lower()


def prefix_matches(
    triggers: Iterable[Trigger], fold: Callable[[str], str], prefix: str
) -> List[Trigger]:
    """Return the triggers whose folded text starts with the folded *prefix*, in order."""
    folded = fold(prefix)
    return [t for t in triggers if fold(t.text).startswith(folded)]


def _coerce(item: TriggerLike) -> Trigger:
    if isinstance(item, Trigger):
        return item
    return Trigger.from_dict(item)


class TriggerCatalog:
    """Ordered, replaceable list of triggers plus matching options.

    Insertion order is preserved and is the tie-break order of every
    completion list.  Triggers longer than
    :attr:`CatalogOptions.max_trigger_length` are kept in :attr:`source`
    but left out of the active view; they come back if the limit is raised.
    """

    def __init__(
        self,
        triggers: Iterable[TriggerLike] = (),
        options: Optional[CatalogOptions] = None,
    ):
        self._options = options or CatalogOptions()
        self._source: Tuple[Trigger, ...] = ()
        self._active: Tuple[Trigger, ...] = ()
        self.replace(triggers)

    # ─────────────────────────────────────
    # Mutation (full replacement only)
    # ─────────────────────────────────────

    def replace(self, triggers: Iterable[TriggerLike]) -> None:
        """Atomically replace the whole trigger set and re-apply the filter.

        Args:
            triggers: :class:`Trigger` instances or ``{"trigger", "content"}``
                mappings, in catalog order.
        """
        self._source = tuple(_coerce(t) for t in triggers)
        self._refilter()

    def set_options(
        self,
        max_trigger_length: Optional[int] = None,
        case_sensitive: Optional[bool] = None,
    ) -> CatalogOptions:
        """Merge new matching options and re-apply the length filter.

        Lowering ``max_trigger_length`` drops longer triggers from the active
        view; this is not an error.

        Returns:
            The merged options.
        """
        changes = {}
        if max_trigger_length is not None:
            changes["max_trigger_length"] = max_trigger_length
        if case_sensitive is not None:
            changes["case_sensitive"] = bool(case_sensitive)
        if changes:
            self._options = dataclasses.replace(self._options, **changes)
            self._refilter()
        return self._options

    def _refilter(self) -> None:
        limit = self._options.max_trigger_length
        active = tuple(t for t in self._source if 0 < len(t.text) <= limit)
        self._active = active
        dropped = len(self._source) - len(active)
        if dropped:
            logger.debug(
                "Catalog rebuilt with %d trigger(s); %d dropped (limit %d)",
                len(active), dropped, limit,
            )
        else:
            logger.debug("Catalog rebuilt with %d trigger(s)", len(active))

    # ─────────────────────────────────────
    # Read access
    # ─────────────────────────────────────

    @property
    def options(self) -> CatalogOptions:
        return self._options

    @property
    def triggers(self) -> Tuple[Trigger, ...]:
        """Active triggers, in catalog order."""
        return self._active

    @property
    def source(self) -> Tuple[Trigger, ...]:
        """Every trigger supplied by the last :meth:`replace`."""
        return self._source

    @property
    def dropped(self) -> Tuple[Trigger, ...]:
        """Supplied triggers excluded by the current length limit (or empty)."""
        limit = self._options.max_trigger_length
        return tuple(t for t in self._source if not 0 < len(t.text) <= limit)

    def completions(self, prefix: str) -> List[str]:
        """Return active trigger texts that start with *prefix*.

        Comparison follows the case mode; the returned texts keep the
        catalog's casing and order.
        """
        return [t.text for t in prefix_matches(self._active, self._options.fold, prefix)]

    def find(self, text: str, exact: bool = False) -> Optional[Trigger]:
        """Return the first active trigger equal to *text*.

        Comparison follows the case mode unless *exact* is set.
        """
        fold = (lambda s: s) if exact else self._options.fold
        folded = fold(text)
        for trigger in self._active:
            if fold(trigger.text) == folded:
                return trigger
        return None

    def __len__(self) -> int:
        return len(self._active)

    def __iter__(self) -> Iterator[Trigger]:
        return iter(self._active)

    def __repr__(self) -> str:
        return f"TriggerCatalog({len(self._active)} active, options={self._options!r})"
