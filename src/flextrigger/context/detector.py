"""Trigger detector: one catalog, one scanner, one classifier.

:class:`TriggerDetector` is the object a host keeps per document.  It owns
the caller's catalog explicitly (no module-level state) and wires the
:class:`~flextrigger.context.scanner.ScanEngine` to the
:class:`~flextrigger.context.classifier.MatchClassifier`.

Typical use::

    detector = TriggerDetector([{"trigger": "gb", "content": "Goodbye!"}])
    result = detector.scan(text, cursor)
    if result.is_match:
        ...  # hand result.content to the expansion step
    elif result.state is TriggerState.AMBIGUOUS:
        cursor = detector.cursor_for(result)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from flextrigger.context.catalog import (
    DEFAULT_MAX_TRIGGER_LENGTH,
    CatalogOptions,
    Trigger,
    TriggerCatalog,
    TriggerLike,
)
from flextrigger.context.classifier import MatchClassifier
from flextrigger.context.cycling import CyclingOption, DisambiguationCursor
from flextrigger.context.delimiters import DelimiterPolicy
from flextrigger.context.match import Ambiguous, TriggerMatch
from flextrigger.context.scanner import ScanEngine

logger = logging.getLogger(__name__)


class TriggerDetector:
    """Classifies the text before the cursor against a trigger catalog.

    Args:
        snippets: Initial triggers, as :class:`Trigger` instances or
            ``{"trigger", "content"}`` mappings.
        max_trigger_length: Longest trigger considered.
        case_sensitive: Whether typed text must match trigger casing.
        delimiters: Custom boundary characters; ``None`` for the defaults.
    """

    def __init__(
        self,
        snippets: Iterable[TriggerLike] = (),
        *,
        max_trigger_length: int = DEFAULT_MAX_TRIGGER_LENGTH,
        case_sensitive: bool = True,
        delimiters: Optional[Iterable[str]] = None,
    ):
        options = CatalogOptions(
            max_trigger_length=max_trigger_length,
            case_sensitive=case_sensitive,
        )
        self.catalog = TriggerCatalog(snippets, options)
        self.delimiters = DelimiterPolicy(delimiters)
        self.classifier = MatchClassifier(self.catalog, self.delimiters)
        self.engine = ScanEngine(self.classifier)

    # ─────────────────────────────────────
    # Detection
    # ─────────────────────────────────────

    def scan(self, text: str, cursor_position: Optional[int] = None) -> TriggerMatch:
        """Classify the text before *cursor_position* (see :class:`ScanEngine`)."""
        return self.engine.scan(text, cursor_position)

    def classify_at(self, text: str, start: int) -> TriggerMatch:
        """Classify *text* from a single start position."""
        return self.classifier.classify_at(text, start)

    def cursor_for(self, result: Ambiguous) -> DisambiguationCursor:
        """Build a cycling cursor over the completions of *result*.

        The catalog entries carried by *result* supply the content.  A result
        built without them falls back to a catalog lookup, exact text first;
        a text that is no longer in the catalog is skipped.
        """
        candidates = result.candidates or self._lookup(result.possible_completions)
        options = [CyclingOption(trigger=t.text, content=t.content) for t in candidates]
        return DisambiguationCursor(
            options,
            potential_trigger=result.potential_trigger,
            start=result.start,
        )

    def _lookup(self, texts: Iterable[str]) -> List[Trigger]:
        found = []
        for text in texts:
            trigger = self.catalog.find(text, exact=True) or self.catalog.find(text)
            if trigger is not None:
                found.append(trigger)
        return found

    # ─────────────────────────────────────
    # Catalog management
    # ─────────────────────────────────────

    def update_snippets(self, snippets: Iterable[TriggerLike]) -> None:
        """Replace the whole trigger set."""
        self.catalog.replace(snippets)
        logger.debug("Detector snippets updated: %d active", len(self.catalog))

    def update_options(
        self,
        max_trigger_length: Optional[int] = None,
        case_sensitive: Optional[bool] = None,
    ) -> CatalogOptions:
        """Merge matching options; see :meth:`TriggerCatalog.set_options`."""
        return self.catalog.set_options(
            max_trigger_length=max_trigger_length,
            case_sensitive=case_sensitive,
        )

    @property
    def loaded_count(self) -> int:
        return len(self.catalog)

    @property
    def max_trigger_length(self) -> int:
        return self.catalog.options.max_trigger_length

    @property
    def case_sensitive(self) -> bool:
        return self.catalog.options.case_sensitive

    def stats(self) -> Dict[str, Any]:
        """Return a summary of the active catalog."""
        triggers = self.catalog.triggers
        return {
            "snippet_count": len(triggers),
            "dropped_count": len(self.catalog.dropped),
            "max_trigger_length": self.max_trigger_length,
            "longest_trigger": max((len(t.text) for t in triggers), default=0),
            "case_sensitive": self.case_sensitive,
        }
