"""Exact/prefix matching of catalog triggers at one start position."""

from __future__ import annotations

from typing import Optional

from flextrigger.context.catalog import TriggerCatalog, prefix_matches
from flextrigger.context.delimiters import DelimiterPolicy
from flextrigger.context.match import (
    IDLE,
    Ambiguous,
    Committed,
    Complete,
    TriggerMatch,
    Typing,
)


class MatchClassifier:
    """Classifies the text that starts at a candidate trigger position.

    Only an exact trigger with a strictly longer sibling is ever
    :class:`Ambiguous`.  Text that is merely a prefix of several triggers is
    :class:`Typing`, however many completions it has.

    Args:
        catalog: Trigger catalog to match against (read-only here).
        delimiters: Boundary policy; defaults to :class:`DelimiterPolicy`.
    """

    def __init__(self, catalog: TriggerCatalog, delimiters: Optional[DelimiterPolicy] = None):
        self.catalog = catalog
        self.delimiters = delimiters or DelimiterPolicy()

    def classify_at(self, text: str, start: int) -> TriggerMatch:
        """Classify *text* from *start*.

        Args:
            text: Text preceding the cursor.
            start: Candidate start index (expected to be a boundary).

        Returns:
            A :class:`Committed`, :class:`Ambiguous`, :class:`Complete`,
            :class:`Typing` or ``Idle`` result.
        """
        length = len(text)
        if start < 0 or start >= length:
            return IDLE

        # Snapshot once; a replacement during this call swaps the reference.
        triggers = self.catalog.triggers
        options = self.catalog.options
        fold = options.fold
        remaining = min(length - start, options.max_trigger_length)

        for trigger in triggers:
            size = len(trigger.text)
            if size > remaining:
                continue
            if fold(text[start:start + size]) != fold(trigger.text):
                continue

            end = start + size
            at_end = end == length
            if not at_end and text[end] not in self.delimiters:
                # Matched characters run on into a longer word.
                continue

            typed_run = self.delimiters.typed_run(text, start)
            matches = prefix_matches(triggers, fold, typed_run)
            has_longer = any(len(t.text) > size for t in matches)

            if has_longer:
                return Ambiguous(
                    potential_trigger=trigger.text,
                    possible_completions=[t.text for t in matches],
                    start=start,
                    candidates=tuple(matches),
                )
            if at_end:
                return Complete(potential_trigger=trigger.text, start=start)
            return Committed(
                trigger=trigger.text,
                content=trigger.content,
                match_end=end,
                start=start,
            )

        typed = self.delimiters.typed_run(text, start)
        if not typed:
            return IDLE

        completions = [t.text for t in prefix_matches(triggers, fold, typed)]
        if completions:
            return Typing(
                potential_trigger=typed,
                possible_completions=completions,
                start=start,
            )
        return IDLE
