"""Right-to-left search for the closest trigger before the cursor."""

from __future__ import annotations

from typing import Optional

from flextrigger.context.classifier import MatchClassifier
from flextrigger.context.match import IDLE, TriggerMatch, TriggerState


class ScanEngine:
    """Walks candidate start positions from the cursor back to the left.

    The first position whose classification is not idle wins, so the
    candidate closest to the cursor always takes precedence.  Positions more
    than ``max_trigger_length + 1`` characters before the cursor are never
    visited: a trigger plus one delimiter is the longest span that can
    classify.
    """

    def __init__(self, classifier: MatchClassifier):
        self.classifier = classifier

    def scan(self, text: str, cursor_position: Optional[int] = None) -> TriggerMatch:
        """Classify the text immediately preceding the cursor.

        Args:
            text: Full text of the editable surface.
            cursor_position: Caret offset; ``None`` means the end of *text*.
                Out-of-range offsets are clamped.

        Returns:
            The first non-idle result, or ``Idle``.
        """
        if not text:
            return IDLE

        if cursor_position is not None:
            text = text[:max(0, cursor_position)]

        length = len(text)
        reach = self.classifier.catalog.options.max_trigger_length + 1
        lowest = max(0, length - reach)
        delimiters = self.classifier.delimiters

        for i in range(length - 1, lowest - 1, -1):
            if not delimiters.is_boundary(text, i):
                continue
            result = self.classifier.classify_at(text, i)
            if result.state is not TriggerState.IDLE:
                return result

        return IDLE
