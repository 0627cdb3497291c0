"""Text input that detects triggers as the user types.

:class:`TriggerInput` is the editable surface for a
:class:`~flextrigger.context.detector.TriggerDetector`.  It re-scans the text
before the cursor on every change and owns at most one
:class:`~flextrigger.context.cycling.DisambiguationCursor` while an
ambiguous trigger is being resolved.

Keys while a cycling session is open:
    Tab        Next candidate
    Shift+Tab  Previous candidate
    Escape     Cancel the session, keep the typed text
    delimiter  Expand the selected candidate, then insert the key
    Enter      Expand the selected candidate, then submit
    other      Drop the session and keep typing
"""

from __future__ import annotations

import logging
from typing import Optional

from textual import events
from textual.message import Message
from textual.widgets import Input

from flextrigger.context.cycling import CyclingOption, DisambiguationCursor
from flextrigger.context.detector import TriggerDetector
from flextrigger.context.match import IDLE, Ambiguous, Committed, TriggerMatch, TriggerState

logger = logging.getLogger(__name__)


class TriggerInput(Input):
    """Single-line input with trigger detection and candidate cycling.

    Args:
        detector: Detector holding the snippet catalog for this document.
        placeholder: Placeholder text shown when the input is empty.
        id: Optional widget identifier.
    """

    def __init__(
        self,
        detector: TriggerDetector,
        *,
        placeholder: str = "Type a trigger…",
        id: Optional[str] = None,
    ):
        super().__init__(placeholder=placeholder, id=id)
        self.detector = detector
        self.result: TriggerMatch = IDLE
        self._session: Optional[DisambiguationCursor] = None
        # Text left of this offset is expanded content and is never re-scanned.
        self._floor = 0

    @property
    def session(self) -> Optional[DisambiguationCursor]:
        """The open cycling session, if any."""
        return self._session

    # ─────────────────────────────────────
    # Detection
    # ─────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-scan the text before the cursor after every edit."""
        if event.input is not self:
            return
        self.detect()

    def detect(self) -> TriggerMatch:
        """Scan the current value and react to the result."""
        text = self.value
        cursor = min(self.cursor_position, len(text))
        self._floor = min(self._floor, cursor)

        # The whole left context is scanned so boundaries stay real; a
        # trigger starting inside expanded or cancelled text is ignored.
        result = self.detector.scan(text, cursor)
        if result.state is not TriggerState.IDLE and result.start < self._floor:
            result = IDLE
        self.result = result
        self.post_message(self.Detected(self, result))

        # Only a trigger that ends at the cursor, or right before the
        # delimiter just typed, is acted on.
        near = cursor - 1
        if isinstance(result, Committed) and result.match_end >= near:
            self._close_session()
            self._expand(result.trigger, result.content, result.start, result.match_end)
        elif isinstance(result, Ambiguous) and result.end >= near:
            session = self.detector.cursor_for(result)
            self._session = session
            self.post_message(self.Cycling(self, session))
        else:
            self._close_session()
        return result

    # ─────────────────────────────────────
    # Cycling session
    # ─────────────────────────────────────

    async def _on_key(self, event: events.Key) -> None:
        # Input._on_key runs after this unless the default is prevented.
        session = self._session
        if session is not None:
            if event.key == "tab":
                event.stop()
                event.prevent_default()
                session.cycle_next()
                self.post_message(self.Cycling(self, session))
                return
            if event.key == "shift+tab":
                event.stop()
                event.prevent_default()
                session.cycle_previous()
                self.post_message(self.Cycling(self, session))
                return
            if event.key == "escape":
                event.stop()
                event.prevent_default()
                self.cancel_session()
                return
            if event.key == "enter" or self.detector.delimiters.is_delimiter(event.character):
                self.commit_session()
            else:
                self._close_session()

    def on_blur(self, event: events.Blur) -> None:
        self._close_session()

    def commit_session(self) -> Optional[CyclingOption]:
        """Expand the selected candidate over the typed trigger and end the session."""
        session = self._session
        self._session = None
        if session is None:
            return None
        option = session.current()
        if option is not None:
            self._expand(option.trigger, option.content, session.start, session.end)
        return option

    def cancel_session(self) -> None:
        """End the session without expanding anything.

        The cancelled trigger is left as plain text and not offered again.
        """
        session = self._session
        if session is not None:
            logger.debug("Cycling cancelled for %r", session.potential_trigger)
            self._floor = max(self._floor, session.end)
        self._close_session()

    def _close_session(self) -> None:
        self._session = None

    # ─────────────────────────────────────
    # Expansion
    # ─────────────────────────────────────

    def _expand(self, trigger: str, content: object, start: int, end: int) -> None:
        text = self.value
        replacement = str(content)
        cursor = self.cursor_position
        new_text = text[:start] + replacement + text[end:]
        new_cursor = cursor + len(replacement) - (end - start) if cursor >= end else start + len(replacement)

        self._floor = start + len(replacement)
        self.value = new_text
        self.cursor_position = new_cursor
        logger.debug("Expanded %r at %d", trigger, start)
        self.post_message(self.Expanded(self, trigger, replacement, start))

    # ─────────────────────────────────────
    # Messages
    # ─────────────────────────────────────

    class Detected(Message):
        """Posted after every scan.

        Attributes:
            input: The posting widget.
            result: The classification.
        """

        def __init__(self, input: "TriggerInput", result: TriggerMatch):
            super().__init__()
            self.input = input
            self.result = result

    class Cycling(Message):
        """Posted when a cycling session opens or its selection moves.

        Attributes:
            input: The posting widget.
            cursor: The session; ``cursor.current()`` is the selection.
        """

        def __init__(self, input: "TriggerInput", cursor: DisambiguationCursor):
            super().__init__()
            self.input = input
            self.cursor = cursor

    class Expanded(Message):
        """Posted after a trigger was replaced by its content.

        Attributes:
            input: The posting widget.
            trigger: Catalog text of the expanded trigger.
            content: Inserted text.
            start: Offset where the content was inserted.
        """

        def __init__(self, input: "TriggerInput", trigger: str, content: str, start: int):
            super().__init__()
            self.input = input
            self.trigger = trigger
            self.content = content
            self.start = start
