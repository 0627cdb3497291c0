"""Textual TUI for trying snippets interactively.

A single :class:`~flextrigger.ui.textual.trigger_input.TriggerInput` expands
triggers as they are typed; the status line below it shows the current
classification and, while an ambiguous trigger is open, the selected
candidate and the next ones.

Keyboard shortcuts:
    Tab     Next candidate (while cycling)
    Escape  Cancel cycling
    Ctrl+L  Clear the input
    Ctrl+Q  Quit
"""

from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from flextrigger.config import AppConfig
from flextrigger.context.detector import TriggerDetector
from flextrigger.context.match import TriggerState
from flextrigger.ui.textual.trigger_input import TriggerInput

CYCLING_HINT = "Tab to cycle • Esc to cancel • delimiter to expand"


class ExpanderApp(App):
    """Single-input application wired to one :class:`TriggerDetector`.

    When no detector is given, one is built from *config* (or from the
    config file at its default location).
    """

    CSS = """
    #editor {
        border: round $accent;
    }

    #status {
        height: 2;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+l", "clear_text", "Clear"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        detector: Optional[TriggerDetector] = None,
        config: Optional[AppConfig] = None,
    ) -> None:
        super().__init__()
        if detector is None:
            config = config or AppConfig.load()
            detector = config.detector()
        self.detector = detector
        self.expansions: list[str] = []
        self.status_line = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield TriggerInput(self.detector, id="editor")
        yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "flextrigger"
        self.sub_title = f"{self.detector.loaded_count} snippet(s)"
        self.query_one("#editor", TriggerInput).focus()

    # ─────────────────────────────────────
    # Status line
    # ─────────────────────────────────────

    def _set_status(self, text: Text | str) -> None:
        self.status_line = text.plain if isinstance(text, Text) else text
        self.query_one("#status", Static).update(text)

    def on_trigger_input_detected(self, event: TriggerInput.Detected) -> None:
        result = event.result
        if result.state is TriggerState.IDLE:
            self._set_status("")
            return
        status = Text()
        status.append(result.state.value, style="bold")
        if result.potential_trigger:
            status.append(f"  {result.potential_trigger}")
        if result.state is TriggerState.TYPING:
            status.append(f"  → {', '.join(result.possible_completions)}", style="dim")
        self._set_status(status)

    def on_trigger_input_cycling(self, event: TriggerInput.Cycling) -> None:
        cursor = event.cursor
        current = cursor.current()
        if current is None:
            return
        status = Text()
        status.append(current.trigger, style="bold reverse")
        status.append(f"  {current.content}")
        upcoming = cursor.preview()
        if upcoming:
            status.append("  next: " + ", ".join(o.trigger for o in upcoming), style="dim")
        status.append(f"\n{CYCLING_HINT}", style="italic")
        self._set_status(status)

    def on_trigger_input_expanded(self, event: TriggerInput.Expanded) -> None:
        self.expansions.append(event.trigger)
        self._set_status(Text(f"expanded {event.trigger}", style="green"))

    def action_clear_text(self) -> None:
        self.query_one("#editor", TriggerInput).value = ""
