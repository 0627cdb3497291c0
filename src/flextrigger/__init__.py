"""flextrigger: trigger detection and disambiguation for text expansion."""

from flextrigger.context import (
    Ambiguous,
    CatalogOptions,
    Committed,
    Complete,
    CyclingOption,
    DelimiterPolicy,
    DisambiguationCursor,
    Idle,
    NoMatch,
    Trigger,
    TriggerCatalog,
    TriggerDetector,
    TriggerMatch,
    TriggerState,
    Typing,
)

__version__ = "0.1.0"

__all__ = [
    "Ambiguous",
    "CatalogOptions",
    "Committed",
    "Complete",
    "CyclingOption",
    "DelimiterPolicy",
    "DisambiguationCursor",
    "Idle",
    "NoMatch",
    "Trigger",
    "TriggerCatalog",
    "TriggerDetector",
    "TriggerMatch",
    "TriggerState",
    "Typing",
]
