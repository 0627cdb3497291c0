"""Trigger detection and disambiguation."""

from flextrigger.context.catalog import CatalogOptions, Trigger, TriggerCatalog
from flextrigger.context.classifier import MatchClassifier
from flextrigger.context.cycling import CyclingOption, DisambiguationCursor
from flextrigger.context.delimiters import DEFAULT_DELIMITERS, DelimiterPolicy
from flextrigger.context.detector import TriggerDetector
from flextrigger.context.match import (
    Ambiguous,
    Committed,
    Complete,
    Idle,
    NoMatch,
    TriggerMatch,
    TriggerState,
    Typing,
)
from flextrigger.context.scanner import ScanEngine

__all__ = [
    "Ambiguous",
    "CatalogOptions",
    "Committed",
    "Complete",
    "CyclingOption",
    "DEFAULT_DELIMITERS",
    "DelimiterPolicy",
    "DisambiguationCursor",
    "Idle",
    "MatchClassifier",
    "NoMatch",
    "ScanEngine",
    "Trigger",
    "TriggerCatalog",
    "TriggerDetector",
    "TriggerMatch",
    "TriggerState",
    "Typing",
]
