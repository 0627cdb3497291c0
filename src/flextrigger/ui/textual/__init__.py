"""Textual widgets hosting the trigger detector.

Includes :class:`~.trigger_input.TriggerInput`.
"""

from flextrigger.ui.textual.trigger_input import TriggerInput

__all__ = ["TriggerInput"]
