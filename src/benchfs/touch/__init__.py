"""Selective modification-time reset for forcing source recompilation."""

from .selective_touch import SelectiveTouch, TouchReport, touch_file, touch_tree
from .touch_policy import TouchDecision, TouchPolicy
from .touch_reason import TouchReason

__all__ = [
    "SelectiveTouch",
    "TouchDecision",
    "TouchPolicy",
    "TouchReason",
    "TouchReport",
    "touch_file",
    "touch_tree",
]
