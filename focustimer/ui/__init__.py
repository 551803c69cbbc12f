"""UI package."""

from .preset_list import PresetListWidget, PresetCard
from .timer_view import TimerView
from .progress_bar import ProgressBar
from .session_tracker import SessionTracker

__all__ = [
    "PresetListWidget",
    "PresetCard",
    "TimerView",
    "ProgressBar",
    "SessionTracker",
]
