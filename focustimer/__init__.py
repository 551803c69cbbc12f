"""FocusTimer: a single-window work/break interval timer."""

__version__ = "0.1.0"
