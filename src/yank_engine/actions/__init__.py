"""Editing verbs a command layer binds keys to."""

from .killing import (
    KILL_ACTIONS,
    backward_kill_line,
    copy_region,
    kill_line,
    kill_region,
    kill_whole_line,
    yank,
    yank_pop,
)

__all__ = [
    "KILL_ACTIONS",
    "backward_kill_line",
    "copy_region",
    "kill_line",
    "kill_region",
    "kill_whole_line",
    "yank",
    "yank_pop",
]
