"""Kill/yank orchestration for a single editor view."""

from yank_engine.killring import AppendDirection

from .orchestrator import KillYanker

__all__ = ["AppendDirection", "KillYanker"]
