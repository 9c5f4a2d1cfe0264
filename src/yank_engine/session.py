"""Process-level owner of the shared kill ring and per-view yankers."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Optional, Union

from yank_engine.host import HostContext, TextEditor
from yank_engine.killring import KillRing
from yank_engine.runtime import telemetry
from yank_engine.runtime.settings import EngineSettings
from yank_engine.yank import KillYanker


class _Default(Enum):
    RING = "ring"


_DEFAULT = _Default.RING


class KillYankSession:
    """Hands out one ``KillYanker`` per editor view, all sharing one ring.

    Pass ``kill_ring=None`` (or settings with ``kill_ring_enabled=False``) to
    run without history: kills only update the clipboard and yanks use the
    host's native paste.
    """

    def __init__(
        self,
        host: HostContext,
        *,
        settings: Optional[EngineSettings] = None,
        kill_ring: Union[KillRing, None, _Default] = _DEFAULT,
    ) -> None:
        self.host = host
        self.settings = settings or EngineSettings()
        self.kill_ring: Optional[KillRing]
        if isinstance(kill_ring, _Default):
            self.kill_ring = (
                KillRing(self.settings.kill_ring_max)
                if self.settings.kill_ring_enabled
                else None
            )
        else:
            self.kill_ring = kill_ring
        self._yankers: Dict[str, KillYanker] = {}

    def attach(self, editor: TextEditor, *, key: Optional[str] = None) -> KillYanker:
        """Return the yanker for ``key``, retargeting it at ``editor`` if it exists."""

        view_key = key or editor.editor_id
        yanker = self._yankers.get(view_key)
        if yanker is not None:
            yanker.set_text_editor(editor)
            return yanker

        yanker = KillYanker(editor, self.kill_ring, self.host, settings=self.settings)
        self._yankers[view_key] = yanker
        telemetry.record_event(
            "session.attach",
            level="debug",
            data={"view": view_key, "history": self.kill_ring is not None},
        )
        return yanker

    def get(self, key: str) -> Optional[KillYanker]:
        return self._yankers.get(key)

    def detach(self, key: str) -> KillYanker:
        try:
            yanker = self._yankers.pop(key)
        except KeyError as exc:
            raise KeyError(f"No yanker attached for view '{key}'") from exc
        yanker.dispose()
        telemetry.record_event("session.detach", level="debug", data={"view": key})
        return yanker

    def close(self) -> None:
        for key in list(self._yankers):
            self.detach(key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._yankers))

    def __len__(self) -> int:
        return len(self._yankers)


__all__ = ["KillYankSession"]
