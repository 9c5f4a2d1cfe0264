"""Executable Textual app demonstrating the kill ring on a TextArea."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static, TextArea

from yank_engine.actions import KILL_ACTIONS
from yank_engine.adapters.clipboard import SystemClipboard
from yank_engine.adapters.memory import MemoryClipboard
from yank_engine.host import Clipboard, HostContext
from yank_engine.runtime.settings import EngineSettings
from yank_engine.session import KillYankSession
from yank_engine.yank import KillYanker

from .host import TextAreaEditor


class KillRingApp(App[None]):
    """Single TextArea with Emacs kill/yank bindings."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+k", "verb('kill.line')", "Kill line", priority=True),
        Binding("ctrl+w", "verb('kill.region')", "Kill region", priority=True),
        Binding("alt+w", "verb('kill.copy_region')", "Copy region", priority=True),
        Binding("ctrl+y", "verb('yank.yank')", "Yank", priority=True),
        Binding("alt+y", "verb('yank.pop')", "Yank pop", priority=True),
        Binding("ctrl+g", "cancel", "Cancel", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        *,
        text: str = "",
        clipboard: Optional[Clipboard] = None,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        super().__init__()
        self._initial_text = text
        self.host = HostContext(
            clipboard=clipboard or MemoryClipboard(),
            show_message=self._update_status,
        )
        self.session = KillYankSession(self.host, settings=settings)
        self.editor: TextAreaEditor | None = None
        self.yanker: KillYanker | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield TextArea(self._initial_text, id="editor")
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        text_area = self.query_one("#editor", TextArea)
        self.editor = TextAreaEditor(text_area, self.host)
        self.yanker = self.session.attach(self.editor)
        text_area.focus()

    def on_unmount(self) -> None:
        self.session.close()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        del event
        if self.editor:
            self.editor.forward_changed()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        del event
        if self.editor:
            self.editor.forward_selection_changed()

    async def action_verb(self, name: str) -> None:
        if not self.yanker:
            return
        done = await KILL_ACTIONS[name](self.yanker)
        ring = self.session.kill_ring
        entries = len(ring) if ring is not None else 0
        outcome = "ok" if done else "nothing to do"
        self._update_status(f"{name}: {outcome} ({entries} in ring)")

    def action_cancel(self) -> None:
        if self.yanker:
            self.yanker.cancel_kill_append()
        self._update_status("Quit")

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the kill ring Textual demo.")
    parser.add_argument("path", nargs="?", help="Optional file to load into the editor")
    parser.add_argument(
        "--system-clipboard",
        action="store_true",
        help="Share kills with the OS clipboard through pyperclip",
    )
    parser.add_argument(
        "--no-kill-ring",
        action="store_true",
        help="Disable history; kills only reach the clipboard",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = EngineSettings.from_env()
    if args.no_kill_ring:
        settings = replace(settings, kill_ring_enabled=False)
    clipboard: Clipboard | None = None
    if args.system_clipboard and SystemClipboard.available():
        clipboard = SystemClipboard()
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    KillRingApp(text=text, clipboard=clipboard, settings=settings).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
