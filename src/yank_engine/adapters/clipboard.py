"""System clipboard access through pyperclip."""

from __future__ import annotations

import asyncio

import pyperclip

from yank_engine.runtime import telemetry


class SystemClipboard:
    """Clipboard protocol over the OS clipboard.

    pyperclip shells out to ``xclip``/``pbcopy``/``wl-copy`` and friends, so
    calls run in a worker thread to keep the event loop responsive.
    """

    async def read_text(self) -> str:
        text = await asyncio.to_thread(pyperclip.paste)
        return text or ""

    async def write_text(self, text: str) -> None:
        await asyncio.to_thread(pyperclip.copy, text)

    @staticmethod
    def available() -> bool:
        """Probe whether pyperclip found a working copy mechanism."""

        try:
            pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            telemetry.record_event(
                "clipboard.unavailable", level="warning", data={"reason": str(exc)}
            )
            return False
        return True


__all__ = ["SystemClipboard"]
