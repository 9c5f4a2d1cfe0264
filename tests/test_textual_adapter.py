from __future__ import annotations

from typing import List

import pytest
from textual.widgets import TextArea
from textual.widgets.text_area import Selection

from yank_engine.adapters.memory import MemoryClipboard
from yank_engine.adapters.textual.app import KillRingApp


@pytest.mark.asyncio
async def test_kill_and_yank_round_trip_through_text_area() -> None:
    clipboard = MemoryClipboard()
    app = KillRingApp(text="hello world", clipboard=clipboard)

    async with app.run_test() as pilot:
        text_area = app.query_one("#editor", TextArea)

        await pilot.press("ctrl+k")
        await pilot.pause()
        assert text_area.text == ""
        assert clipboard.text == "hello world"

        await pilot.press("ctrl+y")
        await pilot.pause()
        assert text_area.text == "hello world"
        assert app.session.kill_ring is not None
        assert len(app.session.kill_ring) == 1


@pytest.mark.asyncio
async def test_yank_pop_without_yank_reports_interruption() -> None:
    app = KillRingApp(text="abc")
    messages: List[str] = []
    app.host.show_message = messages.append

    async with app.run_test() as pilot:
        await pilot.press("alt+y")
        await pilot.pause()

        assert app.query_one("#editor", TextArea).text == "abc"
        assert messages == ["Previous command was not a yank"]


@pytest.mark.asyncio
async def test_yank_pop_replaces_previous_yank_in_text_area() -> None:
    app = KillRingApp(text="one two")
    messages: List[str] = []
    app.host.show_message = messages.append

    async with app.run_test() as pilot:
        text_area = app.query_one("#editor", TextArea)

        text_area.selection = Selection((0, 0), (0, 4))
        await pilot.pause()
        await pilot.press("ctrl+w")
        await pilot.pause()
        text_area.selection = Selection((0, 0), (0, 3))
        await pilot.pause()
        await pilot.press("ctrl+w")
        await pilot.pause()
        assert text_area.text == ""

        await pilot.press("ctrl+y")
        await pilot.pause()
        assert text_area.text == "two"

        await pilot.press("alt+y")
        await pilot.pause()
        assert text_area.text == "one "

        await pilot.press("alt+y")
        await pilot.pause()
        assert text_area.text == "two"
        assert messages == []


@pytest.mark.asyncio
async def test_text_area_rejects_invalid_and_read_only_edits() -> None:
    app = KillRingApp(text="abc")

    async with app.run_test() as pilot:
        text_area = app.query_one("#editor", TextArea)
        editor = app.editor
        assert editor is not None and app.yanker is not None

        assert await editor.edit([((0, 0), (3, 0))]) is False
        assert text_area.text == "abc"

        text_area.read_only = True
        await pilot.pause()
        assert await app.yanker.kill([((0, 0), (0, 1))]) is False
        assert text_area.text == "abc"
