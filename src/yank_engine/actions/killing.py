"""Kill and yank verbs that turn the editor's cursors into ranges."""

from __future__ import annotations

from typing import Awaitable, Callable, List, Mapping

from yank_engine.buffer.state import Range, is_empty, selection_range
from yank_engine.host import TextEditor
from yank_engine.killring import AppendDirection
from yank_engine.yank import KillYanker

Verb = Callable[[KillYanker], Awaitable[bool]]


def _region_ranges(editor: TextEditor) -> List[Range]:
    return [
        selection_range(selection)
        for selection in editor.selections
        if not is_empty(selection)
    ]


def _line_rest_range(editor: TextEditor, row: int, col: int) -> Range | None:
    line = editor.line_text(row)
    last_row = editor.line_count - 1
    if line[col:].strip() == "" and row < last_row:
        return (row, col), (row + 1, 0)
    if col < len(line):
        return (row, col), (row, len(line))
    return None


def _non_empty(ranges: List[Range | None]) -> List[Range]:
    return [
        text_range
        for text_range in ranges
        if text_range is not None and text_range[0] != text_range[1]
    ]


async def kill_region(yanker: KillYanker) -> bool:
    ranges = _region_ranges(yanker.text_editor)
    if not ranges:
        return False
    return await yanker.kill(ranges)


async def copy_region(yanker: KillYanker) -> bool:
    ranges = _region_ranges(yanker.text_editor)
    if not ranges:
        return False
    await yanker.copy(ranges)
    yanker.cancel_kill_append()
    return True


async def kill_line(yanker: KillYanker) -> bool:
    """Kill to end of line, or the line break when only blanks remain."""

    editor = yanker.text_editor
    ranges = _non_empty(
        [_line_rest_range(editor, *active) for _anchor, active in editor.selections]
    )
    if not ranges:
        return False
    return await yanker.kill(ranges)


async def backward_kill_line(yanker: KillYanker) -> bool:
    editor = yanker.text_editor
    candidates: List[Range | None] = []
    for _anchor, (row, col) in editor.selections:
        if col > 0:
            candidates.append(((row, 0), (row, col)))
        elif row > 0:
            candidates.append(((row - 1, len(editor.line_text(row - 1))), (row, 0)))
    ranges = _non_empty(candidates)
    if not ranges:
        return False
    return await yanker.kill(ranges, AppendDirection.BACKWARD)


async def kill_whole_line(yanker: KillYanker) -> bool:
    editor = yanker.text_editor
    last_row = editor.line_count - 1
    candidates: List[Range | None] = []
    for row in sorted({active[0] for _anchor, active in editor.selections}):
        if row < last_row:
            candidates.append(((row, 0), (row + 1, 0)))
        else:
            candidates.append(((row, 0), (row, len(editor.line_text(row)))))
    ranges = _non_empty(candidates)
    if not ranges:
        return False
    return await yanker.kill(ranges)


async def yank(yanker: KillYanker) -> bool:
    return await yanker.yank()


async def yank_pop(yanker: KillYanker) -> bool:
    return await yanker.yank_pop()


KILL_ACTIONS: Mapping[str, Verb] = {
    "kill.region": kill_region,
    "kill.copy_region": copy_region,
    "kill.line": kill_line,
    "kill.backward_line": backward_kill_line,
    "kill.whole_line": kill_whole_line,
    "yank.yank": yank,
    "yank.pop": yank_pop,
}

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
