from __future__ import annotations

from typing import List

import pytest

from yank_engine.buffer import Buffer, BufferDelta, BufferValidationError


def test_apply_edit_deletes_ranges_atomically() -> None:
    buffer = Buffer.from_text("hello world\nsecond line")

    buffer.apply_edit([((0, 0), (0, 6)), ((1, 0), (1, 7))])

    assert buffer.text == "world\nline"
    assert len(buffer.history) == 1


def test_undo_restores_text_and_selections() -> None:
    buffer = Buffer.from_text("hello world\nsecond line")
    buffer.state.set_cursors([(0, 11), (1, 11)])

    buffer.apply_edit([((0, 0), (0, 6)), ((1, 0), (1, 7))])
    assert buffer.state.selections == [((0, 5), (0, 5)), ((1, 4), (1, 4))]

    buffer.undo()

    assert buffer.text == "hello world\nsecond line"
    assert buffer.state.selections == [((0, 11), (0, 11)), ((1, 11), (1, 11))]
    assert buffer.undo() is None


def test_cursor_after_deleted_text_shifts_back() -> None:
    buffer = Buffer.from_text("abcdef")
    buffer.state.set_cursor(0, 6)

    buffer.delete_range((0, 1), (0, 3))

    assert buffer.text == "adef"
    assert buffer.state.cursor == (0, 4)


def test_insertion_at_cursor_moves_cursor_past_it() -> None:
    buffer = Buffer.from_text("abc")
    buffer.state.set_cursor(0, 3)

    buffer.insert_text("X\nY")

    assert buffer.text == "abcX\nY"
    assert buffer.state.cursor == (1, 1)


def test_insertion_at_deletion_start_replaces_the_selection() -> None:
    buffer = Buffer.from_text("abc")
    buffer.state.set_selection((0, 1), (0, 2))

    buffer.apply_edit([((0, 1), (0, 2))], [((0, 1), "ZZ")])

    assert buffer.text == "aZZc"
    assert buffer.state.selections == [((0, 3), (0, 3))]


def test_insertions_at_same_position_keep_their_order() -> None:
    buffer = Buffer.from_text("")

    buffer.apply_edit([], [((0, 0), "first "), ((0, 0), "second")])

    assert buffer.text == "first second"


def test_overlapping_deletions_are_rejected() -> None:
    buffer = Buffer.from_text("abcdef")

    with pytest.raises(BufferValidationError):
        buffer.apply_edit([((0, 0), (0, 3)), ((0, 2), (0, 4))])

    assert buffer.text == "abcdef"
    assert len(buffer.history) == 0


def test_out_of_range_position_is_rejected() -> None:
    buffer = Buffer.from_text("abc")

    with pytest.raises(BufferValidationError) as info:
        buffer.apply_edit([], [((3, 0), "x")])

    assert info.value.cursor == (3, 0)


def test_listeners_receive_one_delta_per_change() -> None:
    buffer = Buffer.from_text("abc")
    deltas: List[BufferDelta] = []
    unsubscribe = buffer.subscribe(deltas.append)

    buffer.insert_text("x", cursor=(0, 0))
    buffer.undo()
    unsubscribe()
    buffer.insert_text("y")

    assert [delta.label for delta in deltas] == ["insert_text", "undo"]
    assert deltas[0].text == "xabc"


def test_get_text_range_spans_lines() -> None:
    buffer = Buffer.from_text("one\ntwo\nthree")

    assert buffer.get_text_range((0, 1), (2, 2)) == "ne\ntwo\nth"
    assert buffer.get_text_range((2, 2), (0, 1)) == "ne\ntwo\nth"


def test_undo_entry_records_the_state_before_the_edit() -> None:
    buffer = Buffer.from_text("abc")
    buffer.state.set_cursor(0, 3)

    buffer.delete_range((0, 0), (0, 1))
    entry = buffer.history.undo()

    assert entry is not None
    assert entry.label == "delete_range"
    assert entry.before_text == "abc"
    assert entry.selections_before == (((0, 3), (0, 3)),)
