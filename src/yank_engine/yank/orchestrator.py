"""Kill/yank state machine bound to one editor view."""

from __future__ import annotations

from typing import List, Optional, Sequence

from yank_engine.buffer.state import (
    Cursor,
    Range,
    active_positions,
    is_empty,
    selection_range,
)
from yank_engine.host import (
    DocumentChangeEvent,
    HostContext,
    SelectionChangeEvent,
    Subscription,
    TextEditor,
)
from yank_engine.killring import (
    AppendDirection,
    KillRing,
    KillRingEntity,
    MultiRegionEntity,
    PlainTextEntity,
    RegionText,
)
from yank_engine.runtime import telemetry
from yank_engine.runtime.settings import EngineSettings

LOGGER_NAME = "yank_engine.yank"


class KillYanker:
    """Coordinates kills, yanks, and yank-pops for one editor.

    ``kill_ring`` may be shared with other yankers or be ``None``, in which
    case kills only reach the clipboard and ``yank`` falls back to the host's
    native paste.

    Append mode and yank continuity are invalidated by any document change of
    this editor's document and any selection change of this editor. The
    yanker's own edits raise those notifications too; the bookkeeping recorded
    after each awaited host call overrides them.
    """

    def __init__(
        self,
        editor: TextEditor,
        kill_ring: Optional[KillRing],
        host: HostContext,
        *,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        self._editor = editor
        self.kill_ring = kill_ring
        self.host = host
        self.settings = settings or EngineSettings()

        self.is_appending = False
        self.prev_kill_positions: List[Cursor] = []
        self.doc_changed_after_yank = False
        self.prev_yank_positions: List[Cursor] = []

        # document changes seen since the last reset; snapshotted around pastes
        self.text_change_count = 0
        # changes produced by the last yank or yank-pop, 2 when the host reformats
        self.prev_yank_changes = 0

        self._subscriptions: List[Subscription] = [
            host.document_changes.subscribe(self.on_document_change),
            host.selection_changes.subscribe(self.on_selection_change),
        ]

    @property
    def text_editor(self) -> TextEditor:
        return self._editor

    def set_text_editor(self, editor: TextEditor) -> None:
        self._editor = editor

    def dispose(self) -> None:
        for subscription in self._subscriptions:
            subscription.dispose()
        self._subscriptions.clear()

    def on_document_change(self, event: DocumentChangeEvent) -> None:
        if event.document_id == self._editor.document_id:
            self.doc_changed_after_yank = True
            self.is_appending = False
        self.text_change_count += 1

    def on_selection_change(self, event: SelectionChangeEvent) -> None:
        if event.editor_id == self._editor.editor_id:
            self.doc_changed_after_yank = True
            self.is_appending = False

    async def kill(
        self,
        ranges: Sequence[Range],
        direction: AppendDirection = AppendDirection.FORWARD,
    ) -> bool:
        """Copy ``ranges`` into the ring (merging when appending) and delete them."""

        with telemetry.span(
            name="yank::kill",
            logger_name=LOGGER_NAME,
            component="yank",
            metadata={"editor": self._editor.editor_id, "ranges": len(ranges)},
        ) as handle:
            if self._cursor_positions() != self.prev_kill_positions:
                self.is_appending = False
            handle.add_metadata("append", self.is_appending)

            await self.copy(ranges, self.is_appending, direction)
            deleted = await self._edit(ranges)

            self.is_appending = True
            self.prev_kill_positions = self._cursor_positions()
            return deleted

    async def copy(
        self,
        ranges: Sequence[Range],
        should_append: bool = False,
        direction: AppendDirection = AppendDirection.FORWARD,
    ) -> KillRingEntity:
        entity = MultiRegionEntity(
            [
                RegionText(self._editor.get_text(text_range), text_range)
                for text_range in ranges
            ]
        )
        if self.kill_ring is None:
            await self.host.clipboard.write_text(entity.as_string())
            return entity

        current = self.kill_ring.get_top()
        if should_append and isinstance(current, MultiRegionEntity):
            current.append(entity, direction)
            await self.host.clipboard.write_text(current.as_string())
            return current

        if should_append and current is not None:
            telemetry.record_event(
                "yank.append_skipped",
                level="debug",
                data={"top": current.kind},
                logger_name=LOGGER_NAME,
            )
        self.kill_ring.push(entity)
        await self.host.clipboard.write_text(entity.as_string())
        return entity

    def cancel_kill_append(self) -> None:
        self.is_appending = False

    async def yank(self) -> bool:
        """Paste the current ring entry, absorbing clipboard text that drifted."""

        with telemetry.span(
            name="yank::yank",
            logger_name=LOGGER_NAME,
            component="yank",
            metadata={"editor": self._editor.editor_id},
        ):
            if self.kill_ring is None:
                await self._editor.native_paste()
                return True

            clipboard_text = await self.host.clipboard.read_text()
            entity = self.kill_ring.get_top()
            if entity is None or not entity.is_same_clipboard_text(clipboard_text):
                entity = PlainTextEntity(clipboard_text)
                self.kill_ring.push(entity)
                telemetry.record_event(
                    "yank.clipboard_absorbed",
                    level="debug",
                    data={"length": len(clipboard_text)},
                    logger_name=LOGGER_NAME,
                )

            return await self._paste_and_track(entity)

    async def yank_pop(self) -> bool:
        """Replace the text pasted by the previous yank with the next older entry."""

        if self.kill_ring is None:
            return False

        with telemetry.span(
            name="yank::yank_pop",
            logger_name=LOGGER_NAME,
            component="yank",
            metadata={"editor": self._editor.editor_id},
        ) as handle:
            if self._is_yank_interrupted():
                handle.add_metadata("status", "interrupted")
                self.host.show_message(self.settings.interruption_message)
                telemetry.record_event(
                    "yank.interrupted",
                    data={"editor": self._editor.editor_id},
                    logger_name=LOGGER_NAME,
                )
                return False

            previous = self.kill_ring.get_top()
            entity = self.kill_ring.pop_next()
            if entity is None:
                handle.add_metadata("status", "exhausted")
                return False

            undo_previous = previous is not None and not previous.is_empty()
            if undo_previous and self.prev_yank_changes > 0:
                handle.add_metadata("undo_steps", self.prev_yank_changes)
                for _ in range(self.prev_yank_changes):
                    await self._editor.undo()

            return await self._paste_and_track(entity)

    async def _paste_and_track(self, entity: KillRingEntity) -> bool:
        self.text_change_count = 0
        pasted = await self._paste(entity)
        self.prev_yank_changes = self.text_change_count

        self.doc_changed_after_yank = False
        self.prev_yank_positions = self._cursor_positions()
        return pasted

    async def _paste(self, entity: KillRingEntity) -> bool:
        selections = list(self._editor.selections)
        flattened = entity.as_string()

        if isinstance(entity, MultiRegionEntity):
            regions = entity.regions
            separately = len(regions) > 1 and len(flattened.split("\n")) != len(regions)
            if separately and len(regions) == len(selections):
                deletions = [
                    selection_range(selection)
                    for selection in selections
                    if not is_empty(selection)
                ]
                insertions = [
                    (selection_range(selection)[0], region.appended_text)
                    for selection, region in zip(selections, regions)
                ]
                return await self._edit(deletions, insertions)

        await self._editor.paste(flattened)
        return True

    async def _edit(
        self,
        deletions: Sequence[Range],
        insertions: Sequence[tuple[Cursor, str]] = (),
    ) -> bool:
        attempts = self.settings.edit_retries
        for attempt in range(1, attempts + 1):
            if await self._editor.edit(deletions, insertions):
                return True
            telemetry.record_event(
                "yank.edit_rejected",
                level="debug",
                data={"attempt": attempt, "editor": self._editor.editor_id},
                logger_name=LOGGER_NAME,
            )
        telemetry.record_event(
            "yank.edit_failed",
            level="warning",
            data={"attempts": attempts, "editor": self._editor.editor_id},
            logger_name=LOGGER_NAME,
        )
        return False

    def _is_yank_interrupted(self) -> bool:
        if self.doc_changed_after_yank:
            return True
        return self._cursor_positions() != self.prev_yank_positions

    def _cursor_positions(self) -> List[Cursor]:
        return active_positions(self._editor.selections)


__all__ = ["KillYanker"]
