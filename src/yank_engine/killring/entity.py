"""Kill ring entries: text captured from editor regions or the clipboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Sequence, Union

from yank_engine.buffer.state import Range


class AppendDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True, slots=True)
class RegionText:
    """Literal text captured from one editor range at kill time."""

    text: str
    range: Range


@dataclass(slots=True)
class AppendedRegion:
    """One region slot and every fragment merged into it by successive kills."""

    fragments: List[RegionText] = field(default_factory=list)

    @property
    def appended_text(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)

    @property
    def last_range(self) -> Range:
        return self.fragments[-1].range

    def append(self, other: "AppendedRegion", direction: AppendDirection) -> None:
        if direction is AppendDirection.BACKWARD:
            self.fragments[:0] = other.fragments
        else:
            self.fragments.extend(other.fragments)

    def copy(self) -> "AppendedRegion":
        return AppendedRegion(list(self.fragments))

    def is_empty(self) -> bool:
        return self.appended_text == ""


class MultiRegionEntity:
    """Text killed from one or more editor ranges.

    Slots keep the order of the ranges at capture time. When flattened, a slot
    whose range starts on the same line as the previous slot's range is joined
    directly; otherwise the two are separated by a newline. Pasting across as
    many selections as there are slots puts each slot back on its own cursor.
    """

    kind: Literal["editor"] = "editor"

    def __init__(self, regions: Sequence[RegionText]) -> None:
        self._regions: List[AppendedRegion] = [
            AppendedRegion([region]) for region in regions
        ]

    @property
    def regions(self) -> Sequence[AppendedRegion]:
        return tuple(self._regions)

    def as_string(self) -> str:
        parts: List[str] = []
        previous: AppendedRegion | None = None
        for region in self._regions:
            if previous is not None:
                same_row = previous.last_range[0][0] == region.last_range[0][0]
                parts.append("" if same_row else "\n")
            parts.append(region.appended_text)
            previous = region
        return "".join(parts)

    def is_empty(self) -> bool:
        return all(region.is_empty() for region in self._regions)

    def is_same_clipboard_text(self, clipboard_text: str) -> bool:
        return self.as_string() == clipboard_text

    def append(
        self,
        other: "KillRingEntity",
        direction: AppendDirection = AppendDirection.FORWARD,
    ) -> bool:
        """Merge ``other`` into this entity in place.

        Returns ``False`` without changing anything when ``other`` is not a
        ``MultiRegionEntity``.
        """

        if not isinstance(other, MultiRegionEntity):
            return False

        incoming = [region.copy() for region in other._regions]
        if self.is_empty():
            self._regions = incoming
        elif len(incoming) == len(self._regions):
            for region, addition in zip(self._regions, incoming):
                region.append(addition, direction)
        elif direction is AppendDirection.BACKWARD:
            self._regions[:0] = incoming
        else:
            self._regions.extend(incoming)
        return True

    def __repr__(self) -> str:
        return f"MultiRegionEntity({self.as_string()!r}, regions={len(self._regions)})"


@dataclass(slots=True)
class PlainTextEntity:
    """Text absorbed from the external clipboard; it has no region structure."""

    text: str
    kind: Literal["clipboard"] = "clipboard"

    def as_string(self) -> str:
        return self.text

    def is_empty(self) -> bool:
        return self.text == ""

    def is_same_clipboard_text(self, clipboard_text: str) -> bool:
        return self.text == clipboard_text


KillRingEntity = Union[MultiRegionEntity, PlainTextEntity]

__all__ = [
    "AppendDirection",
    "AppendedRegion",
    "KillRingEntity",
    "MultiRegionEntity",
    "PlainTextEntity",
    "RegionText",
]
