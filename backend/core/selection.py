"""Selection state of the dashboard, as an immutable value."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Literal

SelectionState = Literal["none", "partial", "all"]


@dataclass(frozen=True)
class Selection:
    """Selected ids plus the ids currently visible after filtering.

    Changing the visible ids does not drop selected ids that fell out of the
    view; ``prune`` does that explicitly.
    """

    selected: frozenset[str] = field(default_factory=frozenset)
    visible_ids: tuple[str, ...] = ()

    @property
    def state(self) -> SelectionState:
        if not self.selected:
            return "none"
        if self.visible_ids and all(vid in self.selected for vid in self.visible_ids):
            return "all"
        return "partial"

    @property
    def count(self) -> int:
        return len(self.selected)

    def is_selected(self, vehicle_id: str) -> bool:
        return vehicle_id in self.selected

    def toggle(self, vehicle_id: str, checked: bool | None = None) -> Selection:
        if checked is None:
            checked = vehicle_id not in self.selected
        if checked:
            return replace(self, selected=self.selected | {vehicle_id})
        return replace(self, selected=self.selected - {vehicle_id})

    def select_all(self) -> Selection:
        return replace(self, selected=frozenset(self.visible_ids))

    def select_none(self) -> Selection:
        return replace(self, selected=frozenset())

    def discard(self, vehicle_id: str) -> Selection:
        return replace(
            self,
            selected=self.selected - {vehicle_id},
            visible_ids=tuple(vid for vid in self.visible_ids if vid != vehicle_id),
        )

    def with_visible(self, visible_ids: Iterable[str]) -> Selection:
        return replace(self, visible_ids=tuple(visible_ids))

    def prune(self) -> Selection:
        visible = set(self.visible_ids)
        return replace(self, selected=frozenset(vid for vid in self.selected if vid in visible))

    def ordered(self, ids_in_order: Iterable[str]) -> list[str]:
        return [vid for vid in ids_in_order if vid in self.selected]
