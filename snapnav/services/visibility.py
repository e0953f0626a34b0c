"""Pure-Python intersection tracking for page sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Sequence

from .host import VisibilityEntry, VisibilityOptions


@dataclass(frozen=True, slots=True)
class SectionGeometry:
    """Vertical extent of a section in page coordinates."""

    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


def visible_ratio(section: SectionGeometry, viewport_top: float, viewport_height: float, inset: float = 0.0) -> float:
    """Fraction of ``section`` inside the viewport shrunk by ``inset`` at top and bottom."""
    if section.height <= 0:
        return 0.0
    margin = viewport_height * inset
    root_top = viewport_top + margin
    root_bottom = viewport_top + viewport_height - margin
    overlap = min(section.bottom, root_bottom) - max(section.top, root_top)
    if overlap <= 0:
        return 0.0
    return min(overlap / section.height, 1.0)


class VisibilityTracker:
    """
    Reports sections whose intersecting state changed since the last update.

    A section intersects when its visible ratio reaches the threshold. The
    first update after construction or ``reset()`` reports every section.
    """

    def __init__(self, section_ids: Sequence[str], options: VisibilityOptions) -> None:
        self.section_ids = tuple(section_ids)
        self.options = options
        self._states: Dict[str, bool] = {}

    def reset(self) -> None:
        self._states.clear()

    def update(
        self,
        geometry: Mapping[str, SectionGeometry],
        viewport_top: float,
        viewport_height: float,
    ) -> list[VisibilityEntry]:
        entries: list[VisibilityEntry] = []
        for section_id in self.section_ids:
            section = geometry.get(section_id)
            if section is None:
                continue
            ratio = visible_ratio(section, viewport_top, viewport_height, self.options.inset)
            intersecting = ratio > 0 and ratio >= self.options.threshold
            if self._states.get(section_id) != intersecting:
                self._states[section_id] = intersecting
                entries.append(VisibilityEntry(section_id, ratio, intersecting))
        return entries
