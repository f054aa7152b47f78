"""Data structures for rendering status frames."""

from __future__ import annotations

from dataclasses import dataclass

from tfl_status.logic.classifier import DisplayEntry


@dataclass(frozen=True)
class StatusFrame:
    """Frame data for the renderer."""

    entries: tuple[DisplayEntry, ...]

    @property
    def total_blocks(self) -> int:
        return len(self.entries)


__all__ = ["DisplayEntry", "StatusFrame"]
