"""Disruption classification for TfL line statuses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from tfl_status.data.tfl_client import MalformedResponseError
from tfl_status.logic.lines import GOOD_SERVICE_COLOR, LINE_STYLES, LineStyle, lookup_style

GOOD_SERVICE_SEVERITY = 10

ALL_GOOD_MESSAGE = "Good service on all lines"
OTHERS_GOOD_MESSAGE = "Good service on all other lines"


@dataclass(frozen=True)
class DisplayEntry:
    """Single status block for display."""

    message: str
    background_color: str
    striped: bool = False


@dataclass(frozen=True)
class LineStatusRecord:
    """Name and reported status severities for one line."""

    name: str
    severities: tuple[int, ...]

    @property
    def disrupted(self) -> bool:
        return any(severity < GOOD_SERVICE_SEVERITY for severity in self.severities)


@dataclass(frozen=True)
class Classification:
    """Disrupted lines in payload order, and whether every line is running normally."""

    all_good: bool
    entries: tuple[DisplayEntry, ...]


def parse_line_statuses(payload: Any) -> list[LineStatusRecord]:
    """Convert a decoded TfL line status array into records."""
    if not isinstance(payload, list):
        raise MalformedResponseError("Expected a list of line statuses")

    records: list[LineStatusRecord] = []
    for index, line in enumerate(payload):
        if not isinstance(line, dict):
            raise MalformedResponseError(f"Line entry {index} is not an object")
        name = line.get("name")
        statuses = line.get("lineStatuses")
        if not isinstance(name, str):
            raise MalformedResponseError(f"Line entry {index} has no name")
        if not isinstance(statuses, list):
            raise MalformedResponseError(f"Line '{name}' has no lineStatuses")

        severities: list[int] = []
        for status in statuses:
            severity = status.get("statusSeverity") if isinstance(status, dict) else None
            if not isinstance(severity, int) or isinstance(severity, bool):
                raise MalformedResponseError(f"Line '{name}' has an invalid statusSeverity")
            severities.append(severity)
        records.append(LineStatusRecord(name=name, severities=tuple(severities)))
    return records


def classify(
    records: Iterable[LineStatusRecord],
    show_names: bool,
    styles: Mapping[str, LineStyle] = LINE_STYLES,
) -> Classification:
    """Collect a display entry for each disrupted line, preserving input order."""
    all_good = True
    entries: list[DisplayEntry] = []
    for record in records:
        if not record.disrupted:
            continue
        all_good = False
        style = lookup_style(record.name, styles)
        entries.append(
            DisplayEntry(
                message=record.name if show_names else "",
                background_color=style.color,
                striped=style.striped,
            )
        )
    return Classification(all_good=all_good, entries=tuple(entries))


def build_display_entries(classification: Classification, show_names: bool) -> list[DisplayEntry]:
    """Turn a classification into the final list handed to the render sink."""
    if classification.all_good:
        return [DisplayEntry(ALL_GOOD_MESSAGE, GOOD_SERVICE_COLOR)]

    entries = list(classification.entries)
    if show_names:
        entries.append(DisplayEntry(OTHERS_GOOD_MESSAGE, GOOD_SERVICE_COLOR))
    return entries


__all__ = [
    "ALL_GOOD_MESSAGE",
    "GOOD_SERVICE_SEVERITY",
    "OTHERS_GOOD_MESSAGE",
    "Classification",
    "DisplayEntry",
    "LineStatusRecord",
    "build_display_entries",
    "classify",
    "parse_line_statuses",
]
