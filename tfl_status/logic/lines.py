"""Presentation styles for TfL lines.

Colours follow the TfL colour standard (issue 08) plus the London Overground
line names introduced in 2024. The named Overground lines are drawn striped.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

DEFAULT_COLOR = "#000000"
GOOD_SERVICE_COLOR = "#004A9C"


@dataclass(frozen=True)
class LineStyle:
    """Background colour and stripe flag for a single line."""

    name: str
    color: str
    striped: bool = False


def _build_registry(styles: list[LineStyle]) -> Mapping[str, LineStyle]:
    registry: dict[str, LineStyle] = {}
    for style in styles:
        if style.name in registry:
            raise ValueError(f"Duplicate line style for '{style.name}'")
        registry[style.name] = style
    return MappingProxyType(registry)


LINE_STYLES: Mapping[str, LineStyle] = _build_registry(
    [
        LineStyle("Bakerloo", "#A65A2A"),
        LineStyle("Central", "#E1251B"),
        LineStyle("Circle", "#FFCD00"),
        LineStyle("District", "#007934"),
        LineStyle("Hammersmith & City", "#EC9BAD"),
        LineStyle("Jubilee", "#7B868C"),
        LineStyle("Metropolitan", "#870F54"),
        LineStyle("Northern", "#000000"),
        LineStyle("Piccadilly", "#000F9F"),
        LineStyle("Victoria", "#00A0DF"),
        LineStyle("Waterloo & City", "#6BCDB2"),
        LineStyle("Transport for London", "#000F9F"),
        LineStyle("DLR", "#00AFAA"),
        LineStyle("Elizabeth line", "#773DBD"),
        LineStyle("London Overground", "#EE7623"),
        LineStyle("Liberty", "#61686B", striped=True),
        LineStyle("Lioness", "#FFA600", striped=True),
        LineStyle("Mildmay", "#006FE6", striped=True),
        LineStyle("Suffragette", "#18A95D", striped=True),
        LineStyle("Weaver", "#9B0058", striped=True),
        LineStyle("Windrush", "#DC241F", striped=True),
    ]
)


def lookup_style(name: str, styles: Mapping[str, LineStyle] = LINE_STYLES) -> LineStyle:
    """Return the style for a line, falling back to an unstriped default colour."""
    style = styles.get(name)
    if style is None:
        return LineStyle(name, DEFAULT_COLOR, striped=False)
    return style


__all__ = [
    "DEFAULT_COLOR",
    "GOOD_SERVICE_COLOR",
    "LINE_STYLES",
    "LineStyle",
    "lookup_style",
]
