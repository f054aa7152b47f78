from __future__ import annotations

import pytest

from tfl_status.logic.lines import DEFAULT_COLOR, LINE_STYLES, LineStyle, lookup_style


def test_known_line_style() -> None:
    style = lookup_style("Waterloo & City")

    assert style.color == "#6BCDB2"
    assert style.striped is False


def test_named_overground_lines_are_striped() -> None:
    for name in ("Liberty", "Lioness", "Mildmay", "Suffragette", "Weaver", "Windrush"):
        assert LINE_STYLES[name].striped is True


def test_unknown_line_falls_back_to_default() -> None:
    style = lookup_style("Hogwarts Express")

    assert style.color == DEFAULT_COLOR
    assert style.striped is False


def test_lookup_uses_injected_registry() -> None:
    registry = {"Central": LineStyle("Central", "#123456", striped=True)}

    style = lookup_style("Central", registry)

    assert style.color == "#123456"
    assert style.striped is True


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        LINE_STYLES["Central"] = LineStyle("Central", "#FFFFFF")  # type: ignore[index]
