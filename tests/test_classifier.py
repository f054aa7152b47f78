from __future__ import annotations

import pytest

from tfl_status.data.tfl_client import MalformedResponseError
from tfl_status.logic.classifier import (
    ALL_GOOD_MESSAGE,
    OTHERS_GOOD_MESSAGE,
    Classification,
    DisplayEntry,
    LineStatusRecord,
    build_display_entries,
    classify,
    parse_line_statuses,
)
from tfl_status.logic.lines import GOOD_SERVICE_COLOR, LineStyle


TUBE_LINES = [
    "Bakerloo",
    "Central",
    "Circle",
    "District",
    "Hammersmith & City",
    "Jubilee",
    "Metropolitan",
    "Northern",
    "Piccadilly",
    "Victoria",
    "Waterloo & City",
]


def _line(name: str, *severities: int) -> dict:
    return {
        "id": name.lower(),
        "name": name,
        "lineStatuses": [{"statusSeverity": s, "statusSeverityDescription": "x"} for s in severities],
    }


def _payload(disrupted: dict[str, tuple[int, ...]] | None = None) -> list[dict]:
    disrupted = disrupted or {}
    return [_line(name, *disrupted.get(name, (10,))) for name in TUBE_LINES]


def test_parse_line_statuses() -> None:
    records = parse_line_statuses([_line("Central", 10, 6)])

    assert records == [LineStatusRecord(name="Central", severities=(10, 6))]


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Central"},
        [None],
        [{"lineStatuses": []}],
        [{"name": "Central"}],
        [{"name": "Central", "lineStatuses": [{"statusSeverity": "6"}]}],
        [{"name": "Central", "lineStatuses": [{}]}],
    ],
)
def test_parse_line_statuses_rejects_malformed(payload) -> None:
    with pytest.raises(MalformedResponseError):
        parse_line_statuses(payload)


@pytest.mark.parametrize("show_names", [True, False])
def test_classify_all_good(show_names: bool) -> None:
    classification = classify(parse_line_statuses(_payload()), show_names)

    assert classification.all_good is True
    assert classification.entries == ()


def test_classify_single_disruption_with_names() -> None:
    records = parse_line_statuses(_payload({"Waterloo & City": (5,)}))

    classification = classify(records, True)

    assert classification.all_good is False
    assert classification.entries == (DisplayEntry("Waterloo & City", "#6BCDB2", False),)


def test_classify_single_disruption_without_names() -> None:
    records = parse_line_statuses(_payload({"Waterloo & City": (5,)}))

    classification = classify(records, False)

    assert classification.entries == (DisplayEntry("", "#6BCDB2", False),)


def test_classify_preserves_input_order() -> None:
    records = parse_line_statuses(
        _payload(
            {
                "Central": (9,),
                "Metropolitan": (10, 6),
                "Piccadilly": (3,),
                "Waterloo & City": (5,),
            }
        )
    )

    classification = classify(records, True)

    assert [entry.message for entry in classification.entries] == [
        "Central",
        "Metropolitan",
        "Piccadilly",
        "Waterloo & City",
    ]


def test_classify_severity_ten_or_above_is_good() -> None:
    records = [LineStatusRecord("Central", (10, 18, 20))]

    assert classify(records, True).all_good is True


def test_classify_unknown_line_uses_fallback_style() -> None:
    records = [LineStatusRecord("Cable Car", (6,))]

    classification = classify(records, True)

    assert classification.entries == (DisplayEntry("Cable Car", "#000000", False),)


def test_classify_striped_line() -> None:
    records = [LineStatusRecord("Mildmay", (6,))]

    classification = classify(records, True)

    assert classification.entries == (DisplayEntry("Mildmay", "#006FE6", True),)


def test_classify_uses_injected_styles() -> None:
    styles = {"Central": LineStyle("Central", "#ABCDEF", striped=True)}

    classification = classify([LineStatusRecord("Central", (6,))], True, styles)

    assert classification.entries == (DisplayEntry("Central", "#ABCDEF", True),)


def test_classify_is_idempotent() -> None:
    records = parse_line_statuses(_payload({"Central": (6,), "Victoria": (9,)}))

    assert classify(records, True) == classify(records, True)


def test_build_entries_all_good() -> None:
    entries = build_display_entries(Classification(all_good=True, entries=()), True)

    assert entries == [DisplayEntry(ALL_GOOD_MESSAGE, GOOD_SERVICE_COLOR, False)]


def test_build_entries_appends_others_good_when_names_shown() -> None:
    classification = Classification(all_good=False, entries=(DisplayEntry("Waterloo & City", "#6BCDB2"),))

    entries = build_display_entries(classification, True)

    assert entries == [
        DisplayEntry("Waterloo & City", "#6BCDB2", False),
        DisplayEntry(OTHERS_GOOD_MESSAGE, "#004A9C", False),
    ]


def test_build_entries_without_names_has_no_trailer() -> None:
    classification = Classification(all_good=False, entries=(DisplayEntry("", "#6BCDB2"),))

    entries = build_display_entries(classification, False)

    assert entries == [DisplayEntry("", "#6BCDB2", False)]


def test_empty_payload_is_all_good() -> None:
    entries = build_display_entries(classify(parse_line_statuses([]), True), True)

    assert entries == [DisplayEntry(ALL_GOOD_MESSAGE, GOOD_SERVICE_COLOR, False)]
