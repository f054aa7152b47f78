"""Render a status frame from a saved TfL line status response."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from tfl_status.logic.classifier import build_display_entries, classify, parse_line_statuses
from tfl_status.rendering import FrameSink


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("payload", help="Path to a JSON file holding a /Line/Mode/{modes}/Status response")
    parser.add_argument("--names", action="store_true", help="Show line names")
    parser.add_argument("--output", default="emulator_output/frame.png", help="PNG output path")
    parser.add_argument("--html", default=None, help="Optional HTML output path")
    args = parser.parse_args()

    with open(args.payload, "r", encoding="utf-8") as handle:
        payload = json.load(handle)

    records = parse_line_statuses(payload)
    entries = build_display_entries(classify(records, args.names), args.names)

    sink = FrameSink(output_path=args.output)
    sink(entries)
    if args.html:
        html_path = Path(args.html)
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(sink.page(), encoding="utf-8")

    for entry in entries:
        label = entry.message or "(unnamed)"
        stripe = " striped" if entry.striped else ""
        print(f"{entry.background_color}{stripe}  {label}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
