from __future__ import annotations

from tfl_status.rendering import DisplayEntry, FrameSink, StatusFrame, render_page


def test_render_page_blocks_and_total() -> None:
    frame = StatusFrame(
        entries=(
            DisplayEntry("Good service on all lines", "#004A9C"),
            DisplayEntry("Central", "#E1251B"),
            DisplayEntry(" ", "#FFFFFF"),
        )
    )

    html = render_page(frame)

    assert html.count('class="status-block"') == 3
    assert "--total-blocks: 3;" in html
    assert 'style="background-color: #E1251B">Central</div>' in html


def test_render_page_escapes_messages() -> None:
    html = render_page(StatusFrame(entries=(DisplayEntry("Hammersmith & City", "#EC9BAD"),)))

    assert "Hammersmith &amp; City" in html


def test_render_page_marks_striped_blocks() -> None:
    html = render_page(StatusFrame(entries=(DisplayEntry("Weaver", "#9B0058", striped=True),)))

    assert 'class="status-block striped"' in html


def test_sink_replaces_previous_view() -> None:
    sink = FrameSink(width=40, height=40)

    sink([DisplayEntry("Central", "#E1251B"), DisplayEntry("Victoria", "#00A0DF")])
    sink([DisplayEntry("Good service on all lines", "#004A9C")])

    assert sink.frame is not None
    assert sink.frame.total_blocks == 1
    assert sink.image is not None
    assert sink.image.load()[0, 39] == (0, 74, 156)
    assert "Victoria" not in sink.page()


def test_sink_page_blank_before_first_render() -> None:
    sink = FrameSink(width=40, height=40)

    assert sink.frame is None
    assert "--total-blocks: 0;" in sink.page()


def test_sink_writes_png(tmp_path) -> None:
    output = tmp_path / "out" / "frame.png"
    sink = FrameSink(width=40, height=40, output_path=str(output))

    sink([DisplayEntry("", "#6BCDB2")])

    assert output.exists()
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
