"""HTML page rendering for the status display."""

from __future__ import annotations

from html import escape

from tfl_status.rendering.frame_data import StatusFrame

PAGE_TEMPLATE = """<!doctype html>
<html>
  <head>
    <meta charset="utf-8">
    <title>TfL Status</title>
    <style>
      :root {{ --total-blocks: {total_blocks}; }}
      html, body {{ margin: 0; height: 100%; }}
      body {{ display: flex; flex-direction: column; font-family: sans-serif; }}
      .status-block {{
        flex: 1 1 calc(100% / var(--total-blocks));
        display: flex; align-items: center; justify-content: center;
        color: #fff; font-size: calc(40vh / var(--total-blocks));
      }}
      .status-block.striped {{
        background-image: repeating-linear-gradient(
          45deg, transparent 0 18px, rgba(255, 255, 255, 0.6) 18px 24px);
      }}
    </style>
  </head>
  <body>
{blocks}
  </body>
</html>"""

BLOCK_TEMPLATE = '    <div class="{css_class}" style="background-color: {color}">{message}</div>'


def render_page(frame: StatusFrame) -> str:
    """Render the frame as a page of full-width status blocks."""
    blocks = []
    for entry in frame.entries:
        css_class = "status-block striped" if entry.striped else "status-block"
        blocks.append(
            BLOCK_TEMPLATE.format(
                css_class=css_class,
                color=escape(entry.background_color, quote=True),
                message=escape(entry.message),
            )
        )
    return PAGE_TEMPLATE.format(total_blocks=frame.total_blocks, blocks="\n".join(blocks))


__all__ = ["render_page"]
