"""Render sink that keeps the current status view and writes frames to disk."""

from __future__ import annotations

import logging
from pathlib import Path
import threading
from typing import Sequence

from PIL import Image

from tfl_status.rendering.composer import DISPLAY_HEIGHT, DISPLAY_WIDTH, compose_frame
from tfl_status.rendering.frame_data import DisplayEntry, StatusFrame
from tfl_status.rendering.page import render_page

logger = logging.getLogger(__name__)


def save_frame(image: Image.Image, path: str = "emulator_output/frame.png") -> None:
    """Save a frame to disk as a PNG image."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path, format="PNG")


class FrameSink:
    """Replaces the current view with each rendered entry list.

    Every call clears the previous frame and draws the new one; the most
    recent call wins.
    """

    def __init__(
        self,
        width: int = DISPLAY_WIDTH,
        height: int = DISPLAY_HEIGHT,
        output_path: str | None = None,
    ) -> None:
        self._width = width
        self._height = height
        self._output_path = output_path
        self._lock = threading.Lock()
        self._frame: StatusFrame | None = None
        self._image: Image.Image | None = None

    def __call__(self, entries: Sequence[DisplayEntry]) -> None:
        frame = StatusFrame(entries=tuple(entries))
        image = compose_frame(frame, self._width, self._height)
        with self._lock:
            self._frame = frame
            self._image = image
        if self._output_path:
            save_frame(image, self._output_path)
        logger.debug("Rendered %d status blocks", frame.total_blocks)

    @property
    def frame(self) -> StatusFrame | None:
        with self._lock:
            return self._frame

    @property
    def image(self) -> Image.Image | None:
        with self._lock:
            return self._image

    def page(self) -> str:
        """Return the current view as HTML; blank before the first render."""
        frame = self.frame
        return render_page(frame if frame is not None else StatusFrame(entries=()))


__all__ = ["FrameSink", "save_frame"]
