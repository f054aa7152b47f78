"""Rendering utilities for the status display."""

from tfl_status.rendering.composer import compose_frame
from tfl_status.rendering.frame_data import DisplayEntry, StatusFrame
from tfl_status.rendering.page import render_page
from tfl_status.rendering.sink import FrameSink, save_frame

__all__ = ["DisplayEntry", "FrameSink", "StatusFrame", "compose_frame", "render_page", "save_frame"]
