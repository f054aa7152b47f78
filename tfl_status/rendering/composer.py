"""Frame composer for the status display."""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

from tfl_status.rendering.frame_data import DisplayEntry, StatusFrame

DISPLAY_WIDTH = 480
DISPLAY_HEIGHT = 320

COLOR_BLANK = (0, 0, 0)
COLOR_TEXT_LIGHT = (255, 255, 255)
COLOR_TEXT_DARK = (0, 0, 0)
COLOR_STRIPE = (255, 255, 255)

STRIPE_WIDTH = 6
STRIPE_SPACING = 24

# Backgrounds brighter than this get dark text.
TEXT_LUMINANCE_THRESHOLD = 160

MIN_FONT_SIZE = 10
MAX_FONT_SIZE = 36


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' or '#RGB' to an RGB tuple."""
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex colour: {value!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _text_color(background: tuple[int, int, int]) -> tuple[int, int, int]:
    red, green, blue = background
    luminance = 0.299 * red + 0.587 * green + 0.114 * blue
    return COLOR_TEXT_DARK if luminance > TEXT_LUMINANCE_THRESHOLD else COLOR_TEXT_LIGHT


def _band_bounds(index: int, count: int, height: int) -> tuple[int, int]:
    top = index * height // count
    bottom = (index + 1) * height // count - 1
    return top, bottom


def _draw_stripes(draw: ImageDraw.ImageDraw, width: int, top: int, bottom: int) -> None:
    band_height = bottom - top + 1
    for offset in range(-band_height, width, STRIPE_SPACING):
        for dx in range(STRIPE_WIDTH):
            x = offset + dx
            draw.line((x, bottom, x + band_height - 1, top), fill=COLOR_STRIPE)


def _draw_block(
    draw: ImageDraw.ImageDraw,
    entry: DisplayEntry,
    width: int,
    top: int,
    bottom: int,
) -> None:
    background = hex_to_rgb(entry.background_color)
    draw.rectangle((0, top, width - 1, bottom), fill=background)
    if entry.striped:
        _draw_stripes(draw, width, top, bottom)

    if not entry.message:
        return

    band_height = bottom - top + 1
    font_size = max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, band_height // 3))
    font = ImageFont.load_default(size=font_size)
    bbox = draw.textbbox((0, 0), entry.message, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]
    text_x = (width - text_width) // 2 - bbox[0]
    text_y = top + (band_height - text_height) // 2 - bbox[1]
    draw.text((text_x, text_y), entry.message, font=font, fill=_text_color(background))


def compose_frame(frame: StatusFrame, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT) -> Image.Image:
    """Compose an RGB frame with one full-width band per display entry."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Frame size must be positive, got {width}x{height}.")
    if frame.total_blocks > height:
        raise ValueError(f"Cannot fit {frame.total_blocks} blocks into {height}px.")

    image = Image.new("RGB", (width, height), COLOR_BLANK)
    draw = ImageDraw.Draw(image)

    for index, entry in enumerate(frame.entries):
        top, bottom = _band_bounds(index, frame.total_blocks, height)
        _draw_block(draw, entry, width, top, bottom)

    return image


__all__ = ["compose_frame", "hex_to_rgb"]
