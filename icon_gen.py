"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64
_HEADER_H = 16
_HEADER_BG = "#0078D4"


def _fit_font(draw: ImageDraw.ImageDraw, text: str, max_w: int, max_h: int):
    """Return the largest truetype font that fits, or the default bitmap font."""
    font_size = 120
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= max_w and bbox[3] - bbox[1] <= max_h:
            return font
        font_size -= 1
    return ImageFont.load_default()


def create_icon_image(day: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA tear-off calendar page showing the day of month."""
    day = day or date.today()
    img = Image.new("RGBA", (ICON_SIZE, ICON_SIZE), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, ICON_SIZE - 1, _HEADER_H - 1), fill=_HEADER_BG)

    text = str(day.day)
    body_h = ICON_SIZE - _HEADER_H
    font = _fit_font(draw, text, ICON_SIZE - 4, body_h - 4)

    # Centre the visible pixels in the area below the header
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (ICON_SIZE - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = _HEADER_H + (body_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
