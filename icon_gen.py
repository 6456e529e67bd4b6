"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

from cell_style import ACCENT


def _fit_font(draw: ImageDraw.ImageDraw, text: str, size: int):
    """Largest TrueType font that fits *text* in the icon, or the default."""
    font_size = 120
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 8 and bbox[3] - bbox[1] <= size - 8:
            return font
        font_size -= 1
    return font


def create_icon_image(count: int = 0, accent: str = ACCENT) -> Image.Image:
    """Return a 64×64 RGBA image with the number of selected dates.

    Zero renders as a plain white tile with an accent border.
    """
    size = 64
    fill = accent if count else "white"
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle((0, 0, size - 1, size - 1), radius=12,
                           fill=fill, outline=accent, width=4)
    if not count:
        return img

    text = str(count) if count < 100 else "99+"
    font = _fit_font(draw, text, size)
    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="white", font=font)
    return img
