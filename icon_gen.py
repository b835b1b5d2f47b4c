"""Generate the dialog window icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import MONTH_ABBR, CalendarDate

ACCENT = "#3B82F6"


def _fit_font(draw: ImageDraw.ImageDraw, text: str, max_w: int, max_h: int,
              start: int) -> ImageFont.ImageFont:
    font_size = start
    while font_size > 6:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= max_w and bbox[3] - bbox[1] <= max_h:
            return font
        font_size -= 1
    return ImageFont.load_default()


def create_icon_image(today: CalendarDate) -> Image.Image:
    """Return a 64×64 RGBA tear-off calendar page for ``today``.

    A coloured band carries the month abbreviation; the day number fills
    the rest of the page.
    """
    size = 64
    band = 18
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size, band), fill=ACCENT)

    month = MONTH_ABBR[today.month].upper()
    font = _fit_font(draw, month, size - 8, band - 4, 16)
    bbox = draw.textbbox((0, 0), month, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (band - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), month, fill="white", font=font)

    day = str(today.day)
    font = _fit_font(draw, day, size - 6, size - band - 6, 60)
    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), day, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band + (size - band - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), day, fill="black", font=font)

    return img
