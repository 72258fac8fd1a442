"""
Canvas renderer for Deck Jockey
Paints the artwork icon and the status bar with its progress indicator
"""

from PIL import Image, ImageDraw, ImageFont

from config.settings import (
    ICON_BACKGROUND,
    BAR_BACKGROUND,
    TEXT_COLOR,
    PROGRESS_TRACK_COLOR,
    PROGRESS_FILL_COLOR,
    BAR_WIDTH_FRACTION,
    BAR_HEIGHT_FRACTION,
    BAR_CORNER_RADIUS,
    ARTIST_OFFSET,
    TRACK_OFFSET,
    FONT_NAME,
    FONT_SIZE
)
from core.snapshot import RenderedFrame


def load_font(name=FONT_NAME, size=FONT_SIZE):
    """Load the bar font, falling back to Pillow's built-in font"""
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        return ImageFont.load_default(size=size)


def progress_fill_width(track_width, snapshot):
    """
    Width in pixels of the progress fill

    Args:
        track_width: Width of the progress track in pixels
        snapshot: PlaybackSnapshot

    Returns:
        int: round(track_width * clamp(progress / duration, 0, 1)), or 0
        when the duration is unknown
    """
    ratio = snapshot.progress_ratio
    if ratio is None:
        return 0
    return int(round(track_width * ratio))


def draw_rounded_rect(draw, x, y, width, height, radius, fill):
    """
    Fill a rectangle with quarter-circle corners

    Straight edges are two overlapping bands, corners are four pie slices.
    The radius shrinks so the corners always fit inside the rectangle.
    """
    if width <= 0 or height <= 0:
        return

    radius = max(0, min(radius, (width - 1) // 2, (height - 1) // 2))
    x1 = x + width - 1
    y1 = y + height - 1

    if radius == 0:
        draw.rectangle([x, y, x1, y1], fill=fill)
        return

    d = 2 * radius
    draw.rectangle([x + radius, y, x1 - radius, y1], fill=fill)
    draw.rectangle([x, y + radius, x1, y1 - radius], fill=fill)
    draw.pieslice([x, y, x + d, y + d], 180, 270, fill=fill)
    draw.pieslice([x1 - d, y, x1, y + d], 270, 360, fill=fill)
    draw.pieslice([x1 - d, y1 - d, x1, y1], 0, 90, fill=fill)
    draw.pieslice([x, y1 - d, x + d, y1], 90, 180, fill=fill)


class CanvasRenderer:
    """Renders icon and status bar images for one device"""

    def __init__(self, icon_size, bar_size, font=None):
        """
        Args:
            icon_size: (width, height) of a key image
            bar_size: (width, height) of the status strip
            font: ImageFont to use for artist/track text
        """
        self.icon_size = tuple(icon_size)
        self.bar_size = tuple(bar_size)
        self.font = font or load_font()

    @property
    def track_geometry(self):
        """(x, y, width, height) of the progress track inside the bar"""
        bar_w, bar_h = self.bar_size
        width = int(bar_w * BAR_WIDTH_FRACTION)
        height = int(bar_h * BAR_HEIGHT_FRACTION)
        return (bar_w - width) // 2, (bar_h - height) // 2, width, height

    def render_icon(self, artwork=None):
        """
        Render the artwork key

        Args:
            artwork: PIL.Image or None

        Returns:
            PIL.Image: black square with the artwork scaled to fill it
        """
        icon = Image.new('RGB', self.icon_size, ICON_BACKGROUND)
        if artwork is not None:
            scaled = artwork.convert('RGB').resize(self.icon_size, Image.Resampling.LANCZOS)
            icon.paste(scaled, (0, 0))
        return icon

    def render_bar(self, snapshot):
        """
        Render the status strip: artist, track and progress bar

        Args:
            snapshot: PlaybackSnapshot

        Returns:
            PIL.Image
        """
        bar_w, bar_h = self.bar_size
        bar = Image.new('RGB', self.bar_size, BAR_BACKGROUND)
        draw = ImageDraw.Draw(bar)

        center_x = bar_w / 2
        center_y = bar_h / 2
        draw.text((center_x, center_y + ARTIST_OFFSET), snapshot.artist,
                  fill=TEXT_COLOR, font=self.font, anchor='ms')
        draw.text((center_x, center_y + TRACK_OFFSET), snapshot.track,
                  fill=TEXT_COLOR, font=self.font, anchor='ms')

        x, y, width, height = self.track_geometry
        draw_rounded_rect(draw, x, y, width, height, BAR_CORNER_RADIUS, PROGRESS_TRACK_COLOR)
        fill_width = progress_fill_width(width, snapshot)
        draw_rounded_rect(draw, x, y, fill_width, height, BAR_CORNER_RADIUS, PROGRESS_FILL_COLOR)

        return bar

    def render(self, snapshot, artwork=None):
        return RenderedFrame(icon=self.render_icon(artwork), bar=self.render_bar(snapshot))
