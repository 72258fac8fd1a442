"""Image rendering for Deck Jockey"""

from .artwork import ArtworkLoader
from .canvas import CanvasRenderer, draw_rounded_rect, progress_fill_width

__all__ = ['ArtworkLoader', 'CanvasRenderer', 'draw_rounded_rect', 'progress_fill_width']
