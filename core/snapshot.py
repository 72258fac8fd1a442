"""
Playback snapshot and rendered frame types
"""

from dataclasses import dataclass
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class PlaybackSnapshot:
    """Artist/track/artwork/progress at one point in time"""

    artist: str
    track: str
    artwork_url: Optional[str] = None
    progress_ms: int = 0
    duration_ms: Optional[int] = None

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        if self.progress_ms is None or self.progress_ms < 0:
            object.__setattr__(self, 'progress_ms', 0)
        if self.duration_ms is not None and self.duration_ms <= 0:
            object.__setattr__(self, 'duration_ms', None)
        if not self.artwork_url:
            object.__setattr__(self, 'artwork_url', None)

    @property
    def progress_ratio(self):
        """Progress as a fraction in [0, 1], or None without a duration"""
        if self.duration_ms is None:
            return None
        return max(0.0, min(1.0, self.progress_ms / self.duration_ms))

    def same_track(self, other):
        return (
            other is not None
            and self.artist == other.artist
            and self.track == other.track
        )


@dataclass
class RenderedFrame:
    """Icon and status bar images for one tick"""

    icon: Image.Image
    bar: Image.Image
