"""
Configuration settings for Deck Jockey
Loads user-specific settings from config.py
"""

import sys

# Try to import optional libraries and set availability flags
try:
    from pypresence import Presence
    PRESENCE_AVAILABLE = True
except ImportError:
    PRESENCE_AVAILABLE = False

# Import configuration from config.py (user-specific settings)
# Note: This imports from the root-level config.py, not this config package
import importlib.util
import pathlib

# Get the parent directory (deck-jockey root)
root_dir = pathlib.Path(__file__).parent.parent


def find_config_file(search_dirs=None):
    """
    Locate the user's config.py

    Looks next to the source checkout first, then in the current working
    directory (where a regular install expects it).

    Returns:
        pathlib.Path or None
    """
    if search_dirs is None:
        search_dirs = [root_dir, pathlib.Path.cwd()]
    for directory in search_dirs:
        candidate = pathlib.Path(directory) / 'config.py'
        if candidate.is_file():
            return candidate
    return None


config_file = find_config_file()

if config_file is not None:
    spec = importlib.util.spec_from_file_location("user_config", config_file)
    user_config = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(user_config)

    SPOTIPY_CLIENT_ID = user_config.SPOTIPY_CLIENT_ID
    SPOTIPY_CLIENT_SECRET = user_config.SPOTIPY_CLIENT_SECRET
    SPOTIPY_REDIRECT_URI = user_config.SPOTIPY_REDIRECT_URI
    DISCORD_CLIENT_ID = getattr(user_config, 'DISCORD_CLIENT_ID', '')
    PLAYER_COMMAND = getattr(user_config, 'PLAYER_COMMAND', 'playerctl')
    PLAYER_NAME = getattr(user_config, 'PLAYER_NAME', '')
    DECK_BRIGHTNESS = getattr(user_config, 'DECK_BRIGHTNESS', 60)
else:
    print("❌ ERROR: config.py not found!")
    print("Please create config.py in the directory you run deck-jockey from.")
    print("See the config.py in the repository for a template.")
    sys.exit(1)

# Spotify API scopes
SCOPE = 'user-read-playback-state,user-read-currently-playing'

# Local OAuth callback server (must match SPOTIPY_REDIRECT_URI)
CALLBACK_HOST = '127.0.0.1'
CALLBACK_PORT = 8888

# Seconds before token expiry at which the refresh timer fires
TOKEN_REFRESH_MARGIN = 60

# Poll/render loop
POLL_INTERVAL = 1.0  # Seconds between ticks

# Device layout
ICON_KEY = 0  # Key that shows the album artwork

# Status bar layout (fractions of the strip size)
BAR_WIDTH_FRACTION = 0.5
BAR_HEIGHT_FRACTION = 0.1
BAR_CORNER_RADIUS = 3
ARTIST_OFFSET = -10  # Baseline offset from the vertical midpoint
TRACK_OFFSET = 20

# Colours
ICON_BACKGROUND = (0, 0, 0)
BAR_BACKGROUND = (255, 255, 255)
TEXT_COLOR = (0, 0, 0)
PROGRESS_TRACK_COLOR = (208, 208, 208)
PROGRESS_FILL_COLOR = (0, 0, 0)

# Font
FONT_NAME = 'NotoSans-Regular.ttf'
FONT_SIZE = 15

# Artwork download timeout (seconds)
ARTWORK_TIMEOUT = 5
