# Deck Jockey Configuration File
#
# This file contains your personal settings and credentials.
# This file is tracked in git with placeholder values.
# Edit this file locally with your actual values - your changes won't be committed.
#
# The basic variant only needs playerctl. The Spotify credentials and the
# Discord client ID are only used when running with --spotify.

# Spotify API Credentials (get from https://developer.spotify.com/dashboard)
SPOTIPY_CLIENT_ID = 'YOUR_CLIENT_ID_HERE'
SPOTIPY_CLIENT_SECRET = 'YOUR_CLIENT_SECRET_HERE'
SPOTIPY_REDIRECT_URI = 'http://127.0.0.1:8888/callback'

# Discord application ID used for Rich Presence (leave empty to disable)
DISCORD_CLIENT_ID = ''

# Media-control executable and optional player name (passed as -p <name>)
PLAYER_COMMAND = 'playerctl'
PLAYER_NAME = ''

# Stream Deck brightness (0-100)
DECK_BRIGHTNESS = 60
