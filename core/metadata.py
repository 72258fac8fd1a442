"""
Metadata source for Deck Jockey
Builds a PlaybackSnapshot from playerctl and, optionally, Spotify
"""

from core.snapshot import PlaybackSnapshot


class MetadataSource:
    """Produces a fresh snapshot on every call"""

    def __init__(self, player, spotify=None):
        """
        Args:
            player: PlayerControl for artist/title/art URL
            spotify: SpotifyClient for progress/duration (streaming variant)
        """
        self.player = player
        self.spotify = spotify

    def fetch_snapshot(self):
        """
        Query the current playback state

        Returns:
            PlaybackSnapshot

        Raises:
            CommandError: playerctl failed
            AuthError: streaming variant without an access token
            MetadataError: Spotify playback query failed
        """
        artist = self.player.artist()
        track = self.player.title()
        artwork_url = self.player.art_url() or None

        progress_ms = 0
        duration_ms = None
        if self.spotify is not None:
            progress = self.spotify.get_playback_progress()
            if progress:
                progress_ms, duration_ms = progress

        return PlaybackSnapshot(
            artist=artist,
            track=track,
            artwork_url=artwork_url,
            progress_ms=progress_ms,
            duration_ms=duration_ms
        )
