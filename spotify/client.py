"""
Spotify Client module for Deck Jockey
Queries playback progress with the current access token
"""

import requests
import spotipy
from spotipy.exceptions import SpotifyException

from core.errors import AuthError, MetadataError


class SpotifyClient:
    """Wrapper for the Spotify playback-state query"""

    def __init__(self, token_provider, verbose=False):
        """
        Args:
            token_provider: Callable returning the current access token,
                raising AuthError when none is available
            verbose: Print extra detail
        """
        self.token_provider = token_provider
        self.verbose = verbose

    def _client(self):
        return spotipy.Spotify(auth=self.token_provider())

    def get_current_playback(self):
        """
        Get the raw playback state

        Returns:
            dict or None if nothing is playing

        Raises:
            AuthError: no token, or Spotify answered 401
            MetadataError: any other API failure
        """
        sp = self._client()
        try:
            return sp.current_playback()
        except SpotifyException as e:
            if e.http_status == 401:
                raise AuthError(f"Spotify rejected the access token: {e.msg}") from e
            raise MetadataError(f"Spotify playback query failed: {e.msg}") from e
        except requests.RequestException as e:
            raise MetadataError(f"Spotify playback query failed: {e}") from e

    def get_playback_progress(self):
        """
        Get progress and duration of the current item

        Returns:
            tuple: (progress_ms, duration_ms), or None if nothing is playing
        """
        playback = self.get_current_playback()
        if not playback:
            return None

        item = playback.get('item') or {}
        duration_ms = item.get('duration_ms')
        progress_ms = playback.get('progress_ms') or 0

        if self.verbose:
            print(f"[DEBUG] Spotify progress: {progress_ms}/{duration_ms} ms")

        return progress_ms, duration_ms
