"""
Spotify token management for Deck Jockey
Exchanges authorization codes and keeps the access token fresh
"""

import threading

import requests

from spotipy.cache_handler import MemoryCacheHandler
from spotipy.oauth2 import SpotifyOAuth, SpotifyOauthError

from config.settings import (
    SPOTIPY_CLIENT_ID,
    SPOTIPY_CLIENT_SECRET,
    SPOTIPY_REDIRECT_URI,
    SCOPE,
    TOKEN_REFRESH_MARGIN
)
from core.errors import AuthError


def create_auth_manager():
    """Spotify OAuth manager that keeps tokens in memory only"""
    return SpotifyOAuth(
        client_id=SPOTIPY_CLIENT_ID,
        client_secret=SPOTIPY_CLIENT_SECRET,
        redirect_uri=SPOTIPY_REDIRECT_URI,
        scope=SCOPE,
        cache_handler=MemoryCacheHandler(),
        open_browser=False
    )


class TokenManager:
    """Holds the current access token and schedules its refresh"""

    def __init__(self, auth_manager=None, refresh_margin=TOKEN_REFRESH_MARGIN,
                 timer_factory=threading.Timer, verbose=False):
        self.auth_manager = auth_manager or create_auth_manager()
        self.refresh_margin = refresh_margin
        self.verbose = verbose
        self._timer_factory = timer_factory
        self._timer = None
        self._token_info = None

    def authorize_url(self):
        return self.auth_manager.get_authorize_url()

    @property
    def access_token(self):
        """
        Current access token

        Raises:
            AuthError: no token has been obtained yet
        """
        token_info = self._token_info
        if not token_info or not token_info.get('access_token'):
            raise AuthError("No Spotify access token - open /login to authenticate")
        return token_info['access_token']

    def exchange_code(self, code):
        """
        Exchange an authorization code for tokens and start the refresh timer

        Raises:
            AuthError: Spotify rejected the code
        """
        try:
            self.auth_manager.get_access_token(code, as_dict=False, check_cache=False)
        except (SpotifyOauthError, requests.RequestException) as e:
            raise AuthError(f"Authorization code exchange failed: {e}") from e

        token_info = self.auth_manager.cache_handler.get_cached_token()
        if not token_info:
            raise AuthError("Authorization code exchange returned no token")

        self._token_info = token_info
        print("✓ Spotify authentication successful")
        self._schedule_refresh(token_info.get('expires_in'))
        return token_info

    def refresh(self):
        """Refresh the access token; on failure keep the current one"""
        token_info = self._token_info
        if not token_info or not token_info.get('refresh_token'):
            print("⚠ No refresh token available - re-authenticate via /login")
            return None

        try:
            new_info = self.auth_manager.refresh_access_token(token_info['refresh_token'])
        except (SpotifyOauthError, requests.RequestException) as e:
            print(f"✗ Token refresh failed: {e}")
            return None

        if not new_info:
            print("✗ Token refresh returned no token")
            return None

        # Spotify does not always send a new refresh token
        if not new_info.get('refresh_token'):
            new_info['refresh_token'] = token_info['refresh_token']
        self._token_info = new_info
        if self.verbose:
            print("✓ Spotify token refreshed")
        self._schedule_refresh(new_info.get('expires_in'))
        return new_info

    def _schedule_refresh(self, expires_in):
        self._cancel_timer()
        if not expires_in:
            return

        delay = max(1, int(expires_in) - self.refresh_margin)
        self._timer = self._timer_factory(delay, self.refresh)
        self._timer.daemon = True
        self._timer.start()
        if self.verbose:
            print(f"→ Next token refresh in {delay}s")

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def stop(self):
        """Cancel any pending refresh"""
        self._cancel_timer()
