"""
Core Deck Jockey application class
Orchestrates all components: player, Stream Deck, renderer, Spotify, presence
"""

import threading
from dataclasses import dataclass, field
from typing import Optional

from config.settings import ICON_KEY, POLL_INTERVAL, DECK_BRIGHTNESS
from core.actions import KeyAction, action_for_key, bindings_for
from core.errors import DeckJockeyError, RenderError, PushError
from core.metadata import MetadataSource
from core.poller import Poller
from core.snapshot import PlaybackSnapshot
from hardware.deck import DeckSession
from media.player import PlayerControl
from rendering.artwork import ArtworkLoader
from rendering.canvas import CanvasRenderer

# Strip size used for rendering when the device has no touch strip
DEFAULT_STRIP_SIZE = (800, 100)


@dataclass
class DeckContext:
    """Everything a tick needs, owned by the DeckJockey"""

    session: DeckSession
    player: PlayerControl
    metadata: MetadataSource
    renderer: CanvasRenderer
    artwork: ArtworkLoader
    bindings: dict = field(default_factory=dict)
    tokens: Optional[object] = None
    presence: Optional[object] = None
    last_snapshot: Optional[PlaybackSnapshot] = None


class DeckJockey:
    """Main application class: poll, render, push, and react to keys"""

    def __init__(self, context, interval=POLL_INTERVAL, auth_server=None, verbose=False):
        self.context = context
        self.auth_server = auth_server
        self.verbose = verbose
        self.poller = Poller(self.refresh, interval=interval)
        self.skipped_ticks = 0
        self._tick_lock = threading.Lock()
        self._stop_event = threading.Event()

        player = context.player
        self._commands = {
            KeyAction.PLAY_PAUSE: player.play_pause,
            KeyAction.NEXT: player.next_track,
            KeyAction.PREVIOUS: player.previous_track,
        }

    def refresh(self):
        """
        Run one tick unless another one is still in flight

        Returns:
            bool: True if a frame was pushed
        """
        if not self._tick_lock.acquire(blocking=False):
            self.skipped_ticks += 1
            if self.verbose:
                print("[DEBUG] Previous update still running - tick skipped")
            return False

        try:
            return self._tick()
        finally:
            self._tick_lock.release()

    def _tick(self):
        ctx = self.context

        try:
            snapshot = ctx.metadata.fetch_snapshot()
        except DeckJockeyError as e:
            print(f"✗ Error fetching media info: {e}")
            return False

        artwork = None
        try:
            artwork = ctx.artwork.load(snapshot.artwork_url)
        except RenderError as e:
            print(f"⚠ {e}")

        frame = ctx.renderer.render(snapshot, artwork)

        try:
            ctx.session.push_icon(ICON_KEY, frame.icon)
            if ctx.session.has_status_strip:
                ctx.session.push_status_strip(frame.bar)
        except PushError as e:
            print(f"✗ Error updating Stream Deck: {e}")
            return False

        if not snapshot.same_track(ctx.last_snapshot):
            print(f"♪ Now playing: {snapshot.track} - {snapshot.artist}")
        ctx.last_snapshot = snapshot

        if ctx.presence is not None:
            ctx.presence.update(snapshot)

        return True

    def handle_key(self, key_index):
        """
        React to a key release

        Returns:
            KeyAction or None if the key is unbound
        """
        action = action_for_key(self.context.bindings, key_index)
        if action is None:
            if self.verbose:
                print(f"[DEBUG] Key {key_index} is not bound")
            return None

        if action is KeyAction.REFRESH:
            self.refresh()
            return action

        try:
            self._commands[action]()
        except DeckJockeyError as e:
            print(f"✗ Error handling Stream Deck key press: {e}")
        return action

    def start(self):
        """Wire up key events, start servers and the poll timer"""
        ctx = self.context
        ctx.session.on_key_up(self.handle_key)

        if ctx.presence is not None:
            ctx.presence.connect()
        if self.auth_server is not None:
            self.auth_server.start()

        self.refresh()
        self.poller.start()

    def stop(self):
        self._stop_event.set()

    def shutdown(self):
        """Stop timers and servers, then release the device"""
        ctx = self.context
        self.poller.stop()
        if ctx.tokens is not None:
            ctx.tokens.stop()
        if self.auth_server is not None:
            self.auth_server.stop()
        if ctx.presence is not None:
            ctx.presence.close()
        ctx.session.close()

    def run(self):
        """Main application loop"""
        print("\n" + "="*60)
        print("  DECK JOCKEY - Now Playing")
        print("="*60)
        print("\n🎛️  STREAM DECK KEYS:")
        for index, action in sorted(self.context.bindings.items()):
            print(f"  • Key {index} - {action.value}")
        print("\n  Press Ctrl+C to quit")
        print("="*60 + "\n")

        try:
            self.start()
            while not self._stop_event.wait(0.5):
                pass
        except KeyboardInterrupt:
            print("\n\n⚠ Interrupted by user")
        finally:
            print("Cleaning up...")
            self.shutdown()
            print("✓ Deck Jockey signing off\n")


def build_jockey(streaming=False, presence=True, interval=POLL_INTERVAL,
                 brightness=DECK_BRIGHTNESS, verbose=False):
    """
    Open the device and assemble a DeckJockey for the selected variant

    Raises:
        NoDeviceError: no Stream Deck connected
    """
    session = DeckSession.open(brightness=brightness, verbose=verbose)
    player = PlayerControl()

    tokens = None
    spotify = None
    auth_server = None
    broadcaster = None
    if streaming:
        from spotify.auth import TokenManager
        from spotify.auth_server import AuthServer
        from spotify.client import SpotifyClient

        tokens = TokenManager(verbose=verbose)
        spotify = SpotifyClient(lambda: tokens.access_token, verbose=verbose)
        auth_server = AuthServer(tokens)

        if presence:
            from presence.discord import PresenceBroadcaster
            broadcaster = PresenceBroadcaster(verbose=verbose)

    renderer = CanvasRenderer(session.icon_size, session.strip_size or DEFAULT_STRIP_SIZE)
    context = DeckContext(
        session=session,
        player=player,
        metadata=MetadataSource(player, spotify=spotify),
        renderer=renderer,
        artwork=ArtworkLoader(),
        bindings=bindings_for(streaming),
        tokens=tokens,
        presence=broadcaster,
    )
    return DeckJockey(context, interval=interval, auth_server=auth_server, verbose=verbose)
