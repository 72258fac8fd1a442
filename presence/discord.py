"""
Discord Rich Presence module for Deck Jockey
Broadcasts the current track to Discord
"""

from config.settings import PRESENCE_AVAILABLE, DISCORD_CLIENT_ID

# Import pypresence if available
if PRESENCE_AVAILABLE:
    from pypresence import Presence
    from pypresence.exceptions import PyPresenceException
    PRESENCE_ERRORS = (PyPresenceException, OSError)
else:
    PRESENCE_ERRORS = (OSError,)


class PresenceBroadcaster:
    """Emits the current track to Discord when it changes"""

    def __init__(self, client_id=DISCORD_CLIENT_ID, rpc_factory=None, verbose=False):
        self.enabled = False
        self.rpc = None
        self.verbose = verbose
        self.last_snapshot = None

        if not client_id:
            print("⚠ DISCORD_CLIENT_ID not configured (presence disabled)")
            return

        if rpc_factory is None:
            if not PRESENCE_AVAILABLE:
                print("⚠ pypresence not installed. Discord presence will be disabled.")
                return
            rpc_factory = Presence

        self.client_id = client_id
        self.rpc = rpc_factory(client_id)
        self.enabled = True

    def connect(self):
        """Connect to the local Discord client; disables presence on failure"""
        if not self.enabled:
            return False

        try:
            self.rpc.connect()
        except PRESENCE_ERRORS as e:
            print(f"⚠ Discord not available: {e}")
            print("  Presence disabled - the deck will keep working")
            self.enabled = False
            return False

        print("✓ Discord presence connected")
        return True

    def update(self, snapshot):
        """Send the snapshot's track if it differs from the last one sent"""
        if not self.enabled or snapshot.same_track(self.last_snapshot):
            return

        details = snapshot.track or "Unknown track"
        state = f"by {snapshot.artist}" if snapshot.artist else None
        large_image = snapshot.artwork_url if (snapshot.artwork_url or '').startswith('http') else None

        try:
            self.rpc.update(details=details, state=state, large_image=large_image)
        except PRESENCE_ERRORS as e:
            print(f"✗ Error updating Discord presence: {e}")
            return

        self.last_snapshot = snapshot
        if self.verbose:
            print(f"[RPC] Updated: {snapshot.track} - {snapshot.artist}")

    def clear(self):
        if not self.enabled:
            return
        try:
            self.rpc.clear()
        except PRESENCE_ERRORS as e:
            print(f"⚠ Error clearing Discord presence: {e}")
        self.last_snapshot = None

    def close(self):
        if not self.enabled:
            return
        self.clear()
        try:
            self.rpc.close()
        except PRESENCE_ERRORS as e:
            print(f"⚠ Error closing Discord presence: {e}")
        self.enabled = False
