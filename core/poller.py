"""
Fixed-interval poller for Deck Jockey
Calls a tick function in a separate thread
"""

import threading

from config.settings import POLL_INTERVAL


class Poller:
    """Runs callback every interval seconds until stopped"""

    def __init__(self, callback, interval=POLL_INTERVAL):
        self.callback = callback
        self.interval = interval
        self.running = False
        self.thread = None
        self._stop_event = threading.Event()

    def start(self):
        """Start the polling thread"""
        if self.running:
            return

        self._stop_event.clear()
        self.running = True
        self.thread = threading.Thread(target=self._poll_loop, daemon=True)
        self.thread.start()
        print(f"✓ Polling every {self.interval:g}s")

    def stop(self):
        """Stop the polling thread"""
        self.running = False
        self._stop_event.set()
        if self.thread:
            self.thread.join(timeout=1.0)
            self.thread = None

    def _poll_loop(self):
        """Main polling loop (runs in thread)"""
        while not self._stop_event.wait(self.interval):
            try:
                self.callback()
            except Exception as e:
                # A failing tick never stops the timer
                print(f"✗ Error updating Stream Deck: {e}")
