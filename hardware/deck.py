"""
Stream Deck session module for Deck Jockey
Owns the open control device: image pushes and key-release events
"""

import threading

from StreamDeck.DeviceManager import DeviceManager, ProbeError
from StreamDeck.ImageHelpers import PILHelper
from StreamDeck.Transport.Transport import TransportError

from config.settings import DECK_BRIGHTNESS
from core.errors import NoDeviceError, PushError, SessionBusyError


class DeckSession:
    """Single open connection to a Stream Deck"""

    _active = None
    _active_lock = threading.Lock()

    def __init__(self, deck, verbose=False):
        self.deck = deck
        self.verbose = verbose
        self._handlers = []
        self.closed = False

        fmt = deck.key_image_format() or {}
        self.icon_size = tuple(fmt.get('size') or (72, 72))

        self.strip_size = None
        if hasattr(deck, 'touchscreen_image_format'):
            strip = (deck.touchscreen_image_format() or {}).get('size')
            if strip and strip[0] > 0 and strip[1] > 0:
                self.strip_size = tuple(strip)

        deck.set_key_callback(self._on_key_change)

    @classmethod
    def open(cls, brightness=DECK_BRIGHTNESS, device_manager=None, verbose=False):
        """
        Open the first connected Stream Deck

        Raises:
            NoDeviceError: no device connected (or it cannot be opened)
            SessionBusyError: a session is already open
        """
        with cls._active_lock:
            if cls._active is not None and not cls._active.closed:
                raise SessionBusyError("A Stream Deck session is already open")

            try:
                manager = device_manager or DeviceManager()
                decks = manager.enumerate()
            except (ProbeError, TransportError) as e:
                raise NoDeviceError(f"Could not search for Stream Decks: {e}") from e
            if not decks:
                raise NoDeviceError("No Stream Decks found")

            deck = decks[0]
            try:
                deck.open()
            except TransportError as e:
                raise NoDeviceError(f"Could not open Stream Deck: {e}") from e

            try:
                deck.reset()
                deck.set_brightness(brightness)
            except TransportError as e:
                cls._close_quietly(deck)
                raise NoDeviceError(f"Could not initialize Stream Deck: {e}") from e

            session = cls(deck, verbose=verbose)
            cls._active = session

        print(f"✓ Stream Deck connected ({deck.deck_type()}, {session.key_count} keys)")
        if session.strip_size is None:
            print("⚠ This Stream Deck has no touch strip - status bar disabled")
        return session

    @staticmethod
    def _close_quietly(deck):
        try:
            deck.close()
        except TransportError as e:
            print(f"⚠ Error closing Stream Deck: {e}")

    @property
    def has_status_strip(self):
        return self.strip_size is not None

    @property
    def key_count(self):
        return self.deck.key_count()

    def push_icon(self, slot, image):
        """
        Show an image on one key

        Args:
            slot: Key index
            image: PIL.Image (converted to the device's native key format)

        Raises:
            PushError: the device write failed
        """
        try:
            native = PILHelper.to_native_key_format(self.deck, image)
            with self.deck:
                self.deck.set_key_image(slot, native)
        except (TransportError, OSError, ValueError) as e:
            raise PushError(f"Failed to push icon to key {slot}: {e}") from e

    def push_status_strip(self, image):
        """
        Show an image across the whole touch strip

        Raises:
            PushError: no strip on this device, or the write failed
        """
        if not self.has_status_strip:
            raise PushError("This Stream Deck has no touch strip")

        width, height = self.strip_size
        try:
            native = PILHelper.to_native_touchscreen_format(self.deck, image)
            with self.deck:
                self.deck.set_touchscreen_image(native, 0, 0, width, height)
        except (TransportError, OSError, ValueError) as e:
            raise PushError(f"Failed to push status strip: {e}") from e

    def on_key_up(self, handler):
        """Register handler(key_index), called once per key release"""
        self._handlers.append(handler)

    def _on_key_change(self, deck, key, state):
        # Runs on the StreamDeck reader thread
        if state:
            return

        for handler in list(self._handlers):
            try:
                handler(key)
            except Exception as e:
                print(f"✗ Error handling Stream Deck key {key}: {e}")

    def close(self):
        """Blank and close the device"""
        if self.closed:
            return

        try:
            with self.deck:
                self.deck.reset()
                self.deck.close()
        except TransportError as e:
            print(f"⚠ Error closing Stream Deck: {e}")
        finally:
            self.closed = True
            with DeckSession._active_lock:
                if DeckSession._active is self:
                    DeckSession._active = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
