"""Shared fakes for Deck Jockey tests"""

import subprocess
from types import SimpleNamespace

import pytest
from StreamDeck.Transport.Transport import TransportError

import hardware.deck as deck_module
from hardware.deck import DeckSession


class FakeDeck:
    """Stands in for a StreamDeck device object"""

    def __init__(self, key_size=(72, 72), strip_size=(800, 100), fail_open=False, fail_reset=False):
        self._key_size = key_size
        self._strip_size = strip_size
        self.fail_open = fail_open
        self.fail_reset = fail_reset
        self.fail_push = False
        self.opened = False
        self.closed = False
        self.resets = 0
        self.brightness = None
        self.callback = None
        self.key_images = {}
        self.strip_images = []

    def open(self):
        if self.fail_open:
            raise TransportError("Could not open HID device")
        self.opened = True

    def reset(self):
        if self.fail_reset:
            raise TransportError("Device not responding")
        self.resets += 1

    def set_brightness(self, percent):
        self.brightness = percent

    def key_image_format(self):
        return {'size': self._key_size, 'format': 'JPEG'}

    def touchscreen_image_format(self):
        return {'size': self._strip_size, 'format': 'JPEG'}

    def set_key_callback(self, callback):
        self.callback = callback

    def set_key_image(self, key, image):
        if self.fail_push:
            raise TransportError("write failed")
        self.key_images[key] = image

    def set_touchscreen_image(self, image, x_pos=0, y_pos=0, width=0, height=0):
        if self.fail_push:
            raise TransportError("write failed")
        self.strip_images.append((image, x_pos, y_pos, width, height))

    def deck_type(self):
        return "Stream Deck +"

    def key_count(self):
        return 8

    def close(self):
        self.closed = True

    def press(self, key):
        self.callback(self, key, True)
        self.callback(self, key, False)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class FakeDeviceManager:
    def __init__(self, decks):
        self.decks = decks

    def enumerate(self):
        return list(self.decks)


@pytest.fixture(autouse=True)
def reset_active_session():
    DeckSession._active = None
    yield
    DeckSession._active = None


@pytest.fixture
def native_images(monkeypatch):
    """Replace PILHelper so pushes hand the raw image bytes to the fake deck"""
    helper = SimpleNamespace(
        to_native_key_format=lambda deck, image: image.tobytes(),
        to_native_touchscreen_format=lambda deck, image: image.tobytes(),
    )
    monkeypatch.setattr(deck_module, 'PILHelper', helper)
    return helper


@pytest.fixture
def deck_factory():
    return FakeDeck


@pytest.fixture
def manager_factory():
    return FakeDeviceManager


@pytest.fixture
def fake_deck():
    return FakeDeck()


@pytest.fixture
def open_session(fake_deck, native_images):
    session = DeckSession.open(brightness=50, device_manager=FakeDeviceManager([fake_deck]))
    yield session
    session.close()


@pytest.fixture
def fake_playerctl(monkeypatch):
    """
    Fake subprocess.run for playerctl

    Set responses[('metadata', 'title')] = (stdout, stderr, returncode).
    Unknown commands succeed with empty output.
    """
    calls = []
    responses = {}

    def run(command, **kwargs):
        calls.append(command)
        args = tuple(command[1:])
        stdout, stderr, returncode = responses.get(args, ('', '', 0))
        return subprocess.CompletedProcess(command, returncode, stdout, stderr)

    monkeypatch.setattr('media.player.subprocess.run', run)
    return SimpleNamespace(calls=calls, responses=responses)
