"""
Error types for Deck Jockey
Every failure inside a tick or key handler is one of these
"""


class DeckJockeyError(Exception):
    """Base class for all Deck Jockey errors"""


class CommandError(DeckJockeyError):
    """The external media-control command failed"""

    def __init__(self, command, message, stderr=''):
        self.command = command
        self.stderr = stderr
        super().__init__(f"{command}: {message}")


class AuthError(DeckJockeyError):
    """No access token available, or the streaming service rejected it"""


class MetadataError(DeckJockeyError):
    """The streaming playback-state query failed"""


class NoDeviceError(DeckJockeyError):
    """No control device found"""


class SessionBusyError(DeckJockeyError):
    """A device session is already open"""


class RenderError(DeckJockeyError):
    """Artwork could not be fetched or decoded"""


class PushError(DeckJockeyError):
    """Writing an image to the device failed"""
