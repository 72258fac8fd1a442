"""
Key bindings for Deck Jockey
Maps physical key indices to media actions
"""

from enum import Enum


class KeyAction(Enum):
    PLAY_PAUSE = 'play-pause'
    NEXT = 'next'
    PREVIOUS = 'previous'
    REFRESH = 'refresh'


# playerctl only
BASIC_BINDINGS = {
    0: KeyAction.PLAY_PAUSE,
    1: KeyAction.NEXT,
    2: KeyAction.REFRESH,
}

# --spotify
STREAMING_BINDINGS = {
    0: KeyAction.PLAY_PAUSE,
    2: KeyAction.REFRESH,
    8: KeyAction.PREVIOUS,
    9: KeyAction.NEXT,
}


def bindings_for(streaming):
    """Return a copy of the key map for the selected variant"""
    return dict(STREAMING_BINDINGS if streaming else BASIC_BINDINGS)


def action_for_key(bindings, key_index):
    """
    Look up the action bound to a key

    Returns:
        KeyAction or None if the key is unbound
    """
    return bindings.get(key_index)
