"""Presence broadcasting for Deck Jockey"""

from .discord import PresenceBroadcaster

__all__ = ['PresenceBroadcaster']
