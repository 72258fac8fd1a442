"""Hardware modules for Deck Jockey"""

from .deck import DeckSession

__all__ = ['DeckSession']
