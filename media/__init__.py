"""Media player control for Deck Jockey"""

from .player import PlayerControl, run_player_command

__all__ = ['PlayerControl', 'run_player_command']
