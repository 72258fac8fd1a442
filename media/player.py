"""
Media player control module for Deck Jockey
Runs playerctl and returns its output
"""

import subprocess

from config.settings import PLAYER_COMMAND, PLAYER_NAME
from core.errors import CommandError


def run_player_command(*args, executable=None, player=None):
    """
    Run the media-control executable

    Args:
        *args: Subcommand and arguments (e.g. 'metadata', 'title')
        executable: Override for PLAYER_COMMAND
        player: Override for PLAYER_NAME

    Returns:
        str: stdout with surrounding whitespace removed

    Raises:
        CommandError: executable missing, non-zero exit, or anything on stderr
    """
    executable = executable or PLAYER_COMMAND
    player = PLAYER_NAME if player is None else player

    command = [executable]
    if player:
        command += ['-p', player]
    command += list(args)
    command_text = ' '.join(command)

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            errors='replace',
            check=False
        )
    except OSError as e:
        raise CommandError(command_text, f"could not run {executable}: {e}") from e

    stderr = (result.stderr or '').strip()
    if result.returncode != 0:
        raise CommandError(
            command_text,
            f"exited with status {result.returncode}" + (f" ({stderr})" if stderr else ''),
            stderr
        )
    if stderr:
        raise CommandError(command_text, stderr, stderr)

    return (result.stdout or '').strip()


class PlayerControl:
    """Play/pause/skip and metadata queries through playerctl"""

    def __init__(self, executable=None, player=None, runner=run_player_command):
        self.executable = executable
        self.player = player
        self._runner = runner

    def _run(self, *args):
        return self._runner(*args, executable=self.executable, player=self.player)

    def play_pause(self):
        """Toggle play/pause"""
        self._run('play-pause')
        print("⏯ Play/Pause toggled")

    def next_track(self):
        """Skip to the next track"""
        self._run('next')
        print("⏭ Next track")

    def previous_track(self):
        """Go back to the previous track"""
        self._run('previous')
        print("⏮ Previous track")

    def metadata(self, field):
        return self._run('metadata', field)

    def artist(self):
        return self.metadata('artist')

    def title(self):
        return self.metadata('title')

    def art_url(self):
        return self.metadata('mpris:artUrl')
