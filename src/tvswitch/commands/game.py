"""
Game launcher.

Runs a game command, optionally wrapped in gamescope with arguments chosen
by the current mode (e.g. a 4K output resolution on the TV).
"""

import logging
import shlex
from typing import List, Optional

from ..config import State
from ..exceptions import CommandError, CommandNotFoundError, CommandNotExecutableError
from ..runner import CommandRunner

logger = logging.getLogger(__name__)


def build_game_command(
    state: State,
    command: str,
    tv_gamescope_args: Optional[str] = None,
    desktop_gamescope_args: Optional[str] = None,
) -> List[str]:
    """
    Build the argument list for a game launch.

    Returns:
        ["gamescope", *args, "--", *command] when the current mode has
        gamescope args, otherwise the command alone
    """
    try:
        game = shlex.split(command)
        gamescope_args = tv_gamescope_args if state.tv else desktop_gamescope_args
        wrapper = shlex.split(gamescope_args) if gamescope_args is not None else None
    except ValueError as e:
        raise CommandError(f"Cannot parse game command line: {e}") from e

    if not game:
        raise CommandError("Game command is empty")

    if wrapper is None:
        return game
    return ["gamescope", *wrapper, "--", *game]


def launch_game(
    runner: CommandRunner,
    state: State,
    command: str,
    tv_gamescope_args: Optional[str] = None,
    desktop_gamescope_args: Optional[str] = None,
) -> int:
    """
    Launch a game in the foreground.

    Returns:
        The game's exit status, or 128+N when it was killed by signal N

    Raises:
        CommandNotFoundError: If the executable is not installed
        CommandNotExecutableError: If the executable cannot be started
    """
    args = build_game_command(state, command, tv_gamescope_args, desktop_gamescope_args)
    logger.info(f"Launching in {state.mode} mode: {' '.join(args)}")

    result = runner.run(args, capture=False)
    if result.not_found:
        raise CommandNotFoundError(f"Command not found: {args[0]}")
    if result.not_executable:
        raise CommandNotExecutableError(f"Cannot execute {args[0]}: {result.stderr}")
    if result.returncode < 0:
        # subprocess reports death by signal N as -N; shells report 128+N
        return 128 - result.returncode
    return result.returncode
