"""
Transition overlay shown while outputs switch.

Uses an eww window that takes a `text` argument and closes itself
after `--duration`.
"""

import logging

from ..config import OverlayConfig
from ..runner import CommandResult, CommandRunner


class EwwOverlay:
    """Opens the transition window on a given screen."""

    def __init__(self, runner: CommandRunner, config: OverlayConfig) -> None:
        self.runner = runner
        self.config = config
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def show(self, screen: int, text: str) -> CommandResult:
        """
        Show the overlay on one screen.

        Args:
            screen: eww screen index, also used as the window instance id
            text: Message to display
        """
        self.logger.debug(f"Showing overlay on screen {screen}: {text}")
        return self.runner.run([
            "eww", "open", self.config.window,
            "--id", str(screen),
            "--screen", str(screen),
            "--arg", f"text={text}",
            "--duration", self.config.duration,
        ])
