"""
tv-switch - Toggle a niri workstation between desktop monitors and a TV.

Switches outputs, workspaces, output scale and the default audio sink,
remembering the current mode in a small state file.
"""

__version__ = "0.1.0"

from .config import Config, State, StateStore, VideoOutput
from .runner import CommandRunner, CommandResult
from .transitions import ModeSwitcher

__all__ = [
    "Config",
    "State",
    "StateStore",
    "VideoOutput",
    "CommandRunner",
    "CommandResult",
    "ModeSwitcher",
]
