"""CLI commands module."""

from .mode import (
    toggle,
    switch_to_tv,
    switch_to_desktop,
    toggle_scaling,
    set_scaled,
    set_unscaled,
    fix_workspace_order,
)
from .init import init_state, init_config
from .status import show_status
from .game import launch_game

__all__ = [
    "toggle",
    "switch_to_tv",
    "switch_to_desktop",
    "toggle_scaling",
    "set_scaled",
    "set_unscaled",
    "fix_workspace_order",
    "init_state",
    "init_config",
    "show_status",
    "launch_game",
]
