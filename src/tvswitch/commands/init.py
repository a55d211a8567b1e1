"""Initialization commands."""

import logging
from pathlib import Path
from typing import Optional

from ..config import Config, State
from ..exceptions import ConfigError
from ..transitions import ModeSwitcher


def init_state(switcher: ModeSwitcher) -> State:
    """Reset the state file to desktop mode and select the desktop sink."""
    logger = logging.getLogger(__name__)

    state = switcher.store.init()
    logger.info(f"Initialized state file {switcher.store.state_file}")
    switcher.audio.set_default_sink(switcher.config.audio.desktop_sink)
    return state


def init_config(config: Config, config_file: Optional[Path] = None, force: bool = False) -> Path:
    """
    Write the given configuration as a TOML file.

    Args:
        config: Configuration to write (normally the built-in defaults)
        config_file: Target path (defaults to the XDG config location)
        force: Overwrite an existing file

    Returns:
        Path of the written file

    Raises:
        ConfigError: If the file exists and force is not set, or writing fails
    """
    target = config_file or Config.get_config_file()
    if target.exists() and not force:
        raise ConfigError(
            f"Config file {target} already exists. Use --force to overwrite."
        )

    config.save(target)
    print(f"Configuration written to {target}")
    return target
