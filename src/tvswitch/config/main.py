"""
Main Config class for tv-switch.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field

import tomli
import tomli_w

from ..exceptions import ConfigError, ConfigValidationError

from .dataclasses import (
    DEFAULT_STATE_FILE,
    VideoOutput,
    TvOutputConfig,
    AudioConfig,
    TimingConfig,
    OverlayConfig,
    LoggingConfig,
    default_desktop_outputs,
    default_tv_output,
    expand_state_file,
)
from .validation import validate_toml_structure, validate_workspace_layout


@dataclass
class Config:
    """
    Main configuration class for tv-switch.

    Every field has a built-in default, so the tool works without a config
    file. A TOML file overrides individual sections.
    """

    state_file: Path = field(default_factory=lambda: Path(DEFAULT_STATE_FILE))
    tv: TvOutputConfig = field(default_factory=default_tv_output)
    desktop: List[VideoOutput] = field(default_factory=default_desktop_outputs)
    audio: AudioConfig = field(default_factory=AudioConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    overlay: OverlayConfig = field(default_factory=OverlayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        """Validate configuration."""
        names = [output.name for output in self.desktop]
        if len(set(names)) != len(names):
            raise ConfigValidationError(f"Duplicate desktop output names: {names}")

        if self.tv.name in names:
            raise ConfigValidationError(
                f"TV output {self.tv.name} is also listed as a desktop output."
            )

        validate_workspace_layout(
            self.tv.workspaces,
            {output.name: output.workspaces for output in self.desktop},
        )

        for name in ('tv_enable_settle', 'tv_disable_settle', 'desktop_settle'):
            if getattr(self.timing, name) < 0:
                raise ConfigValidationError(
                    f"timing.{name} ({getattr(self.timing, name)}s) must not be negative."
                )

        if self.timing.command_timeout <= 0:
            raise ConfigValidationError(
                f"Command timeout ({self.timing.command_timeout}s) must be positive."
            )

        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.logging.level.upper() not in valid_levels:
            raise ConfigValidationError(
                f"Invalid log level: {self.logging.level}\n"
                f"Must be one of: {valid_levels}"
            )

    def get_desktop_output_names(self) -> List[str]:
        """Get desktop output names in display order."""
        return [output.name for output in self.desktop]

    @classmethod
    def get_config_dir(cls) -> Path:
        """
        Get user configuration directory.

        Uses XDG_CONFIG_HOME if set, otherwise defaults to ~/.config.
        """
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "tv-switch"
        return Path.home() / ".config" / "tv-switch"

    @classmethod
    def get_config_file(cls) -> Path:
        """Get default config file path."""
        return cls.get_config_dir() / "config.toml"

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> 'Config':
        """
        Load configuration from TOML file.

        A missing file means built-in defaults. Sections present in the file
        replace the corresponding defaults.

        Args:
            config_file: Optional path to config TOML file

        Returns:
            Config instance with loaded settings

        Raises:
            ConfigError: If the file is unreadable, malformed or invalid
        """
        logger = logging.getLogger(__name__)

        if not config_file:
            config_file = cls.get_config_file()

        config_dict: Dict[str, Any] = {}
        if config_file.exists():
            try:
                with open(config_file, 'rb') as f:
                    config_dict = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {config_file}: {e}")
            except OSError as e:
                raise ConfigError(f"Failed to read config {config_file}: {e}")

            validate_toml_structure(config_dict, config_file)
            logger.debug(f"Loaded config from {config_file}")
        else:
            logger.debug(f"No config at {config_file}, using built-in defaults")

        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create Config from a (validated) TOML dictionary."""
        kwargs: Dict[str, Any] = {}

        if 'state_file' in config_dict:
            kwargs['state_file'] = expand_state_file(config_dict['state_file'])
        if 'tv' in config_dict:
            tv_dict = dict(config_dict['tv'])
            default_tv = default_tv_output()
            tv_dict.setdefault('workspaces', default_tv.workspaces)
            kwargs['tv'] = TvOutputConfig.from_dict(tv_dict)
        if 'desktop' in config_dict:
            kwargs['desktop'] = [VideoOutput.from_dict(d) for d in config_dict['desktop']]
        if 'audio' in config_dict:
            kwargs['audio'] = AudioConfig(**config_dict['audio'])
        if 'timing' in config_dict:
            kwargs['timing'] = TimingConfig(**config_dict['timing'])
        if 'overlay' in config_dict:
            kwargs['overlay'] = OverlayConfig(**config_dict['overlay'])
        if 'logging' in config_dict:
            kwargs['logging'] = LoggingConfig(**config_dict['logging'])

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a TOML-serializable dictionary."""
        return {
            'state_file': str(self.state_file),
            'tv': self.tv.to_dict(),
            'desktop': [output.to_dict() for output in self.desktop],
            'audio': {
                'desktop_sink': self.audio.desktop_sink,
                'tv_sink': self.audio.tv_sink,
            },
            'timing': {
                'tv_enable_settle': self.timing.tv_enable_settle,
                'tv_disable_settle': self.timing.tv_disable_settle,
                'desktop_settle': self.timing.desktop_settle,
                'command_timeout': self.timing.command_timeout,
            },
            'overlay': {
                'window': self.overlay.window,
                'duration': self.overlay.duration,
                'tv_text': self.overlay.tv_text,
                'desktop_text': self.overlay.desktop_text,
            },
            'logging': {
                'level': self.logging.level,
                'verbose': self.logging.verbose,
            },
        }

    def save(self, config_file: Path) -> None:
        """Save configuration to a TOML file."""
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'wb') as f:
                tomli_w.dump(self.to_dict(), f)

            logging.getLogger(__name__).info(f"Saved config to {config_file}")
        except OSError as e:
            raise ConfigError(f"Failed to save config to {config_file}: {e}")
