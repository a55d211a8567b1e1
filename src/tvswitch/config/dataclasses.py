"""
Configuration dataclasses for tv-switch.
"""

from pathlib import Path
from typing import Dict, Any, List
from dataclasses import dataclass, field


DEFAULT_STATE_FILE = "/tmp/tv.state"


@dataclass
class VideoOutput:
    """
    A compositor output and the workspaces that live on it.

    Workspace order is display order: the first workspace ends up at index 1.
    """
    name: str  # Compositor output name (e.g., "DP-1", "HDMI-A-1")
    workspaces: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VideoOutput':
        """
        Create VideoOutput from a config table.

        Expects format:
        {"output": "DP-1", "workspaces": ["browser", "chat"]}
        """
        return cls(name=data['output'], workspaces=list(data.get('workspaces', [])))

    def to_dict(self) -> Dict[str, Any]:
        return {'output': self.name, 'workspaces': list(self.workspaces)}


@dataclass
class TvOutputConfig(VideoOutput):
    """The single TV output, with the scale used while in scaled mode."""
    scale: str = "2"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TvOutputConfig':
        """Create TvOutputConfig from the [tv] table."""
        return cls(
            name=data['output'],
            workspaces=list(data.get('workspaces', [])),
            scale=data.get('scale', "2"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['scale'] = self.scale
        return data


def default_desktop_outputs() -> List[VideoOutput]:
    """Desktop monitors, left to right."""
    return [
        VideoOutput("DP-1", ["browser", "chat"]),
        VideoOutput("DP-2", ["code", "terminal"]),
        VideoOutput("DP-3", ["media", "games"]),
    ]


def default_tv_output() -> TvOutputConfig:
    return TvOutputConfig(
        name="HDMI-A-1",
        workspaces=["browser", "chat", "code", "terminal", "media", "games"],
        scale="2",
    )


@dataclass
class AudioConfig:
    """PulseAudio/PipeWire sink names."""
    desktop_sink: str = "alsa_output.pci-0000_09_00.4.analog-stereo"
    tv_sink: str = "alsa_output.pci-0000_07_00.1.hdmi-stereo"


@dataclass
class TimingConfig:
    """
    Settle delays (seconds) between output topology changes.

    tv_enable_settle: after enabling the TV, before moving workspaces
    tv_disable_settle: after reordering workspaces, before disabling monitors
    desktop_settle: after enabling the monitors, before disabling the TV
    """
    tv_enable_settle: float = 1.0
    tv_disable_settle: float = 1.0
    desktop_settle: float = 2.0
    command_timeout: int = 30  # Per external command


@dataclass
class OverlayConfig:
    """eww transition overlay settings."""
    window: str = "tv-transition"
    duration: str = "3s"
    tv_text: str = "Switching to TV..."
    desktop_text: str = "Switching to Desktop..."


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    verbose: bool = False


def expand_state_file(path: str) -> Path:
    """Get absolute state file path."""
    return Path(path).expanduser()
