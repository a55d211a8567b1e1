"""
Configuration package for tv-switch.
"""

from .main import Config
from .state import State, StateStore
from .dataclasses import (
    VideoOutput,
    TvOutputConfig,
    AudioConfig,
    TimingConfig,
    OverlayConfig,
    LoggingConfig,
)
