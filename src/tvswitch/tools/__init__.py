"""Wrappers for the external programs tv-switch drives."""

from .compositor import NiriCompositor
from .audio import PactlAudio
from .overlay import EwwOverlay

__all__ = [
    "NiriCompositor",
    "PactlAudio",
    "EwwOverlay",
]
