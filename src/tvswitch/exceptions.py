"""
Common exception classes for tv-switch.

All exceptions inherit from TvSwitchError for unified catching at CLI level.
Failures of the external tools themselves (niri, pactl, eww) are not
exceptions: they are logged and ignored by the command runner.
"""


class TvSwitchError(Exception):
    """
    Base exception for all tv-switch errors.
    
    All domain-specific exceptions inherit from this class, allowing
    callers to catch all tv-switch errors with a single except clause.
    """
    pass


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigError(TvSwitchError):
    """
    Configuration-related errors.
    
    Raised when:
    - Config file is malformed or unreadable
    - Config contains unknown sections or keys
    - Config values have the wrong type
    """
    pass


class ConfigValidationError(ConfigError):
    """
    Config value validation failed.
    
    Raised when a config value is present but inconsistent, e.g. a desktop
    workspace missing from the TV output's workspace list.
    """
    pass


# ============================================================================
# State Errors
# ============================================================================

class StateError(TvSwitchError):
    """
    State file errors.
    
    Every state error is fatal: the mode is unknown, so no switch is attempted.
    """
    pass


class StateFileError(StateError):
    """State file could not be read or written."""
    pass


class StateParseError(StateError):
    """
    State file content is malformed.
    
    Raised when a line is missing or holds an unrecognized token.
    The file is never repaired automatically.
    """
    pass


# ============================================================================
# Command Errors
# ============================================================================

class CommandError(TvSwitchError):
    """
    External command errors.
    
    Only raised where the outcome of a command matters (game launching).
    Display and audio commands are fire-and-forget.
    """
    pass


class CommandNotFoundError(CommandError):
    """Required command not found in PATH."""
    pass


class CommandNotExecutableError(CommandError):
    """Command found but could not be executed (permissions, bad format)."""
    pass
