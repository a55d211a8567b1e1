"""
Configuration validation for tv-switch.
"""

from pathlib import Path
from typing import Dict, Any, List

from ..exceptions import ConfigError, ConfigValidationError


# Top-level scalar keys and their types
VALID_ROOT_KEYS = {
    'state_file': str,
}

# Section tables and their keys. 'desktop' is an array of tables.
VALID_SECTIONS = {
    'tv': {
        'output': str,
        'scale': str,
        'workspaces': list,
    },
    'desktop': {
        'output': str,
        'workspaces': list,
    },
    'audio': {
        'desktop_sink': str,
        'tv_sink': str,
    },
    'timing': {
        'tv_enable_settle': (int, float),
        'tv_disable_settle': (int, float),
        'desktop_settle': (int, float),
        'command_timeout': int,
    },
    'overlay': {
        'window': str,
        'duration': str,
        'tv_text': str,
        'desktop_text': str,
    },
    'logging': {
        'level': str,
        'verbose': bool,
    },
}


def _type_name(expected) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


def _validate_table(name: str, table: Dict[str, Any], config_file: Path) -> None:
    valid_keys = VALID_SECTIONS[name]
    for key, value in table.items():
        if key not in valid_keys:
            raise ConfigError(
                f"Unknown key '{key}' in section '{name}' in {config_file}. "
                f"Valid keys: {list(valid_keys.keys())}"
            )

        expected_type = valid_keys[key]
        # bool is an int subclass; never accept it for numeric keys
        if isinstance(value, bool) and expected_type is not bool:
            raise ConfigError(
                f"Key '{name}.{key}' must be of type {_type_name(expected_type)} "
                f"in {config_file}, got bool"
            )
        if not isinstance(value, expected_type):
            raise ConfigError(
                f"Key '{name}.{key}' must be of type {_type_name(expected_type)} "
                f"in {config_file}, got {type(value).__name__}"
            )

    if name in ('tv', 'desktop') and 'output' not in table:
        raise ConfigError(f"Section '{name}' is missing required key 'output' in {config_file}")

    for workspace in table.get('workspaces', []):
        if not isinstance(workspace, str):
            raise ConfigError(
                f"Workspaces in section '{name}' must be strings in {config_file}, "
                f"got {workspace!r}"
            )


def validate_toml_structure(config_dict: Dict[str, Any], config_file: Path) -> None:
    """
    Validate TOML structure before creating dataclasses.

    Checks for unknown sections and keys, providing helpful error messages.

    Args:
        config_dict: Loaded TOML configuration dictionary
        config_file: Path to config file for error messages

    Raises:
        ConfigError: If structure validation fails
    """
    for key, value in config_dict.items():
        if key in VALID_ROOT_KEYS:
            if not isinstance(value, VALID_ROOT_KEYS[key]):
                raise ConfigError(
                    f"Key '{key}' must be of type {VALID_ROOT_KEYS[key].__name__} "
                    f"in {config_file}, got {type(value).__name__}"
                )
            continue

        if key not in VALID_SECTIONS:
            raise ConfigError(
                f"Unknown config section '{key}' in {config_file}. "
                f"Valid sections: {list(VALID_SECTIONS.keys())}"
            )

        if key == 'desktop':
            if not isinstance(value, list) or not all(isinstance(t, dict) for t in value):
                raise ConfigError(
                    f"Section 'desktop' must be an array of tables ([[desktop]]) in {config_file}"
                )
            for table in value:
                _validate_table(key, table, config_file)
        else:
            if not isinstance(value, dict):
                raise ConfigError(
                    f"Section '{key}' must be a dictionary in {config_file}"
                )
            _validate_table(key, value, config_file)


def validate_workspace_layout(tv_workspaces: List[str], desktop_layout: Dict[str, List[str]]) -> None:
    """
    Check that desktop workspaces partition the TV workspaces.

    Args:
        tv_workspaces: Workspace order on the TV output
        desktop_layout: Desktop output name -> its workspace order

    Raises:
        ConfigValidationError: If a workspace is unknown to the TV, owned twice,
            listed twice on the TV, or owned by no desktop output
    """
    if not desktop_layout:
        raise ConfigValidationError("At least one [[desktop]] output must be configured.")

    duplicates = sorted({ws for ws in tv_workspaces if tv_workspaces.count(ws) > 1})
    if duplicates:
        raise ConfigValidationError(
            f"Workspaces listed more than once under [tv].workspaces: {duplicates}"
        )

    owners: Dict[str, str] = {}
    for output, workspaces in desktop_layout.items():
        for workspace in workspaces:
            if workspace in owners:
                raise ConfigValidationError(
                    f"Workspace '{workspace}' is assigned to both "
                    f"{owners[workspace]} and {output}."
                )
            owners[workspace] = output
            if workspace not in tv_workspaces:
                raise ConfigValidationError(
                    f"Workspace '{workspace}' on {output} is missing from the TV workspace list.\n"
                    "Every desktop workspace must also be listed under [tv].workspaces."
                )

    stranded = [ws for ws in tv_workspaces if ws not in owners]
    if stranded:
        raise ConfigValidationError(
            f"TV workspaces {stranded} are not assigned to any desktop output.\n"
            "Every TV workspace must also be listed under one [[desktop]] output."
        )
