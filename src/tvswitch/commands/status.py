"""Status command."""

import json
from typing import Any, Dict

from ..config import Config, State


def build_status(config: Config, state: State) -> Dict[str, Any]:
    """Collect the current mode and the outputs/sink it implies."""
    if state.tv:
        active_outputs = [config.tv.name]
        sink = config.audio.tv_sink
    else:
        active_outputs = config.get_desktop_output_names()
        sink = config.audio.desktop_sink

    return {
        "mode": state.mode,
        "scaling": state.scaling,
        "scale": (config.tv.scale if state.scaled else "1") if state.tv else None,
        "active_outputs": active_outputs,
        "audio_sink": sink,
        "state_file": str(config.state_file),
    }


def show_status(config: Config, state: State, as_json: bool = False) -> None:
    """Print current status."""
    status = build_status(config, state)

    if as_json:
        print(json.dumps(status, indent=2))
        return

    print("tv-switch Status")
    print("================")
    print(f"Mode: {status['mode']}")
    if state.tv:
        print(f"Scaling: {status['scaling']} (scale {status['scale']})")
    print(f"Active outputs: {', '.join(status['active_outputs'])}")
    print(f"Audio sink: {status['audio_sink']}")
    print(f"State file: {status['state_file']}")
