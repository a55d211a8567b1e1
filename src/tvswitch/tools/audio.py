"""PulseAudio/PipeWire sink control via pactl."""

import logging

from ..runner import CommandResult, CommandRunner


class PactlAudio:
    """Default sink selection through `pactl`."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def set_default_sink(self, sink: str) -> CommandResult:
        self.logger.info(f"Switching audio to {sink}")
        return self.runner.run(["pactl", "set-default-sink", sink])
