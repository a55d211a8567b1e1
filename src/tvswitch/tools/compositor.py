"""
niri IPC commands.

Uses: niri msg output ... / niri msg action ...
"""

import logging

from ..runner import CommandResult, CommandRunner


class NiriCompositor:
    """Output and workspace control through `niri msg`."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _output(self, output: str, *args: str) -> CommandResult:
        return self.runner.run(["niri", "msg", "output", output, *args])

    def _action(self, action: str, *args: str) -> CommandResult:
        return self.runner.run(["niri", "msg", "action", action, *args])

    def output_on(self, output: str) -> CommandResult:
        self.logger.debug(f"Enabling output {output}")
        return self._output(output, "on")

    def output_off(self, output: str) -> CommandResult:
        self.logger.debug(f"Disabling output {output}")
        return self._output(output, "off")

    def set_scale(self, output: str, scale: str) -> CommandResult:
        self.logger.debug(f"Setting scale of {output} to {scale}")
        return self._output(output, "scale", scale)

    def move_workspace_to_monitor(self, workspace: str, output: str) -> CommandResult:
        """Move a named workspace to another output."""
        return self._action("move-workspace-to-monitor", "--reference", workspace, output)

    def move_workspace_to_index(self, workspace: str, index: int) -> CommandResult:
        """Move a named workspace to a 1-based index on its current output."""
        return self._action("move-workspace-to-index", "--reference", workspace, str(index))
