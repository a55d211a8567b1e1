"""
External command execution.

Display, audio and overlay commands are fire-and-forget: failures are logged
and reported in the returned CommandResult, never raised.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence


# Shell conventions for "found but not executable" and "command not found"
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False
    not_found: bool = False  # Executable missing from PATH
    not_executable: bool = False  # Found but exec failed (permissions, format)

    @property
    def ok(self) -> bool:
        return (
            self.returncode == 0
            and not self.timed_out
            and not self.not_found
            and not self.not_executable
        )


class CommandRunner:
    """Runs external commands from argument lists (no shell)."""

    def __init__(self, timeout: Optional[int] = 30) -> None:
        self.timeout = timeout
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def run(self, cmd: Sequence[str], capture: bool = True) -> CommandResult:
        """
        Run a command and return its result.

        Args:
            cmd: Command to run as list of strings
            capture: Capture stdout/stderr; when False the child inherits
                this process's stdio and no timeout applies

        Returns:
            CommandResult; a missing executable yields returncode 127, one
            that cannot be executed yields 126
        """
        args = list(cmd)
        cmd_str = ' '.join(args)  # For logging purposes

        self.logger.debug(f"Running command: {cmd_str}")
        try:
            if capture:
                result = subprocess.run(args, capture_output=True, text=True, timeout=self.timeout)
            else:
                result = subprocess.run(args)
        except subprocess.TimeoutExpired as e:
            self.logger.error(f"Command timed out after {e.timeout}s: {cmd_str}")
            return CommandResult(args=args, returncode=-1, timed_out=True)
        except FileNotFoundError:
            self.logger.error(f"Command not found: {args[0]} - ensure {args[0]} is installed and in PATH")
            return CommandResult(args=args, returncode=EXIT_NOT_FOUND, not_found=True)
        except OSError as e:
            # PermissionError, ENOEXEC and friends: the program exists but won't start
            self.logger.error(f"OS error executing command {cmd_str}: {e}")
            return CommandResult(
                args=args,
                returncode=EXIT_NOT_EXECUTABLE,
                stderr=str(e),
                not_executable=True,
            )

        outcome = CommandResult(
            args=args,
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

        if outcome.returncode != 0:
            message = f"Command failed with exit code {outcome.returncode}: {cmd_str}"
            if outcome.stderr:
                message += f"\nStderr: {outcome.stderr.strip()}"
            elif outcome.stdout:
                message += f"\nStdout: {outcome.stdout.strip()}"
            self.logger.warning(message)
        else:
            self.logger.debug(f"Command succeeded: {cmd_str}")

        return outcome
