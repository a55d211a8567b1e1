"""
State management for tv-switch.

The state file holds two lines: the current mode ("desktop" or "tv") and
whether the TV output is scaled ("scaled" or "unscaled").
"""

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import StateFileError, StateParseError


MODE_TOKENS = {"desktop": False, "tv": True}
SCALE_TOKENS = {"unscaled": False, "scaled": True}


@dataclass(frozen=True)
class State:
    """Current display mode."""
    tv: bool = False
    scaled: bool = True  # Only meaningful while tv is True

    @property
    def mode(self) -> str:
        return "tv" if self.tv else "desktop"

    @property
    def scaling(self) -> str:
        return "scaled" if self.scaled else "unscaled"

    def serialize(self) -> str:
        return f"{self.mode}\n{self.scaling}"

    @classmethod
    def parse(cls, content: str) -> 'State':
        """
        Parse state file content.

        Raises:
            StateParseError: If a line is missing or holds an unknown token
        """
        lines = content.split("\n")
        # Tolerate a single trailing newline
        if len(lines) == 3 and lines[2] == "":
            lines = lines[:2]

        if len(lines) != 2:
            raise StateParseError(
                f"Expected 2 lines in state file, got {len(lines)}: {content!r}"
            )

        # Tokens must match exactly; padding is malformed
        mode, scaling = lines

        if mode not in MODE_TOKENS:
            raise StateParseError(
                f"Invalid mode '{mode}' in state file. "
                f"Expected one of: {list(MODE_TOKENS)}"
            )
        if scaling not in SCALE_TOKENS:
            raise StateParseError(
                f"Invalid scaling '{scaling}' in state file. "
                f"Expected one of: {list(SCALE_TOKENS)}"
            )

        return cls(tv=MODE_TOKENS[mode], scaled=SCALE_TOKENS[scaling])


class StateStore:
    """
    Loads and saves the mode state file.

    Not locked: concurrent invocations race on read-modify-write.
    """

    def __init__(self, state_file: Path) -> None:
        self.state_file = state_file
        self.logger = logging.getLogger(__name__)

    def load(self) -> State:
        """
        Load current state, initializing the file on first run.

        Raises:
            StateFileError: If the file cannot be read
            StateParseError: If the file content is malformed
        """
        if not self.state_file.exists():
            self.logger.info(f"No state file at {self.state_file}, initializing")
            return self.init()

        try:
            content = self.state_file.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise StateFileError(f"Failed to read state file {self.state_file}: {e}") from e

        state = State.parse(content)
        self.logger.debug(f"Loaded state: {state.mode}, {state.scaling}")
        return state

    def save(self, state: State) -> None:
        """
        Atomically overwrite the state file.

        An existing file keeps its permission bits; a new one gets the
        umask-derived mode a plain open() would give it.

        Raises:
            StateFileError: If the file cannot be written
        """
        try:
            self.state_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.state_file.parent,
                prefix=f".{self.state_file.name}.",
                suffix=".tmp",
            )
        except OSError as e:
            raise StateFileError(f"Failed to save state file {self.state_file}: {e}") from e

        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(state.serialize())
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.state_file)
        except OSError as e:
            raise StateFileError(f"Failed to save state file {self.state_file}: {e}") from e
        finally:
            # Also covers KeyboardInterrupt between write and replace
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)

        self.logger.debug(f"Saved state: {state.mode}, {state.scaling}")

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(self.state_file.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def init(self) -> State:
        """Write the default state unconditionally."""
        state = State()
        self.save(state)
        return state
