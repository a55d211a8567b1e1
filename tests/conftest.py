"""Test configuration and fixtures."""

from pathlib import Path
from typing import List, Sequence

import pytest

from tvswitch.config import Config, StateStore
from tvswitch.runner import CommandResult
from tvswitch.transitions import ModeSwitcher


TV_SINK = "alsa_output.pci-0000_07_00.1.hdmi-stereo"
DESKTOP_SINK = "alsa_output.pci-0000_09_00.4.analog-stereo"


class FakeRunner:
    """
    Records commands instead of running them.

    Sleeps are recorded in the same event list so tests can check ordering.
    """

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.events: List[list] = []

    def run(self, cmd: Sequence[str], capture: bool = True) -> CommandResult:
        self.events.append(list(cmd))
        return CommandResult(args=list(cmd), returncode=self.returncode)

    def sleep(self, seconds: float) -> None:
        self.events.append(["sleep", seconds])

    @property
    def commands(self) -> List[list]:
        return [e for e in self.events if e[0] != "sleep"]

    def starting_with(self, *prefix: str) -> List[list]:
        return [e for e in self.events if e[:len(prefix)] == list(prefix)]


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    return tmp_path / "tv.state"


@pytest.fixture
def test_config(state_file: Path) -> Config:
    """Built-in defaults with an isolated state file."""
    return Config(state_file=state_file)


@pytest.fixture
def store(state_file: Path) -> StateStore:
    return StateStore(state_file)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def switcher(test_config: Config, fake_runner: FakeRunner) -> ModeSwitcher:
    return ModeSwitcher.from_config(test_config, runner=fake_runner, sleep=fake_runner.sleep)


@pytest.fixture
def cli_env(monkeypatch, tmp_path: Path, fake_runner: FakeRunner) -> FakeRunner:
    """Point the CLI at a temp config dir and the fake runner, with no real sleeps."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr("tvswitch.cli.build_runner", lambda config: fake_runner)
    monkeypatch.setattr(
        "tvswitch.cli.build_switcher",
        lambda config, runner: ModeSwitcher.from_config(config, runner=runner, sleep=fake_runner.sleep),
    )
    return fake_runner
