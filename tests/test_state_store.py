"""Tests for the state file store."""

from dataclasses import FrozenInstanceError

import os
import stat

import pytest

from tvswitch.config import State, StateStore
from tvswitch.exceptions import StateFileError, StateParseError


@pytest.mark.parametrize("tv", [True, False])
@pytest.mark.parametrize("scaled", [True, False])
def test_save_then_load_returns_same_state(store, tv, scaled):
    state = State(tv=tv, scaled=scaled)
    store.save(state)

    assert store.load() == state


def test_default_state():
    state = State()

    assert state.tv is False
    assert state.scaled is True
    assert state.serialize() == "desktop\nscaled"


def test_state_is_immutable():
    state = State()
    with pytest.raises(FrozenInstanceError):
        state.tv = True


def test_load_missing_file_initializes(store, state_file):
    assert not state_file.exists()

    state = store.load()

    assert state == State()
    assert state_file.read_text() == "desktop\nscaled"


def test_init_overwrites_existing_state(store, state_file):
    state_file.write_text("tv\nunscaled")

    state = store.init()

    assert state == State(tv=False, scaled=True)
    assert state_file.read_text() == "desktop\nscaled"


def test_save_format(store, state_file):
    store.save(State(tv=True, scaled=False))

    assert state_file.read_text() == "tv\nunscaled"


def test_save_creates_parent_directory(tmp_path):
    store = StateStore(tmp_path / "nested" / "dir" / "tv.state")

    store.save(State(tv=True))

    assert store.state_file.read_text() == "tv\nscaled"


def test_save_leaves_no_temp_files(store, state_file):
    store.save(State(tv=True))
    store.save(State(tv=False))

    assert [p.name for p in state_file.parent.iterdir()] == [state_file.name]


def test_load_tolerates_trailing_newline(store, state_file):
    state_file.write_text("tv\nscaled\n")

    assert store.load() == State(tv=True, scaled=True)


@pytest.mark.parametrize("content", [
    "foo\nscaled",
    "tv\nfoo",
    "desktop",
    "",
    "tv\nscaled\nextra",
    "scaled\ntv",
    "  tv \nscaled",
    "tv\n scaled",
    "tv\nscaled\n\n",
    "tv\r\nscaled",
])
def test_malformed_state_is_rejected(store, state_file, content):
    state_file.write_text(content)

    with pytest.raises(StateParseError):
        store.load()

    # Never repaired
    assert state_file.read_text() == content


def test_unknown_mode_message_names_token(store, state_file):
    state_file.write_text("foo\nscaled")

    with pytest.raises(StateParseError, match="foo"):
        store.load()


def test_unreadable_state_file(store, state_file):
    # A directory at the state path cannot be read as a file
    state_file.mkdir()

    with pytest.raises(StateFileError):
        store.load()


def test_unwritable_state_path(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = StateStore(blocker / "tv.state")

    with pytest.raises(StateFileError):
        store.save(State())


def test_save_keeps_existing_permissions(store, state_file):
    state_file.write_text("desktop\nscaled")
    state_file.chmod(0o644)

    store.save(State(tv=True))

    assert stat.S_IMODE(state_file.stat().st_mode) == 0o644
    assert state_file.read_text() == "tv\nscaled"


def test_new_state_file_follows_umask(store, state_file):
    old_umask = os.umask(0o022)
    try:
        store.save(State())
    finally:
        os.umask(old_umask)

    assert stat.S_IMODE(state_file.stat().st_mode) == 0o644


def test_interrupted_save_removes_temp_file(store, state_file, monkeypatch):
    state_file.write_text("desktop\nscaled")

    def interrupted(src, dst):
        raise KeyboardInterrupt

    monkeypatch.setattr("tvswitch.config.state.os.replace", interrupted)

    with pytest.raises(KeyboardInterrupt):
        store.save(State(tv=True))

    assert [p.name for p in state_file.parent.iterdir()] == [state_file.name]
    assert state_file.read_text() == "desktop\nscaled"
