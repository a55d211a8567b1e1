"""
Step definitions for the mode switching feature.

Commands run through the real CLI entry point with a recording runner in
place of niri, pactl and eww.
"""

from typing import List

import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from tvswitch.cli import main

from conftest import TV_SINK, DESKTOP_SINK

# Load all scenarios from the feature file
scenarios("../features/mode_switching.feature")


# ============================================================================
# Helpers
# ============================================================================

def classify(event: list) -> str:
    """Name one recorded event by the kind of switch step it is."""
    if event[0] == "sleep":
        return "sleep"
    if event[0] == "eww":
        return "overlay"
    if event[0] == "pactl":
        return "sink"
    if event[:3] == ["niri", "msg", "output"]:
        return {"on": "output-on", "off": "output-off", "scale": "scale"}[event[4]]
    if event[:3] == ["niri", "msg", "action"]:
        return {
            "move-workspace-to-monitor": "move-to-monitor",
            "move-workspace-to-index": "move-to-index",
        }[event[3]]
    raise AssertionError(f"Unexpected command: {event}")


def collapse(kinds: List[str]) -> List[str]:
    """Merge consecutive repeats, e.g. three overlays become one step."""
    steps: List[str] = []
    for kind in kinds:
        if not steps or steps[-1] != kind:
            steps.append(kind)
    return steps


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def switch_context():
    """Context for CLI runs."""
    return {"exit_code": None}


# ============================================================================
# Given Steps
# ============================================================================

@given("there is no state file")
def given_no_state_file(state_file):
    assert not state_file.exists()


@given(parsers.parse('the state is "{mode}" and "{scaling}"'))
@given(parsers.parse('the state file contains "{mode}" and "{scaling}"'))
def given_state(state_file, mode, scaling):
    state_file.write_text(f"{mode}\n{scaling}")


# ============================================================================
# When Steps
# ============================================================================

@when(parsers.parse('I run "{command}"'))
def when_run_command(switch_context, cli_env, state_file, command):
    switch_context["exit_code"] = main(["--state-file", str(state_file), command])


# ============================================================================
# Then Steps
# ============================================================================

@then("the command succeeds")
def then_succeeds(switch_context):
    assert switch_context["exit_code"] == 0


@then(parsers.parse("the command fails with exit code {code:d}"))
def then_fails(switch_context, code):
    assert switch_context["exit_code"] == code


@then(parsers.parse('the state file reads "{mode}" and "{scaling}"'))
def then_state_file(state_file, mode, scaling):
    assert state_file.read_text() == f"{mode}\n{scaling}"


@then("no commands were issued")
def then_no_commands(cli_env):
    assert cli_env.events == []


@then(parsers.parse("exactly {count:d} command was issued"))
def then_command_count(cli_env, count):
    assert len(cli_env.commands) == count


@then(parsers.parse('the switch steps were "{steps}"'))
def then_switch_steps(cli_env, steps):
    expected = [s.strip() for s in steps.split(",")]
    assert collapse([classify(e) for e in cli_env.events]) == expected


@then(parsers.parse("{count:d} transition overlays were shown"))
def then_overlay_count(cli_env, count):
    assert len(cli_env.starting_with("eww")) == count


@then(parsers.parse("{count:d} outputs were disabled"))
def then_disabled_count(cli_env, count):
    disabled = [e for e in cli_env.events if e[:3] == ["niri", "msg", "output"] and e[-1] == "off"]
    assert len(disabled) == count


@then("the audio sink is set to the desktop sink")
def then_desktop_sink(cli_env):
    assert cli_env.starting_with("pactl") == [["pactl", "set-default-sink", DESKTOP_SINK]]


@then("the audio sink is set to the TV sink")
def then_tv_sink(cli_env):
    assert cli_env.starting_with("pactl") == [["pactl", "set-default-sink", TV_SINK]]
