"""
Mode transitions between desktop and TV.

Each transition persists the new state first, then drives the compositor,
overlay and audio tools. Tool failures are logged by the runner and do not
stop the sequence.
"""

import logging
import time
from dataclasses import replace
from typing import Callable, Optional

from .config import Config, State, StateStore
from .runner import CommandRunner
from .tools import NiriCompositor, PactlAudio, EwwOverlay

logger = logging.getLogger(__name__)

UNITY_SCALE = "1"


class ModeSwitcher:
    """
    Performs mode transitions.

    Callers check preconditions (e.g. only call to_tv from desktop mode);
    the scaling transitions additionally refuse to act outside TV mode.
    """

    def __init__(
        self,
        config: Config,
        store: StateStore,
        compositor: NiriCompositor,
        audio: PactlAudio,
        overlay: EwwOverlay,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.store = store
        self.compositor = compositor
        self.audio = audio
        self.overlay = overlay
        self.sleep = sleep

    @classmethod
    def from_config(
        cls,
        config: Config,
        runner: Optional[CommandRunner] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> 'ModeSwitcher':
        """Create a switcher wired to the real external tools."""
        runner = runner or CommandRunner(timeout=config.timing.command_timeout)
        return cls(
            config=config,
            store=StateStore(config.state_file),
            compositor=NiriCompositor(runner),
            audio=PactlAudio(runner),
            overlay=EwwOverlay(runner, config.overlay),
            sleep=sleep,
        )

    def _settle(self, seconds: float) -> None:
        if seconds > 0:
            logger.debug(f"Waiting {seconds}s for outputs to settle")
            self.sleep(seconds)

    def to_tv(self, state: State) -> State:
        """Switch from the desktop monitors to the TV."""
        logger.info("Switching to TV mode")
        state = replace(state, tv=True)
        self.store.save(state)

        tv = self.config.tv
        for screen, _ in enumerate(self.config.desktop):
            self.overlay.show(screen, self.config.overlay.tv_text)

        self.compositor.output_on(tv.name)
        self._settle(self.config.timing.tv_enable_settle)

        for workspace in tv.workspaces:
            self.compositor.move_workspace_to_monitor(workspace, tv.name)
        self.fix_workspace_order(state)
        self._settle(self.config.timing.tv_disable_settle)

        for output in self.config.desktop:
            self.compositor.output_off(output.name)

        self.audio.set_default_sink(self.config.audio.tv_sink)
        return state

    def to_desktop(self, state: State) -> State:
        """Switch from the TV back to the desktop monitors."""
        logger.info("Switching to desktop mode")
        # Leaving TV mode always resets scaling
        state = replace(state, tv=False, scaled=True)
        self.store.save(state)

        tv = self.config.tv
        # Restore the scale now so the next TV switch starts scaled
        self.compositor.set_scale(tv.name, tv.scale)
        self.overlay.show(0, self.config.overlay.desktop_text)

        for output in self.config.desktop:
            self.compositor.output_on(output.name)
        self._settle(self.config.timing.desktop_settle)

        self.compositor.output_off(tv.name)

        for output in self.config.desktop:
            for workspace in output.workspaces:
                self.compositor.move_workspace_to_monitor(workspace, output.name)
        self.fix_workspace_order(state)

        self.audio.set_default_sink(self.config.audio.desktop_sink)
        return state

    def to_scaled(self, state: State) -> State:
        """Apply the configured TV scale."""
        return self._set_scaling(state, scaled=True)

    def to_unscaled(self, state: State) -> State:
        """Run the TV at native resolution (scale 1)."""
        return self._set_scaling(state, scaled=False)

    def _set_scaling(self, state: State, scaled: bool) -> State:
        if not state.tv:
            logger.debug("Not in TV mode, scaling unchanged")
            return state

        state = replace(state, scaled=scaled)
        self.store.save(state)

        scale = self.config.tv.scale if scaled else UNITY_SCALE
        logger.info(f"Setting TV scale to {scale}")
        self.compositor.set_scale(self.config.tv.name, scale)
        return state

    def fix_workspace_order(self, state: State) -> State:
        """
        Reindex workspaces on the active output(s).

        In TV mode the TV's workspace order is applied; in desktop mode each
        monitor is indexed independently, starting at 1.
        """
        if state.tv:
            layouts = [self.config.tv]
        else:
            layouts = self.config.desktop

        for output in layouts:
            logger.debug(f"Ordering workspaces on {output.name}: {output.workspaces}")
            for index, workspace in enumerate(output.workspaces, start=1):
                self.compositor.move_workspace_to_index(workspace, index)
        return state
