"""Mode switching commands."""

import logging

from ..config import State
from ..transitions import ModeSwitcher

logger = logging.getLogger(__name__)


def toggle(switcher: ModeSwitcher) -> State:
    """Switch to whichever mode is not active."""
    state = switcher.store.load()
    if state.tv:
        return switcher.to_desktop(state)
    return switcher.to_tv(state)


def switch_to_tv(switcher: ModeSwitcher) -> State:
    state = switcher.store.load()
    if state.tv:
        logger.info("Already in TV mode")
        return state
    return switcher.to_tv(state)


def switch_to_desktop(switcher: ModeSwitcher) -> State:
    state = switcher.store.load()
    if not state.tv:
        logger.info("Already in desktop mode")
        return state
    return switcher.to_desktop(state)


def toggle_scaling(switcher: ModeSwitcher) -> State:
    """Flip TV scaling. Does nothing in desktop mode."""
    state = switcher.store.load()
    if not state.tv:
        logger.info("Scaling only applies in TV mode")
        return state
    if state.scaled:
        return switcher.to_unscaled(state)
    return switcher.to_scaled(state)


def set_scaled(switcher: ModeSwitcher) -> State:
    state = switcher.store.load()
    if state.tv and not state.scaled:
        return switcher.to_scaled(state)
    logger.info(f"Nothing to do ({state.mode}, {state.scaling})")
    return state


def set_unscaled(switcher: ModeSwitcher) -> State:
    state = switcher.store.load()
    if state.tv and state.scaled:
        return switcher.to_unscaled(state)
    logger.info(f"Nothing to do ({state.mode}, {state.scaling})")
    return state


def fix_workspace_order(switcher: ModeSwitcher) -> State:
    """Reapply the workspace order for the current mode."""
    state = switcher.store.load()
    return switcher.fix_workspace_order(state)
