"""
Command-line interface for tv-switch.

Usage:
    tv-switch [options] <command>

Commands:
    init                 Reset state to desktop mode and select the desktop sink
    toggle               Toggle between TV and desktop modes
    tv                   Switch to TV mode
    desktop              Switch to desktop mode
    toggle-scaling       Toggle TV scaling (TV mode only)
    scaled               Scale the TV output (TV mode only)
    unscaled             Run the TV output at scale 1 (TV mode only)
    fix-workspace-order  Reapply workspace order for the current mode
    status               Show current mode
    game                 Launch a game, wrapped in gamescope per mode
    init-config          Write the default config file
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from .config import Config
from .exceptions import (
    TvSwitchError,
    ConfigError,
    StateFileError,
    StateParseError,
    CommandNotFoundError,
    CommandNotExecutableError,
)
from .runner import CommandRunner, EXIT_NOT_FOUND, EXIT_NOT_EXECUTABLE
from .transitions import ModeSwitcher
from .commands import (
    toggle,
    switch_to_tv,
    switch_to_desktop,
    toggle_scaling,
    set_scaled,
    set_unscaled,
    fix_workspace_order,
    init_state,
    init_config,
    show_status,
    launch_game,
)

# sysexits.h
EX_DATAERR = 65
EX_IOERR = 74
EX_CONFIG = 78

MODE_COMMANDS = {
    "toggle": toggle,
    "tv": switch_to_tv,
    "desktop": switch_to_desktop,
    "toggle-scaling": toggle_scaling,
    "scaled": set_scaled,
    "unscaled": set_unscaled,
    "fix-workspace-order": fix_workspace_order,
    "init": init_state,
}


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_runner(config: Config) -> CommandRunner:
    return CommandRunner(timeout=config.timing.command_timeout)


def build_switcher(config: Config, runner: CommandRunner) -> ModeSwitcher:
    return ModeSwitcher.from_config(config, runner=runner, sleep=time.sleep)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tv-switch",
        description="Switch a niri workstation between desktop monitors and a TV"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to config file"
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        help="Override state file path"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("init", help="Initialize the state file and set the desktop audio sink")
    subparsers.add_parser("toggle", help="Toggle between TV and desktop modes")
    subparsers.add_parser("toggle-scaling", help="Toggle TV scaling (TV mode only)")
    subparsers.add_parser("tv", help="Switch to TV mode")
    subparsers.add_parser("desktop", help="Switch to desktop mode")
    subparsers.add_parser("scaled", help="Use the configured TV scale (TV mode only)")
    subparsers.add_parser("unscaled", help="Use scale 1 on the TV (TV mode only)")
    subparsers.add_parser("fix-workspace-order", help="Reapply workspace order for the current mode")

    status_parser = subparsers.add_parser("status", help="Show current mode")
    status_parser.add_argument("--json", action="store_true", help="Output as JSON")

    game_parser = subparsers.add_parser("game", help="Helper for launching games")
    game_parser.add_argument("game_command", metavar="COMMAND", help="Game command line")
    game_parser.add_argument(
        "-t", "--tv-gamescope-args",
        help="gamescope args to use in TV mode"
    )
    game_parser.add_argument(
        "-d", "--desktop-gamescope-args",
        help="gamescope args to use in desktop mode"
    )

    init_config_parser = subparsers.add_parser("init-config", help="Write the default config file")
    init_config_parser.add_argument("--force", action="store_true", help="Overwrite an existing config")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = logging.getLogger(__name__)

    try:
        if args.command == "init-config":
            setup_logging("DEBUG" if args.verbose else "INFO")
            init_config(Config(), args.config, force=args.force)
            return 0

        config = Config.load(config_file=args.config)
        if args.state_file:
            config.state_file = args.state_file

        level = "DEBUG" if args.verbose or config.logging.verbose else config.logging.level
        setup_logging(level)

        runner = build_runner(config)
        switcher = build_switcher(config, runner)

        if args.command in MODE_COMMANDS:
            MODE_COMMANDS[args.command](switcher)
        elif args.command == "status":
            show_status(config, switcher.store.load(), as_json=args.json)
        elif args.command == "game":
            return launch_game(
                runner,
                switcher.store.load(),
                args.game_command,
                tv_gamescope_args=args.tv_gamescope_args,
                desktop_gamescope_args=args.desktop_gamescope_args,
            )
        else:
            parser.print_help()
            return 1

        return 0

    # Handle specific error types with appropriate exit codes and messages
    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        return 130

    except ConfigError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EX_CONFIG

    except StateParseError as e:
        print(f"Corrupt State File: {e}", file=sys.stderr)
        print("Run 'tv-switch init' to reset it.", file=sys.stderr)
        return EX_DATAERR

    except StateFileError as e:
        print(f"State File Error: {e}", file=sys.stderr)
        return EX_IOERR

    except CommandNotFoundError as e:
        print(f"{e}", file=sys.stderr)
        return EXIT_NOT_FOUND

    except CommandNotExecutableError as e:
        print(f"{e}", file=sys.stderr)
        return EXIT_NOT_EXECUTABLE

    except TvSwitchError as e:
        # Catch-all for any other tv-switch errors
        print(f"Error: {e}", file=sys.stderr)
        logger.error(str(e))
        if args.verbose:
            raise
        return 1

    except Exception as e:
        # Unexpected errors - show full traceback in verbose mode
        print(f"Unexpected Error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.error(f"Unexpected error: {type(e).__name__}: {e}")
        if args.verbose:
            raise
        print("\nRun with -v/--verbose for full traceback.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
