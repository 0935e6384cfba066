"""hyprws - command line entry point."""

import argparse
import asyncio
import signal
import sys
from collections.abc import Callable, Sequence
from typing import NoReturn, cast

from . import commands, constants
from .backend import HyprlandBackend
from .config import Settings, load_settings
from .constants import MAX_LOCAL, MAX_ORDINAL
from .handlers.bar import WorkspaceBar
from .handlers.binder import MonitorBinder
from .handlers.interface import Handler
from .listener import Listener, get_event_stream_with_retry
from .logging_setup import get_logger, init_logger
from .models import Direction, ExitCode, HyprwsError

__all__ = ["build_parser", "main", "run"]


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser exiting with `ExitCode.USAGE_ERROR` on bad usage."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.USAGE_ERROR, f"{self.prog}: error: {message}\n")


def _bounded_int(low: int, high: int) -> Callable[[str], int]:
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError as e:
            msg = f"invalid number: {text!r}"
            raise argparse.ArgumentTypeError(msg) from e
        if not low <= value <= high:
            msg = f"{value} is not in {low}..{high}"
            raise argparse.ArgumentTypeError(msg)
        return value

    return convert


def direction(text: str) -> Direction:
    """Parse a direction, `L` or `R` (case insensitive)."""
    try:
        return Direction(text.upper())
    except ValueError as e:
        msg = f"invalid direction: {text!r} (choose from L, R)"
        raise argparse.ArgumentTypeError(msg) from e


def build_parser() -> ArgumentParser:
    """Return the command line parser."""
    local = _bounded_int(1, MAX_LOCAL)

    parser = ArgumentParser(prog="hyprws", description="Monitor-aware workspaces for Hyprland", allow_abbrev=False)
    parser.add_argument("--debug", help="Enable debug mode and log to a file", metavar="filename")
    parser.add_argument("--config", help="Use a different configuration file", metavar="filename")
    groups = parser.add_subparsers(dest="group", required=True, metavar="{workspace,display,bar}")

    workspace = groups.add_parser("workspace", help="Commands for interacting with workspaces")
    workspace_cmds = workspace.add_subparsers(dest="action", required=True)
    focus = workspace_cmds.add_parser("focus", help="Focus the appropriate workspace")
    focus.add_argument("workspace", type=local)
    move = workspace_cmds.add_parser("move", help="Move the focused window to the appropriate workspace")
    move.add_argument("workspace", type=local)

    display = groups.add_parser("display", help="Commands for interacting with displays")
    display_cmds = display.add_subparsers(dest="action", required=True)
    focus = display_cmds.add_parser("focus", help="Focus the next monitor in provided direction, will loop")
    focus.add_argument("direction", type=direction, metavar="{L,R}")
    move = display_cmds.add_parser("move", help="Move the focused window to the monitor in the provided direction, will loop")
    move.add_argument("direction", type=direction, metavar="{L,R}")
    display_cmds.add_parser("listener", help="Listen for new monitors and set up workspaces for them")

    bar = groups.add_parser("bar", help="Commands for bar stuff")
    bar_cmds = bar.add_subparsers(dest="action", required=True)
    bar_ws = bar_cmds.add_parser("workspace", help="Subscribe to a workspace status, prints waybar compatible JSON")
    bar_ws.add_argument("workspace", type=local)
    bar_ws.add_argument("display", type=_bounded_int(0, MAX_ORDINAL))

    return parser


async def run_listener(handler: Handler) -> ExitCode:
    """Run `handler` against the compositor events until the stream ends."""
    log = get_logger("startup")
    result = await get_event_stream_with_retry()
    if result[0] is None:
        log.critical("Failed to open hyprland event stream: %s.", result[1])
        return ExitCode.CONNECTION_ERROR
    events_reader, events_writer = cast("tuple[asyncio.StreamReader, asyncio.StreamWriter]", result)
    try:
        await Listener(handler).run(events_reader)
    finally:
        events_writer.close()
        await events_writer.wait_closed()
    log.critical("Hyprland event stream closed")
    return ExitCode.CONNECTION_ERROR


async def run_command(args: argparse.Namespace, settings: Settings) -> ExitCode:
    """Execute the parsed command line."""
    command = (args.group, args.action)
    if command == ("display", "listener"):
        return await run_listener(MonitorBinder("binder", settings))
    if command == ("bar", "workspace"):
        return await run_listener(WorkspaceBar("bar", settings, args.workspace, args.display))

    backend = HyprlandBackend(get_logger(args.group))
    if command == ("workspace", "focus"):
        await commands.focus_workspace(backend, settings, args.workspace)
    elif command == ("workspace", "move"):
        await commands.move_to_workspace(backend, settings, args.workspace)
    elif command == ("display", "focus"):
        await commands.focus_display(backend, args.direction)
    elif command == ("display", "move"):
        await commands.move_to_display(backend, args.direction)
    else:
        msg = f"unknown command {args.group} {args.action}"
        raise AssertionError(msg)
    return ExitCode.SUCCESS


async def run(args: argparse.Namespace) -> ExitCode:
    """Load the configuration and execute the command, mapping errors to exit codes."""
    log = get_logger("startup")
    try:
        settings = await load_settings(args.config, log)
        return await run_command(args, settings)
    except HyprwsError as e:
        log.error("%s %s failed: %s", args.group, args.action, e)  # noqa: TRY400
        return e.exit_code
    except ConnectionResetError:
        log.critical("Lost connection to Hyprland")
        return ExitCode.CONNECTION_ERROR


def main(argv: Sequence[str] | None = None) -> None:
    """Run the command."""
    args = build_parser().parse_args(argv)
    if args.debug:
        init_logger(filename=args.debug, force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")

    if not constants.HYPRLAND_INSTANCE_SIGNATURE:
        log.critical("HYPRLAND_INSTANCE_SIGNATURE is not set, is Hyprland running ?")
        sys.exit(ExitCode.ENV_ERROR)

    signal.signal(signal.SIGTERM, lambda *_: sys.exit(ExitCode.SUCCESS))
    try:
        code = asyncio.run(run(args))
    except KeyboardInterrupt:
        code = ExitCode.SUCCESS
    sys.exit(code)


if __name__ == "__main__":
    main()
