"""Interact with hyprland using sockets."""

__all__ = [
    "get_event_stream",
    "get_response",
    "hyprctl",
    "hyprctl_connection",
    "hyprctl_json",
    "retry_on_reset",
]

import asyncio
import json
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from functools import wraps
from logging import Logger
from typing import Any

from . import constants
from .models import DispatchFailure, QueryFailure

JSONResponse = dict[str, Any] | list[dict[str, Any]]


async def get_event_stream() -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Return a new event socket connection."""
    return await asyncio.open_unix_connection(constants.EVENTS)


def retry_on_reset(func: Callable) -> Callable:
    """Retry on reset wrapper."""

    @wraps(func)
    async def wrapper(*args, logger: Logger, **kwargs) -> Any:  # noqa: ANN401
        exc = None
        for count in range(constants.IPC_MAX_RETRIES):
            try:
                return await func(*args, **kwargs, logger=logger)
            except ConnectionResetError as e:  # noqa: PERF203
                exc = e
                logger.warning("ipc connection problem, retrying...")
                await asyncio.sleep(constants.IPC_RETRY_DELAY_MULTIPLIER * count)
        logger.error("ipc connection failed.")
        raise ConnectionResetError from exc

    return wrapper


@asynccontextmanager
async def hyprctl_connection(logger: Logger) -> AsyncIterator[tuple[asyncio.StreamReader, asyncio.StreamWriter]]:
    """Open a connection to the request socket, closing it on exit."""
    try:
        reader, writer = await asyncio.open_unix_connection(constants.HYPRCTL)
    except (FileNotFoundError, ConnectionRefusedError) as e:
        logger.critical("hyprctl socket not found! is it running ?")
        msg = f"can't connect to {constants.HYPRCTL}"
        raise QueryFailure(msg) from e
    try:
        yield reader, writer
    finally:
        writer.close()
        await writer.wait_closed()


async def get_response(command: bytes, logger: Logger) -> JSONResponse:
    """Get response of `command` from the IPC socket."""
    async with hyprctl_connection(logger) as (reader, writer):
        writer.write(command)
        await writer.drain()
        reader_data = await reader.read()
    decoded_data = reader_data.decode("utf-8", errors="replace")
    try:
        return json.loads(decoded_data)  # type: ignore[no-any-return]
    except json.JSONDecodeError as e:
        logger.debug("Invalid reply: %r", decoded_data)
        msg = f"invalid JSON reply to {command.decode()}"
        raise QueryFailure(msg) from e


@retry_on_reset
async def hyprctl_json(command: str, *, logger: Logger) -> JSONResponse:
    """Run an IPC command and return the JSON output.

    Raises:
        QueryFailure: the socket is unreachable or the reply isn't JSON
    """
    logger.debug(command)
    return await get_response(f"-j/{command}".encode(), logger)


@retry_on_reset
async def _send_command(command: str, base_command: str, *, logger: Logger) -> bytes:
    async with hyprctl_connection(logger) as (ctl_reader, ctl_writer):
        ctl_writer.write(f"/{base_command} {command}".encode())
        await ctl_writer.drain()
        return await ctl_reader.read(100)


async def hyprctl(command: str, base_command: str = "dispatch", *, logger: Logger) -> None:
    """Run an IPC command.

    Args:
        command: the command arguments, eg: "workspace 12"
        base_command: type of command to send ("dispatch", "keyword"...)
        logger: logger to use

    Raises:
        DispatchFailure: the command couldn't be sent or the compositor didn't reply "ok"
    """
    logger.debug("%s %s", base_command, command)
    try:
        resp = await _send_command(command, base_command, logger=logger)
    except QueryFailure as e:
        raise DispatchFailure(str(e)) from e
    except OSError as e:
        msg = f"{base_command} {command}: {str(e) or type(e).__name__}"
        raise DispatchFailure(msg) from e

    # remove "\n" from the response
    resp = b"".join(resp.split(b"\n"))
    if resp != b"ok":
        reason = resp.decode("utf-8", errors="replace") or "no reply"
        msg = f"{base_command} {command}: {reason}"
        raise DispatchFailure(msg)
