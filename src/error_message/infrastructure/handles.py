"""Identifiers for runtime handles (threads, tasks, processes)."""

from __future__ import annotations

import asyncio
import os
import subprocess
import threading
from multiprocessing.process import BaseProcess
from typing import Any

from loguru import logger

HANDLE_TYPES: tuple[type[Any], ...] = (
    threading.Thread,
    asyncio.Task,
    BaseProcess,
    subprocess.Popen,
)


def is_handle(value: Any) -> bool:
    return isinstance(value, HANDLE_TYPES)


def process_pid(process: BaseProcess) -> int | str | None:
    """Return the pid of *process*, ``None`` before start, ``"closed"`` after close()."""
    try:
        return process.pid
    except ValueError:
        return "closed"


def handle_id(handle: Any) -> str:
    if isinstance(handle, threading.Thread):
        return f"#Thread<{handle.ident}>"
    if isinstance(handle, asyncio.Task):
        return f"#Task<{id(handle):#x}>"
    if isinstance(handle, BaseProcess):
        return f"#Process<{process_pid(handle)}>"
    return f"#Popen<{handle.pid}>"


def is_local(handle: Any) -> bool:
    """Return ``True`` if *handle* lives inside the running OS process.

    Threads and tasks always do. A process object is local only when it
    describes the current process; children, the parent and ``Popen``
    objects are foreign.
    """
    if isinstance(handle, (threading.Thread, asyncio.Task)):
        return True
    if isinstance(handle, BaseProcess):
        return process_pid(handle) == os.getpid()
    return False


def registered_name(handle: Any) -> str | None:
    if isinstance(handle, threading.Thread):
        # only running threads are registered with the interpreter
        for thread in threading.enumerate():
            if thread is handle:
                return thread.name
        return None
    if isinstance(handle, asyncio.Task):
        return handle.get_name()
    return handle.name


def render_handle(handle: Any) -> str:
    """Render *handle* as ``"<id>"`` or ``"<id>__<registered name>"``."""
    identifier = handle_id(handle)
    if not is_local(handle):
        return identifier
    try:
        name = registered_name(handle)
    except Exception as exc:
        logger.debug("Name lookup for {} failed: {!r}", identifier, exc)
        return identifier
    if not name:
        return identifier
    return f"{identifier}__{name}"
