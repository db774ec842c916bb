"""Helpers for tests: shell commands, scope guards and DNS lookups."""

from __future__ import annotations

import concurrent.futures
import socket
import subprocess
from typing import Callable

__all__ = [
    "CommandError",
    "ScopeExit",
    "scope_exit",
    "execute_system_command",
    "resolve_dns_query",
]


class CommandError(Exception):
    """Raised when a shell command does not complete successfully."""


def execute_system_command(command: str) -> None:
    """Run a command through the shell; raise CommandError unless it exits with 0."""
    completed = subprocess.run(command, shell=True)
    status = completed.returncode
    if status < 0:
        raise CommandError(f"Command [{command}] did not exit normally, ret: {status}")
    if status != 0:
        raise CommandError(f"Command [{command}] completed with error: {status}")


class ScopeExit:
    """Runs a callback once when its scope is left, unless released first."""

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._pending = True

    def release(self) -> None:
        """Make sure the callback will not run."""
        self._pending = False

    def reset(self) -> None:
        """Run the callback now if it has not run yet; it never runs twice."""
        if self._pending:
            self._pending = False
            self._callback()

    def __enter__(self) -> ScopeExit:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.reset()

    def __bool__(self) -> bool:
        return self._pending


def scope_exit(callback: Callable[[], None]) -> ScopeExit:
    """A guard that runs the callback when the ``with`` block ends."""
    return ScopeExit(callback)


def _lookup(host: str, service: str) -> tuple | None:
    try:
        infos = socket.getaddrinfo(host, service, type=socket.SOCK_STREAM)
    except socket.gaierror as exc:
        print(f"Error resolving address: {exc.errno}, {exc.strerror}")
        return None
    if not infos:
        print("Failed to resolve address to any endpoints")
        return None
    print("Resolved endpoints:")
    found = None
    for _family, _type, _proto, _canon, sockaddr in infos:
        print(f"Host: {host}, IP: {sockaddr[0]}")
        found = sockaddr
    return found


def resolve_dns_query(host: str, service: str, timeout: float = 30.0) -> tuple | None:
    """Resolve a host and service to a TCP endpoint.

    Returns the last endpoint found as a socket address tuple, or None if the
    query fails, finds nothing or does not finish within the timeout.
    """
    print(f"Issuing query: {host}:{service}")
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(_lookup, host, service)
        print("Waiting...")
        try:
            return future.result(timeout=timeout)
        except concurrent.futures.TimeoutError:
            print(f"Timed out after {timeout:g}s")
            return None
    finally:
        executor.shutdown(wait=False)