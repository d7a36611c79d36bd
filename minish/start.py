"""Process start-up helpers: exit-status reporting and environment lookup."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator, Mapping

__all__ = ["report", "env_vars", "var"]

DEFAULT_PROGRAM_NAME = "minish"


def report(result: object, program_name: str | None = None) -> int:
    """Turn the outcome of the shell into an exit status.

    ``None`` means success (0), an integer is used as is, and an exception
    is written to standard error with the program name and gives -1.
    """
    if result is None:
        return 0
    if isinstance(result, BaseException):
        name = program_name or DEFAULT_PROGRAM_NAME
        print(f"{name}: {result!r}", file=sys.stderr)
        return -1
    if isinstance(result, bool) or not isinstance(result, int):
        raise TypeError(f"cannot report {type(result).__name__} as an exit status")
    return result


def env_vars(
    environ: Mapping[str, str] | Iterable[str] | None = None,
) -> Iterator[tuple[str, str]]:
    """Yield ``(name, value)`` pairs of the environment.

    ``environ`` is a mapping or a sequence of ``NAME=value`` strings; by
    default the process environment is used.
    """
    if environ is None:
        environ = os.environ
    if isinstance(environ, Mapping):
        yield from environ.items()
        return
    for entry in environ:
        name, found, value = entry.partition("=")
        if not found:
            raise ValueError(f"environment entry without '=': {entry!r}")
        yield name, value


def var(
    name: str, environ: Mapping[str, str] | Iterable[str] | None = None
) -> str | None:
    """Return the value of the first variable called ``name``, or ``None``."""
    return next((value for key, value in env_vars(environ) if key == name), None)