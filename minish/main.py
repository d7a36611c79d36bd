"""The interactive read-and-run loop and the command entry point."""

from __future__ import annotations

import io
import sys
from collections.abc import Callable, Sequence
from typing import Any, BinaryIO, TextIO

from .bufio import BufReader, InvalidUtf8Error, read_line
from .errors import ErrorKind, ShellIOError
from .shell import ExitRequest, exec_line, parse_shell, split_shell
from .start import report

__all__ = ["run_shell", "main"]

PROMPT = "# "


def _spawn_unavailable(argv: Sequence[str]) -> Any:
    raise ShellIOError(ErrorKind.NOT_FOUND)


def run_shell(
    stdin: BinaryIO,
    stdout: TextIO,
    stderr: TextIO,
    spawn: Callable[[Sequence[str]], Any] = _spawn_unavailable,
) -> int:
    """Read lines from ``stdin`` and run them until end of input or an exit.

    Returns the exit status. Raises :class:`ShellIOError` when the input is
    not valid UTF-8.
    """
    reader = BufReader(stdin)
    while True:
        print(PROMPT, end="", file=stdout, flush=True)
        try:
            text = read_line(reader)
        except InvalidUtf8Error as exc:
            raise ShellIOError(ErrorKind.INVALID_DATA, "Invalid UTF-8 Text") from exc
        if not text:
            print("exit", file=stdout, flush=True)
            return 0

        line = parse_shell(split_shell(text))
        if line.command is None:
            continue
        print(line, file=stderr, flush=True)
        try:
            exec_line(line, spawn)
        except ExitRequest as request:
            print(f"exit command: {request.command}", file=stdout, flush=True)
            return request.status
        except ShellIOError as exc:
            print(f"Error spawning {line.command}: {exc}", file=stdout, flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell on the process's standard streams."""
    if argv is None:
        argv = sys.argv
    print(len(argv), flush=True)
    program_name = argv[0] if argv else None
    stdin = getattr(sys.stdin, "buffer", None)
    if stdin is None:
        stdin = io.BytesIO(sys.stdin.read().encode("utf-8"))
    try:
        status = run_shell(stdin, sys.stdout, sys.stderr)
    except ShellIOError as exc:
        return report(exc, program_name)
    return report(status, program_name)


if __name__ == "__main__":
    sys.exit(main())