"""Command-line splitting, parsing and execution."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from .errors import ErrorKind, ShellIOError
from .helpers import split_once_owned

__all__ = [
    "EnvVar",
    "ShellLine",
    "ExitRequest",
    "split_shell",
    "parse_shell",
    "exec_line",
]

EXIT_COMMANDS = frozenset({"return", "exit", "logout"})

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class _State(Enum):
    NORMAL = auto()
    ESCAPE = auto()
    DQUOTE = auto()
    ESCAPE_DQUOTE = auto()
    SQUOTE = auto()
    ESCAPE_SQUOTE = auto()


def _next_word(s: str) -> tuple[str, str]:
    """Take one word off the front of the already-stripped, non-empty ``s``.

    Returns the word and the text that remains after it.
    """
    state = _State.NORMAL
    buf: list[str] = []

    for n, c in enumerate(s):
        if state is _State.NORMAL:
            if c.isspace():
                return ("".join(buf) if buf else s[:n]), s[n:]
            if c == "\\":
                buf.append(s[:n])
                state = _State.ESCAPE
            elif c == '"':
                buf.append(s[:n])
                state = _State.DQUOTE
            elif c == "'":
                buf.append(s[:n])
                state = _State.SQUOTE
            elif c == ";":
                if n == 0:
                    return ("".join(buf) if buf else s[:1]), s[1:]
                return ("".join(buf) if buf else s[:n]), s[n:]
        elif state is _State.ESCAPE:
            buf.append(c)
            state = _State.NORMAL
        elif state is _State.ESCAPE_DQUOTE:
            buf.append(c)
            state = _State.DQUOTE
        elif state is _State.ESCAPE_SQUOTE:
            buf.append(c)
            state = _State.SQUOTE
        elif state is _State.DQUOTE:
            if c == '"':
                state = _State.NORMAL
            elif c == "\\":
                state = _State.ESCAPE_DQUOTE
            else:
                buf.append(c)
        else:  # single-quoted
            if c == "'":
                state = _State.NORMAL
            elif c == "\\":
                state = _State.ESCAPE_SQUOTE
            else:
                buf.append(c)

    # A word that runs to the end of the input is returned as written.
    return s, ""


def split_shell(text: str) -> Iterator[str]:
    """Yield the words of a command line, honouring quotes, escapes and ``;``."""
    rest = text
    while True:
        s = rest.strip()
        if not s:
            return
        word, rest = _next_word(s)
        yield word


@dataclass
class EnvVar:
    """An environment assignment written before the command."""

    key: str
    val: str


@dataclass
class ShellLine:
    """A parsed command line: assignments, a command and its arguments."""

    env: list[EnvVar] = field(default_factory=list)
    command: str | None = None
    args: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        parts = [f"{v.key}={v.val}" for v in self.env]
        if self.command is not None:
            parts.append(self.command)
        text = " ".join(parts)
        return text + "".join(f" {a}" for a in self.args)


class ExitRequest(Exception):
    """Raised when a line asks the shell to exit with a given status."""

    def __init__(self, command: str, status: int) -> None:
        super().__init__(command, status)
        self.command = command
        self.status = status


def parse_shell(words: Iterable[str]) -> ShellLine:
    """Build a :class:`ShellLine` from a sequence of words."""
    line = ShellLine()
    it = iter(words)
    for word in it:
        pair = split_once_owned(word, "=")
        if pair is None:
            line.command = word
            break
        line.env.append(EnvVar(*pair))
    line.args.extend(it)
    return line


def _parse_status(text: str) -> int:
    if not text:
        raise ShellIOError(
            ErrorKind.INVALID_INPUT, "cannot parse integer from empty string"
        )
    digits = text[1:] if text[0] in "+-" else text
    if not digits or any(c not in "0123456789" for c in digits):
        raise ShellIOError(ErrorKind.INVALID_INPUT, "invalid digit found in string")
    value = int(text)
    if value > _I32_MAX:
        raise ShellIOError(
            ErrorKind.INVALID_INPUT, "number too large to fit in target type"
        )
    if value < _I32_MIN:
        raise ShellIOError(
            ErrorKind.INVALID_INPUT, "number too small to fit in target type"
        )
    return value


def exec_line(line: ShellLine, spawn: Callable[[Sequence[str]], Any]) -> Any:
    """Run ``line``.

    Returns ``None`` when there is no command. Exit commands raise
    :class:`ExitRequest`; anything else is handed to ``spawn`` as the
    argument list (command first) and its result is returned.
    """
    command = line.command
    if command is None:
        return None
    if command in EXIT_COMMANDS:
        status = _parse_status(line.args[0]) if line.args else 0
        raise ExitRequest(command, status)
    return spawn([command, *line.args])