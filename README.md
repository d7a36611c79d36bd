# minish

A very small interactive shell. It prints a `# ` prompt, reads one line at a
time, splits the line into words, parses leading `KEY=value` assignments,
the command and its arguments, and echoes the parsed line to standard error.

## Installing

```
pip install .
```

## Running

```
minish
```

On start-up the shell prints the number of its command-line arguments
(program name included), then shows the prompt. When input ends (Ctrl-D),
it prints `exit` and stops with status 0.

The commands `exit`, `return` and `logout` leave the shell. It prints
`exit command: <name>` and stops with the status given as the first
argument, or 0 when there is none:

```
# exit 3
```

The status must be a whole number in the 32-bit signed range. If it is
not, the shell prints `Error spawning exit: ...` with the reason and keeps
running.

If the input is not valid UTF-8, the shell stops. It writes
`minish: ...` to standard error and returns -1.

## What it does not do

The `minish` command does not start programs. Every command other than the
exit commands is parsed and echoed, and then reported as
`Error spawning <command>: Not Found`. To run commands, call `run_shell`
with your own `spawn` callable (see below).

## Line syntax

- Words are split on whitespace.
- `;` is a word of its own. It does not separate commands.
- A backslash escapes the next character.
- Text inside `"..."` or `'...'` is one literal piece. A backslash inside
  quotes escapes the next character.
- The last word on a line is kept exactly as written, with its quotes and
  backslashes.
- Leading `KEY=value` words are environment assignments. The first word
  without `=` is the command, and every word after it is an argument.

## Using it as a library

```python
from minish.shell import split_shell, parse_shell

line = parse_shell(split_shell('LANG=C greet "hello world" now'))
print(line.env[0].key, line.env[0].val)  # LANG C
print(line.command)                       # greet
print(line.args)                          # ['hello world', 'now']
print(line)                               # LANG=C greet hello world now
```

- `minish.shell.exec_line(line, spawn)` runs a parsed `ShellLine`:
  - It returns `None` when there is no command.
  - For an exit command it raises `ExitRequest`, which has `command` and
    `status`.
  - For any other command it calls `spawn([command, *args])` and returns
    its result.
- `minish.main.run_shell(stdin, stdout, stderr, spawn)` runs the read–parse
  loop on a binary `stdin` and text output streams, and returns the exit
  status. A `spawn` that raises `minish.errors.ShellIOError` has its
  message reported as `Error spawning <command>: <message>`.
- `minish.bufio` provides `BufReader`, a 64-byte buffered reader, together
  with `read_until` and `read_line`.
- `minish.start` provides `report(result, program_name)`, which turns a
  result into an exit status, and `env_vars` and `var` for environment
  lookup.
- `minish.errors` provides the `ErrorKind` and `SysError` enums and the
  `ShellIOError` exception.