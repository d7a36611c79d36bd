import pytest

from minish.errors import ErrorKind, ShellIOError
from minish.shell import (
    EnvVar,
    ExitRequest,
    ShellLine,
    exec_line,
    parse_shell,
    split_shell,
)


def test_split_plain_words():
    assert list(split_shell("ls -l /tmp")) == ["ls", "-l", "/tmp"]


def test_split_ignores_surrounding_whitespace():
    assert list(split_shell("   echo   hi  \n")) == ["echo", "hi"]


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_split_blank_gives_nothing(text):
    assert list(split_shell(text)) == []


def test_split_double_quoted_word():
    assert list(split_shell('echo "hello world" x')) == ["echo", "hello world", "x"]


def test_split_single_quoted_word():
    assert list(split_shell("echo 'a b' c")) == ["echo", "a b", "c"]


def test_split_escaped_quote_inside_double_quotes():
    assert list(split_shell('"a\\"b" c')) == ['a"b', "c"]


def test_split_semicolon_is_its_own_word():
    assert list(split_shell("a;b")) == ["a", ";", "b"]


def test_split_last_word_returned_as_written():
    assert list(split_shell('echo "x y"')) == ["echo", '"x y"']


def test_parse_env_command_and_args():
    line = parse_shell(["A=1", "B=2", "cmd", "x=y"])
    assert line.env == [EnvVar("A", "1"), EnvVar("B", "2")]
    assert line.command == "cmd"
    assert line.args == ["x=y"]


def test_parse_without_command():
    line = parse_shell(["A=1"])
    assert line.command is None
    assert line.args == []
    assert line.env == [EnvVar("A", "1")]


def test_parse_empty_key():
    line = parse_shell(["=x", "run"])
    assert line.env == [EnvVar("", "x")]
    assert line.command == "run"


@pytest.mark.parametrize("text", ["A=1 ls -l", "A=1 B=2", "ls", "cmd a b c"])
def test_display_round_trips_simple_lines(text):
    assert str(parse_shell(split_shell(text))) == text


def test_display_empty_line():
    assert str(ShellLine()) == ""


def test_exec_without_command_does_not_spawn():
    calls = []
    assert exec_line(ShellLine(env=[EnvVar("A", "1")]), calls.append) is None
    assert calls == []


def test_exec_passes_arguments_to_spawn():
    calls = []

    def spawn(argv):
        calls.append(list(argv))
        return 42

    line = parse_shell(split_shell("X=1 prog a b"))
    assert exec_line(line, spawn) == 42
    assert calls == [["prog", "a", "b"]]


@pytest.mark.parametrize("command", ["exit", "return", "logout"])
def test_exit_commands_default_to_zero(command):
    with pytest.raises(ExitRequest) as info:
        exec_line(ShellLine(command=command), lambda argv: None)
    assert info.value.status == 0
    assert info.value.command == command


@pytest.mark.parametrize("arg,status", [("3", 3), ("-2", -2), ("+5", 5)])
def test_exit_status_parsed(arg, status):
    with pytest.raises(ExitRequest) as info:
        exec_line(ShellLine(command="exit", args=[arg]), lambda argv: None)
    assert info.value.status == status


@pytest.mark.parametrize("arg", ["abc", "", "-", "2147483648", "-2147483649", " 1"])
def test_exit_bad_status_is_invalid_input(arg):
    with pytest.raises(ShellIOError) as info:
        exec_line(ShellLine(command="exit", args=[arg]), lambda argv: None)
    assert info.value.kind is ErrorKind.INVALID_INPUT


def test_spawn_errors_propagate():
    def spawn(argv):
        raise ShellIOError(ErrorKind.NOT_FOUND)

    with pytest.raises(ShellIOError) as info:
        exec_line(ShellLine(command="missing"), spawn)
    assert info.value.kind is ErrorKind.NOT_FOUND