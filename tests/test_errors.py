import pytest

from minish.errors import ErrorKind, ShellIOError, SysError


@pytest.mark.parametrize(
    "kind, text",
    [
        (ErrorKind.NOT_FOUND, "Not Found"),
        (ErrorKind.ADDR_IN_USE, "Address in Use"),
        (ErrorKind.WRITE_ZERO, "Write returned 0"),
        (ErrorKind.EXECUTABLE_FILE_BUSY, "Text Busy"),
        (ErrorKind.UNCATEGORIZED, "(Uncategorized)"),
        (ErrorKind.INVALID_DATA, "Invalid Data"),
    ],
)
def test_display_names(kind, text):
    assert str(kind) == text


@pytest.mark.parametrize(
    "kind, text",
    [
        (ErrorKind.STALE_NETWORK_FILE_HANDLE, "Stale Remote Object"),
        (ErrorKind.DEADLOCK, "Deadlock (Avoided)"),
        (ErrorKind.TOO_MANY_LINKS, "Too Many (Hard) Links"),
        (ErrorKind.INVALID_STATE, "Invalid Object State"),
        (ErrorKind.OTHER, "Other Error"),
        (ErrorKind.UNEXPECTED_EOF, "Unexpected EOF"),
    ],
)
def test_display_names_differ_from_member_names(kind, text):
    assert kind.__str__() == text


@pytest.mark.parametrize(
    "sys_error, kind",
    [
        (SysError.PERMISSION, ErrorKind.PERMISSION_DENIED),
        (SysError.DOES_NOT_EXIST, ErrorKind.NOT_FOUND),
        (SysError.INTERP_ERROR, ErrorKind.NOT_FOUND),
        (SysError.INVALID_STRING, ErrorKind.INVALID_DATA),
        (SysError.RESOURCE_LIMIT_EXHAUSTED, ErrorKind.QUOTA_EXCEEDED),
        (SysError.KILLED, ErrorKind.UNCATEGORIZED),
        (SysError.CLOSED_REMOTELY, ErrorKind.CONNECTION_RESET),
        (SysError.DEADLOCKED, ErrorKind.DEADLOCK),
        (SysError.PENDING, ErrorKind.IN_PROGRESS),
        (SysError.DEVICE_FULL, ErrorKind.STORAGE_FULL),
    ],
)
def test_from_sys_error(sys_error, kind):
    assert ErrorKind.from_sys_error(sys_error) is kind


@pytest.mark.parametrize(
    "sys_error, kind",
    [
        (SysError.INVALID_HANDLE, ErrorKind.INVALID_INPUT),
        (SysError.TIMEOUT, ErrorKind.TIMED_OUT),
        (SysError.FINISHED_ENUMERATE, ErrorKind.UNCATEGORIZED),
        (SysError.SIGNALED, ErrorKind.UNCATEGORIZED),
        (SysError.ORPHANED_OBJECTS, ErrorKind.UNCATEGORIZED),
        (SysError.PRIVILEGE_CHECK_FAILED, ErrorKind.PERMISSION_DENIED),
    ],
)
def test_more_sys_error_mappings(sys_error, kind):
    assert ErrorKind.from_sys_error(sys_error) is kind


def test_shell_io_error_with_message():
    err = ShellIOError(ErrorKind.INVALID_DATA, "Invalid UTF-8 Text")
    assert str(err) == "Invalid UTF-8 Text"
    assert err.kind is ErrorKind.INVALID_DATA


def test_shell_io_error_without_message_uses_kind():
    err = ShellIOError(ErrorKind.NOT_FOUND)
    assert str(err) == "Not Found"
    assert err.message is None


def test_shell_io_error_is_raisable_oserror():
    err = ShellIOError(ErrorKind.TIMED_OUT)
    with pytest.raises(OSError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "Timed Out"