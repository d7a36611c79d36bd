"""Error kinds and the exception raised for shell I/O failures."""

from __future__ import annotations

from enum import Enum

__all__ = ["ErrorKind", "SysError", "ShellIOError"]


class ErrorKind(Enum):
    """Category of an I/O error; the value is its human-readable name."""

    NOT_FOUND = "Not Found"
    PERMISSION_DENIED = "Permission Denied"
    CONNECTION_REFUSED = "Connection Refused"
    CONNECTION_RESET = "Connection Reset"
    HOST_UNREACHABLE = "Host Unreachable"
    NETWORK_UNREACHABLE = "Network Unreachable"
    CONNECTION_ABORTED = "Connection Aborted"
    NOT_CONNECTED = "Not Connected"
    ADDR_IN_USE = "Address in Use"
    ADDR_NOT_AVAILABLE = "Address Not Available"
    NETWORK_DOWN = "Network Down"
    BROKEN_PIPE = "Broken Pipe"
    ALREADY_EXISTS = "Already Exists"
    WOULD_BLOCK = "Would Block"
    NOT_A_DIRECTORY = "Not A Directory"
    IS_A_DIRECTORY = "Is A Directory"
    DIRECTORY_NOT_EMPTY = "Directory Not Empty"
    READ_ONLY_FILESYSTEM = "Read Only Filesystem"
    FILESYSTEM_LOOP = "Filesystem Loop"
    STALE_NETWORK_FILE_HANDLE = "Stale Remote Object"
    INVALID_INPUT = "Invalid Input"
    INVALID_DATA = "Invalid Data"
    TIMED_OUT = "Timed Out"
    WRITE_ZERO = "Write returned 0"
    STORAGE_FULL = "Storage Full"
    NOT_SEEKABLE = "Not Seekable"
    QUOTA_EXCEEDED = "Quota Exceeded"
    FILE_TOO_LARGE = "File Too Large"
    RESOURCE_BUSY = "Resource Busy"
    EXECUTABLE_FILE_BUSY = "Text Busy"
    DEADLOCK = "Deadlock (Avoided)"
    CROSSES_DEVICES = "Crosses Devices"
    TOO_MANY_LINKS = "Too Many (Hard) Links"
    INVALID_FILENAME = "Invalid Filename"
    ARGUMENT_LIST_TOO_LONG = "Argument List Too Long"
    INTERRUPTED = "Interrupted"
    UNSUPPORTED = "Unsupported"
    UNEXPECTED_EOF = "Unexpected EOF"
    OUT_OF_MEMORY = "Out Of Memory"
    IN_PROGRESS = "In Progress"
    INVALID_STATE = "Invalid Object State"
    OTHER = "Other Error"
    UNCATEGORIZED = "(Uncategorized)"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_sys_error(cls, error: SysError) -> ErrorKind:
        """Map a system error onto the matching error kind."""
        return _SYS_TO_KIND.get(error, cls.UNCATEGORIZED)


class SysError(Enum):
    """Error conditions reported by the system interface."""

    PERMISSION = "Permission"
    INVALID_HANDLE = "InvalidHandle"
    INVALID_MEMORY = "InvalidMemory"
    BUSY = "Busy"
    INVALID_OPERATION = "InvalidOperation"
    INVALID_STRING = "InvalidString"
    INSUFFICIENT_LENGTH = "InsufficientLength"
    RESOURCE_LIMIT_EXHAUSTED = "ResourceLimitExhausted"
    INVALID_STATE = "InvalidState"
    INVALID_OPTION = "InvalidOption"
    INSUFFICIENT_MEMORY = "InsufficientMemory"
    UNSUPPORTED_KERNEL_FUNCTION = "UnsupportedKernelFunction"
    KERNEL_FUNCTION_WOULD_BLOCK = "KernelFunctionWouldBlock"
    FINISHED_ENUMERATE = "FinishedEnumerate"
    TIMEOUT = "Timeout"
    INTERRUPTED = "Interrupted"
    KILLED = "Killed"
    DEADLOCKED = "Deadlocked"
    UNSUPPORTED_OPERATION = "UnsupportedOperation"
    PENDING = "Pending"
    DOES_NOT_EXIST = "DoesNotExist"
    ALREADY_EXISTS = "AlreadyExists"
    UNKNOWN_DEVICE = "UnknownDevice"
    WOULD_BLOCK = "WouldBlock"
    DEVICE_FULL = "DeviceFull"
    DEVICE_UNAVAILABLE = "DeviceUnavailable"
    LINK_RESOLUTION_LOOP = "LinkResolutionLoop"
    ORPHANED_OBJECTS = "OrphanedObjects"
    CLOSED_REMOTELY = "ClosedRemotely"
    CONNECTION_INTERRUPTED = "ConnectionInterrupted"
    ADDRESS_NOT_AVAILABLE = "AddressNotAvailable"
    SIGNALED = "Signaled"
    MAPPING_INACCESSIBLE = "MappingInaccessible"
    PRIVILEGE_CHECK_FAILED = "PrivilegeCheckFailed"
    INTERP_ERROR = "InterpError"


_SYS_TO_KIND: dict[SysError, ErrorKind] = {
    SysError.PERMISSION: ErrorKind.PERMISSION_DENIED,
    SysError.INVALID_HANDLE: ErrorKind.INVALID_INPUT,
    SysError.INVALID_MEMORY: ErrorKind.INVALID_INPUT,
    SysError.BUSY: ErrorKind.RESOURCE_BUSY,
    SysError.INVALID_OPERATION: ErrorKind.INVALID_INPUT,
    SysError.INVALID_STRING: ErrorKind.INVALID_DATA,
    SysError.INSUFFICIENT_LENGTH: ErrorKind.INVALID_INPUT,
    SysError.RESOURCE_LIMIT_EXHAUSTED: ErrorKind.QUOTA_EXCEEDED,
    SysError.INVALID_STATE: ErrorKind.INVALID_STATE,
    SysError.INVALID_OPTION: ErrorKind.UNSUPPORTED,
    SysError.INSUFFICIENT_MEMORY: ErrorKind.OUT_OF_MEMORY,
    SysError.UNSUPPORTED_KERNEL_FUNCTION: ErrorKind.UNSUPPORTED,
    SysError.KERNEL_FUNCTION_WOULD_BLOCK: ErrorKind.WOULD_BLOCK,
    SysError.FINISHED_ENUMERATE: ErrorKind.UNCATEGORIZED,
    SysError.TIMEOUT: ErrorKind.TIMED_OUT,
    SysError.INTERRUPTED: ErrorKind.INTERRUPTED,
    SysError.KILLED: ErrorKind.UNCATEGORIZED,
    SysError.DEADLOCKED: ErrorKind.DEADLOCK,
    SysError.UNSUPPORTED_OPERATION: ErrorKind.UNSUPPORTED,
    SysError.PENDING: ErrorKind.IN_PROGRESS,
    SysError.DOES_NOT_EXIST: ErrorKind.NOT_FOUND,
    SysError.ALREADY_EXISTS: ErrorKind.ALREADY_EXISTS,
    SysError.UNKNOWN_DEVICE: ErrorKind.INVALID_DATA,
    SysError.WOULD_BLOCK: ErrorKind.WOULD_BLOCK,
    SysError.DEVICE_FULL: ErrorKind.STORAGE_FULL,
    SysError.DEVICE_UNAVAILABLE: ErrorKind.RESOURCE_BUSY,
    SysError.LINK_RESOLUTION_LOOP: ErrorKind.FILESYSTEM_LOOP,
    SysError.ORPHANED_OBJECTS: ErrorKind.UNCATEGORIZED,
    SysError.CLOSED_REMOTELY: ErrorKind.CONNECTION_RESET,
    SysError.CONNECTION_INTERRUPTED: ErrorKind.CONNECTION_ABORTED,
    SysError.ADDRESS_NOT_AVAILABLE: ErrorKind.ADDR_NOT_AVAILABLE,
    SysError.SIGNALED: ErrorKind.UNCATEGORIZED,
    SysError.MAPPING_INACCESSIBLE: ErrorKind.INVALID_INPUT,
    SysError.PRIVILEGE_CHECK_FAILED: ErrorKind.PERMISSION_DENIED,
    SysError.INTERP_ERROR: ErrorKind.NOT_FOUND,
}


class ShellIOError(OSError):
    """An I/O failure carrying an :class:`ErrorKind` and an optional message."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message if self.message is not None else str(self.kind)