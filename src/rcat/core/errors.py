# src/rcat/core/errors.py
import errno
from typing import Optional


class ReadError(Exception):
    """A single file could not be streamed to the output."""

    reason = "Input/output error"

    def __init__(self, path: str, detail: Optional[str] = None):
        self.path = path
        self.detail = detail or self.reason
        super().__init__(f"{path}: {self.detail}")

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> "ReadError":
        """
        Maps an OSError raised while opening or reading `path` to the
        matching ReadError subclass. The OS message is kept as the detail.
        """
        if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
            error_cls = NotFound
        elif isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
            error_cls = PermissionDenied
        elif isinstance(exc, (IsADirectoryError, NotADirectoryError)):
            error_cls = InvalidTarget
        else:
            error_cls = IOFailure
        return error_cls(path, exc.strerror)


class NotFound(ReadError):
    reason = "No such file or directory"


class PermissionDenied(ReadError):
    reason = "Permission denied"


class InvalidTarget(ReadError):
    reason = "Is a directory"


class IOFailure(ReadError):
    reason = "Input/output error"
