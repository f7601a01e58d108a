# src/rcat/core/concat.py
import os
import sys
from typing import BinaryIO, Iterable, Iterator, List, Optional, TextIO

from rcat.config import CHUNK_SIZE, EXIT_FAILURE, EXIT_SUCCESS, PROG_NAME
from rcat.core.errors import InvalidTarget, IOFailure, ReadError
from rcat.models import FileArgument

class Concatenator:
    def __init__(self, stdout: Optional[BinaryIO] = None, stderr: Optional[TextIO] = None,
                 chunk_size: int = CHUNK_SIZE):
        # Streams default to the process streams at run time, not at import time
        self._stdout = stdout
        self._stderr = stderr
        self.chunk_size = chunk_size
        self.failures: List[ReadError] = []

    @property
    def stdout(self) -> BinaryIO:
        return self._stdout if self._stdout is not None else sys.stdout.buffer

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _read_chunks(self, arg: FileArgument) -> Iterator[bytes]:
        """
        Yields the file's bytes chunk by chunk.
        Open and read problems are raised as ReadError; the handle is
        closed on every path out of the generator.
        """
        if os.path.isdir(arg.path):
            raise InvalidTarget(arg.path)

        try:
            f = open(arg.path, "rb")
        except OSError as e:
            raise ReadError.from_os_error(arg.path, e) from e
        except ValueError as e:
            # e.g. an embedded null byte; the OS never sees such a path
            raise InvalidTarget(arg.path, str(e)) from e

        with f:
            while True:
                try:
                    chunk = f.read(self.chunk_size)
                except OSError as e:
                    raise IOFailure(arg.path, e.strerror) from e
                if not chunk:
                    return
                yield chunk

    def copy(self, arg: FileArgument) -> None:
        """Streams one file to stdout. Write errors are not caught here."""
        out = self.stdout
        for chunk in self._read_chunks(arg):
            out.write(chunk)
        out.flush()

    def report(self, error: ReadError) -> None:
        print(f"{PROG_NAME}: {error}", file=self.stderr)

    def run(self, paths: Iterable[str]) -> int:
        """
        Concatenates every path, in order, to stdout.
        A failing file is reported and skipped; the remaining files are
        still processed. Returns the exit status for the whole run.
        """
        self.failures = []

        for path in paths:
            arg = FileArgument(path)
            try:
                self.copy(arg)
            except ReadError as e:
                # Keep whatever was already written for this file in order
                self.stdout.flush()
                self.failures.append(e)
                self.report(e)

        return EXIT_FAILURE if self.failures else EXIT_SUCCESS


def run(paths: Iterable[str]) -> int:
    """Concatenates `paths` to the process's stdout."""
    return Concatenator().run(paths)
