# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import IO

from pytermor import seq

from ..common import ReadError
from ..console import ConsoleDebugBuffer

STDIN_FILENAME = '-'
STDIN_DISPLAY_NAME = 'stdin'


class Reader:
    """
    Opens one input source for reading in binary mode and closes it on exit,
    standard input excluded. Consuming the source is up to the caller::

        with Reader('file.txt') as source:
            transformer.transform(source)
    """
    def __init__(self, filename: str|None, stdin: IO[bytes]|None = None,
                 debug_buffer: ConsoleDebugBuffer|None = None):
        self._filename = filename
        self._stdin = stdin
        self._io: IO[bytes]|None = None
        self._debug_buffer = debug_buffer if debug_buffer is not None else self.create_debug_buffer()

    @staticmethod
    def create_debug_buffer() -> ConsoleDebugBuffer:
        return ConsoleDebugBuffer('reader', seq.MAGENTA)

    @property
    def reading_stdin(self) -> bool:
        return not self._filename or self._filename == STDIN_FILENAME

    @property
    def name(self) -> str:
        if self.reading_stdin:
            return STDIN_DISPLAY_NAME
        return self._filename

    def __enter__(self) -> IO[bytes]:
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            self.close()
        except ReadError:
            if exc_type is None:
                raise
        return False

    def open(self) -> IO[bytes]:
        if self.reading_stdin:
            self._io = self._stdin if self._stdin is not None else sys.stdin.buffer
            self._debug_buffer.write(1, 'Reading from stdin')
            return self._io

        try:
            self._io = open(self._filename, 'rb')
        except OSError as e:
            raise ReadError(self.name, e) from e
        self._debug_buffer.write(1, f'Opened file: {self._filename}')
        return self._io

    def close(self):
        if self.reading_stdin or not self._io or self._io.closed:
            return
        try:
            self._io.close()
        except OSError as e:
            raise ReadError(self.name, e) from e
        self._debug_buffer.write(1, f'Closed file: {self._filename}')
