# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import IO

from pytermor import seq

from ..common import WriteError
from ..console import ConsoleDebugBuffer, Console

STDOUT_DISPLAY_NAME = 'stdout'


class Writer:
    def __init__(self, io: IO[bytes]|None = None):
        self._io_primary: IO[bytes] = io if io is not None else sys.stdout.buffer
        self._bytes_written = 0
        self._debug_buffer = ConsoleDebugBuffer('writer', seq.BLUE)

    @property
    def bytes_written(self) -> int:
        return self._bytes_written

    def write(self, output: bytes):
        if not output:
            return
        try:
            self._io_primary.write(output)
            self._io_primary.flush()
        except OSError as e:
            raise WriteError(STDOUT_DISPLAY_NAME, e) from e

        self._debug_buffer.write(2, f'Wrote {Console.printd(output)}', offset=self._bytes_written)
        self._bytes_written += len(output)

    def flush(self):
        try:
            self._io_primary.flush()
        except OSError as e:
            raise WriteError(STDOUT_DISPLAY_NAME, e) from e
