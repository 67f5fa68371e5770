# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import IO

from pytermor import seq

from . import AbstractRunner
from ..byteio import DisplayOptions, TransformState, Reader, Writer, StreamTransformer
from ..common import ReadError
from ..console import Console, ConsoleDebugBuffer
from ..settings import Settings, SettingsManager


class ConcatRunner(AbstractRunner):
    """
    Feeds every input source through one transformer in the order they were
    specified. Unreadable sources are reported and skipped; write failures
    are not handled here and stop the run.
    """
    def __init__(self, settings: Settings = None, stdin: IO[bytes] = None, stdout: IO[bytes] = None):
        self._settings = settings if settings is not None else SettingsManager.app_settings
        self._stdin = stdin
        self._options = DisplayOptions.from_settings(self._settings)
        self._state = TransformState()
        self._writer = Writer(stdout)
        self._transformer = StreamTransformer(self._options, self._state, self._writer)
        self._debug_buffer = ConsoleDebugBuffer('runner', seq.GREEN)
        self._reader_debug_buffer = Reader.create_debug_buffer()

    @property
    def state(self) -> TransformState:
        return self._state

    def run(self) -> int:
        self._debug_buffer.write(1, f'Display options: {self._options}')
        exit_code = 0

        for filename in self._settings.effective_filenames:
            reader = Reader(filename, self._stdin, self._reader_debug_buffer)
            try:
                with reader as source:
                    self._transformer.transform(source, reader.name)
            except ReadError as e:
                Console.error(f'{e!s}')
                exit_code = 1

        self._writer.flush()
        self._debug_buffer.write(1, f'Total: {self._writer.bytes_written} bytes, '
                                    f'{self._state.line_number - 1} numbered lines, exit code {exit_code}')
        return exit_code
