# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import IO

from pytermor import seq

from .const import END_MARKER, LINE_NUMBER_SEPARATOR, LINE_NUMBER_WIDTH, NEWLINE, READ_CHUNK_SIZE, TAB, TAB_NOTATION
from .escaper import Escaper
from .options import DisplayOptions
from .state import TransformState
from .writer import Writer
from ..common import ReadError
from ..console import ConsoleDebugBuffer, Console


class StreamTransformer:
    """
    Byte-level state machine that copies a source to the writer, applying
    the display options on the way.

    All line-related state lives in the :class:`TransformState` instance the
    transformer was created with; feeding several sources through the same
    transformer (or through transformers sharing the state) makes numbering
    and blank line squeezing continuous across the sources.

    Without any display option active the chunks are written as read and the
    state is left untouched, since nothing would consult it.
    """
    def __init__(self, options: DisplayOptions, state: TransformState, writer: Writer,
                 chunk_size: int = READ_CHUNK_SIZE):
        self._options = options
        self._state = state
        self._writer = writer
        self._chunk_size = chunk_size
        self._escaper = Escaper(options)
        self._debug_buffer = ConsoleDebugBuffer('transf', seq.CYAN)
        self._debug_line_ends = self._debug_buffer.is_enabled(3)

    @property
    def state(self) -> TransformState:
        return self._state

    def transform(self, source: IO[bytes], name: str = 'stdin'):
        """
        Read ``source`` until EOF, writing transformed bytes as they come.

        :raises ReadError:  on source failure; the output produced so far stays written.
        :raises WriteError: on sink failure.
        """
        offset = 0
        while raw_input := self._read(source, name):
            self._debug_buffer.write(2, f'Read chunk: {Console.printd(raw_input)}', offset=offset)
            if self._options.is_passthrough:
                self._writer.write(raw_input)
            else:
                self._writer.write(self.feed(raw_input))
            offset += len(raw_input)

        self._debug_buffer.write(1, f'Encountered EOF in {name} after {offset} bytes')

    def feed(self, raw: bytes) -> bytes:
        opts = self._options
        state = self._state
        output = bytearray()

        for b in raw:
            at_line_beginning = state.line_beginning
            if at_line_beginning:
                is_blank = (b == NEWLINE)

                if opts.squeeze_blank and is_blank and state.prev_line_blank:
                    continue

                if opts.numbering and not (opts.number_nonblank and is_blank):
                    output += self._format_line_number()

                state.line_beginning = False

            if b == TAB and opts.show_tabs:
                output += TAB_NOTATION
                continue

            if b == NEWLINE:
                if opts.show_ends:
                    output += END_MARKER
                output.append(NEWLINE)

                state.line_beginning = True
                state.prev_line_blank = at_line_beginning
                if self._debug_line_ends:
                    self._debug_buffer.write(3, f'Line end: blank={at_line_beginning}, next number={state.line_number}')
                continue

            state.prev_line_blank = False
            output += self._escaper.visible(b)

        return bytes(output)

    def _format_line_number(self) -> bytes:
        line_number = self._state.next_line_number()
        return f'{line_number:>{LINE_NUMBER_WIDTH}d}{LINE_NUMBER_SEPARATOR}'.encode('ascii')

    def _read(self, source: IO[bytes], name: str) -> bytes:
        read = getattr(source, 'read1', None) or source.read
        try:
            return read(self._chunk_size)
        except OSError as e:
            raise ReadError(name, e) from e
