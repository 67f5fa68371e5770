# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import traceback
from abc import ABCMeta, abstractmethod
from typing import IO, Any, List

from pytermor import autof, fmt, seq

from .common import ArgumentError, StreamError, get_terminal_width
from .settings import Settings, SettingsManager


# noinspection PyMethodMayBeStatic
class AbstractConsoleBuffer(metaclass=ABCMeta):
    @abstractmethod
    def flush(self): raise NotImplementedError


class ConsoleDebugBuffer(AbstractConsoleBuffer):
    def __init__(self, key_prefix: str = None, prefix_color=seq.GRAY):
        self._buf = ''
        self._key_prefix = key_prefix
        self._prefix_fmt = autof(prefix_color + seq.BG_BLACK)

        Console.register_buffer(self)

    def is_enabled(self, level: int) -> bool:
        return SettingsManager.app_settings.debug >= level

    def write(self, level: int, s: str, offset: int = None, end='\n', flush=True):
        if not self.is_enabled(level):
            return

        prefix = ''
        if isinstance(offset, int):
            prefix = Console.format_prefix(f'0x{offset:06x}', self._prefix_fmt)
        elif self._key_prefix is not None:
            prefix = Console.format_prefix(self._key_prefix, self._prefix_fmt)

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        Console.debug(self._buf, end='')
        self._buf = ''


class Console:
    PROG = 'icat'
    FMT_ERROR_TRACE = fmt.red
    FMT_ERROR = autof(seq.HI_RED)
    MAIN_PREFIX_LEN = 8

    buffers: List[AbstractConsoleBuffer] = list()

    @staticmethod
    def register_buffer(buffer: AbstractConsoleBuffer):
        Console.buffers.append(buffer)

    @staticmethod
    def flush_buffers():
        for buffer in Console.buffers:
            buffer.flush()

    @staticmethod
    def on_exception(e: Exception):
        Console.flush_buffers()

        if isinstance(e, ArgumentError):
            Console.error(f'{e!s}')
            if e.help_text:
                Console.print(e.help_text, end='', file=sys.stderr)
            else:
                Console.info(e.USAGE_MSG, file=sys.stderr)

        elif isinstance(e, StreamError):
            Console.error(f'{e!s}')

        elif SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(Console.colorize(Console.FMT_ERROR_TRACE, '\n'.join(tb_lines)), file=sys.stderr)
            Console.error(error)

        else:
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info("Run the app with '" + Console.colorize(fmt.bold, '--debug') + "' argument to see the details",
                         file=sys.stderr)

    @staticmethod
    def debug(s: str = '', end='\n'):
        Console.print(s, end=end, file=sys.stderr)

    @staticmethod
    def info(s: str = '', end='\n', file: IO = None):
        Console.print(s, end=end, file=file)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(Console.colorize(Console.FMT_ERROR, f'{Console.PROG}: {s}'), end=end, file=sys.stderr)

    @staticmethod
    def is_color_enabled(io: IO = None) -> bool:
        io = io or sys.stderr
        isatty = getattr(io, 'isatty', None)
        return bool(isatty and isatty())

    @staticmethod
    def colorize(f, s: Any, io: IO = None) -> str:
        if not Console.is_color_enabled(io):
            return f'{s!s}'
        return f(s)

    @staticmethod
    def get_separator() -> str:
        return Console.colorize(fmt.gray, '│')

    @staticmethod
    def get_separator_line() -> str:
        return Console.colorize(fmt.gray, '─' * get_terminal_width(exact=True))

    @staticmethod
    def debug_settings():
        app_settings = SettingsManager.app_settings
        if not app_settings.debug_settings:
            return

        default_settings = Settings()
        debug_buffer = ConsoleDebugBuffer('settings')
        attrs = sorted(attr for attr in app_settings.__dict__ if not attr.startswith('_'))
        max_attr_len = max(len(attr) for attr in attrs)

        debug_buffer.write(3, Console.get_separator_line())
        for attr in attrs:
            app_value = getattr(app_settings, attr)
            default_value = getattr(default_settings, attr, None)
            if app_value != default_value:
                values = Console.colorize(fmt.green, f'{app_value!s}') + ' ' + \
                         Console.colorize(fmt.gray, f'[{default_value!s}]')
            else:
                values = Console.colorize(fmt.yellow, f'{default_value!s}')
            debug_buffer.write(3, attr.rjust(max_attr_len) + Console.get_separator() + values)
        debug_buffer.write(3, Console.get_separator_line())

    @staticmethod
    def format_prefix(label: str, f) -> str:
        label = f'{label!s:>{Console.MAIN_PREFIX_LEN}.{Console.MAIN_PREFIX_LEN}s}'
        return Console.colorize(f, label) + Console.get_separator()

    @staticmethod
    def print(s: str, end='\n', **kwargs):
        print(s, end=end, **kwargs)

    @staticmethod
    def printd(v: Any, max_input_len: int = 5) -> str:
        if SettingsManager.app_settings.debug_buffer_contents_full:
            max_input_len = sys.maxsize

        if isinstance(v, (bytes, bytearray)):
            result = 'len ' + Console.colorize(fmt.bold, len(v))
            if not SettingsManager.app_settings.debug_buffer_contents:
                return result
            if len(v) == 0:
                return f'{result} []'

            hex_str = ' '.join([f'{b:02x}' for b in v[:max_input_len]])
            if len(v) > max_input_len:
                hex_str += ' ..'
            return f'{result} [{hex_str}]'

        return f'{v!s}'
