# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import shutil


class ArgumentError(Exception):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"

    def __init__(self, msg: str, help_text: str|None = None):
        super().__init__(msg)
        self.help_text = help_text


class StreamError(Exception):
    def __init__(self, subject: str, cause: OSError|None = None):
        self.subject = subject
        self.cause = cause
        super().__init__(f'{subject}: {self.description}')

    @property
    def description(self) -> str:
        if self.cause is None:
            return 'I/O error'
        return self.cause.strerror or str(self.cause)


class ReadError(StreamError):
    pass


class WriteError(StreamError):
    pass


def get_terminal_width(exact: bool = False) -> int:
    width = shutil.get_terminal_size().columns
    if not exact:
        width -= 2
    return width
