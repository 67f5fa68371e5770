# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import ArgumentError, StreamError, ReadError, WriteError, get_terminal_width
from .version import __version__

from .arghelp import AppArgumentParser
from .app import App, main
