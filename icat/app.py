# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
import sys

from .arghelp import AppArgumentParser
from .common import WriteError
from .console import Console
from .runner import RunnerFactory
from .settings import SettingsManager


# noinspection PyMethodMayBeStatic
class App:
    EXIT_INTERRUPTED = 130

    def run(self, argv=None):
        try:
            self._parse_args(argv)  # help processing is handled by argparse
            exit_code = (RunnerFactory.create()).run()
        except WriteError as e:
            Console.on_exception(e)
            self._detach_stdout()
            self._exit(1)
        except KeyboardInterrupt:
            Console.flush_buffers()
            self._exit(self.EXIT_INTERRUPTED)
        except Exception as e:
            Console.on_exception(e)
            self._exit(1)
        self._exit(exit_code)

    def _parse_args(self, argv=None):
        SettingsManager.init()
        AppArgumentParser().parse_args(argv, namespace=SettingsManager.app_settings)
        Console.debug_settings()

    def _detach_stdout(self):
        # keep the interpreter from failing again while flushing stdout at exit
        try:
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        except (OSError, ValueError):
            pass

    def _exit(self, code: int):
        sys.exit(code)


def main():
    App().run()
