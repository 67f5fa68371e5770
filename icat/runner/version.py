# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from importlib.metadata import version, PackageNotFoundError

from . import AbstractRunner
from ..console import Console
from ..version import __version__


class VersionRunner(AbstractRunner):
    def run(self) -> int:
        Console.info("es7s/icat".ljust(16) + __version__)
        Console.info("pytermor".ljust(16) + self._get_dependency_version('pytermor'))
        return 0

    def _get_dependency_version(self, name: str) -> str:
        try:
            return version(name)
        except PackageNotFoundError:
            return 'n/a'
