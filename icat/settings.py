# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from argparse import Namespace
from typing import Any, List


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        self.debug: int = 0
        self.filenames: List[str] = []
        self.number: bool = False
        self.number_nonblank: bool = False
        self.show_all: bool = False
        self.show_ends: bool = False
        self.show_nonprinting: bool = False
        self.show_tabs: bool = False
        self.squeeze_blank: bool = False
        self.unbuffered: bool = False  # accepted for compatibility, no effect
        self.version: bool = False

        super().__init__(**kwargs)

    @property
    def effective_filenames(self) -> List[str]:
        return self.filenames or ['-']

    @property
    def debug_settings(self) -> bool:
        return self.debug >= 3

    @property
    def debug_buffer_contents(self) -> bool:
        return self.debug >= 2

    @property
    def debug_buffer_contents_full(self) -> bool:
        return self.debug >= 4


class SettingsManager:
    app_settings: Settings = Settings()

    @staticmethod
    def init():
        SettingsManager.app_settings = Settings()
