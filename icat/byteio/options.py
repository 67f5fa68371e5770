# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class DisplayOptions:
    show_all: bool = False
    number_nonblank: bool = False
    show_ends: bool = False
    number: bool = False
    squeeze_blank: bool = False
    show_tabs: bool = False
    show_nonprinting: bool = False

    def __post_init__(self):
        if self.show_all:
            object.__setattr__(self, 'show_nonprinting', True)
            object.__setattr__(self, 'show_ends', True)
            object.__setattr__(self, 'show_tabs', True)
        # numbering nonblank lines takes precedence
        if self.number_nonblank:
            object.__setattr__(self, 'number', False)

    @classmethod
    def from_settings(cls, settings: Any) -> DisplayOptions:
        return cls(**{f.name: bool(getattr(settings, f.name, False)) for f in fields(cls)})

    @property
    def numbering(self) -> bool:
        return self.number or self.number_nonblank

    @property
    def is_passthrough(self) -> bool:
        return not any((self.numbering, self.show_ends, self.squeeze_blank,
                        self.show_tabs, self.show_nonprinting))

    def __str__(self) -> str:
        active = [f.name for f in fields(self) if getattr(self, f.name)]
        return ', '.join(active) or 'none'
