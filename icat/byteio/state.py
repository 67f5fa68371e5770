# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TransformState:
    """
    Position of the output within the current run. One instance is shared
    by all the sources of a run, so line numbers and blank line squeezing
    continue across file boundaries.
    """
    line_number: int = 1
    line_beginning: bool = True
    prev_line_blank: bool = False

    def next_line_number(self) -> int:
        line_number = self.line_number
        self.line_number += 1
        return line_number
