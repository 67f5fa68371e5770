# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from .const import CARET, CARET_SHIFT, DEL, DEL_NOTATION, META_BIT, META_PREFIX, NEWLINE, SPACE, TAB
from .options import DisplayOptions


def render_7bit(b: int) -> bytes:
    """
    Render a 7-bit value in caret notation: control chars become ``^`` followed
    by the char shifted by 64, DEL becomes ``^?``, anything else is kept as is.
    """
    if b < SPACE:
        return CARET + bytes([b + CARET_SHIFT])
    if b == DEL:
        return DEL_NOTATION
    return bytes([b])


def render_meta(b: int) -> bytes:
    if b >= META_BIT:
        return META_PREFIX + render_7bit(b - META_BIT)
    return render_7bit(b)


def visible(b: int, options: DisplayOptions) -> bytes:
    if not options.show_nonprinting or b in (NEWLINE, TAB):
        return bytes([b])
    return render_meta(b)


class Escaper:
    """
    Maps raw bytes to their printable representation according to
    display options (``cat -v`` notation). The mapping is computed once
    for all 256 byte values.
    """
    def __init__(self, options: DisplayOptions):
        self._table: List[bytes] = [visible(b, options) for b in range(0x100)]

    def visible(self, b: int) -> bytes:
        return self._table[b]
