# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
TAB = 0x09
NEWLINE = 0x0a
SPACE = 0x20
DEL = 0x7f
META_BIT = 0x80

CARET = b'^'
CARET_SHIFT = 0x40
DEL_NOTATION = b'^?'
META_PREFIX = b'M-'
TAB_NOTATION = b'^I'
END_MARKER = b'$'

LINE_NUMBER_WIDTH = 6
LINE_NUMBER_SEPARATOR = '\t'

READ_CHUNK_SIZE: int = 4096
