# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .options import DisplayOptions
from .state import TransformState
from .escaper import Escaper, visible, render_7bit, render_meta

from .reader import Reader
from .writer import Writer
from .transformer import StreamTransformer
