# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .app import main

main()
