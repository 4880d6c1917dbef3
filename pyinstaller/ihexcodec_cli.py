"""
Run PyInstaller against this script file to build a standalone executable.
Make sure that ihexcodec is installed into the Python environment before.
"""
from ihexcodec.__main__ import main as _main

_main('__main__')
