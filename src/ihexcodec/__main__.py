r"""Runs the :mod:`ihexcodec.cli` application via ``python -m ihexcodec``.

The command line application lives in :mod:`ihexcodec.cli`, so that importing
it does not run it twice (see PEP 338).
"""
from .cli import main as _main


def main(module_name: str) -> None:
    if module_name == '__main__':
        _main()


main(__name__)
