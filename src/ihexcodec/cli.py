# Copyright (c) 2013-2025, Andrea Zoppi
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""
Command line application.

It lives apart from ``__main__`` so that ``python -m ihexcodec`` does not
import it twice.
"""

import logging
import sys
from typing import Mapping
from typing import Optional
from typing import Sequence
from typing import Type

import click

from .__init__ import __version__
from .base import colorize_tokens
from .checksum import checksum as _checksum
from .errors import DecodeError
from .errors import IhexError
from .reader import Reader
from .reader import ReaderOptions
from .records import DataRecord
from .records import EndOfFileRecord
from .records import ExtendedLinearAddressRecord
from .records import ExtendedSegmentAddressRecord
from .records import Record
from .records import StartLinearAddressRecord
from .records import StartSegmentAddressRecord
from .utils import parse_int
from .utils import unhexlify
from .writer import assemble
from .writer import encode as _encode
from .writer import encode_tokens

logger = logging.getLogger(__name__)

FILE_PATH_IN = click.Path(dir_okay=False, allow_dash=True, readable=True, exists=True)

RECORD_TYPE_NAMES: Mapping[str, Type[Record]] = {
    'data': DataRecord,
    'eof': EndOfFileRecord,
    'esa': ExtendedSegmentAddressRecord,
    'ssa': StartSegmentAddressRecord,
    'ela': ExtendedLinearAddressRecord,
    'sla': StartLinearAddressRecord,
}
r"""Record classes by short command line name."""

RECORD_TYPE_CHOICE = click.Choice(list(RECORD_TYPE_NAMES.keys()))


# ----------------------------------------------------------------------------

def build_record(name: str, values: Sequence[str]) -> Record:
    r"""Builds a record from command line values.

    Args:
        name (str):
            Record type name, key of :data:`RECORD_TYPE_NAMES`.

        values (str list):
            Field values.
            Integers follow :func:`ihexcodec.utils.parse_int`.
            The *data* record takes the data bytes as a hexadecimal string,
            optionally separated by spaces, dots, dashes or colons.

    Returns:
        :class:`ihexcodec.records.Record`: Built record.

    Raises:
        ValueError: Invalid values.

    Examples:
        >>> build_record('data', ['0x10', '61-62-63'])
        DataRecord(offset=16, value=b'abc')
        >>> build_record('ssa', ['0', '3800h'])
        StartSegmentAddressRecord(cs=0, ip=14336)
    """

    record_type = RECORD_TYPE_NAMES[name]

    if record_type is DataRecord:
        if len(values) not in (1, 2):
            raise ValueError('data record requires OFFSET and optional DATA')
        offset = parse_int(values[0])
        data = unhexlify(values[1], delete=...) if len(values) > 1 else b''
        return DataRecord(offset, data)

    fields = record_type.FIELDS
    if len(values) != len(fields):
        raise ValueError(f'{name} record requires {len(fields)} value(s): '
                         f'{", ".join(key.upper() for key in fields) or "none"}')

    return record_type(*(parse_int(value) for value in values))


def read_text(path: Optional[str]) -> str:
    r"""Reads the text of an object file.

    Args:
        path (str):
            File path; ``None`` or ``-`` for standard input.

    Returns:
        str: File text, each byte being a character.
    """

    if path is None or path == '-':
        data = click.get_binary_stream('stdin').read()
    else:
        with open(path, 'rb') as stream:
            data = stream.read()

    logger.debug(f'read {len(data)} bytes from {path or "-"}')
    return data.decode('latin-1')


def print_version(ctx, _, value):

    if not value or ctx.resilient_parsing:
        return

    click.echo(str(__version__))
    ctx.exit()


def setup_logging(verbose: bool) -> None:

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
    )


# ============================================================================

@click.group()
@click.option('-V', '--version', is_flag=True, is_eager=True,
              expose_value=False, callback=print_version, help="""
    Prints the package version number.
""")
@click.option('-v', '--verbose', is_flag=True, help="""
    Logs debug messages onto standard error.
""")
def main(verbose: bool) -> None:
    """
    Command line utilities for Intel HEX object files.

    Input files can be set to ``-`` to read from standard input.
    """

    setup_logging(verbose)


# ----------------------------------------------------------------------------

@main.command()
@click.argument('hexbytes', type=str)
def checksum(
    hexbytes: str,
) -> None:
    r"""Computes the checksum of some bytes.

    ``HEXBYTES`` is the hexadecimal string of the bytes, optionally separated
    by spaces, dots, dashes or colons.
    """

    try:
        data = unhexlify(hexbytes, delete=...)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint='HEXBYTES')

    click.echo(f'{_checksum(data):02X}')


# ----------------------------------------------------------------------------

@main.command()
@click.argument('record_type', type=RECORD_TYPE_CHOICE)
@click.argument('values', nargs=-1)
def encode(
    record_type: str,
    values: Sequence[str],
) -> None:
    r"""Encodes a single record.

    ``RECORD_TYPE`` is the record type name.

    ``VALUES`` are the record fields:

    \b
    data OFFSET [DATA]
    eof
    esa EXTENSION
    ssa CS IP
    ela EXTENSION
    sla ADDRESS
    """

    try:
        record = build_record(record_type, values)
        line = _encode(record)
    except ValueError as exc:
        raise click.ClickException(str(exc))

    click.echo(line)


# ----------------------------------------------------------------------------

@main.command('print')
@click.option('-c', '--color', is_flag=True, help="""
    Colorizes record fields with ANSI codes.
""")
@click.argument('infile', type=FILE_PATH_IN)
def print_(
    color: bool,
    infile: str,
) -> None:
    r"""Prints records in canonical form.

    ``INFILE`` is the path of the input file.
    Reading stops at the first malformed line.
    """

    reader = Reader(read_text(infile))

    for item in reader:
        if isinstance(item, DecodeError):
            raise click.ClickException(f'{infile}:{reader.row}: {item}')

        tokens = encode_tokens(item)
        if color:
            tokens = colorize_tokens(tokens)
        click.echo(''.join(tokens.values()), color=color)


# ----------------------------------------------------------------------------

@main.command()
@click.option('--keep-going', is_flag=True, help="""
    Keeps decoding after malformed lines.
""")
@click.option('--ignore-eof', is_flag=True, help="""
    Keeps decoding after the End Of File record.
""")
@click.argument('infile', type=FILE_PATH_IN)
def records(
    keep_going: bool,
    ignore_eof: bool,
    infile: str,
) -> None:
    r"""Lists decoded records.

    ``INFILE`` is the path of the input file.

    Each line reports the input line number and the decoded record, or the
    decode error.
    """

    options = ReaderOptions(stop_after_first_error=not keep_going,
                            stop_after_eof=not ignore_eof)
    reader = Reader(read_text(infile), options)

    for item in reader:
        click.echo(f'{reader.row}: {item!r}')


# ----------------------------------------------------------------------------

@main.command()
@click.option('--keep-going', is_flag=True, help="""
    Keeps decoding after malformed lines, reporting all of them.
""")
@click.option('--ignore-eof', is_flag=True, help="""
    Keeps decoding after the End Of File record.
""")
@click.argument('infile', type=FILE_PATH_IN)
def validate(
    keep_going: bool,
    ignore_eof: bool,
    infile: str,
) -> None:
    r"""Validates an object file.

    ``INFILE`` is the path of the input file.

    Each malformed line is reported onto standard error.
    The decoded records must then end with the one and only End Of File
    record.
    The exit status is non-zero if any errors are found.
    """

    options = ReaderOptions(stop_after_first_error=not keep_going,
                            stop_after_eof=not ignore_eof)
    reader = Reader(read_text(infile), options)
    decoded = []
    failures = 0

    for item in reader:
        if isinstance(item, DecodeError):
            click.echo(f'{infile}:{reader.row}: {item}', err=True)
            failures += 1
        else:
            decoded.append(item)

    try:
        assemble(decoded)
    except IhexError as exc:
        click.echo(f'{infile}: {exc}', err=True)
        failures += 1

    if failures:
        logger.debug(f'{failures} failure(s) in {infile}')
        sys.exit(1)
