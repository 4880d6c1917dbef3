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

r"""Intel HEX encoding.

This module turns :class:`ihexcodec.records.Record` objects into text:

* :func:`encode` formats the canonical line of a single record;

* :func:`assemble` checks and formats a whole object file.
"""

import logging
from typing import Iterable
from typing import Mapping

from deprecated import deprecated

from .checksum import checksum
from .errors import DataExceedsMaximumLength
from .errors import MissingEndOfFileRecord
from .errors import MultipleEndOfFileRecords
from .reader import START_CODE
from .records import PAYLOAD_SIZE_MAX
from .records import Record
from .utils import hexlify

logger = logging.getLogger(__name__)


def encode_tokens(record: Record, end: str = '') -> Mapping[str, str]:
    r"""Encodes a record into field tokens.

    Args:
        record (:class:`ihexcodec.records.Record`):
            Record to encode.

        end (str):
            Line terminator token.

    Returns:
        dict: Token strings, keyed by field name, in line order:
        ``begin``, ``count``, ``address``, ``tag``, ``data``, ``checksum``,
        ``end``.

    Raises:
        :class:`ihexcodec.errors.DataExceedsMaximumLength`: Payload longer
        than 255 bytes.

    Examples:
        >>> from ihexcodec import DataRecord
        >>> encode_tokens(DataRecord(0x1234, b'abc'), end='\n')  # doctest:+NORMALIZE_WHITESPACE
        {'begin': ':', 'count': '03', 'address': '1234', 'tag': '00',
         'data': '616263', 'checksum': '91', 'end': '\n'}
    """

    payload = record.payload()
    size = len(payload)
    if size > PAYLOAD_SIZE_MAX:
        raise DataExceedsMaximumLength(size)

    address = record.address_field()
    tag = record.record_type()
    header = bytes((size, (address >> 8) & 0xFF, address & 0xFF, tag))
    check = checksum(header + payload)

    return {
        'begin': START_CODE,
        'count': f'{size:02X}',
        'address': f'{address:04X}',
        'tag': f'{tag:02X}',
        'data': hexlify(payload),
        'checksum': f'{check:02X}',
        'end': end,
    }


def encode(record: Record) -> str:
    r"""Encodes a record line.

    Args:
        record (:class:`ihexcodec.records.Record`):
            Record to encode.

    Returns:
        str: Canonical record line (uppercase), without line terminator.

    Raises:
        :class:`ihexcodec.errors.DataExceedsMaximumLength`: Payload longer
        than 255 bytes.

    Examples:
        >>> from ihexcodec import EndOfFileRecord, StartLinearAddressRecord
        >>> encode(EndOfFileRecord())
        ':00000001FF'
        >>> encode(StartLinearAddressRecord(0xCD))
        ':04000005000000CD2A'
    """

    return ''.join(encode_tokens(record).values())


def assemble(records: Iterable[Record], end: str = '\n') -> str:
    r"""Assembles an object file.

    The record sequence must end with the one and only *End Of File* record.

    No further checks are performed: for example, overlapping data records
    are not detected.

    Args:
        records (:class:`ihexcodec.records.Record` list):
            Records to assemble.

        end (str):
            Line terminator, appended to each line, including the last one.

    Returns:
        str: Object file text.

    Raises:
        :class:`ihexcodec.errors.MissingEndOfFileRecord`: The sequence is
        empty, or its last record is not *End Of File*.

        :class:`ihexcodec.errors.MultipleEndOfFileRecords`: More than one
        *End Of File* record.

        :class:`ihexcodec.errors.EncodeError`: A record cannot be encoded.

    Examples:
        >>> from ihexcodec import DataRecord, EndOfFileRecord
        >>> print(assemble([DataRecord(0x1234, b'abc'), EndOfFileRecord()]), end='')
        :0312340061626391
        :00000001FF
    """

    records = list(records)

    if not records or not records[-1].tag.is_eof():
        raise MissingEndOfFileRecord()

    eof_count = sum(1 for record in records if record.tag.is_eof())
    if eof_count > 1:
        raise MultipleEndOfFileRecords(eof_count)

    lines = [encode(record) for record in records]
    logger.debug(f'assembled {len(lines)} records')
    return ''.join(line + end for line in lines)


@deprecated(reason='Use assemble() instead')
def create_object_file_representation(records: Iterable[Record]) -> str:

    return assemble(records)
