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

r"""Intel HEX decoding.

This module turns text into :class:`ihexcodec.records.Record` objects:

* :func:`decode_line` decodes a single record line, raising a typed
  :class:`ihexcodec.errors.DecodeError` on failure;

* :class:`Reader` lazily decodes a whole object file, line by line, yielding
  either records or decode errors.

A record line follows this syntax (big-endian fields)::

    ':' COUNT(2) ADDRESS(4) TAG(2) DATA(COUNT*2) CHECKSUM(2)
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator
from typing import Optional
from typing import Union

from .base import AnyBytes
from .checksum import checksum
from .errors import ChecksumMismatch
from .errors import ContainsInvalidCharacters
from .errors import DecodeError
from .errors import InvalidLengthForType
from .errors import MissingStartCode
from .errors import PayloadLengthMismatch
from .errors import RecordNotEvenLength
from .errors import RecordTooLong
from .errors import RecordTooShort
from .errors import UnsupportedRecordType
from .records import PAYLOAD_SIZE_MAX
from .records import DataRecord
from .records import EndOfFileRecord
from .records import ExtendedLinearAddressRecord
from .records import ExtendedSegmentAddressRecord
from .records import Record
from .records import RecordTag
from .records import StartLinearAddressRecord
from .records import StartSegmentAddressRecord

logger = logging.getLogger(__name__)

START_CODE: str = ':'
r"""Character starting each record line."""

SMALLEST_RECORD_CHAR_COUNT: int = 5 * 2
r"""Count, address, tag and checksum digits, excluding the start code."""

LARGEST_RECORD_CHAR_COUNT: int = SMALLEST_RECORD_CHAR_COUNT + (PAYLOAD_SIZE_MAX * 2)
r"""Smallest record digits, plus a 255 byte payload."""

HEX_CHARS: frozenset = frozenset('0123456789ABCDEFabcdef')
r"""Valid characters after the start code."""

EOL_REGEX = re.compile(r'\r\n|\r|\n')
r"""Line terminator regex: CR, LF, or CR+LF."""

ReadResult = Union[Record, DecodeError]


def _to_text(text: Union[str, AnyBytes]) -> str:

    if isinstance(text, (bytes, bytearray, memoryview)):
        # Any byte maps to some character; non-ASCII ones are then invalid
        text = bytes(text).decode('latin-1')
    return text


def decode_line(line: Union[str, AnyBytes]) -> Record:
    r"""Decodes a record line.

    The line is checked in the following order, raising the first error met:

    #. Start code (:class:`~ihexcodec.errors.MissingStartCode`).
    #. Hexadecimal digits only
       (:class:`~ihexcodec.errors.ContainsInvalidCharacters`).
    #. Whole number of bytes
       (:class:`~ihexcodec.errors.RecordNotEvenLength`).
    #. Between 5 and 260 bytes (:class:`~ihexcodec.errors.RecordTooShort`,
       :class:`~ihexcodec.errors.RecordTooLong`).
    #. Checksum (:class:`~ihexcodec.errors.ChecksumMismatch`).
    #. Payload size against the *count* field
       (:class:`~ihexcodec.errors.PayloadLengthMismatch`).
    #. Record type tag
       (:class:`~ihexcodec.errors.UnsupportedRecordType`).
    #. Payload size against the record type
       (:class:`~ihexcodec.errors.InvalidLengthForType`).

    Args:
        line (str):
            Record line, without line terminator.
            A byte string is accepted too, each byte being a character.

    Returns:
        :class:`ihexcodec.records.Record`: Decoded record.

    Raises:
        :class:`ihexcodec.errors.DecodeError`: Invalid record line.

    Examples:
        >>> decode_line(':0B0010006164647265737320676170A7')
        DataRecord(offset=16, value=b'address gap')
        >>> decode_line(':00000001FF')
        EndOfFileRecord()
        >>> decode_line(':0B0010006164647265737320676170FF')
        Traceback (most recent call last):
            ...
        ihexcodec.errors.ChecksumMismatch: Failed to parse IHEX record: The checksum for the record does not match (computed 0xA7, expected 0xFF).
    """

    line = _to_text(line)

    if not line.startswith(START_CODE):
        raise MissingStartCode()

    hexstr = line[len(START_CODE):]

    # Garbage must be reported before any length issues
    if not HEX_CHARS.issuperset(hexstr):
        raise ContainsInvalidCharacters()

    char_count = len(hexstr)
    if char_count % 2:
        raise RecordNotEvenLength()
    if char_count < SMALLEST_RECORD_CHAR_COUNT:
        raise RecordTooShort()
    if char_count > LARGEST_RECORD_CHAR_COUNT:
        raise RecordTooLong()

    data = bytes.fromhex(hexstr)

    expected = data[-1]
    computed = checksum(data[:-1])
    if computed != expected:
        raise ChecksumMismatch(computed, expected)

    count = data[0]
    address = (data[1] << 8) | data[2]
    tag_value = data[3]
    payload = data[4:-1]
    size = len(payload)

    if size != count:
        raise PayloadLengthMismatch()

    try:
        tag = RecordTag(tag_value)
    except ValueError:
        raise UnsupportedRecordType(tag_value) from None

    fixed_size = tag.payload_size()
    if fixed_size is not None and size != fixed_size:
        raise InvalidLengthForType()

    if tag == RecordTag.DATA:
        return DataRecord(address, payload)

    elif tag == RecordTag.END_OF_FILE:
        return EndOfFileRecord()

    elif tag == RecordTag.EXTENDED_SEGMENT_ADDRESS:
        extension = (payload[0] << 8) | payload[1]
        return ExtendedSegmentAddressRecord(extension)

    elif tag == RecordTag.START_SEGMENT_ADDRESS:
        cs = (payload[0] << 8) | payload[1]
        ip = (payload[2] << 8) | payload[3]
        return StartSegmentAddressRecord(cs, ip)

    elif tag == RecordTag.EXTENDED_LINEAR_ADDRESS:
        extension = (payload[0] << 8) | payload[1]
        return ExtendedLinearAddressRecord(extension)

    else:  # elif tag == RecordTag.START_LINEAR_ADDRESS:
        address = ((payload[0] << 24) |
                   (payload[1] << 16) |
                   (payload[2] << 8) |
                   payload[3])
        return StartLinearAddressRecord(address)


@dataclass(frozen=True)
class ReaderOptions:
    r"""Stop conditions of a :class:`Reader`.

    Attributes:
        stop_after_first_error (bool):
            Stops reading after the first line failing to decode.
            The error itself is still yielded.

        stop_after_eof (bool):
            Stops reading after the first *End Of File* record.
            The record itself is still yielded.
    """

    stop_after_first_error: bool = True
    stop_after_eof: bool = True


class Reader(Iterator[ReadResult]):
    r"""Object file reader.

    It iterates through the lines of some text, skipping empty lines, and
    decodes each line via :func:`decode_line`.
    Each item is either the decoded :class:`ihexcodec.records.Record`, or the
    :class:`ihexcodec.errors.DecodeError` describing the failure: malformed
    lines are reported as values, never raised.

    Lines can be terminated by any mix of CR, LF, and CR+LF.

    Once :attr:`finished`, the reader yields no more items, even if some text
    was not consumed yet.
    A new reader is required to scan the text again.

    Args:
        text (str):
            Object file text.
            A byte string is accepted too, each byte being a character.

        options (:class:`ReaderOptions`):
            Stop conditions.
            If ``None``, the default ones apply (stop after both the first
            error and the first *End Of File* record).

    Attributes:
        options (:class:`ReaderOptions`):
            Stop conditions.

        row (int):
            Line number (1-based) of the last yielded item; zero before the
            first one.

    Examples:
        >>> text = ':0B0010006164647265737320676170A7\r\n\n:00000001FF\r'
        >>> for item in Reader(text):
        ...     print(item)
        DataRecord(offset=16, value=b'address gap')
        EndOfFileRecord()
        >>> text = ':00000001FF\n:00000001FF\n'
        >>> list(Reader(text, ReaderOptions(stop_after_eof=False)))
        [EndOfFileRecord(), EndOfFileRecord()]
    """

    def __init__(
        self,
        text: Union[str, AnyBytes],
        options: Optional[ReaderOptions] = None,
    ):

        if options is None:
            options = ReaderOptions()

        self.options: ReaderOptions = options
        self.row: int = 0

        self._text: str = _to_text(text)
        self._position: int = 0
        self._scanned_rows: int = 0
        self._finished: bool = False

    def __iter__(self) -> 'Reader':

        return self

    def __next__(self) -> ReadResult:

        if self._finished:
            raise StopIteration

        line = self._next_line()
        if line is None:
            self._finished = True
            raise StopIteration

        try:
            record = decode_line(line)

        except DecodeError as error:
            logger.debug(f'line {self.row}: {error!r}')

            if self.options.stop_after_first_error:
                logger.debug(f'line {self.row}: stopping after first error')
                self._finished = True
            return error

        if record.tag.is_eof() and self.options.stop_after_eof:
            logger.debug(f'line {self.row}: stopping after end of file')
            self._finished = True
        return record

    def _next_line(self) -> Optional[str]:

        text = self._text
        size = len(text)

        while self._position < size:
            start = self._position
            match = EOL_REGEX.search(text, start)

            if match:
                line = text[start:match.start()]
                self._position = match.end()
            else:
                line = text[start:]
                self._position = size

            self._scanned_rows += 1
            if line:
                self.row = self._scanned_rows
                return line

        return None

    @property
    def finished(self) -> bool:
        r"""bool: No more items will be yielded."""

        return self._finished


def decode_stream(
    text: Union[str, AnyBytes],
    options: Optional[ReaderOptions] = None,
) -> Reader:
    r"""Decodes an object file lazily.

    Args:
        text (str):
            Object file text.

        options (:class:`ReaderOptions`):
            Stop conditions; defaults apply if ``None``.

    Returns:
        :class:`Reader`: Lazy iterator of records or decode errors.

    See Also:
        :class:`Reader`

    Examples:
        >>> list(decode_stream(':00000001FF\n:00000001FF\n'))
        [EndOfFileRecord()]
    """

    return Reader(text, options=options)
