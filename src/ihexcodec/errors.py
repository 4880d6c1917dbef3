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

r"""Typed codec errors.

Every failure of the codec is reported as an instance of some
:class:`IhexError` child class.
They are regular exceptions, raised by :func:`ihexcodec.reader.decode_line`,
:func:`ihexcodec.writer.encode` and :func:`ihexcodec.writer.assemble`, but
they also behave as plain values: :class:`ihexcodec.reader.Reader` yields
them as items, and two errors compare equal when they share class and
arguments.

Examples:
    >>> from ihexcodec.errors import ChecksumMismatch
    >>> error = ChecksumMismatch(0xA7, 0xFF)
    >>> error == ChecksumMismatch(0xA7, 0xFF)
    True
    >>> error.computed, error.expected
    (167, 255)
    >>> str(error)
    'Failed to parse IHEX record: The checksum for the record does not match (computed 0xA7, expected 0xFF).'
"""

from typing import Any
from typing import Sequence


class IhexError(ValueError):
    r"""Intel HEX codec error."""

    FIELDS: Sequence[str] = ()
    r"""Names of the positional arguments, exposed as attributes."""

    PREFIX: str = ''
    r"""Message prefix, shared by a family of errors."""

    DESCRIPTION: str = 'Intel HEX codec error'
    r"""Message template, formatted with :attr:`FIELDS`."""

    def __init__(self, *values: Any):

        fields = self.FIELDS
        if len(values) != len(fields):
            raise TypeError(f'{type(self).__name__} takes {len(fields)} '
                            f'argument(s), {len(values)} given')

        super().__init__(*values)

        for key, value in zip(fields, values):
            setattr(self, key, value)

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, IhexError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __ne__(self, other: Any) -> bool:

        if not isinstance(other, IhexError):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:

        return hash((type(self), self.args))

    def __repr__(self) -> str:

        args = ', '.join(repr(value) for value in self.args)
        return f'{type(self).__name__}({args})'

    def __str__(self) -> str:

        meta = dict(zip(self.FIELDS, self.args))
        return f'{self.PREFIX}{self.DESCRIPTION.format(**meta)}.'


# ----------------------------------------------------------------------------

class DecodeError(IhexError):
    r"""A record line cannot be decoded."""

    PREFIX = 'Failed to parse IHEX record: '
    DESCRIPTION = 'Invalid record'


class MissingStartCode(DecodeError):
    r"""The record line does not begin with ``:``."""

    DESCRIPTION = "Record does not begin with a Start Code (':')"


class ContainsInvalidCharacters(DecodeError):
    r"""The record line is not made of hexadecimal digits only."""

    DESCRIPTION = 'Record contains invalid characters'


class RecordNotEvenLength(DecodeError):
    r"""The record line does not contain a whole number of bytes."""

    DESCRIPTION = 'Record does not contain a whole number of bytes'


class RecordTooShort(DecodeError):
    r"""The record line is shorter than the smallest valid record."""

    DESCRIPTION = 'Record string is shorter than the smallest valid record'


class RecordTooLong(DecodeError):
    r"""The record line exceeds the largest valid record (255 data bytes)."""

    DESCRIPTION = 'Record string is longer than the longest valid record'


class ChecksumMismatch(DecodeError):
    r"""The transmitted checksum does not match the computed one.

    Args:
        computed (int):
            Checksum computed over the record bytes.

        expected (int):
            Checksum byte transmitted by the record line.
    """

    FIELDS = ('computed', 'expected')
    DESCRIPTION = ('The checksum for the record does not match '
                   '(computed 0x{computed:02X}, expected 0x{expected:02X})')


class PayloadLengthMismatch(DecodeError):
    r"""The payload size does not match the *count* field."""

    DESCRIPTION = 'The length of the payload does not match the length field'


class UnsupportedRecordType(DecodeError):
    r"""The record type tag is not among the standard ones.

    Args:
        tag (int):
            Unsupported record type tag.
    """

    FIELDS = ('tag',)
    DESCRIPTION = 'The record specifies an unsupported IHEX record type (0x{tag:02X})'


class InvalidLengthForType(DecodeError):
    r"""The payload size is invalid for the record type."""

    DESCRIPTION = 'The payload length is invalid for the IHEX record type'


# ----------------------------------------------------------------------------

class EncodeError(IhexError):
    r"""A record cannot be encoded."""

    PREFIX = 'Failed to generate IHEX record: '
    DESCRIPTION = 'Invalid record'


class DataExceedsMaximumLength(EncodeError):
    r"""The record payload is longer than 255 bytes.

    Args:
        length (int):
            Actual payload length.
    """

    FIELDS = ('length',)
    DESCRIPTION = 'Record contains data too large to represent ({length} bytes)'


# ----------------------------------------------------------------------------

class AssembleError(IhexError):
    r"""A record sequence is not a valid object file."""

    PREFIX = 'Failed to generate IHEX object file: '
    DESCRIPTION = 'Invalid record sequence'


class MissingEndOfFileRecord(AssembleError):
    r"""The record sequence does not end with an *End Of File* record."""

    DESCRIPTION = 'Object does not end in an End Of File record'


class MultipleEndOfFileRecords(AssembleError):
    r"""The record sequence holds more than one *End Of File* record.

    Args:
        count (int):
            Number of *End Of File* records found.
    """

    FIELDS = ('count',)
    DESCRIPTION = 'Object contains multiple End Of File records ({count})'
