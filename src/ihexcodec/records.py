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

r"""Intel HEX record model.

The Intel HEX format knows six record types, each modeled by its own class:

========  ======================================  ===============
Tag       Record class                            Payload size
========  ======================================  ===============
``00``    :class:`DataRecord`                     0 to 255 bytes
``01``    :class:`EndOfFileRecord`                0 bytes
``02``    :class:`ExtendedSegmentAddressRecord`   2 bytes
``03``    :class:`StartSegmentAddressRecord`      4 bytes
``04``    :class:`ExtendedLinearAddressRecord`    2 bytes
``05``    :class:`StartLinearAddressRecord`       4 bytes
========  ======================================  ===============

Records are immutable values: they compare equal when they are of the same
type and carry the same fields.

See Also:
    `<https://en.wikipedia.org/wiki/Intel_HEX>`_
"""

import enum
import operator
from typing import Any
from typing import Mapping
from typing import Optional
from typing import Sequence
from typing import Tuple

from deprecated import deprecated

from .base import AnyBytes

PAYLOAD_SIZE_MAX: int = 0xFF
r"""Maximum payload size, as the *count* field is a single byte."""


class RecordTag(enum.IntEnum):
    r"""Intel HEX record type tag."""

    DATA = 0
    r"""Binary data."""

    END_OF_FILE = 1
    r"""End Of File."""

    EXTENDED_SEGMENT_ADDRESS = 2
    r"""Extended Segment Address."""

    START_SEGMENT_ADDRESS = 3
    r"""Start Segment Address."""

    EXTENDED_LINEAR_ADDRESS = 4
    r"""Extended Linear Address."""

    START_LINEAR_ADDRESS = 5
    r"""Start Linear Address."""

    def is_data(self) -> bool:

        return self == self.DATA

    def is_eof(self) -> bool:
        r"""Tells whether this is an End Of File record tag.

        Returns:
            bool: This is an End Of File record tag.

        Examples:
            >>> RecordTag.END_OF_FILE.is_eof()
            True
            >>> RecordTag.DATA.is_eof()
            False
        """

        return self == self.END_OF_FILE

    def is_extension(self) -> bool:
        r"""Tells whether this is an Extended Address record tag.

        Returns:
            bool: This is an Extended Address record tag.

        Examples:
            >>> RecordTag.EXTENDED_LINEAR_ADDRESS.is_extension()
            True
            >>> RecordTag.EXTENDED_SEGMENT_ADDRESS.is_extension()
            True
            >>> RecordTag.DATA.is_extension()
            False
        """

        return ((self == self.EXTENDED_SEGMENT_ADDRESS) or
                (self == self.EXTENDED_LINEAR_ADDRESS))

    def is_file_termination(self) -> bool:

        return self.is_eof()

    def is_start(self) -> bool:
        r"""Tells whether this is a Start Address record tag.

        Returns:
            bool: This is a Start Address record tag.

        Examples:
            >>> RecordTag.START_LINEAR_ADDRESS.is_start()
            True
            >>> RecordTag.START_SEGMENT_ADDRESS.is_start()
            True
            >>> RecordTag.DATA.is_start()
            False
        """

        return ((self == self.START_SEGMENT_ADDRESS) or
                (self == self.START_LINEAR_ADDRESS))

    def payload_size(self) -> Optional[int]:
        r"""Fixed payload size.

        Returns:
            int: Payload size required by the record type, ``None`` for
            *data* records, which have a variable payload size.

        Examples:
            >>> RecordTag.START_LINEAR_ADDRESS.payload_size()
            4
            >>> RecordTag.DATA.payload_size() is None
            True
        """

        if self.is_data():
            return None
        elif self.is_eof():
            return 0
        elif self.is_extension():
            return 2
        else:
            return 4


def _check_uint(name: str, value: int, bits: int) -> int:

    value = operator.index(value)
    if not 0 <= value < (1 << bits):
        raise ValueError(f'{name} overflow')
    return value


class Record:
    r"""Intel HEX record.

    Base class of the six record types.
    It is not meant to be instantiated directly.

    Attributes:
        TAG (:class:`RecordTag`):
            Record type tag, per record class.

        FIELDS (str list):
            Names of the record fields, in constructor order.
    """

    TAG: RecordTag = None  # override

    FIELDS: Sequence[str] = ()

    __slots__ = ()

    def __delattr__(self, key: str) -> None:

        raise AttributeError('immutable record')

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, Record):
            return NotImplemented
        return type(self) is type(other) and self._values() == other._values()

    def __hash__(self) -> int:

        return hash((type(self), self._values()))

    def __ne__(self, other: Any) -> bool:

        if not isinstance(other, Record):
            return NotImplemented
        return not self == other

    def __reduce__(self) -> Tuple[Any, Tuple[Any, ...]]:

        return type(self), self._values()

    def __repr__(self) -> str:

        fields = ', '.join(f'{key}={value!r}' for key, value in self.get_meta().items())
        return f'{type(self).__name__}({fields})'

    def __setattr__(self, key: str, value: Any) -> None:

        raise AttributeError('immutable record')

    def _init_field(self, key: str, value: Any) -> None:

        object.__setattr__(self, key, value)

    def _values(self) -> Tuple[Any, ...]:

        return tuple(getattr(self, key) for key in self.FIELDS)

    def address_field(self) -> int:
        r"""Value of the 16-bit *address* field.

        Only *data* records carry a meaningful address (their *offset*);
        all the other records serialize a zero address.

        Returns:
            int: Address field value.
        """

        return 0

    @classmethod
    @deprecated(reason='Use parse() instead')
    def from_record_string(cls, line: str) -> 'Record':

        return cls.parse(line)

    def get_meta(self) -> Mapping[str, Any]:
        r"""Record fields.

        Returns:
            dict: Field names mapped to their values, in constructor order.

        Examples:
            >>> StartSegmentAddressRecord(0x1234, 0x3800).get_meta()
            {'cs': 4660, 'ip': 14336}
        """

        return {key: getattr(self, key) for key in self.FIELDS}

    @classmethod
    def parse(cls, line: str) -> 'Record':
        r"""Parses a record line.

        Shortcut to :func:`ihexcodec.reader.decode_line`.
        The returned object is of the record class matching the line, which
        is not necessarily `cls`.

        Args:
            line (str):
                Record line, without line terminator.

        Returns:
            :class:`Record`: Decoded record.

        Raises:
            :class:`ihexcodec.errors.DecodeError`: Invalid record line.

        Examples:
            >>> Record.parse(':00000001FF')
            EndOfFileRecord()
        """

        from .reader import decode_line
        return decode_line(line)

    def payload(self) -> bytes:
        r"""Serialized payload.

        Multi-byte fields are serialized as big-endian.

        Returns:
            bytes: Payload bytes.
        """

        return b''

    def record_type(self) -> int:
        r"""Record type tag value.

        Returns:
            int: Record type tag, as serialized.

        Examples:
            >>> ExtendedLinearAddressRecord(0).record_type()
            4
        """

        return int(self.TAG)

    @property
    def tag(self) -> RecordTag:
        r""":class:`RecordTag`: Record type tag."""

        return self.TAG

    def to_line(self) -> str:
        r"""Encodes the record line.

        Shortcut to :func:`ihexcodec.writer.encode`.

        Returns:
            str: Record line, without line terminator.

        Raises:
            :class:`ihexcodec.errors.EncodeError`: Invalid record content.

        Examples:
            >>> DataRecord(0x0010, b'address gap').to_line()
            ':0B0010006164647265737320676170A7'
        """

        from .writer import encode
        return encode(self)

    @deprecated(reason='Use to_line() instead')
    def to_record_string(self) -> str:

        return self.to_line()


class DataRecord(Record):
    r"""Data record.

    It carries up to 255 bytes of data, to be placed at some 16-bit offset
    within the current addressing window.

    The data size is not checked upon construction, but by the encoder.

    Args:
        offset (int):
            16-bit load offset.

        value (bytes):
            Data bytes.

    Examples:
        >>> record = DataRecord(0x1234, b'abc')
        >>> record.payload()
        b'abc'
        >>> hex(record.address_field())
        '0x1234'
    """

    TAG = RecordTag.DATA
    FIELDS = ('offset', 'value')
    __slots__ = FIELDS

    def __init__(self, offset: int, value: AnyBytes = b''):

        self._init_field('offset', _check_uint('offset', offset, 16))
        self._init_field('value', bytes(value))

    def address_field(self) -> int:

        return self.offset

    def payload(self) -> bytes:

        return self.value


class EndOfFileRecord(Record):
    r"""End Of File record.

    It marks the end of an object file, and has no payload.
    It must occur exactly once per file, as the very last record.
    """

    TAG = RecordTag.END_OF_FILE
    __slots__ = ()


class ExtendedSegmentAddressRecord(Record):
    r"""Extended Segment Address record.

    It specifies bits 4 to 19 of the segment base address, allowing to
    address up to 1 MiB.

    Args:
        extension (int):
            16-bit segment base value.

    Examples:
        >>> ExtendedSegmentAddressRecord(0x1200).payload()
        b'\x12\x00'
    """

    TAG = RecordTag.EXTENDED_SEGMENT_ADDRESS
    FIELDS = ('extension',)
    __slots__ = FIELDS

    def __init__(self, extension: int):

        self._init_field('extension', _check_uint('extension', extension, 16))

    def payload(self) -> bytes:

        extension = self.extension
        return bytes(((extension >> 8) & 0xFF,
                      extension & 0xFF))


class StartSegmentAddressRecord(Record):
    r"""Start Segment Address record.

    It specifies the execution start address as the ``CS:IP`` register pair.

    Args:
        cs (int):
            16-bit value of the ``CS`` register.

        ip (int):
            16-bit value of the ``IP`` register.

    Examples:
        >>> StartSegmentAddressRecord(0x1234, 0x3800).payload()
        b'\x1248\x00'
    """

    TAG = RecordTag.START_SEGMENT_ADDRESS
    FIELDS = ('cs', 'ip')
    __slots__ = FIELDS

    def __init__(self, cs: int, ip: int):

        self._init_field('cs', _check_uint('cs', cs, 16))
        self._init_field('ip', _check_uint('ip', ip, 16))

    def payload(self) -> bytes:

        cs = self.cs
        ip = self.ip
        return bytes(((cs >> 8) & 0xFF,
                      cs & 0xFF,
                      (ip >> 8) & 0xFF,
                      ip & 0xFF))


class ExtendedLinearAddressRecord(Record):
    r"""Extended Linear Address record.

    It specifies the upper 16 bits of a 32-bit linear address; the lower 16
    bits come from the *offset* of the following data records.

    Args:
        extension (int):
            Upper 16 bits of the linear address.

    Examples:
        >>> ExtendedLinearAddressRecord(0xABCD).payload()
        b'\xab\xcd'
    """

    TAG = RecordTag.EXTENDED_LINEAR_ADDRESS
    FIELDS = ('extension',)
    __slots__ = FIELDS

    def __init__(self, extension: int):

        self._init_field('extension', _check_uint('extension', extension, 16))

    def payload(self) -> bytes:

        extension = self.extension
        return bytes(((extension >> 8) & 0xFF,
                      extension & 0xFF))


class StartLinearAddressRecord(Record):
    r"""Start Linear Address record.

    It specifies the 32-bit execution start address (``EIP`` register).

    Args:
        address (int):
            32-bit start address.

    Examples:
        >>> StartLinearAddressRecord(0x12345678).payload()
        b'\x124Vx'
    """

    TAG = RecordTag.START_LINEAR_ADDRESS
    FIELDS = ('address',)
    __slots__ = FIELDS

    def __init__(self, address: int):

        self._init_field('address', _check_uint('address', address, 32))

    def payload(self) -> bytes:

        address = self.address
        return bytes(((address >> 24) & 0xFF,
                      (address >> 16) & 0xFF,
                      (address >> 8) & 0xFF,
                      address & 0xFF))


RECORD_TYPES: Mapping[RecordTag, type] = {
    RecordTag.DATA: DataRecord,
    RecordTag.END_OF_FILE: EndOfFileRecord,
    RecordTag.EXTENDED_SEGMENT_ADDRESS: ExtendedSegmentAddressRecord,
    RecordTag.START_SEGMENT_ADDRESS: StartSegmentAddressRecord,
    RecordTag.EXTENDED_LINEAR_ADDRESS: ExtendedLinearAddressRecord,
    RecordTag.START_LINEAR_ADDRESS: StartLinearAddressRecord,
}
r"""Record class by record type tag."""
