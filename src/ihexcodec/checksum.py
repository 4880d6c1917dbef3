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

r"""Intel HEX record checksum."""

from .base import ByteValues


def checksum(data: ByteValues) -> int:
    r"""Computes the Intel HEX checksum of some bytes.

    All the byte values are summed with 8-bit wraparound, then the two's
    complement of the sum is returned.

    A record is consistent when its checksum field equals the checksum of all
    the bytes from the *count* field up to the last *data* byte.

    Args:
        data (bytes):
            Byte values to checksum.

    Returns:
        int: Checksum byte value, within ``0x00`` and ``0xFF``.

    Examples:
        >>> checksum(b'')
        0
        >>> checksum(b'\x00\x00\x00\x01')
        255
        >>> hex(checksum(b'\x02\x00\x00\x04\xFF\xFF'))
        '0xfc'
    """

    total = 0
    for value in data:
        total = (total + value) & 0xFF
    return (0x100 - total) & 0xFF
