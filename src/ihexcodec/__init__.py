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

__version__ = '0.1.0'

from .checksum import checksum
from .errors import AssembleError
from .errors import ChecksumMismatch
from .errors import ContainsInvalidCharacters
from .errors import DataExceedsMaximumLength
from .errors import DecodeError
from .errors import EncodeError
from .errors import IhexError
from .errors import InvalidLengthForType
from .errors import MissingEndOfFileRecord
from .errors import MissingStartCode
from .errors import MultipleEndOfFileRecords
from .errors import PayloadLengthMismatch
from .errors import RecordNotEvenLength
from .errors import RecordTooLong
from .errors import RecordTooShort
from .errors import UnsupportedRecordType
from .reader import Reader
from .reader import ReaderOptions
from .reader import decode_line
from .reader import decode_stream
from .records import DataRecord
from .records import EndOfFileRecord
from .records import ExtendedLinearAddressRecord
from .records import ExtendedSegmentAddressRecord
from .records import Record
from .records import RecordTag
from .records import StartLinearAddressRecord
from .records import StartSegmentAddressRecord
from .writer import assemble
from .writer import create_object_file_representation
from .writer import encode
