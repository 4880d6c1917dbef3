import copy
import pickle

import pytest

from ihexcodec.records import RECORD_TYPES
from ihexcodec.records import DataRecord
from ihexcodec.records import EndOfFileRecord
from ihexcodec.records import ExtendedLinearAddressRecord
from ihexcodec.records import ExtendedSegmentAddressRecord
from ihexcodec.records import Record
from ihexcodec.records import RecordTag
from ihexcodec.records import StartLinearAddressRecord
from ihexcodec.records import StartSegmentAddressRecord

DATA = RecordTag.DATA
EOF = RecordTag.END_OF_FILE
ESA = RecordTag.EXTENDED_SEGMENT_ADDRESS
SSA = RecordTag.START_SEGMENT_ADDRESS
ELA = RecordTag.EXTENDED_LINEAR_ADDRESS
SLA = RecordTag.START_LINEAR_ADDRESS

ADDRESS_GAP = bytes([0x61, 0x64, 0x64, 0x72, 0x65, 0x73, 0x73, 0x20, 0x67, 0x61, 0x70])


def make_records():
    return [
        DataRecord(0x0010, ADDRESS_GAP),
        EndOfFileRecord(),
        ExtendedSegmentAddressRecord(0x1200),
        StartSegmentAddressRecord(0x0000, 0x3800),
        ExtendedLinearAddressRecord(0xFFFF),
        StartLinearAddressRecord(0x000000CD),
    ]


class TestRecordTag:

    def test_enum(self):
        assert RecordTag.DATA == 0
        assert RecordTag.END_OF_FILE == 1
        assert RecordTag.EXTENDED_SEGMENT_ADDRESS == 2
        assert RecordTag.START_SEGMENT_ADDRESS == 3
        assert RecordTag.EXTENDED_LINEAR_ADDRESS == 4
        assert RecordTag.START_LINEAR_ADDRESS == 5
        assert len(RecordTag) == 6

    def test_is_data(self):
        assert DATA.is_data() is True
        assert EOF.is_data() is False
        assert ESA.is_data() is False
        assert SSA.is_data() is False
        assert ELA.is_data() is False
        assert SLA.is_data() is False

    def test_is_eof(self):
        assert DATA.is_eof() is False
        assert EOF.is_eof() is True
        assert ESA.is_eof() is False
        assert SSA.is_eof() is False
        assert ELA.is_eof() is False
        assert SLA.is_eof() is False

    def test_is_extension(self):
        assert DATA.is_extension() is False
        assert EOF.is_extension() is False
        assert ESA.is_extension() is True
        assert SSA.is_extension() is False
        assert ELA.is_extension() is True
        assert SLA.is_extension() is False

    def test_is_file_termination(self):
        assert DATA.is_file_termination() is False
        assert EOF.is_file_termination() is True
        assert ESA.is_file_termination() is False
        assert SSA.is_file_termination() is False
        assert ELA.is_file_termination() is False
        assert SLA.is_file_termination() is False

    def test_is_start(self):
        assert DATA.is_start() is False
        assert EOF.is_start() is False
        assert ESA.is_start() is False
        assert SSA.is_start() is True
        assert ELA.is_start() is False
        assert SLA.is_start() is True

    def test_payload_size(self):
        assert DATA.payload_size() is None
        assert EOF.payload_size() == 0
        assert ESA.payload_size() == 2
        assert SSA.payload_size() == 4
        assert ELA.payload_size() == 2
        assert SLA.payload_size() == 4


class TestRecord:

    def test___delattr__(self):
        record = DataRecord(0x1234, b'abc')
        with pytest.raises(AttributeError, match='immutable record'):
            del record.offset

    def test___eq__(self):
        records1 = make_records()
        records2 = make_records()
        for record1, record2 in zip(records1, records2):
            assert record1 is not record2
            assert record1 == record2

    def test___eq___variant(self):
        assert ExtendedSegmentAddressRecord(0x1234) != ExtendedLinearAddressRecord(0x1234)
        assert DataRecord(0, b'') != EndOfFileRecord()
        assert (DataRecord(0, b'') == (0, b'')) is False

    def test___hash__(self):
        records = make_records()
        assert len(set(records + make_records())) == len(records)
        assert hash(DataRecord(1, b'x')) == hash(DataRecord(1, bytearray(b'x')))

    def test___ne__(self):
        assert DataRecord(0x1234, b'abc') != DataRecord(0x1235, b'abc')
        assert DataRecord(0x1234, b'abc') != DataRecord(0x1234, b'abd')
        assert StartSegmentAddressRecord(1, 2) != StartSegmentAddressRecord(2, 1)
        assert StartLinearAddressRecord(1) != StartLinearAddressRecord(2)
        assert (EndOfFileRecord() != EndOfFileRecord()) is False

    def test___repr__(self):
        assert repr(DataRecord(0x10, b'abc')) == "DataRecord(offset=16, value=b'abc')"
        assert repr(EndOfFileRecord()) == 'EndOfFileRecord()'
        assert repr(ExtendedSegmentAddressRecord(1)) == 'ExtendedSegmentAddressRecord(extension=1)'
        assert repr(StartSegmentAddressRecord(1, 2)) == 'StartSegmentAddressRecord(cs=1, ip=2)'
        assert repr(ExtendedLinearAddressRecord(3)) == 'ExtendedLinearAddressRecord(extension=3)'
        assert repr(StartLinearAddressRecord(4)) == 'StartLinearAddressRecord(address=4)'

    def test___setattr__(self):
        for record in make_records():
            with pytest.raises(AttributeError, match='immutable record'):
                record.offset = 0
        record = DataRecord(0x1234, b'abc')
        with pytest.raises(AttributeError, match='immutable record'):
            record.value = b'xyz'
        assert record.value == b'abc'

    def test_address_field(self):
        assert DataRecord(0x1234, b'abc').address_field() == 0x1234
        for record in make_records()[1:]:
            assert record.address_field() == 0

    def test_copy(self):
        for record in make_records():
            assert copy.copy(record) == record
            assert copy.deepcopy(record) == record

    def test_from_record_string(self):
        with pytest.deprecated_call():
            record = Record.from_record_string(':00000001FF')
        assert record == EndOfFileRecord()

    def test_get_meta(self):
        assert DataRecord(0x10, b'abc').get_meta() == {'offset': 0x10, 'value': b'abc'}
        assert EndOfFileRecord().get_meta() == {}
        assert StartSegmentAddressRecord(1, 2).get_meta() == {'cs': 1, 'ip': 2}

    def test_parse(self):
        assert Record.parse(':0200000212FEEC') == ExtendedSegmentAddressRecord(0x12FE)
        assert DataRecord.parse(':00000001FF') == EndOfFileRecord()

    def test_payload(self):
        payloads = [
            ADDRESS_GAP,
            b'',
            b'\x12\x00',
            b'\x00\x00\x38\x00',
            b'\xFF\xFF',
            b'\x00\x00\x00\xCD',
        ]
        for record, expected in zip(make_records(), payloads):
            assert record.payload() == expected

    def test_payload_big_endian(self):
        assert StartSegmentAddressRecord(0x1234, 0x5678).payload() == b'\x12\x34\x56\x78'
        assert StartLinearAddressRecord(0x12345678).payload() == b'\x12\x34\x56\x78'
        assert ExtendedSegmentAddressRecord(0xABCD).payload() == b'\xAB\xCD'
        assert ExtendedLinearAddressRecord(0x00FF).payload() == b'\x00\xFF'

    def test_pickle(self):
        for record in make_records():
            assert pickle.loads(pickle.dumps(record)) == record

    def test_record_type(self):
        assert DataRecord(0, b'').record_type() == 0x00
        assert EndOfFileRecord().record_type() == 0x01
        assert ExtendedSegmentAddressRecord(0).record_type() == 0x02
        assert StartSegmentAddressRecord(0, 0).record_type() == 0x03
        assert ExtendedLinearAddressRecord(0).record_type() == 0x04
        assert StartLinearAddressRecord(0).record_type() == 0x05

    def test_record_types(self):
        for tag, record_type in RECORD_TYPES.items():
            assert record_type.TAG is tag
        assert set(RECORD_TYPES) == set(RecordTag)

    def test_tag(self):
        tags = [DATA, EOF, ESA, SSA, ELA, SLA]
        for record, tag in zip(make_records(), tags):
            assert record.tag is tag

    def test_to_line(self):
        assert DataRecord(0x0010, ADDRESS_GAP).to_line() == ':0B0010006164647265737320676170A7'

    def test_to_record_string(self):
        with pytest.deprecated_call():
            line = EndOfFileRecord().to_record_string()
        assert line == ':00000001FF'


class TestDataRecord:

    def test___init__(self):
        record = DataRecord(0x1234, b'abc')
        assert record.offset == 0x1234
        assert record.value == b'abc'

    def test___init___default(self):
        record = DataRecord(0xFFFE)
        assert record.offset == 0xFFFE
        assert record.value == b''

    def test___init___sequences(self):
        assert DataRecord(0, bytearray(b'abc')).value == b'abc'
        assert DataRecord(0, memoryview(b'abc')).value == b'abc'
        assert DataRecord(0, [0x61, 0x62, 0x63]).value == b'abc'
        assert type(DataRecord(0, bytearray(b'abc')).value) is bytes

    def test___init___oversized(self):
        record = DataRecord(0, bytes(256))
        assert len(record.value) == 256

    def test___init___raises(self):
        with pytest.raises(ValueError, match='offset overflow'):
            DataRecord(-1, b'')
        with pytest.raises(ValueError, match='offset overflow'):
            DataRecord(0x10000, b'')
        with pytest.raises(TypeError):
            DataRecord(1.5, b'')


class TestAddressRecords:

    def test___init__(self):
        assert ExtendedSegmentAddressRecord(0xFFFF).extension == 0xFFFF
        assert ExtendedLinearAddressRecord(0xFFFF).extension == 0xFFFF
        record = StartSegmentAddressRecord(0xFFFF, 0x0001)
        assert record.cs == 0xFFFF
        assert record.ip == 0x0001
        assert StartLinearAddressRecord(0xFFFFFFFF).address == 0xFFFFFFFF

    def test___init___raises(self):
        with pytest.raises(ValueError, match='extension overflow'):
            ExtendedSegmentAddressRecord(0x10000)
        with pytest.raises(ValueError, match='extension overflow'):
            ExtendedLinearAddressRecord(-1)
        with pytest.raises(ValueError, match='cs overflow'):
            StartSegmentAddressRecord(0x10000, 0)
        with pytest.raises(ValueError, match='ip overflow'):
            StartSegmentAddressRecord(0, 0x10000)
        with pytest.raises(ValueError, match='address overflow'):
            StartLinearAddressRecord(0x100000000)
        with pytest.raises(TypeError):
            EndOfFileRecord(0)
