import pytest

from ihexcodec.checksum import checksum


def test_checksum_empty():
    assert checksum(b'') == 0x00
    assert checksum([]) == 0x00


def test_checksum_eof_record():
    assert checksum(b'\x00\x00\x00\x01') == 0xFF


def test_checksum_ela_record():
    assert checksum([0x02, 0x00, 0x00, 0x04, 0xFF, 0xFF]) == 0xFC


def test_checksum_sla_record():
    assert checksum(bytearray([0x04, 0x00, 0x00, 0x05, 0x00, 0x00, 0x00, 0xCD])) == 0x2A


# https://en.wikipedia.org/wiki/Intel_HEX#Checksum_calculation
def test_checksum_wikipedia():
    assert checksum(bytes.fromhex('0300300002337A')) == 0x1E


def test_checksum_memoryview():
    assert checksum(memoryview(b'\x01')) == 0xFF


def test_checksum_wraparound():
    assert checksum(b'\xFF' * 256) == 0x00
    assert checksum(b'\x80\x80') == 0x00
    assert checksum(b'\x80\x81') == 0xFF


@pytest.mark.parametrize('size', [0, 1, 2, 3, 4, 5, 16, 255, 256, 257, 1000])
def test_checksum_zero_sum(size):
    data = bytes((i * 7 + 3) & 0xFF for i in range(size))
    value = checksum(data)
    assert 0x00 <= value <= 0xFF
    assert (sum(data) + value) & 0xFF == 0
    assert checksum(data + bytes([value])) == 0x00
