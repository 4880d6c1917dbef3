from typing import Any
from typing import Mapping
from typing import Type

import pytest

from ihexcodec.utils import hexlify
from ihexcodec.utils import parse_int
from ihexcodec.utils import unhexlify

PARSE_INT_PASS: Mapping[Any, int] = {
    None: None,
    '123': 123,
    ' 123 ': 123,
    '\t123\t': 123,
    '+123': 123,
    '-123': -123,
    ' +123 ': 123,
    ' -123 ': -123,
    ' + 123 ': 123,
    ' - 123 ': -123,
    '0xDEADBEEF': 0xDEADBEEF,
    '0XDEADBEEF': 0xDEADBEEF,
    'DEADBEEFh': 0xDEADBEEF,
    'DEADBEEFH': 0xDEADBEEF,
    '0b101100111000': 0b101100111000,
    '01234567': 0o1234567,
    '0o1234567': 0o1234567,
    '0O1234567': 0o1234567,
    b'456': 456,
    123: 123,
    135.7: 135,
}

PARSE_INT_FAIL: Mapping[Any, Type[BaseException]] = {
    Ellipsis: TypeError,
    'x': ValueError,
    '1k': ValueError,
    '0b1h': ValueError,
    '0o1h': ValueError,
    (1,): TypeError,
}


def test_hexlify_doctest():
    ans_out = hexlify(b'\xAA\xBB\xCC')
    ans_ref = 'AABBCC'
    assert ans_out == ans_ref

    ans_out = hexlify(b'\xAA\xBB\xCC', sep=' ')
    ans_ref = 'AA BB CC'
    assert ans_out == ans_ref

    ans_out = hexlify(b'\xAA\xBB\xCC', sep='-')
    ans_ref = 'AA-BB-CC'
    assert ans_out == ans_ref

    ans_out = hexlify(b'\xAA\xBB\xCC', upper=False)
    ans_ref = 'aabbcc'
    assert ans_out == ans_ref


def test_hexlify_empty():
    assert hexlify(b'') == ''
    assert hexlify(bytearray(), sep=' ') == ''


def test_hexlify_memoryview():
    assert hexlify(memoryview(b'\x01\x02')) == '0102'


def test_parse_int_doctest():
    assert parse_int('-0xAB') == -171
    assert parse_int('FFFFh') == 0xFFFF
    assert parse_int(None) is None
    assert parse_int(123) == 123


def test_parse_int_fail():
    for value_in, raised_exception in PARSE_INT_FAIL.items():
        with pytest.raises(raised_exception):
            parse_int(value_in)


def test_parse_int_pass():
    for value_in, value_out in PARSE_INT_PASS.items():
        assert parse_int(value_in) == value_out


def test_unhexlify_doctest():
    ans_out = unhexlify('AABBCC')
    ans_ref = b'\xaa\xbb\xcc'
    assert ans_out == ans_ref

    ans_out = unhexlify('AA BB CC', delete=...)
    ans_ref = b'\xaa\xbb\xcc'
    assert ans_out == ans_ref

    ans_out = unhexlify('AA-BB-CC', delete=...)
    ans_ref = b'\xaa\xbb\xcc'
    assert ans_out == ans_ref

    ans_out = unhexlify('AA/BB/CC', delete='/')
    ans_ref = b'\xaa\xbb\xcc'
    assert ans_out == ans_ref


def test_unhexlify_lowercase():
    assert unhexlify('aabbcc') == b'\xaa\xbb\xcc'


def test_unhexlify_raises():
    hexstrs = [
        'A',
        'ABC',
        'GG',
        'AA BB',
        'ÀÁ',
    ]
    for hexstr in hexstrs:
        with pytest.raises(ValueError, match='invalid hexadecimal string'):
            unhexlify(hexstr)
