import logging
from datetime import date
from decimal import Decimal

import pytest

from featherini import ConversionError, convert_to, l_trim, r_trim, trim


def test_trim_default_chars():
    assert trim('\t; key = val ;\v\f') == 'key = val'
    assert l_trim('  a ; ') == 'a ; '
    assert r_trim('  a ; ') == '  a'


def test_trim_empty_and_all_trimmed():
    assert trim('') == ''
    assert trim(' ;; \t') == ''


def test_trim_keeps_line_breaks():
    assert trim(' a\n') == 'a\n'


def test_trim_custom_chars():
    assert trim('[ my section ]', '[] ') == 'my section'
    assert trim('[[x]]', '[] ') == 'x'


def test_convert_to_str_is_identity():
    assert convert_to('  raw text ;') == '  raw text ;'
    assert convert_to('abc', str) == 'abc'


def test_convert_to_numbers():
    assert convert_to('42', int) == 42
    assert convert_to(' 3.5 ', float) == 3.5
    assert convert_to('1.10', Decimal) == Decimal('1.10')


@pytest.mark.parametrize('text, expected', [
    ('1', True), ('yes', True), ('True', True), ('t', True),
    ('0', False), ('no', False), ('false', False), ('', False),
])
def test_convert_to_bool(text, expected):
    assert convert_to(text, bool) is expected


def test_convert_to_malformed_gives_zero(caplog):
    with caplog.at_level(logging.WARNING, logger='featherini.util'):
        assert convert_to('12abc', int) == 0
        assert convert_to('n/a', float) == 0.0
        assert convert_to('oops', Decimal) == Decimal(0)
    assert 'Cannot convert "12abc" to int' in caplog.text


def test_convert_to_malformed_strict():
    with pytest.raises(ConversionError) as exc:
        convert_to('12abc', int, strict=True)
    assert isinstance(exc.value, ValueError)
    assert exc.value.text == '12abc'
    assert exc.value.target is int
    assert isinstance(exc.value.__cause__, ValueError)


def test_convert_to_malformed_without_zero_value():
    assert convert_to('2024-01-31', date.fromisoformat) == date(2024, 1, 31)
    assert convert_to('not-a-date', date.fromisoformat) is None
    # `date()` needs arguments as well.
    assert convert_to('2024-01-31', date) is None
