import pytest

from featherini import (
    DuplicateSection,
    IniDocument,
    IniSection,
    NoSectionSelected
)


def test_new_document_has_default_section():
    doc = IniDocument()
    assert list(doc) == ['']
    assert doc.current_name == ''
    assert len(doc.current) == 0


def test_create_selects_new_section():
    doc = IniDocument()
    sect = doc.create('A')
    assert isinstance(sect, IniSection)
    assert sect.name == 'A'
    assert doc.current_name == 'A'
    assert doc.current is sect


def test_create_duplicate_named_section():
    doc = IniDocument()
    doc.create('A')
    with pytest.raises(DuplicateSection) as exc:
        doc.create('A')
    assert exc.value.section == 'A'
    assert exc.value.lineno is None


def test_create_default_section_again_empties_it():
    doc = IniDocument()
    doc.assign('k', 'v')
    doc.create('')
    assert len(doc['']) == 0


def test_select():
    doc = IniDocument()
    assert doc.select('A') is False
    assert 'A' in doc
    assert doc.current_name == 'A'

    doc.select('')
    assert doc.select('A') is True
    assert doc.current_name == 'A'


def test_select_no_create():
    doc = IniDocument()
    assert doc.select('missing', no_create=True) is False
    assert 'missing' not in doc
    assert doc.current_name == ''


def test_remove_unsets_cursor():
    doc = IniDocument()
    doc.assign('k', 'v', 'A')
    doc.remove('A')
    assert 'A' not in doc
    assert doc.current_name is None
    with pytest.raises(NoSectionSelected):
        doc.lookup('k')
    with pytest.raises(LookupError):
        doc.assign('k', 'v')


def test_remove_missing_section_still_unsets_cursor():
    doc = IniDocument()
    doc.remove('nope')
    assert list(doc) == ['']
    assert doc.current_name is None


def test_lookup_default_when_missing():
    doc = IniDocument()
    doc.assign('k', 'v', 'A')
    assert doc.lookup('nope', 'fallback', 'A') == 'fallback'
    assert doc.lookup('k', section='A') == 'v'


def test_lookup_qualified_creates_section():
    doc = IniDocument()
    assert doc.lookup('k', 'x', 'B') == 'x'
    assert 'B' in doc
    assert doc.current_name == 'B'


def test_assign_keeps_one_entry_per_key():
    doc = IniDocument()
    for i in range(5):
        doc.assign('k', str(i), 'A')
    assert list(doc['A'].items()) == [('k', '4')]


def test_values_coerced_to_text():
    sect = IniSection('A')
    sect['n'] = 3
    sect['b'] = True
    assert sect['n'] == '3'
    assert sect['b'] == 'True'


def test_lexicographic_order():
    doc = IniDocument()
    doc.assign('z', '1', 'b')
    doc.assign('a', '2', 'b')
    doc.assign('m', '3', 'a')
    assert list(doc) == ['', 'a', 'b']
    assert list(doc['b']) == ['a', 'z']
    assert doc.to_dict() == {'': {}, 'a': {'m': '3'}, 'b': {'a': '2', 'z': '1'}}


def test_setitem_copies_mapping():
    doc = IniDocument()
    src = {'k': 'v'}
    doc['A'] = src
    src['k'] = 'changed'
    assert doc['A']['k'] == 'v'
    assert doc['A'].name == 'A'


def test_delitem_current_unsets_cursor():
    doc = IniDocument()
    doc.create('A')
    del doc['A']
    assert doc.current_name is None


def test_copy_is_independent():
    doc = IniDocument()
    doc.assign('k', 'v', 'A')
    dup = doc.copy()
    dup.assign('k', 'other', 'A')
    dup.assign('new', '1', 'B')
    assert doc['A']['k'] == 'v'
    assert 'B' not in doc
    assert dup.current_name == 'B'


def test_copy_after_clear():
    doc = IniDocument()
    doc.clear()
    dup = doc.copy()
    assert len(dup) == 0
    assert dup.current_name is None
