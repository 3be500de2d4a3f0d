import pytest

from featherini import IniDocument, IniError, IniJsonParser, IniYamlParser


@pytest.fixture
def doc():
    ret = IniDocument()
    ret.assign('top', 'level')
    ret.assign('name', 'Café', 'Menu')
    ret.assign('empty', '', 'Menu')
    ret.create('Blank')
    return ret


@pytest.mark.parametrize('handler', [IniJsonParser, IniYamlParser])
def test_write_then_read(tmp_path, doc, handler):
    path = tmp_path / 'doc.out'
    handler(path).write(doc)
    assert handler(path).read().to_dict() == doc.to_dict()


def test_json_layout(tmp_path, doc):
    path = tmp_path / 'doc.json'
    IniJsonParser(path).write(doc, indent=None)
    assert path.read_text(encoding='utf-8') == (
        '{"": {"top": "level"}, "Blank": {}, '
        '"Menu": {"empty": "", "name": "Café"}}')


def test_yaml_scalars_become_text(tmp_path):
    path = tmp_path / 'doc.yaml'
    path.write_text(
        'server:\n'
        '  port: 8080\n'
        '  debug: true\n'
        '  note:\n'
        'other:\n',
        encoding='utf-8')
    doc = IniYamlParser(path).read()
    assert doc.to_dict() == {
        '': {},
        'other': {},
        'server': {'debug': 'True', 'note': '', 'port': '8080'},
    }


@pytest.mark.parametrize('content', ['[1, 2]', '{"a": [1]}'])
def test_json_rejects_other_shapes(tmp_path, content):
    path = tmp_path / 'bad.json'
    path.write_text(content, encoding='utf-8')
    with pytest.raises(IniError):
        IniJsonParser(path).read()
