from typing import List, Optional

from entityprops import Entity
from entityprops.core.reflection import (
    annotation_text,
    class_annotations,
    doc_description,
    has_method,
    parse_annotations,
    public_methods,
)
from tests.entities import Author, Book, Novel, Shelf


def test_parse_annotations_groups_values_by_tag():
    doc = """Summary line.

    @property int $id
    @property-read string $name
    @property bool $flag
    @internal
    """
    tags = parse_annotations(doc)
    assert list(tags) == ['property', 'property-read', 'internal']
    assert tags['property'] == ['int $id', 'bool $flag']
    assert tags['property-read'] == ['string $name']
    assert tags['internal'] == ['']


def test_parse_annotations_empty():
    assert parse_annotations(None) == {}
    assert parse_annotations('No tags here.') == {}


def test_doc_description_drops_tag_lines():
    doc = """
        Author of the book.

        @return Author
    """
    assert doc_description(doc) == 'Author of the book.'
    assert doc_description('@return int') is None
    assert doc_description(None) is None
    assert doc_description('   ') is None


def test_doc_description_keeps_multiline_text():
    doc = """First line.
        Second line.

        @see Other
    """
    assert doc_description(doc) == 'First line.\nSecond line.'


def test_annotation_text():
    assert annotation_text(int) == 'int'
    assert annotation_text(str) == 'str'
    assert annotation_text(set) == '\\set'
    assert annotation_text(Author) == '\\tests.entities.Author'
    assert annotation_text(Optional[int]) == 'int|NULL'
    assert annotation_text(int | None) == 'int|NULL'
    assert annotation_text(List[str]) == 'list'
    assert annotation_text(type(None)) == 'NULL'
    assert annotation_text('Author') == 'Author'
    assert annotation_text('Optional[Author]') == 'Author|NULL'
    assert annotation_text('Author | None') == 'Author|NULL'
    assert annotation_text('List[Author]') is None
    assert annotation_text(None) is None


def test_public_methods_reports_declaring_class():
    methods = {m.name: m for m in public_methods(Novel)}
    assert methods['get_pages'].declaring_class is Novel
    assert methods['getAuthor'].declaring_class is Book
    assert methods['to_dict'].declaring_class is Entity
    assert all(not name.startswith('_') for name in methods)
    # own members are listed before inherited ones
    names = [m.name for m in public_methods(Novel)]
    assert names.index('get_pages') < names.index('getAuthor')


def test_public_methods_return_annotations():
    methods = {m.name: m for m in public_methods(Book)}
    assert methods['getAuthor'].return_annotation == '\\tests.entities.Author'
    assert methods['getTags'].return_annotation == 'list'
    # no annotation: falls back to the @return tag
    assert methods['getIsbn'].return_annotation == 'string'


def test_public_methods_include_properties_and_skip_static_methods():
    methods = {m.name: m for m in public_methods(Shelf)}
    assert methods['label'].kind == 'property'
    assert methods['label'].has_setter is True
    assert methods['code'].has_setter is False
    assert 'getDefault' not in methods
    assert '_getHidden' not in methods


def test_internal_markers():
    methods = {m.name: m for m in public_methods(Shelf)}
    assert methods['get_token'].is_internal
    assert methods['getCacheKey'].is_internal
    assert methods['getCacheKey'].has_annotation('internal')
    assert not methods['getLocation'].is_internal


def test_has_method():
    assert has_method(Book, 'setAuthor')
    assert not has_method(Book, 'setTags')
    assert not has_method(Shelf, '_getHidden')


def test_class_annotations_ignore_inherited_docstrings():
    assert 'property' in class_annotations(Book)
    assert class_annotations(type('Plain', (Book,), {})) == {}
