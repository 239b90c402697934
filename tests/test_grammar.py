import pytest

from entityprops import MalformedPropertyDeclaration
from entityprops.core.grammar import parse_property_declaration


def test_type_and_name():
    decl = parse_property_declaration('property', 'string $title')
    assert decl.type == 'string'
    assert decl.name == '$title'
    assert decl.bare_name == 'title'
    assert decl.column is None
    assert decl.description == ''


def test_column_and_description():
    decl = parse_property_declaration('property', 'string|NULL $title -> book_title Title shown in listings')
    assert decl.type == 'string|NULL'
    assert decl.name == '$title'
    assert decl.column == 'book_title'
    assert decl.description == 'Title shown in listings'


def test_description_without_column():
    decl = parse_property_declaration('property-read', 'int $id  Primary key')
    assert decl.column is None
    assert decl.description == 'Primary key'


@pytest.mark.parametrize('line, expected_type', [
    (r'\NULL|string $title', r'\NULL|string'),
    (r'\App\Models\Author $author', r'\App\Models\Author'),
    ('app.models.Author $author', 'app.models.Author'),
    (r'NULL|\App\Author $author', r'NULL|\App\Author'),
    ('string[] $aliases', 'string[]'),
    ('  int $id', 'int'),
])
def test_type_expressions(line, expected_type):
    assert parse_property_declaration('property', line).type == expected_type


def test_column_allows_dashes():
    assert parse_property_declaration('property', 'string $slug -> url-slug').column == 'url-slug'


def test_missing_sigil():
    with pytest.raises(MalformedPropertyDeclaration) as exc_info:
        parse_property_declaration('property', 'string name')
    assert exc_info.value.tag == 'property'
    assert exc_info.value.line == 'string name'
    assert 'Missing "$"' in str(exc_info.value)


@pytest.mark.parametrize('line', [
    '',
    'string',
    '$title',
    '123 $x',
    'string $1abc',
    'string\n$title',
])
def test_malformed(line):
    with pytest.raises(MalformedPropertyDeclaration) as exc_info:
        parse_property_declaration('property-read', line)
    assert '@property-read' in str(exc_info.value)
