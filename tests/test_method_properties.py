from entityprops import Entity, EntityType, MethodProperty
from entityprops.core.extractors import extract_method_properties, is_property_accessor
from entityprops.core.reflection import MethodInfo
from entityprops.core.types import ModuleTypeQualifier
from tests.entities import Book, Novel, Shelf


class Other:
    pass


def _methods(cls):
    return extract_method_properties(EntityType(cls), base=Entity, qualifier=ModuleTypeQualifier())


def test_accessor_predicate_is_pure_over_method_info():
    assert is_property_accessor(MethodInfo(name='getTitle', declaring_class=Other), Entity)
    assert is_property_accessor(MethodInfo(name='get_title', declaring_class=Other), Entity)
    assert not is_property_accessor(MethodInfo(name='get', declaring_class=Other), Entity)
    assert not is_property_accessor(MethodInfo(name='fetchTitle', declaring_class=Other), Entity)
    assert not is_property_accessor(MethodInfo(name='getTitle', declaring_class=Entity), Entity)
    assert not is_property_accessor(MethodInfo(name='getTitle', declaring_class=Other, is_internal=True), Entity)
    assert is_property_accessor(MethodInfo(name='title', declaring_class=Other, kind='property'), Entity)


def test_book_accessors():
    props = _methods(Book)
    assert set(props) == {'author', 'tags', 'isbn'}
    assert all(isinstance(p, MethodProperty) for p in props.values())

    author = props['author']
    assert author.readonly is False
    assert author.type == 'tests.entities.Author'
    assert author.nullable is False
    assert author.description == 'Author of the book.'
    assert author.accessor == 'getAuthor'

    tags = props['tags']
    assert tags.readonly is True
    assert tags.type == 'list'
    assert tags.description is None

    isbn = props['isbn']
    assert isbn.readonly is True
    assert isbn.type == 'string'
    assert isbn.description == 'ISBN code.'


def test_inherited_accessors_and_optional_return():
    props = _methods(Novel)
    assert {'author', 'tags', 'isbn', 'pages'} <= set(props)
    pages = props['pages']
    assert pages.readonly is False
    assert pages.type == 'int'
    assert pages.nullable is True
    assert pages.accessor == 'get_pages'
    assert pages.entity_type.entity_class is Novel


def test_shelf_accessor_variants():
    props = _methods(Shelf)
    assert set(props) == {'label', 'code', 'location', 'capacity', 'floor'}
    assert props['label'].readonly is False
    assert props['label'].type == 'str'
    assert props['label'].description == 'Label printed on the shelf.'
    assert props['code'].readonly is True
    assert props['code'].nullable is True
    assert props['location'].readonly is False
    assert props['location'].description == 'Room and row.'
    assert props['capacity'].readonly is False
    assert props['floor'].readonly is True
    assert props['floor'].type == 'int'


def test_untyped_accessor():
    class Loose(Entity):
        def getSomething(self):
            return 1

    prop = _methods(Loose)['something']
    assert prop.type is None
    assert prop.nullable is False
    assert prop.readonly is True


def test_later_duplicate_overwrites_earlier():
    class Twice(Entity):
        def getTitle(self) -> str:
            return ''

        def get_title(self) -> int:
            return 0

    props = _methods(Twice)
    assert list(props) == ['title']
    assert props['title'].accessor == 'get_title'
    assert props['title'].type == 'int'


def test_accessor_returning_none_has_no_type():
    class Quiet(Entity):
        def getNothing(self) -> None:
            pass

        def getTagged(self):
            """@return NULL"""

    props = _methods(Quiet)
    assert (props['nothing'].type, props['nothing'].nullable) == (None, False)
    assert (props['tagged'].type, props['tagged'].nullable) == (None, False)


def test_unresolved_optional_annotations():
    class Pending(Entity):
        def getMaybe(self) -> 'Optional[Missing]':
            pass

        def getEither(self) -> 'Union[Missing, None]':
            pass

        def getPiped(self) -> 'None | Missing':
            pass

    props = _methods(Pending)
    for name in ('maybe', 'either', 'piped'):
        assert props[name].type == 'tests.test_method_properties.Missing'
        assert props[name].nullable is True


def test_subscripted_return_text_is_left_untyped():
    class Nested(Entity):
        def getRows(self) -> 'List[Missing]':
            pass

        def getLegacy(self):
            """@return Dict[str, int]"""

    props = _methods(Nested)
    assert props['rows'].type is None
    assert props['legacy'].type is None
