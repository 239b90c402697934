"""Entity base class.

An entity wraps one database row: a SQLAlchemy ``Row``, a ``RowMapping`` or
any other mapping, or an ORM instance. Docstring-declared properties read
their column from that row; accessor-backed properties are plain methods.

Example::

    class Book(Entity):
        \"\"\"
        @property-read int $id
        @property string $title -> book_title Title shown in listings
        @property NULL|string $written
        \"\"\"

        def getAuthor(self) -> Author:
            return Author(self._row.author)
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict

from sqlalchemy.engine import Row

from .core.properties import AnnotationProperty, MethodProperty
from .reflection import EntityType

__all__ = ['Entity']


def _row_value(row: Any, column: str) -> Any:
    if isinstance(row, Row):
        return row._mapping[column]
    if isinstance(row, Mapping):
        return row[column]
    return getattr(row, column)


class Entity:
    def __init__(self, row: Any):
        self._row = row

    @classmethod
    def get_reflection(cls) -> EntityType:
        return EntityType.for_class(cls)

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        prop = type(self).get_reflection().get_entity_property(name)
        if isinstance(prop, AnnotationProperty):
            try:
                return _row_value(self._row, prop.column)
            except (KeyError, AttributeError) as exc:
                raise AttributeError(
                    f"{type(self).__name__}.{name}: column {prop.column!r} missing from row"
                ) from exc
        if isinstance(prop, MethodProperty) and prop.accessor != name:
            return getattr(self, prop.accessor)()
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Values of every resolved property, keyed by property name."""
        return {name: getattr(self, name) for name in type(self).get_reflection().get_entity_properties()}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._row!r}>"
