from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, Optional

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from ..reflection import EntityType

__all__ = [
    'NATIVE_TYPES',
    'is_native_type',
    'EntityProperty',
    'MethodProperty',
    'AnnotationProperty',
]

# Closed set of primitive kinds. Anything else is a fully-qualified class path.
NATIVE_TYPES: FrozenSet[str] = frozenset({
    'array',
    'bool',
    'bytes',
    'callable',
    'dict',
    'float',
    'int',
    'list',
    'mixed',
    'object',
    'str',
    'string',
})


def is_native_type(type_name: Optional[str]) -> bool:
    return type_name in NATIVE_TYPES


@dataclass(frozen=True)
class EntityProperty:
    """Resolved metadata of one entity property.

    Attributes:
        entity_type: Reflection of the class this property was resolved for.
        name: Property name, without the ``$`` sigil of docstring declarations.
        readonly: True when the property cannot be assigned.
        type: Native kind name (see :data:`NATIVE_TYPES`), a fully-qualified
            class path, or ``None`` when the source declares no type.
        nullable: True when the declared type is a union with NULL.
        description: Human-readable description, ``None`` when empty.
    """

    entity_type: EntityType
    name: str
    readonly: bool
    type: Optional[str]
    nullable: bool = False
    description: Optional[str] = None

    @property
    def is_native(self) -> bool:
        return is_native_type(self.type)

    @property
    def entity_class(self) -> type:
        return self.entity_type.entity_class


@dataclass(frozen=True)
class MethodProperty(EntityProperty):
    """Property backed by a ``get<Name>`` accessor (or a Python ``property``).

    ``accessor`` is the attribute name of that method or property.
    """

    accessor: str = ''


@dataclass(frozen=True)
class AnnotationProperty(EntityProperty):
    """Property declared by an ``@property`` / ``@property-read`` docstring tag.

    ``column`` names the row column backing the property and defaults to the
    property name.
    """

    column: str = ''

    def __post_init__(self):
        if not self.column:
            object.__setattr__(self, 'column', self.name)
