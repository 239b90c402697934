"""Property extraction from accessors and from class docstrings."""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Dict, FrozenSet, Optional

from ..naming import accessor_suffix, property_name, setter_name
from .grammar import PROPERTY_READ_TAG, PROPERTY_TAGS, parse_property_declaration
from .properties import AnnotationProperty, MethodProperty
from .reflection import MethodInfo, class_annotations, doc_description, has_method, public_methods
from .types import NULL_MARKERS, TypeQualifier, UnionPolicy, first_member_policy, normalize_type

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from ..reflection import EntityType

logger = logging.getLogger(__name__)

__all__ = ['is_property_accessor', 'extract_method_properties', 'extract_annotation_properties']


def is_property_accessor(method: MethodInfo, base: Optional[type] = None) -> bool:
    """True when ``method`` contributes a method-backed property.

    Accessors declared by ``base`` itself and those marked internal never do.
    """
    if base is not None and method.declaring_class is base:
        return False
    if method.is_internal:
        return False
    if method.kind == 'property':
        return True
    return accessor_suffix(method.name) is not None


def extract_method_properties(
    entity_type: 'EntityType',
    *,
    base: Optional[type],
    qualifier: TypeQualifier,
    union_policy: UnionPolicy = first_member_policy,
    null_markers: FrozenSet[str] = NULL_MARKERS,
) -> Dict[str, MethodProperty]:
    cls = entity_type.entity_class
    properties: Dict[str, MethodProperty] = {}
    for method in public_methods(cls):
        if not is_property_accessor(method, base):
            continue
        if method.kind == 'property':
            name = method.name
            readonly = not method.has_setter
        else:
            suffix = accessor_suffix(method.name)
            name = property_name(suffix)
            readonly = not has_method(cls, setter_name(suffix))

        type_name: Optional[str] = None
        nullable = False
        if method.return_annotation is not None:
            type_name, nullable = normalize_type(
                method.return_annotation,
                method.declaring_class,
                qualifier=qualifier,
                union_policy=union_policy,
                null_markers=null_markers,
            )

        properties[name] = MethodProperty(
            entity_type=entity_type,
            name=name,
            readonly=readonly,
            type=type_name,
            nullable=nullable,
            description=doc_description(method.doc),
            accessor=method.name,
        )
    return properties


def extract_annotation_properties(
    entity_type: 'EntityType',
    *,
    qualifier: TypeQualifier,
    union_policy: UnionPolicy = first_member_policy,
    null_markers: FrozenSet[str] = NULL_MARKERS,
) -> Dict[str, AnnotationProperty]:
    """Properties declared in the class's own docstring.

    Raises:
        MalformedPropertyDeclaration: A declaration does not match the grammar.
        DuplicateNullMarker: A declared type lists NULL twice.
    """
    cls = entity_type.entity_class
    properties: Dict[str, AnnotationProperty] = {}
    for tag, values in class_annotations(cls).items():
        if tag not in PROPERTY_TAGS:
            continue
        for line in values:
            declaration = parse_property_declaration(tag, line)
            type_name, nullable = normalize_type(
                declaration.type,
                cls,
                qualifier=qualifier,
                union_policy=union_policy,
                null_markers=null_markers,
            )
            name = declaration.bare_name
            properties[name] = AnnotationProperty(
                entity_type=entity_type,
                name=name,
                readonly=tag == PROPERTY_READ_TAG,
                type=type_name,
                nullable=nullable,
                description=declaration.description or None,
                column=declaration.column or name,
            )
    logger.debug("%s declares %d docstring properties", cls.__qualname__, len(properties))
    return properties
