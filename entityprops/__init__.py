"""entityprops public API and lightweight lazy exports.

Entity modules usually import :class:`Entity` while this package's resolver
imports the entity base as its traversal boundary; resolving the exports
lazily keeps either import order working.

Exposes:
- Entity, EntityType, internal
- get_properties, get_property, has_property (schema lookups keyed by class)
- EntityProperty, MethodProperty, AnnotationProperty
- PropertyCache, ResolverConfig, get_config, set_config
- error classes from entityprops.exceptions (imported eagerly, no dependencies)
"""
from __future__ import annotations

from .exceptions import (
    EntityPropsError,
    InvalidPropertyDefinitionError,
    MalformedPropertyDeclaration,
    DuplicateNullMarker,
    MultipleTypesError,
)

_LAZY = {
    'Entity': 'entity',
    'EntityType': 'reflection',
    'get_properties': 'reflection',
    'get_property': 'reflection',
    'has_property': 'reflection',
    'PropertyCache': 'cache',
    'ResolverConfig': 'config',
    'get_config': 'config',
    'set_config': 'config',
    'EntityProperty': 'core.properties',
    'MethodProperty': 'core.properties',
    'AnnotationProperty': 'core.properties',
    'internal': 'core.reflection',
}


def __getattr__(name: str):  # PEP 562 lazy exports
    import importlib as _importlib
    module_name = _LAZY.get(name)
    if module_name is None:
        raise AttributeError(name)
    return getattr(_importlib.import_module(f"{__name__}.{module_name}"), name)


__all__ = [
    'Entity', 'EntityType', 'internal',
    'get_properties', 'get_property', 'has_property',
    'EntityProperty', 'MethodProperty', 'AnnotationProperty',
    'PropertyCache', 'ResolverConfig', 'get_config', 'set_config',
    'EntityPropsError', 'InvalidPropertyDefinitionError', 'MalformedPropertyDeclaration',
    'DuplicateNullMarker', 'MultipleTypesError',
]
