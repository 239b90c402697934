"""Entity type reflection: the merged, cached property schema of one entity class.

Precedence when the schema is built:

1. accessor-backed properties (``getFoo`` / ``get_foo`` / ``property``) always win;
2. docstring properties are then added walking the hierarchy from the
   topmost entity ancestor down to the class itself, and a name already
   present is never replaced. An ancestor's declaration therefore wins over a
   subclass declaration of the same name.
"""
from __future__ import annotations
import logging
import threading
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from .cache import PropertyCache, default_annotation_cache
from .config import get_config
from .core.extractors import extract_annotation_properties, extract_method_properties
from .core.hierarchy import class_tree
from .core.properties import AnnotationProperty, EntityProperty
from .core.types import ModuleTypeQualifier, TypeQualifier, UnionPolicy

logger = logging.getLogger(__name__)

__all__ = ['EntityType', 'get_properties', 'get_property', 'has_property']


class EntityType:
    """Reflection of an entity class exposing its resolved property schema.

    Args:
        entity_class: The entity class to reflect.
        base: Entity base class where hierarchy traversal stops. Defaults to
            :class:`entityprops.Entity`.
        qualifier: Resolves short class names in type declarations.
        union_policy: Decides unions of several non-NULL types. Defaults to
            the active :class:`~entityprops.config.ResolverConfig`.
        null_markers: Lower-case NULL spellings in type unions.
        annotation_cache: Cache of per-class docstring properties, shared by
            every reflection using it. Defaults to the process-wide cache.
    """

    _registry = PropertyCache('entity-types')

    def __init__(
        self,
        entity_class: type,
        *,
        base: Optional[type] = None,
        qualifier: Optional[TypeQualifier] = None,
        union_policy: Optional[UnionPolicy] = None,
        null_markers: Optional[FrozenSet[str]] = None,
        annotation_cache: Optional[PropertyCache] = None,
    ):
        if base is None:
            from .entity import Entity
            base = Entity
        if union_policy is None or null_markers is None:
            config = get_config()
            union_policy = union_policy or config.union_policy_fn
            null_markers = null_markers or config.null_markers
        self.entity_class = entity_class
        self.base = base
        self.qualifier = qualifier if qualifier is not None else ModuleTypeQualifier()
        self.union_policy = union_policy
        self.null_markers = null_markers
        self.annotation_cache = annotation_cache if annotation_cache is not None else default_annotation_cache
        self._properties: Optional[Dict[str, EntityProperty]] = None
        self._lock = threading.Lock()

    @classmethod
    def for_class(cls, entity_class: type) -> 'EntityType':
        """Shared reflection of ``entity_class`` built with the default settings."""
        return cls._registry.get_or_compute(entity_class, lambda: cls(entity_class))

    @property
    def name(self) -> str:
        return f"{self.entity_class.__module__}.{self.entity_class.__qualname__}"

    def get_entity_properties(self) -> Mapping[str, EntityProperty]:
        self._load_entity_properties()
        return MappingProxyType(self._properties)

    def get_entity_property(self, name: str, default: Any = None) -> Any:
        return self._properties[name] if self.has_entity_property(name) else default

    def has_entity_property(self, name: str) -> bool:
        self._load_entity_properties()
        return name in self._properties

    def _load_entity_properties(self) -> None:
        if self._properties is not None:
            return
        with self._lock:
            if self._properties is not None:
                return
            properties: Dict[str, EntityProperty] = dict(extract_method_properties(
                self,
                base=self.base,
                qualifier=self.qualifier,
                union_policy=self.union_policy,
                null_markers=self.null_markers,
            ))
            for klass in class_tree(self.entity_class, self.base):
                for name, prop in self._annotation_properties(klass).items():
                    properties.setdefault(name, prop)
            self._properties = properties
        logger.debug("resolved %d properties for %s", len(properties), self.name)

    def annotation_key(self, klass: type) -> Tuple[type, UnionPolicy, FrozenSet[str]]:
        """Cache key of the docstring properties of ``klass`` under these settings."""
        return klass, self.union_policy, self.null_markers

    def _annotation_properties(self, klass: type) -> Dict[str, AnnotationProperty]:
        return self.annotation_cache.get_or_compute(
            self.annotation_key(klass),
            lambda: extract_annotation_properties(
                self._reflect(klass),
                qualifier=self.qualifier,
                union_policy=self.union_policy,
                null_markers=self.null_markers,
            ),
        )

    def _reflect(self, klass: type) -> 'EntityType':
        if klass is self.entity_class:
            return self
        return type(self)(
            klass,
            base=self.base,
            qualifier=self.qualifier,
            union_policy=self.union_policy,
            null_markers=self.null_markers,
            annotation_cache=self.annotation_cache,
        )

    def __repr__(self) -> str:
        return f"<EntityType {self.name}>"


def get_properties(entity_class: type) -> Mapping[str, EntityProperty]:
    return EntityType.for_class(entity_class).get_entity_properties()


def get_property(entity_class: type, name: str, default: Any = None) -> Any:
    return EntityType.for_class(entity_class).get_entity_property(name, default)


def has_property(entity_class: type, name: str) -> bool:
    return EntityType.for_class(entity_class).has_entity_property(name)
