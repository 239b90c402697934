# Core subpackage: grammar, type normalization, introspection and extraction used by EntityType.
from .properties import NATIVE_TYPES, is_native_type, EntityProperty, MethodProperty, AnnotationProperty
from .grammar import PropertyDeclaration, parse_property_declaration
from .types import (
    ModuleTypeQualifier, TypeQualifier, normalize_type, split_union,
    first_member_policy, strict_union_policy, union_policy_for,
)
from .reflection import MethodInfo, internal, public_methods, class_annotations, parent_of
from .hierarchy import class_tree
from .extractors import is_property_accessor, extract_method_properties, extract_annotation_properties

__all__ = [
    'NATIVE_TYPES','is_native_type','EntityProperty','MethodProperty','AnnotationProperty',
    'PropertyDeclaration','parse_property_declaration',
    'ModuleTypeQualifier','TypeQualifier','normalize_type','split_union',
    'first_member_policy','strict_union_policy','union_policy_for',
    'MethodInfo','internal','public_methods','class_annotations','parent_of',
    'class_tree',
    'is_property_accessor','extract_method_properties','extract_annotation_properties',
]
