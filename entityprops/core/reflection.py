"""Class and function introspection used by the property extractors.

Everything here is read-only over class objects: docstring tags, public
accessors along the MRO, return annotations.
"""
from __future__ import annotations
import inspect
import re
import typing
from dataclasses import dataclass, field as dc_field
from types import UnionType
from typing import Any, Callable, Dict, List, Optional, Union

from .properties import is_native_type

__all__ = [
    'INTERNAL_MARKER',
    'internal',
    'MethodInfo',
    'parse_annotations',
    'doc_description',
    'annotation_text',
    'public_methods',
    'has_method',
    'class_annotations',
    'parent_of',
]

INTERNAL_MARKER = '__entityprops_internal__'
INTERNAL_TAG = 'internal'
RETURN_TAG = 'return'
NULL_MARKER = 'NULL'

_TAG_RE = re.compile(r'^[ \t]*@(?P<tag>[A-Za-z][\w-]*)(?:[ \t]+(?P<value>.*?))?[ \t]*$', re.M)
_TAG_LINE_RE = re.compile(r'^\s*@.*$', re.M)
_OPTIONAL_RE = re.compile(r'^(?:typing\.)?Optional\[(?P<inner>.*)\]$')
_UNION_RE = re.compile(r'^(?:typing\.)?Union\[(?P<inner>.*)\]$')
_NONE_SPELLINGS = ('None', 'NoneType', 'type(None)')
# ``List[str]`` but not the ``string[]`` list suffix
_SUBSCRIPT_RE = re.compile(r'\[(?!\])')


def internal(func: Callable) -> Callable:
    """Exclude a ``get<Name>`` method from the entity property schema."""
    setattr(func, INTERNAL_MARKER, True)
    return func


@dataclass(frozen=True)
class MethodInfo:
    """Snapshot of one public accessor candidate.

    ``kind`` is ``"method"`` for plain functions and ``"property"`` for Python
    ``property`` objects; ``has_setter`` is only meaningful for the latter.
    """

    name: str
    declaring_class: type
    return_annotation: Optional[str] = None
    doc: Optional[str] = None
    is_internal: bool = False
    annotations: Dict[str, List[str]] = dc_field(default_factory=dict)
    kind: str = 'method'
    has_setter: bool = False

    def has_annotation(self, tag: str) -> bool:
        return tag in self.annotations


def parse_annotations(doc: Optional[str]) -> Dict[str, List[str]]:
    """Collect ``@tag value`` lines of a docstring, in order of appearance."""
    tags: Dict[str, List[str]] = {}
    if not doc:
        return tags
    for match in _TAG_RE.finditer(inspect.cleandoc(doc)):
        tags.setdefault(match.group('tag'), []).append(match.group('value') or '')
    return tags


def doc_description(doc: Optional[str]) -> Optional[str]:
    """Docstring text without tag lines; ``None`` when nothing is left."""
    if not doc:
        return None
    text = _TAG_LINE_RE.sub('', inspect.cleandoc(doc)).strip()
    return text or None


def _string_annotation_text(text: str) -> Optional[str]:
    """Type text for an annotation left as a string (unresolved forward ref).

    ``Optional[X]``, ``Union[X, None]`` and ``X | None`` become ``X|NULL``.
    Other subscripted forms cannot be rendered and yield ``None``.
    """
    text = text.strip()
    match = _OPTIONAL_RE.match(text)
    if match is not None:
        members = [match.group('inner'), NULL_MARKER]
    else:
        match = _UNION_RE.match(text)
        members = match.group('inner').split(',') if match is not None else text.split('|')
    members = [member.strip() for member in members]
    members = [NULL_MARKER if member in _NONE_SPELLINGS else member for member in members]
    if len(members) > 2 or any(not member or '[' in member for member in members):
        return None
    return '|'.join(members)


def _is_bare_null(text: str) -> bool:
    return '|' not in text and text.lstrip('\\').lower() in ('null', 'none')


def annotation_text(annotation: Any) -> Optional[str]:
    """Render a return annotation as type text for the type normalizer.

    Real classes come out absolute (``\\package.module.Class``) so that the
    qualifier keeps them as they are; ``Optional[X]`` and ``X | None`` become
    ``X|NULL``.
    """
    if annotation is None or annotation is inspect.Signature.empty:
        return None
    if isinstance(annotation, str):
        return _string_annotation_text(annotation)
    if isinstance(annotation, typing.ForwardRef):
        return annotation.__forward_arg__
    if annotation is type(None):
        return NULL_MARKER
    origin = typing.get_origin(annotation)
    if origin is Union or origin is UnionType:
        return '|'.join(annotation_text(arg) or '' for arg in typing.get_args(annotation))
    if origin is not None:
        return annotation_text(origin)
    if isinstance(annotation, type):
        if annotation.__module__ == 'builtins':
            name = annotation.__qualname__
            return name if is_native_type(name) else '\\' + name
        return f"\\{annotation.__module__}.{annotation.__qualname__}"
    return str(annotation)


def _return_annotation(func: Callable, tags: Dict[str, List[str]]) -> Optional[str]:
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError):
        # unresolved forward reference; keep the raw string
        hints = getattr(func, '__annotations__', {}) or {}
    text: Optional[str] = None
    if 'return' in hints:
        text = annotation_text(hints['return'])
    else:
        values = tags.get(RETURN_TAG)
        if values and values[0]:
            text = values[0].split()[0]
    # a getter returning only None has no property type
    if text is None or _is_bare_null(text) or _SUBSCRIPT_RE.search(text):
        return None
    return text


def _method_info(name: str, func: Callable, declaring_class: type, *, kind: str = 'method',
                 has_setter: bool = False) -> MethodInfo:
    doc = getattr(func, '__doc__', None)
    tags = parse_annotations(doc)
    return MethodInfo(
        name=name,
        declaring_class=declaring_class,
        return_annotation=_return_annotation(func, tags),
        doc=doc,
        is_internal=bool(getattr(func, INTERNAL_MARKER, False)) or INTERNAL_TAG in tags,
        annotations=tags,
        kind=kind,
        has_setter=has_setter,
    )


def public_methods(cls: type) -> List[MethodInfo]:
    """Public functions and ``property`` objects visible on ``cls``.

    The most derived definition of a name wins, so ``declaring_class`` is the
    class that actually provides the attribute. Own members come first, then
    those inherited, following the MRO.
    """
    seen = set()
    methods: List[MethodInfo] = []
    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if name.startswith('_'):
                continue
            if isinstance(attr, property):
                if attr.fget is None:
                    continue
                methods.append(_method_info(name, attr.fget, klass, kind='property',
                                            has_setter=attr.fset is not None))
            elif inspect.isfunction(attr):
                methods.append(_method_info(name, attr, klass))
    return methods


def has_method(cls: type, name: str) -> bool:
    return not name.startswith('_') and callable(getattr(cls, name, None))


def class_annotations(cls: type) -> Dict[str, List[str]]:
    """Tags of the class's own docstring; inherited docstrings are ignored."""
    return parse_annotations(vars(cls).get('__doc__'))


def parent_of(cls: type, base: Optional[type] = None) -> Optional[type]:
    """Primary parent of ``cls``: the first base deriving from ``base`` if any."""
    if base is not None:
        for parent in cls.__bases__:
            if issubclass(parent, base):
                return parent
    parent = cls.__base__
    if parent is None or parent is object:
        return None
    return parent
