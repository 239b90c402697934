"""Type expression normalization for entity properties.

Turns the raw type text of a declaration (``\\NULL|string``, ``integer``,
``Author``) into a ``(type, nullable)`` pair whose type is either a native
kind name or a fully-qualified class path.
"""
from __future__ import annotations
import inspect
import logging
import sys
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Protocol, Tuple

from ..exceptions import DuplicateNullMarker, MultipleTypesError
from .properties import is_native_type

logger = logging.getLogger(__name__)

__all__ = [
    'NULL_MARKERS',
    'TYPE_ALIASES',
    'UnionPolicy',
    'first_member_policy',
    'strict_union_policy',
    'union_policy_for',
    'split_union',
    'TypeQualifier',
    'ModuleTypeQualifier',
    'normalize_type',
]

NULL_MARKERS: FrozenSet[str] = frozenset({'null', 'none'})

TYPE_ALIASES: Dict[str, str] = {
    'boolean': 'bool',
    'integer': 'int',
}

# (raw type text, members) -> effective member
UnionPolicy = Callable[[str, List[str]], str]


def first_member_policy(raw: str, members: List[str]) -> str:
    """Keep the first member of a union without NULL and drop the rest."""
    logger.warning("type union %r truncated to %r", raw, members[0])
    return members[0]


def strict_union_policy(raw: str, members: List[str]) -> str:
    raise MultipleTypesError(raw)


_UNION_POLICIES: Dict[str, UnionPolicy] = {
    'lenient': first_member_policy,
    'strict': strict_union_policy,
}


def union_policy_for(name: str) -> UnionPolicy:
    try:
        return _UNION_POLICIES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown union policy {name!r}; expected one of {sorted(_UNION_POLICIES)}") from None


def split_union(raw: str) -> List[str]:
    """Split on the first ``|`` only; at most two stripped members."""
    return [part.strip() for part in raw.split('|', 1)]


def _is_null(member: str, null_markers: FrozenSet[str]) -> bool:
    return member.lstrip("\\").lower() in null_markers


class TypeQualifier(Protocol):
    def qualify(self, name: str, context: type) -> str:  # pragma: no cover - protocol
        ...


class ModuleTypeQualifier:
    """Resolve short or relative class names against the context class's module.

    - ``\\app\\models\\Author`` is absolute: the leading ``\\`` is dropped and
      ``\\`` separators become ``.``.
    - a first segment bound in the context module (an imported class or module,
      or the context class itself) expands from that object.
    - a first segment naming an imported top-level module is kept as is.
    - anything else is taken relative to the context class's module.
    """

    def qualify(self, name: str, context: type) -> str:
        if name.startswith('\\'):
            return name[1:].replace('\\', '.')
        name = name.replace('\\', '.')
        head, _, rest = name.partition('.')
        module_name = getattr(context, '__module__', None) or ''
        module = sys.modules.get(module_name)
        target: Any = vars(module).get(head) if module is not None else None
        if target is None and head == getattr(context, '__name__', None):
            target = context
        base: Optional[str] = None
        if isinstance(target, type):
            base = f"{target.__module__}.{target.__qualname__}"
        elif inspect.ismodule(target):
            base = target.__name__
        if base is not None:
            return f"{base}.{rest}" if rest else base
        if rest and head in sys.modules:
            return name
        return f"{module_name}.{name}" if module_name else name


def normalize_type(
    raw: str,
    context: type,
    *,
    qualifier: TypeQualifier,
    union_policy: UnionPolicy = first_member_policy,
    null_markers: FrozenSet[str] = NULL_MARKERS,
) -> Tuple[str, bool]:
    """Return ``(type, nullable)`` for a raw type expression.

    Raises:
        DuplicateNullMarker: Both union members are NULL.
        MultipleTypesError: Raised by ``strict_union_policy`` only.
    """
    members = split_union(raw)
    nullable = False
    type_name = members[0]
    if len(members) == 2:
        first_null = _is_null(members[0], null_markers)
        second_null = _is_null(members[1], null_markers)
        if first_null and second_null:
            raise DuplicateNullMarker(raw)
        if first_null:
            nullable, type_name = True, members[1]
        elif second_null:
            nullable, type_name = True, members[0]
        else:
            type_name = union_policy(raw, members)

    type_name = TYPE_ALIASES.get(type_name, type_name)
    if not is_native_type(type_name):
        type_name = qualifier.qualify(type_name, context)
    return type_name, nullable
