from __future__ import annotations
from typing import List

from .reflection import parent_of

__all__ = ['class_tree']


def class_tree(cls: type, base: type) -> List[type]:
    """Classes from the topmost entity ancestor down to ``cls``.

    ``base`` (the entity base class) and ``object`` are excluded.
    """
    tree: List[type] = []
    current = cls
    while current is not None and current is not base:
        tree.append(current)
        current = parent_of(current, base)
    tree.reverse()
    return tree
