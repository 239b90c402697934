"""Resolver settings.

Read from the environment (``.env`` files included, via python-dotenv):

- ``ENTITYPROPS_UNION_POLICY``: ``lenient`` (default) keeps the first member
  of a union without NULL, ``strict`` rejects such unions.
- ``ENTITYPROPS_NULL_MARKERS``: comma-separated NULL spellings, default
  ``null,none`` (case-insensitive).
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import FrozenSet, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .cache import default_annotation_cache
from .core.types import NULL_MARKERS, UnionPolicy, union_policy_for

logger = logging.getLogger(__name__)

__all__ = ['ResolverConfig', 'get_config', 'set_config', 'ENV_UNION_POLICY', 'ENV_NULL_MARKERS']

ENV_UNION_POLICY = 'ENTITYPROPS_UNION_POLICY'
ENV_NULL_MARKERS = 'ENTITYPROPS_NULL_MARKERS'

_ACTIVE_CONFIG: Optional['ResolverConfig'] = None


@dataclass(frozen=True)
class ResolverConfig:
    union_policy: str = 'lenient'
    null_markers: FrozenSet[str] = NULL_MARKERS

    def __post_init__(self):
        # validates the name, raises ValueError
        union_policy_for(self.union_policy)
        object.__setattr__(self, 'union_policy', self.union_policy.strip().lower())
        markers = frozenset(m.strip().lower() for m in self.null_markers if m and m.strip())
        if not markers:
            raise ValueError("At least one NULL marker is required")
        object.__setattr__(self, 'null_markers', markers)

    @property
    def union_policy_fn(self) -> UnionPolicy:
        return union_policy_for(self.union_policy)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> 'ResolverConfig':
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get(ENV_UNION_POLICY):
            kwargs['union_policy'] = env[ENV_UNION_POLICY]
        if env.get(ENV_NULL_MARKERS):
            kwargs['null_markers'] = frozenset(env[ENV_NULL_MARKERS].split(','))
        return cls(**kwargs)


def set_config(config: Optional[ResolverConfig]) -> None:
    """Replace the active config; ``None`` re-reads the environment on next use.

    Shared reflections from ``EntityType.for_class`` hold the previous
    settings and are dropped, as is the process-wide annotation cache.
    """
    global _ACTIVE_CONFIG
    from .reflection import EntityType
    _ACTIVE_CONFIG = config
    EntityType._registry.clear()
    default_annotation_cache.clear()
    logger.debug("resolver config replaced, shared caches cleared")


def get_config() -> ResolverConfig:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = ResolverConfig.from_env()
    return _ACTIVE_CONFIG
