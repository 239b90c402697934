"""Errors raised while resolving entity property schemas.

All of them are raised for malformed class declarations and surface at the
first schema lookup for the affected entity class. None of them is transient.
"""
from __future__ import annotations

__all__ = [
    'EntityPropsError',
    'InvalidPropertyDefinitionError',
    'MalformedPropertyDeclaration',
    'DuplicateNullMarker',
    'MultipleTypesError',
]


class EntityPropsError(ValueError):
    """Base class for every entityprops error."""


class InvalidPropertyDefinitionError(EntityPropsError):
    """A docstring property declaration cannot be turned into metadata."""


class MalformedPropertyDeclaration(InvalidPropertyDefinitionError):
    """``@property`` / ``@property-read`` value does not match the grammar."""

    def __init__(self, tag: str, line: str, message: str | None = None):
        self.tag = tag
        self.line = line
        if message is None:
            message = (
                '"@property[-read] <type> $<property> [-> <column>][ <description>]" expected, '
                f'"@{tag} {line}" given.'
            )
        super().__init__(message)

    @classmethod
    def missing_sigil(cls, tag: str, line: str) -> 'MalformedPropertyDeclaration':
        return cls(tag, line, f'Missing "$" in property name in "@{tag} {line}"')


class DuplicateNullMarker(InvalidPropertyDefinitionError):
    def __init__(self, type_text: str):
        self.type_text = type_text
        super().__init__(f'Only one NULL is allowed, "{type_text}" given.')


class MultipleTypesError(InvalidPropertyDefinitionError):
    """Raised by the strict union policy for unions of several non-NULL types."""

    def __init__(self, type_text: str):
        self.type_text = type_text
        super().__init__(f'Multiple non-NULL types detected in "{type_text}".')
