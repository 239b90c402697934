"""Parser for ``@property`` / ``@property-read`` docstring declarations.

Grammar of one declaration value::

    <type> <ws>+ $<name> (<ws>+ -> <ws>+ <column>)? <ws>* <description>?

``<type>`` is one or two ``|``-joined members, each an identifier path
separated by ``\\`` or ``.`` with an optional leading ``\\``.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional

from ..exceptions import MalformedPropertyDeclaration

__all__ = ['PropertyDeclaration', 'PROPERTY_TAGS', 'parse_property_declaration']

PROPERTY_TAG = 'property'
PROPERTY_READ_TAG = 'property-read'
PROPERTY_TAGS = (PROPERTY_TAG, PROPERTY_READ_TAG)

NAME_SIGIL = '$'

_IDENT = r'[^\W\d]\w*'
# The first segment may carry ``[]`` and ``|`` (e.g. ``NULL|string``).
_FIRST_SEGMENT = r'[^\W\d][\w\[\]|]*'
_SEP = r'[\\.]'
_TYPE = (
    rf'\\?{_FIRST_SEGMENT}(?:{_SEP}{_IDENT})*'
    rf'(?:\|\\?{_IDENT}(?:{_SEP}{_IDENT})*)?'
)

DECLARATION_RE = re.compile(
    rf'^[ \t]*(?P<type>{_TYPE})'
    r'[ \t]+(?P<property>\$?[^\W\d]\w*)'
    r'(?:[ \t]+->[ \t]+(?P<column>[A-Za-z0-9_-]+))?'
    r'[ \t]*(?P<description>.*)\Z'
)


@dataclass(frozen=True)
class PropertyDeclaration:
    type: str
    name: str
    column: Optional[str]
    description: str

    @property
    def bare_name(self) -> str:
        return self.name[len(NAME_SIGIL):]


def parse_property_declaration(tag: str, line: str) -> PropertyDeclaration:
    """Split one declaration value into its type, name, column and description.

    Args:
        tag: Tag the value was found under (``property`` or ``property-read``),
            used for error messages.
        line: Raw value following the tag.

    Raises:
        MalformedPropertyDeclaration: The value does not match the grammar or
            the name lacks the ``$`` sigil.
    """
    match = DECLARATION_RE.match(line)
    if match is None:
        raise MalformedPropertyDeclaration(tag, line)
    name = match.group('property')
    if not name.startswith(NAME_SIGIL):
        raise MalformedPropertyDeclaration.missing_sigil(tag, line)
    return PropertyDeclaration(
        type=match.group('type'),
        name=name,
        column=match.group('column'),
        description=match.group('description'),
    )
