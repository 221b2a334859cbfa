"""
Column descriptor for captured table columns.
"""
from dataclasses import dataclass
from typing import Any, Self


def type_keyword(type_name: str | None) -> str:
    """Upper-case type keyword, without parameters or attributes.

    >>> type_keyword("enum('a','b')")
    'ENUM'
    >>> type_keyword('int(10) unsigned')
    'INT'
    >>> type_keyword('double precision')
    'DOUBLE'
    >>> type_keyword(None)
    ''
    """
    if not isinstance(type_name, str):
        return ''
    words = type_name.upper().split('(')[0].split()
    return words[0] if words else ''


@dataclass(frozen=True)
class Column:
    """Representation of a captured column as supplied by the schema loader

    Technical implementation details:
    - Carries the declared type name verbatim, e.g. ``ENUM('a','b')`` or ``YEAR(4)``
    - Length and scale are taken from the DDL where present
    - ``optional`` mirrors the column's nullability and decides how unknown data
      is treated by the generic converters
    - ``position`` is the index of the value in a captured row; when omitted
      the column's place in its table listing is used
    - Instances are immutable once handed to the converters
    """
    name: str
    type_name: str | None = None
    length: int | None = None
    scale: int | None = None
    optional: bool = True
    position: int | None = None

    def base_type(self) -> str:
        """Upper-case type keyword without parameters or attributes.

        >>> Column('c', "enum('a','b')").base_type()
        'ENUM'
        >>> Column('c', 'int unsigned').base_type()
        'INT'
        >>> Column('c', None).base_type()
        ''
        """
        return type_keyword(self.type_name)

    def __repr__(self) -> str:
        return (f'Column(name={self.name!r}, type_name={self.type_name!r}, '
                f'optional={self.optional})')

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.
        """
        return {
            'name': self.name,
            'type_name': self.type_name,
            'length': self.length,
            'scale': self.scale,
            'optional': self.optional,
            'position': self.position,
            }

    @staticmethod
    def get_names(columns: list[Self]) -> list[str]:
        """Get column names from a list of Column objects.
        """
        return [col.name for col in columns]

    @staticmethod
    def get_column_by_name(columns: list[Self], name: str) -> Self | None:
        """Find a column by name in a list of Column objects.
        """
        for col in columns:
            if col.name == name:
                return col
        return None
