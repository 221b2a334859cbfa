"""
Type classification for captured MySQL columns.

This module provides a single place where declared column type names are
mapped to conversion rules:

1. ``classify``: the MySQL-specific classes (YEAR, ENUM, SET) handled by
   MySqlValueConverters, everything else is OTHER
2. ``generic_kind``: the conversion kind used by the generic converters for
   standard SQL types

The module focuses solely on type identification, not conversion.
"""
import enum
import logging

from binlog_values.column import type_keyword

logger = logging.getLogger(__name__)

__all__ = ['TypeClass', 'matches', 'classify', 'generic_kind']


class TypeClass(enum.Enum):
    YEAR = 'YEAR'
    ENUM = 'ENUM'
    SET = 'SET'
    OTHER = 'OTHER'


_SPECIALIZED = (TypeClass.YEAR, TypeClass.ENUM, TypeClass.SET)


def matches(upper_type_name: str | None, upper_match: str) -> bool:
    """Check if an upper-case type name is, or is parameterized from, a keyword.

    >>> matches('YEAR', 'YEAR')
    True
    >>> matches("ENUM('A','B')", 'ENUM')
    True
    >>> matches('YEARLY', 'YEAR')
    False
    >>> matches(None, 'SET')
    False
    """
    if upper_type_name is None:
        return False
    return upper_type_name == upper_match or upper_type_name.startswith(upper_match + '(')


def classify(type_name: str | None) -> TypeClass:
    """Classify a declared column type name.

    Matching is case-insensitive and tolerates parameterized declarations.

    >>> classify('year')
    <TypeClass.YEAR: 'YEAR'>
    >>> classify("enum('a','b')")
    <TypeClass.ENUM: 'ENUM'>
    >>> classify('varchar(32)')
    <TypeClass.OTHER: 'OTHER'>
    >>> classify(None)
    <TypeClass.OTHER: 'OTHER'>
    """
    if not isinstance(type_name, str):
        return TypeClass.OTHER
    upper = type_name.upper()
    for type_class in _SPECIALIZED:
        if matches(upper, type_class.value):
            return type_class
    return TypeClass.OTHER


# Base keyword -> generic conversion kind
mysql_kinds = {
    'BOOL': 'boolean',
    'BOOLEAN': 'boolean',
    'TINYINT': 'tinyint',
    'SMALLINT': 'short',
    'MEDIUMINT': 'integer',
    'INT': 'integer',
    'INTEGER': 'integer',
    'BIGINT': 'long',
    'FLOAT': 'float',
    'DOUBLE': 'double',
    'REAL': 'double',
    'DECIMAL': 'decimal',
    'NUMERIC': 'decimal',
    'DEC': 'decimal',
    'FIXED': 'decimal',
    'CHAR': 'string',
    'VARCHAR': 'string',
    'TINYTEXT': 'string',
    'TEXT': 'string',
    'MEDIUMTEXT': 'string',
    'LONGTEXT': 'string',
    'JSON': 'string',
    'BINARY': 'bytes',
    'VARBINARY': 'bytes',
    'TINYBLOB': 'bytes',
    'BLOB': 'bytes',
    'MEDIUMBLOB': 'bytes',
    'LONGBLOB': 'bytes',
    'DATE': 'date',
    'TIME': 'time',
    'DATETIME': 'timestamp',
    'TIMESTAMP': 'timestamptz',
    }

# Unsigned integers need the next wider kind to hold their range
unsigned_kinds = {
    'tinyint': 'short',
    'short': 'integer',
    'integer': 'long',
    'long': 'decimal',
    }


def generic_kind(type_name: str | None, length: int | None = None) -> str | None:
    """Map a declared type name to the generic conversion kind.

    Returns None when the type is not known to the generic converters.

    >>> generic_kind('varchar(255)')
    'string'
    >>> generic_kind('int(10) unsigned')
    'long'
    >>> generic_kind('bit', 1)
    'boolean'
    >>> generic_kind('bit(8)', 8)
    'bytes'
    >>> generic_kind('geometry') is None
    True
    """
    keyword = type_keyword(type_name)
    if not keyword:
        return None

    if keyword == 'BIT':
        return 'boolean' if length in {None, 1} else 'bytes'

    kind = mysql_kinds.get(keyword)
    if kind is None:
        logger.debug(f'No generic conversion for type {type_name!r}')
        return None

    if 'UNSIGNED' in type_name.upper().split():
        kind = unsigned_kinds.get(kind, kind)
    return kind
