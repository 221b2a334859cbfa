"""
MySQL-specific customization of the conversions of binlog values.

MySQL ``YEAR``, ``ENUM`` and ``SET`` columns are handed over by the binlog
client in shapes that the generic converters do not know about. This module
recognizes those column types and handles them here; every other type is
delegated, unmodified, to the generic converters.

``TIMESTAMP`` values are always stored in UTC by MySQL and replicated in that
form, so the default offset used for values without timezone information is
UTC unless configured otherwise.
"""
import datetime
import logging
from typing import Any

import pandas as pd

from binlog_values.adapters.type_conversion import FallbackConverters
from binlog_values.adapters.type_conversion import GenericValueConverters
from binlog_values.adapters.type_conversion import ValueConverter, is_null
from binlog_values.adapters.type_conversion import is_number, narrow_integral
from binlog_values.adapters.type_conversion import narrow_real, unwrap_value
from binlog_values.adapters.type_mapping import TypeClass, classify
from binlog_values.column import Column
from binlog_values.options import ConverterOptions
from binlog_values.schema import Field, Schema, Year
from binlog_values.values import Year as YearValue

logger = logging.getLogger(__name__)

__all__ = [
    'MySqlValueConverters',
    'classify',
    'resolve_schema',
    'build_converter',
]


class MySqlValueConverters:
    """Schemas and converters for MySQL columns.

    Holds the fallback converters and never mutates them; instances are safe
    to share across threads.
    """

    def __init__(self, fallback: FallbackConverters | None = None,
                 options: ConverterOptions | None = None) -> None:
        """Initialize with the converters used for all non-MySQL-specific types.

        Args:
            fallback: Generic converters; built from ``options`` when omitted
            options: Converter options, only used when ``fallback`` is omitted
        """
        self.fallback = fallback if fallback is not None else GenericValueConverters(options)

    def schema_builder(self, column: Column | None) -> Schema | None:
        """Build the output schema for a column.

        Args:
            column: Column descriptor

        Returns
            Year schema for YEAR, int32 for ENUM, int64 for SET, otherwise
            whatever the fallback produces
        """
        type_class = classify(column.type_name) if column is not None else TypeClass.OTHER
        if type_class is TypeClass.YEAR:
            return Year.schema().as_optional(column.optional)
        if type_class is TypeClass.ENUM:
            return Schema.int32().as_optional(column.optional)
        if type_class is TypeClass.SET:
            return Schema.int64().as_optional(column.optional)
        return self.fallback.schema_builder(column)

    def converter(self, column: Column, field: Field) -> ValueConverter | None:
        """Build the per-row converter for a column.

        ENUM values arrive as their ordinal and are converted as integers.
        SET values are converted as doubles although the schema is int64.

        Args:
            column: Column descriptor
            field: Output field the converted values are written to

        Returns
            Function converting one raw value
        """
        type_class = classify(column.type_name)
        logger.debug(f'Converter for column {column.name!r} of class {type_class.name}')
        if type_class is TypeClass.YEAR:
            return lambda data: self.convert_year(column, field, data)
        if type_class is TypeClass.ENUM:
            return lambda data: self.fallback.convert_integer(column, field, data)
        if type_class is TypeClass.SET:
            # TODO: decode SET bitmasks as int64 once consumers accept a shape change
            return lambda data: self.fallback.convert_double(column, field, data)
        return self.fallback.converter(column, field)

    def convert_year(self, column: Column, field: Field, data: Any) -> int | None:
        """Convert a value for a MySQL ``YEAR`` column.

        The binlog hands over a Year, while the JDBC-style paths return either
        a date or a short.

        Args:
            column: Column definition describing the value
            field: Field definition
            data: Raw value

        Returns
            Year number, or the result of the unknown data handler
        """
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, YearValue):
            return data.value
        if isinstance(data, pd.Period) and data.freqstr.startswith(('Y', 'A')):
            return data.year
        if isinstance(data, datetime.date):
            return data.year
        if is_number(data):
            if isinstance(data, int):
                return narrow_integral(data, 32)
            return narrow_real(data, 32)
        return self.fallback.handle_unknown_data(column, field, data)


_default_converters = MySqlValueConverters()


def resolve_schema(column: Column | None) -> Schema | None:
    """Build the output schema for a column with the default converters.
    """
    return _default_converters.schema_builder(column)


def build_converter(column: Column, field: Field) -> ValueConverter | None:
    """Build the per-row converter for a column with the default converters.
    """
    return _default_converters.converter(column, field)
