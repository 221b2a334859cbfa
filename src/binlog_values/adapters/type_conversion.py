"""
Generic conversion of raw binlog values into event schema values.

This module handles the conversion of values handed over by the binlog
deserializer to the canonical output types (Binlog → Event direction only).

It provides:
1. Shared helpers for null detection and NumPy/Pandas scalar unwrapping
2. Numeric narrowing to fixed-width signed integers
3. A GenericValueConverters class building schemas and per-row converters
   for the standard SQL types
4. The unknown data handler invoked for unrecognized value shapes

Usage:
    converters = GenericValueConverters()

    schema = converters.schema_builder(column)
    field = Field(column.name, schema)
    convert = converters.converter(column, field)

    for row in rows:
        value = convert(row[index])
"""
import datetime
import decimal
import functools
import json
import logging
import math
import numbers
from collections.abc import Callable
from typing import Any, Protocol

import numpy as np
import pandas as pd

from binlog_values.adapters.type_mapping import generic_kind
from binlog_values.column import Column
from binlog_values.exceptions import TypeConversionError
from binlog_values.options import ConverterOptions
from binlog_values.schema import Date, Decimal, Field, Schema, Time, Timestamp
from binlog_values.schema import ZonedTimestamp

logger = logging.getLogger(__name__)

__all__ = [
    'ValueConverter',
    'FallbackConverters',
    'GenericValueConverters',
    'is_null',
    'unwrap_value',
    'is_number',
    'narrow_integral',
    'narrow_real',
]

ValueConverter = Callable[[Any], Any]

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.UTC)
EPOCH_DATE = EPOCH.date()
ONE_MILLI = datetime.timedelta(milliseconds=1)

# Wide enough for MySQL DECIMAL(65, 30)
DECIMAL_CONTEXT = decimal.Context(prec=100)


def is_null(value: Any) -> bool:
    """Check if a raw value represents an absent value.

    Covers None as well as NaN, ``pd.NA`` and ``NaT`` scalars. Decimal NaNs,
    signaling ones included, are checked without pandas.

    >>> is_null(None), is_null(float('nan')), is_null(0)
    (True, True, False)
    >>> is_null(decimal.Decimal('sNaN'))
    True
    """
    if value is None:
        return True
    if isinstance(value, decimal.Decimal):
        return value.is_nan()
    return bool(pd.api.types.is_scalar(value) and pd.isna(value))


def unwrap_value(value: Any) -> Any:
    """Convert NumPy scalars to the equivalent Python value.

    >>> unwrap_value(np.int16(45))
    45
    >>> unwrap_value('abc')
    'abc'
    """
    if isinstance(value, np.datetime64):
        return pd.Timestamp(value).to_pydatetime()
    if isinstance(value, np.timedelta64):
        return pd.Timedelta(value).to_pytimedelta()
    if isinstance(value, np.generic):
        return value.item()
    return value


def is_number(value: Any) -> bool:
    """Check for a numeric value; booleans are not numbers here.

    >>> is_number(3), is_number(decimal.Decimal('1.5')), is_number(True)
    (True, True, False)
    """
    if isinstance(value, bool | np.bool_):
        return False
    return isinstance(value, numbers.Real | decimal.Decimal)


def narrow_integral(value: int, bits: int) -> int:
    """Keep the low-order bits of an integer as a two's complement value.

    >>> narrow_integral(45, 32)
    45
    >>> narrow_integral(2**31, 32)
    -2147483648
    >>> narrow_integral(-129, 8)
    127
    """
    span = 1 << bits
    half = span >> 1
    return ((value + half) % span) - half


def narrow_real(value: Any, bits: int) -> int:
    """Truncate a real number toward zero, clamped to the signed range.

    >>> narrow_real(45.9, 32)
    45
    >>> narrow_real(-2.5, 32)
    -2
    >>> narrow_real(float('inf'), 16)
    32767
    """
    high = (1 << (bits - 1)) - 1
    low = -high - 1
    if math.isinf(float(value)):
        return high if value > 0 else low
    return max(low, min(high, int(value)))


def _to_integer(value: Any, bits: int) -> int:
    if isinstance(value, numbers.Integral):
        return narrow_integral(int(value), bits)
    return narrow_real(value, bits)


class FallbackConverters(Protocol):
    """Capabilities a specialized converter delegates to.
    """

    def schema_builder(self, column: Column) -> Schema | None: ...

    def converter(self, column: Column, field: Field) -> ValueConverter | None: ...

    def convert_integer(self, column: Column, field: Field, data: Any) -> Any: ...

    def convert_double(self, column: Column, field: Field, data: Any) -> Any: ...

    def handle_unknown_data(self, column: Column, field: Field, data: Any) -> Any: ...


class GenericValueConverters:
    """Schemas and converters for the standard SQL column types.

    Instances hold only their options and may be shared across threads.
    """

    def __init__(self, options: ConverterOptions | None = None) -> None:
        self.options = options or ConverterOptions()

    @property
    def default_offset(self) -> datetime.tzinfo:
        return self.options.default_offset

    def schema_builder(self, column: Column | None) -> Schema | None:
        """Build the output schema for a column.

        Args:
            column: Column descriptor; may be None

        Returns
            Schema, or None when the column type has no generic conversion
        """
        if column is None:
            logger.debug('No schema for missing column')
            return None

        kind = generic_kind(column.type_name, column.length)
        if kind is None:
            logger.warning(f'Unexpected type {column.type_name!r} for column {column.name!r}; column skipped')
            return None

        if kind == 'decimal':
            schema = Decimal.schema(column.scale or 0)
        else:
            schema = self._kind_schemas[kind]()
        return schema.as_optional(column.optional)

    def converter(self, column: Column, field: Field) -> ValueConverter | None:
        """Build the per-row converter for a column.

        Args:
            column: Column descriptor
            field: Output field the converted values are written to

        Returns
            Function converting one raw value, or None when the column type
            has no generic conversion
        """
        kind = generic_kind(column.type_name, column.length)
        if kind is None:
            return None
        method = getattr(self, self._kind_converters[kind])
        return functools.partial(method, column, field)

    _kind_schemas = {
        'boolean': Schema.boolean,
        'tinyint': Schema.int8,
        'short': Schema.int16,
        'integer': Schema.int32,
        'long': Schema.int64,
        'float': Schema.float32,
        'double': Schema.float64,
        'string': Schema.string,
        'bytes': Schema.bytes,
        'date': Date.schema,
        'time': Time.schema,
        'timestamp': Timestamp.schema,
        'timestamptz': ZonedTimestamp.schema,
        }

    _kind_converters = {
        'boolean': 'convert_boolean',
        'tinyint': 'convert_tinyint',
        'short': 'convert_short',
        'integer': 'convert_integer',
        'long': 'convert_long',
        'float': 'convert_float',
        'double': 'convert_double',
        'decimal': 'convert_decimal',
        'string': 'convert_string',
        'bytes': 'convert_bytes',
        'date': 'convert_date',
        'time': 'convert_time',
        'timestamp': 'convert_timestamp',
        'timestamptz': 'convert_timestamp_with_zone',
        }

    def _convert_integral(self, column: Column, field: Field, data: Any, bits: int) -> int | None:
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, bool):
            return int(data)
        if is_number(data):
            return _to_integer(data, bits)
        return self.handle_unknown_data(column, field, data)

    def convert_tinyint(self, column: Column, field: Field, data: Any) -> int | None:
        return self._convert_integral(column, field, data, 8)

    def convert_short(self, column: Column, field: Field, data: Any) -> int | None:
        return self._convert_integral(column, field, data, 16)

    def convert_integer(self, column: Column, field: Field, data: Any) -> int | None:
        """Convert a value to a 32-bit signed integer.

        Integral values keep their low-order 32 bits, other reals are
        truncated toward zero and clamped. Booleans become 1 or 0.
        """
        return self._convert_integral(column, field, data, 32)

    def convert_long(self, column: Column, field: Field, data: Any) -> int | None:
        return self._convert_integral(column, field, data, 64)

    def convert_double(self, column: Column, field: Field, data: Any) -> float | None:
        """Convert a value to a double precision float.
        """
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, bool):
            return 1.0 if data else 0.0
        if is_number(data):
            return float(data)
        return self.handle_unknown_data(column, field, data)

    def convert_float(self, column: Column, field: Field, data: Any) -> float | None:
        """Convert a value to a float carrying single precision.
        """
        value = self.convert_double(column, field, data)
        if value is None:
            return None
        return float(np.float32(value))

    def convert_decimal(self, column: Column, field: Field, data: Any) -> decimal.Decimal | None:
        """Convert a value to a Decimal at the column's scale.
        """
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, bool):
            value = decimal.Decimal(int(data))
        elif isinstance(data, decimal.Decimal):
            value = data
        elif isinstance(data, numbers.Integral):
            value = decimal.Decimal(int(data))
        elif isinstance(data, float):
            value = decimal.Decimal(repr(data))
        elif isinstance(data, str):
            try:
                value = decimal.Decimal(data.strip())
            except decimal.InvalidOperation:
                return self.handle_unknown_data(column, field, data)
        else:
            return self.handle_unknown_data(column, field, data)

        if column.scale is not None and value.is_finite():
            value = value.quantize(decimal.Decimal(1).scaleb(-column.scale), context=DECIMAL_CONTEXT)
        return value

    def convert_boolean(self, column: Column, field: Field, data: Any) -> bool | None:
        """Convert a value to a boolean; numbers and bit strings are true when non-zero.
        """
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, bool):
            return data
        if is_number(data):
            return data != 0
        if isinstance(data, bytes | bytearray):
            return any(data)
        return self.handle_unknown_data(column, field, data)

    def convert_string(self, column: Column, field: Field, data: Any) -> str | None:
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, str):
            return data
        if isinstance(data, bytes | bytearray | memoryview):
            return bytes(data).decode('utf-8', errors='replace')
        if isinstance(data, dict | list):
            return json.dumps(data)
        if is_number(data) or isinstance(data, bool):
            return str(data)
        return self.handle_unknown_data(column, field, data)

    def convert_bytes(self, column: Column, field: Field, data: Any) -> bytes | None:
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, bytes):
            return data
        if isinstance(data, bytearray | memoryview):
            return bytes(data)
        if isinstance(data, str):
            return data.encode('utf-8')
        return self.handle_unknown_data(column, field, data)

    def convert_date(self, column: Column, field: Field, data: Any) -> int | None:
        """Convert a date to the number of days since the epoch.
        """
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, datetime.datetime):
            data = data.date()
        if isinstance(data, datetime.date):
            return (data - EPOCH_DATE).days
        return self.handle_unknown_data(column, field, data)

    def convert_time(self, column: Column, field: Field, data: Any) -> int | None:
        """Convert a time of day or duration to milliseconds.

        MySQL ``TIME`` values may arrive as durations outside a single day.
        """
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, datetime.datetime):
            data = data.time()
        if isinstance(data, datetime.time):
            seconds = data.hour * 3600 + data.minute * 60 + data.second
            return seconds * 1000 + data.microsecond // 1000
        if isinstance(data, datetime.timedelta):
            return narrow_real(int(data / ONE_MILLI), 32)
        return self.handle_unknown_data(column, field, data)

    def convert_timestamp(self, column: Column, field: Field, data: Any) -> int | None:
        """Convert a timestamp to milliseconds since the epoch.

        Values without timezone information are taken as UTC.
        """
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, datetime.datetime):
            if data.tzinfo is None:
                data = data.replace(tzinfo=datetime.UTC)
            return (data - EPOCH) // ONE_MILLI
        if isinstance(data, datetime.date):
            return (data - EPOCH_DATE).days * 86_400_000
        return self.handle_unknown_data(column, field, data)

    def convert_timestamp_with_zone(self, column: Column, field: Field, data: Any) -> str | None:
        """Convert a timestamp to an ISO-8601 string with offset.

        Values without timezone information are placed in the default offset.
        """
        if is_null(data):
            return None
        data = unwrap_value(data)
        if isinstance(data, datetime.datetime):
            if data.tzinfo is None:
                logger.debug(f'Applying default offset to {data} for column {column.name!r}')
                data = data.replace(tzinfo=self.default_offset)
            return data.isoformat()
        if isinstance(data, datetime.date):
            return datetime.datetime.combine(data, datetime.time(), tzinfo=self.default_offset).isoformat()
        return self.handle_unknown_data(column, field, data)

    def handle_unknown_data(self, column: Column, field: Field, data: Any) -> Any:
        """Handle a value whose shape matches no expected representation.

        Optional columns and fields are logged and converted to None. Required
        ones raise TypeConversionError unless ``handle_unknown_as_null`` is set.
        """
        message = (f'Unexpected value for type {column.type_name!r} and column {column.name!r}: '
                   f'class={type(data).__name__}')
        if column.optional or field.schema.optional or self.options.handle_unknown_as_null:
            logger.warning(message)
            return None
        raise TypeConversionError(message)
