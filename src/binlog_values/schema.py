"""
Output schema model for converted binlog values.

This module provides:
- SchemaType: physical encodings available to the event schema
- Schema: a physical type plus an optional logical name and parameters
- Logical types: Year, Date, Time, Timestamp, ZonedTimestamp, Decimal
- Field: named, positioned schema for one output column

Logical types keep the semantic meaning of a value (a calendar year is not just
an integer) while sharing the physical encodings with plain values.
"""
import enum
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Self

from binlog_values.exceptions import SchemaError

__all__ = [
    'SchemaType',
    'Schema',
    'Year',
    'Date',
    'Time',
    'Timestamp',
    'ZonedTimestamp',
    'Decimal',
    'Field',
]


class SchemaType(enum.Enum):
    INT8 = 'int8'
    INT16 = 'int16'
    INT32 = 'int32'
    INT64 = 'int64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'
    BOOLEAN = 'boolean'
    STRING = 'string'
    BYTES = 'bytes'


@dataclass(frozen=True)
class Schema:
    """Shape of a converted value.

    >>> Schema.int32()
    Schema(type=int32, optional=False)
    >>> Schema.int64().as_optional().optional
    True
    """
    type: SchemaType
    name: str | None = None
    optional: bool = False
    parameters: MappingProxyType = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def __post_init__(self):
        if not isinstance(self.parameters, MappingProxyType):
            object.__setattr__(self, 'parameters', MappingProxyType(dict(self.parameters)))

    def as_optional(self, optional: bool = True) -> Self:
        """Return a copy with the given optional flag.
        """
        if self.optional == optional:
            return self
        return replace(self, optional=optional)

    def __repr__(self) -> str:
        name = f', name={self.name!r}' if self.name else ''
        params = f', parameters={dict(self.parameters)!r}' if self.parameters else ''
        return f'Schema(type={self.type.value}{name}, optional={self.optional}{params})'

    @classmethod
    def int8(cls) -> Self:
        return cls(SchemaType.INT8)

    @classmethod
    def int16(cls) -> Self:
        return cls(SchemaType.INT16)

    @classmethod
    def int32(cls) -> Self:
        return cls(SchemaType.INT32)

    @classmethod
    def int64(cls) -> Self:
        return cls(SchemaType.INT64)

    @classmethod
    def float32(cls) -> Self:
        return cls(SchemaType.FLOAT32)

    @classmethod
    def float64(cls) -> Self:
        return cls(SchemaType.FLOAT64)

    @classmethod
    def boolean(cls) -> Self:
        return cls(SchemaType.BOOLEAN)

    @classmethod
    def string(cls) -> Self:
        return cls(SchemaType.STRING)

    @classmethod
    def bytes(cls) -> Self:
        return cls(SchemaType.BYTES)


class Year:
    """Calendar year number, e.g. ``2016``.
    """
    SCHEMA_NAME = 'binlog_values.time.Year'

    @classmethod
    def schema(cls) -> Schema:
        return Schema(SchemaType.INT32, name=cls.SCHEMA_NAME)


class Date:
    """Number of days since the epoch.
    """
    SCHEMA_NAME = 'binlog_values.time.Date'

    @classmethod
    def schema(cls) -> Schema:
        return Schema(SchemaType.INT32, name=cls.SCHEMA_NAME)


class Time:
    """Number of milliseconds past midnight.
    """
    SCHEMA_NAME = 'binlog_values.time.Time'

    @classmethod
    def schema(cls) -> Schema:
        return Schema(SchemaType.INT32, name=cls.SCHEMA_NAME)


class Timestamp:
    """Number of milliseconds since the epoch, with no timezone information.
    """
    SCHEMA_NAME = 'binlog_values.time.Timestamp'

    @classmethod
    def schema(cls) -> Schema:
        return Schema(SchemaType.INT64, name=cls.SCHEMA_NAME)


class ZonedTimestamp:
    """ISO-8601 timestamp string carrying its offset.
    """
    SCHEMA_NAME = 'binlog_values.time.ZonedTimestamp'

    @classmethod
    def schema(cls) -> Schema:
        return Schema(SchemaType.STRING, name=cls.SCHEMA_NAME)


class Decimal:
    """Exact decimal with a fixed scale.
    """
    SCHEMA_NAME = 'binlog_values.data.Decimal'
    SCALE_FIELD = 'scale'

    @classmethod
    def schema(cls, scale: int) -> Schema:
        return Schema(SchemaType.BYTES, name=cls.SCHEMA_NAME,
                      parameters={cls.SCALE_FIELD: str(scale)})


@dataclass(frozen=True)
class Field:
    """Output-side field of the event schema.
    """
    name: str
    schema: Schema
    index: int = 0

    def __post_init__(self):
        if not self.name:
            raise SchemaError('Field name must not be empty')
        if not isinstance(self.schema, Schema):
            raise SchemaError(f'Field {self.name!r} requires a Schema, got {type(self.schema).__name__}')

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.
        """
        return {
            'name': self.name,
            'index': self.index,
            'type': self.schema.type.value,
            'logical': self.schema.name,
            'optional': self.schema.optional,
            }
