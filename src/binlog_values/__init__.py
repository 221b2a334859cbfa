"""
Conversion of MySQL binlog column values into typed event values.

Schemas and converters can be built either as:
- Module functions: bv.resolve_schema(column), bv.build_converter(column, field)
- MySqlValueConverters methods: converters.schema_builder(column), converters.converter(column, field)

The module functions use a shared default MySqlValueConverters instance.
"""
__version__ = '0.1.0'

from binlog_values.adapters.type_conversion import GenericValueConverters
from binlog_values.adapters.type_mapping import TypeClass, classify
from binlog_values.column import Column
from binlog_values.exceptions import ConversionError, SchemaError
from binlog_values.exceptions import TypeConversionError, ValidationError
from binlog_values.mysql import MySqlValueConverters, build_converter
from binlog_values.mysql import resolve_schema
from binlog_values.options import ConverterOptions
from binlog_values.row import RowConverter
from binlog_values.schema import Field, Schema, SchemaType
from binlog_values.values import Year

__all__ = [
    'classify',
    'resolve_schema',
    'build_converter',
    'TypeClass',
    'MySqlValueConverters',
    'GenericValueConverters',
    'RowConverter',
    'ConverterOptions',
    'Column',
    'Field',
    'Schema',
    'SchemaType',
    'Year',
    'ConversionError',
    'SchemaError',
    'TypeConversionError',
    'ValidationError',
]
