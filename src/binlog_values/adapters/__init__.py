"""
Conversion adapters package.

This package provides the following components:

- type_mapping: Column type classification (no conversion)
- type_conversion: Generic conversion of raw binlog values into event values

Type conversion principles:
1. Classification happens once per column, from its declared type name
2. Conversion happens per row, through the function built for the column
3. Unrecognized value shapes go to the unknown data handler, never dropped
"""

from binlog_values.adapters.type_mapping import *
from binlog_values.adapters.type_conversion import GenericValueConverters
from binlog_values.adapters.type_conversion import FallbackConverters, ValueConverter
