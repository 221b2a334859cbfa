"""Row converter turning captured row values into event field dictionaries."""
import logging
from collections.abc import Sequence
from typing import Any

from binlog_values.adapters.type_conversion import ValueConverter
from binlog_values.column import Column
from binlog_values.exceptions import SchemaError
from binlog_values.mysql import MySqlValueConverters
from binlog_values.schema import Field, Schema

logger = logging.getLogger(__name__)


class RowConverter:
    """Per-table converter for binlog rows.

    Schemas are resolved and converters built once, at construction. Columns
    without a schema are skipped.
    """

    def __init__(self, columns: Sequence[Column],
                 converters: MySqlValueConverters | None = None) -> None:
        """Initialize with the captured columns of a table.

        Args:
            columns: Column descriptors; columns without a position are read
                from their index in this sequence
            converters: Converters to use; the MySQL defaults when omitted
        """
        converters = converters or MySqlValueConverters()
        names = [col.name for col in columns]
        if len(set(names)) != len(names):
            raise SchemaError(f'Duplicate column names in {names}')

        self._entries: list[tuple[int, Field, ValueConverter]] = []
        for index, column in enumerate(columns):
            position = column.position if column.position is not None else index
            schema = converters.schema_builder(column)
            if schema is None:
                logger.debug(f'Skipping column {column.name!r} of type {column.base_type() or None}')
                continue
            field = Field(column.name, schema, index=len(self._entries))
            convert = converters.converter(column, field)
            if convert is None:
                logger.debug(f'No converter for column {column.name!r}; column skipped')
                continue
            self._entries.append((position, field, convert))

    @property
    def fields(self) -> list[Field]:
        return [field for _, field, _ in self._entries]

    @property
    def schemas(self) -> dict[str, Schema]:
        return {field.name: field.schema for _, field, _ in self._entries}

    def __call__(self, values: Sequence[Any]) -> dict[str, Any]:
        """Convert a row of raw values to a dictionary keyed by field name.

        Args:
            values: Raw column values, indexed by column position

        Returns
            Dictionary mapping field names to converted values
        """
        return {
            field.name: convert(values[position])
            for position, field, convert in self._entries
            }
