"""
Column and converter fixtures for conversion tests.

Provides column descriptors for the MySQL-specific types and a recording
stand-in for the generic converters, so delegation can be verified without
depending on the generic conversion rules.

Usage:
    def test_delegation(recording_fallback):
        converters = MySqlValueConverters(fallback=recording_fallback)
        converters.schema_builder(column)
        assert recording_fallback.calls[0][0] == 'schema_builder'
"""
import pytest
from binlog_values.column import Column
from binlog_values.schema import Field, Schema

UNKNOWN = object()


class RecordingFallback:
    """Fallback converters that record every call and return sentinels.
    """

    def __init__(self, unknown_result=UNKNOWN):
        self.calls = []
        self.unknown_result = unknown_result
        self.schema = Schema.string()
        self.convert = lambda data: ('fallback', data)

    def schema_builder(self, column):
        self.calls.append(('schema_builder', column))
        return self.schema

    def converter(self, column, field):
        self.calls.append(('converter', column, field))
        return self.convert

    def convert_integer(self, column, field, data):
        self.calls.append(('convert_integer', column, field, data))
        return ('integer', data)

    def convert_double(self, column, field, data):
        self.calls.append(('convert_double', column, field, data))
        return ('double', data)

    def handle_unknown_data(self, column, field, data):
        self.calls.append(('handle_unknown_data', column, field, data))
        return self.unknown_result

    def names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recording_fallback():
    """Fixture returning a fresh RecordingFallback"""
    return RecordingFallback()


@pytest.fixture
def year_column():
    return Column(name='built', type_name='YEAR(4)')


@pytest.fixture
def enum_column():
    return Column(name='size', type_name="ENUM('a','b','c')")


@pytest.fixture
def set_column():
    return Column(name='flags', type_name="SET('x','y','z')")


@pytest.fixture
def varchar_column():
    return Column(name='title', type_name='VARCHAR(255)')


@pytest.fixture
def required_int_column():
    return Column(name='qty', type_name='INT(11)', optional=False)


def make_field(column, schema=None):
    """Create a Field for a column, int32 unless a schema is given"""
    schema = schema or Schema.int32().as_optional(column.optional)
    return Field(column.name, schema)


@pytest.fixture
def field_for():
    """Fixture that provides make_field as a factory"""
    return make_field
