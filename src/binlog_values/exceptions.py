"""
Conversion-specific exception classes.
"""


class ConversionError(Exception):
    """Base class for all binlog value conversion errors.
    """


class TypeConversionError(ConversionError):
    """Error converting a raw binlog value into its output type.
    """


class SchemaError(ConversionError):
    """Error building an output schema or field.
    """


class ValidationError(ConversionError):
    """Error in input validation.
    """
