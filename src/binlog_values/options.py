import datetime
from dataclasses import dataclass

from binlog_values.exceptions import ValidationError

__all__ = ['ConverterOptions']


@dataclass
class ConverterOptions:
    """Options

    - default_offset: zone used only when a value without timezone information
      is converted to a value that requires one (default: UTC)
    - handle_unknown_as_null: log and return None for unrecognized values even
      when the column is required (default: False)
    """
    default_offset: datetime.tzinfo | None = None
    handle_unknown_as_null: bool = False

    def __post_init__(self):
        if self.default_offset is None:
            self.default_offset = datetime.UTC
        if not isinstance(self.default_offset, datetime.tzinfo):
            raise ValidationError(
                f'default_offset must be a tzinfo, got {type(self.default_offset).__name__}')
