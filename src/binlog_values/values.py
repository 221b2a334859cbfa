"""Value shapes produced by the binlog deserializer."""
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Year:
    """Calendar year as handed over for MySQL ``YEAR`` columns.

    >>> Year(2016).value
    2016
    """
    value: int
