"""Error kinds raised by the aggregation pipeline.

All of them are recoverable: by default the pipeline logs them and degrades
its output (fewer records, zero contributions, empty series). Passing
``strict=True`` to the pipeline functions raises them instead.
"""

from __future__ import annotations


class SuperstoreChartsError(Exception):
    """Base class for package errors."""


class ParseError(SuperstoreChartsError, ValueError):
    """An `Order Date` value could not be parsed into a calendar year."""

    def __init__(self, value: object, row: int | None = None) -> None:
        self.value = value
        self.row = row
        where = f" (row {row})" if row is not None else ""
        super().__init__(f"Unparseable order date {value!r}{where}")


class InvalidMetricError(SuperstoreChartsError, ValueError):
    """A metric field (Profit or Sales) is not a finite decimal number."""

    def __init__(self, field: str, value: object, row: int | None = None) -> None:
        self.field = field
        self.value = value
        self.row = row
        where = f" (row {row})" if row is not None else ""
        super().__init__(f"Non-numeric {field} value {value!r}{where}")


class UnknownKeyError(SuperstoreChartsError, KeyError):
    """The selected group key is not present in the grouped table."""

    def __init__(self, key: object, available: list[object]) -> None:
        self.key = key
        self.available = available
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown group key {self.key!r}; available keys: {self.available!r}"
