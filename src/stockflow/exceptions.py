"""Project-level exceptions.

Field-level input problems use ``protean.exceptions.ValidationError`` and
missing records use ``protean.exceptions.ObjectNotFoundError``; the classes
below cover the two remaining failure kinds.
"""


class StockflowError(Exception):
    """Base class for StockFlow errors that are not Protean validation errors."""


class ConflictError(StockflowError):
    """A business rule rejected the operation (duplicate SKU, insufficient stock)."""

    def __init__(self, messages: dict[str, list[str]]):
        self.messages = messages
        super().__init__(messages)


class AlertGenerationError(StockflowError):
    """The low-stock report could not be computed because a store read failed."""
