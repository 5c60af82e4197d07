"""Exceptions raised at the variant engine's input boundary.

The resolution functions themselves never raise; they return sentinels.
"""


class VariantEngineError(Exception):
    """Base class for variant engine errors."""


class InvalidProductRecord(VariantEngineError):
    """A product payload could not be turned into a ProductRecord."""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors or {}

    def __str__(self):
        if not self.errors:
            return super().__str__()
        fields = ', '.join(sorted(str(key) for key in self.errors))
        return f"{super().__str__()} (fields: {fields})"
