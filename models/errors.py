"""
Domain errors for the inventory tracker.
"""


class ValidationError(ValueError):
    """Raised when a record or argument does not satisfy the data model."""
