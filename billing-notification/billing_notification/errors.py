class InvalidEventError(ValueError):
    """Raised when an invocation event cannot be handled."""
