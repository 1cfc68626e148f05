class InvalidArgumentError(ValueError):
    """Raised when an argument cannot produce a curve (e.g. fewer than one segment per span)."""
