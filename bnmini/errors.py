class NotFoundError(LookupError):
    """Raised when a variable (or a variable name) is not part of a network."""
