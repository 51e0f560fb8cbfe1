class NoValueError(LookupError):
    """Raised by ``get()`` when a wrapper holds no value."""

    def __init__(self, message: str = "No value present"):
        super().__init__(message)


def require_callable(fn, name: str):
    """Reject a missing or non-callable function argument."""
    if not callable(fn):
        raise TypeError(f"{name} must be callable, got {type(fn).__name__}")
    return fn
