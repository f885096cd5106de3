# zoneplanner/core/exceptions.py


class PreconditionViolation(ValueError):
    """
    Raised when a core algorithm is called with input its caller should have rejected.
    """
