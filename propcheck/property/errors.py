"""Property-related exceptions."""


class PreconditionFailure(Exception):
    """Raised by pre() to discard the current trial without judging it."""

    def __init__(self, message: str = "Pre-condition failed"):
        super().__init__(message)
