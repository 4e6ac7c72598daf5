"""Base exceptions for stylecheck domain."""


class StyleCheckError(Exception):
    """Root exception for all stylecheck errors.

    All domain exceptions inherit from this.
    Every StyleCheckError is fatal for the current invocation.
    """
