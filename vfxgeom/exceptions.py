"""Exception types raised by the geometry routines."""


class DgalError(RuntimeError):
    """General geometry library error."""


class DgalSubprocessError(DgalError):
    """A subordinate step of an operation failed."""