"""
Custom exceptions for the lexicon.
"""


class NullArgumentError(TypeError):
    """
    Raised when a required argument is None.

    Raised synchronously and never caught inside the package.
    """

    def __init__(self, argument: str):
        """
        Initialize null argument error.

        Args:
            argument: Name of the parameter that was None.
        """
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class InvariantError(AssertionError):
    """
    Raised when the tree fails its well-formedness check.

    This is a programmer error: it never happens to a lexicon that is only
    touched through its public methods.
    """

    def __init__(self, where: str):
        """
        Initialize invariant error.

        Args:
            where: Operation boundary at which the check failed,
                e.g. "start of add()".
        """
        self.where = where
        super().__init__(f"invariant false at {where}")
