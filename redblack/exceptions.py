"""
Exceptions raised by the red-black tree package.
"""


class EmptyTreeError(ValueError):
    """Raised when a query needs at least one value but the tree is empty."""


class InvariantViolation(AssertionError):
    """Raised by the invariant checker, never by insertion."""

    def __init__(self, rule: str, node, message: str):
        self.rule = rule
        self.node = node
        super().__init__(f"{rule}: {message}")
