class MarkovError(Exception):
    """Base class for errors raised by the markov chain package."""


class InvalidPairSize(MarkovError, ValueError):
    """Raised when a pair's current state does not match the chain's pair size."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"mismatch pair size from chain and given pair: expected {expected}, got {actual}"
        )


class EmptyChainError(MarkovError, ValueError):
    """Raised when a random state is requested from a chain with no states."""

    def __init__(self, message="Chain is empty. Train it before building sequences."):
        super().__init__(message)
