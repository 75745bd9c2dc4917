"""Exceptions raised by the search core."""


class StudentSearchError(Exception):
    """Base exception for all StudentSearch errors."""

    pass


class EmptyCorpusError(StudentSearchError):
    """Raised when a vocabulary is fitted, or an engine initialized, with no records."""

    def __init__(self, message: str = "Cannot fit a vocabulary on an empty corpus"):
        super().__init__(message)


class UninitializedEngineError(StudentSearchError):
    """Raised when a search runs before the engine was initialized successfully."""

    def __init__(
        self, message: str = "Search engine is not initialized; call initialize() first"
    ):
        super().__init__(message)


class VocabularyMismatchError(StudentSearchError):
    """
    Raised when two feature vectors produced by different vocabularies are compared.

    Such a comparison has no meaning, so it is treated as an internal
    invariant violation rather than a recoverable search failure.
    """

    pass


class DimensionMismatchError(StudentSearchError):
    """Raised when compared vectors differ in length."""

    def __init__(self, left: int, right: int):
        super().__init__(f"Vector dimensions must match: {left} != {right}")
        self.left = left
        self.right = right
