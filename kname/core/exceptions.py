"""Exception types raised by the name generation core."""


class KnameError(Exception):
    """Base class for all kname errors."""


class EmptyResultError(KnameError):
    """No record in the dataset satisfies the supplied filter."""


class InsufficientCandidatesError(KnameError):
    """Unique sampling asked for more distinct records than are available."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} unique names but only {available} "
            f"names match the filter criteria"
        )


class LoadError(KnameError):
    """The name dataset could not be read or parsed."""
