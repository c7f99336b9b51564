"""Exceptions raised while building or configuring the precomputed tables."""


class TableIntegrityError(ValueError):
    """A precomputed table violates its ordering or boundary invariants."""
