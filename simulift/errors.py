from __future__ import annotations


class DomainError(ValueError):
    """A denominator or divisor that must be positive was not."""


class RangeWarning(UserWarning):
    """Input outside its documented range; the computation still proceeds."""
