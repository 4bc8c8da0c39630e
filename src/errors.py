"""
Exceptions raised by the membership filter.
"""


class FilterError(Exception):
    """Base class for membership filter errors."""


class InvalidConfiguration(FilterError, ValueError):
    """Construction parameters are out of range (table count, start size)."""


class HashDomainViolation(FilterError, ValueError):
    """A hash or table size cannot be reduced to a valid table index."""
