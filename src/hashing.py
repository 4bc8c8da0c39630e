"""
Hash-to-index mapping shared by every table of the filter.

All tables are indexed by the same scalar hash, reduced modulo each
table's size. Hashes are first reinterpreted as unsigned 64-bit values so
the most negative signed hash cannot produce a negative index.
"""

import operator

import config
from errors import HashDomainViolation

HASH_MASK = (1 << config.HASH_BITS) - 1
_SIGNED_MIN = -(1 << (config.HASH_BITS - 1))


def to_unsigned(hash_value):
    """Maps a signed or unsigned 64-bit hash into [0, 2**64)."""
    if isinstance(hash_value, bool):
        raise HashDomainViolation("hash must be an integer, got bool")
    try:
        hash_value = operator.index(hash_value)
    except TypeError:
        raise HashDomainViolation(
            f"hash must be an integer, got {type(hash_value).__name__}"
        ) from None
    if hash_value < _SIGNED_MIN or hash_value > HASH_MASK:
        raise HashDomainViolation(
            f"hash {hash_value} is outside the {config.HASH_BITS}-bit domain"
        )

    # Two's complement reinterpretation; -2**63 becomes 2**63
    return hash_value & HASH_MASK


def canonical_hash(value, hash_func=hash):
    """Hashes value with hash_func and returns it in the unsigned domain."""
    return to_unsigned(hash_func(value))


def index(hash_value, table_size):
    """Returns the slot of a non-negative hash in a table of table_size bits."""
    if table_size < 1:
        raise HashDomainViolation(f"table size must be positive, got {table_size}")
    if hash_value < 0:
        raise HashDomainViolation(f"hash must be non-negative, got {hash_value}")

    return hash_value % table_size
