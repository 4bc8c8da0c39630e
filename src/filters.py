"""
Membership filters sharing a unified interface.

PrimeTableFilter is a Bloom filter variant: instead of k hash functions
over one bit array, it keeps k bit tables of distinct prime sizes and
indexes every table with the same scalar hash, reduced modulo that
table's size.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

import config
from config import FilterConfig
from hashing import canonical_hash, index
from primes import prime_sequence

logger = logging.getLogger(__name__)


def _product_percent(fractions):
    rate = 1.0
    for fraction in fractions:
        rate *= fraction
    return rate * 100.0


class BaseFilter:
    """Interface shared by membership filters."""

    def __init__(self):
        self.name = "Base"

    def add(self, key):
        raise NotImplementedError

    def delete(self, key):
        raise NotImplementedError

    def __contains__(self, key):
        raise NotImplementedError

    def size_bits(self):
        raise NotImplementedError


@dataclass(frozen=True)
class FilterStats:
    """Point-in-time snapshot of a PrimeTableFilter's occupancy."""

    table_sizes: Tuple[int, ...]
    bits_set: Tuple[int, ...]
    occupancy: Tuple[float, ...]
    size_bits: int
    estimated_false_positive_rate: float

    def size_ratio(self, data_size):
        """Filter size relative to the data it summarises (both in the same unit)."""
        if data_size <= 0:
            raise ValueError(f"data_size must be positive, got {data_size}")
        return self.size_bits / data_size


class PrimeTableFilter(BaseFilter):
    """
    Set-membership filter over prime-sized bit tables.

    Table sizes are strictly increasing primes, the first above
    `start_size`. `hash_func` must be deterministic for equal values for
    as long as the filter lives; Python's built-in hash qualifies within a
    single process.
    """

    def __init__(
        self,
        start_size=config.DEFAULT_START_SIZE,
        num_tables=config.DEFAULT_NUM_TABLES,
        hash_func=hash,
    ):
        super().__init__()
        self.name = "PrimeTableFilter"
        self.config = FilterConfig(start_size=start_size, num_tables=num_tables)
        self.hash_func = hash_func

        self._tables = [
            np.zeros(size, dtype=bool)
            for size in prime_sequence(self.config.start_size, self.config.num_tables)
        ]
        logger.debug(
            "Allocated %d tables with prime sizes %s",
            len(self._tables),
            self.table_sizes,
        )

    @classmethod
    def from_config(cls, filter_config, hash_func=hash):
        return cls(
            start_size=filter_config.start_size,
            num_tables=filter_config.num_tables,
            hash_func=hash_func,
        )

    def _indices(self, value):
        # Resolve every slot up front so a bad hash never leaves a partial write
        h = canonical_hash(value, self.hash_func)
        return [index(h, table.size) for table in self._tables]

    def add(self, value):
        """Marks value as present in every table."""
        for table, slot in zip(self._tables, self._indices(value)):
            table[slot] = True

    def update(self, values):
        """Adds every value from an iterable."""
        count = 0
        for value in values:
            self.add(value)
            count += 1
        logger.debug("Inserted %d values into %s", count, self.name)

    def delete(self, value):
        """Always raises: a set bit may be shared with other values, so nothing can be removed."""
        raise NotImplementedError(f"{self.name} does not support deletion")

    def contains(self, value):
        """True if value might have been added; False means it never was."""
        for table, slot in zip(self._tables, self._indices(value)):
            if not table[slot]:
                return False
        return True

    def __contains__(self, value):
        return self.contains(value)

    def estimated_false_positive_rate(self):
        """
        Estimated false positive rate, as a percentage.

        Multiplies the fraction of set bits in each table, treating each
        table's occupancy as an independent collision probability. The
        tables share one hash, so this is an approximation rather than an
        exact figure. It is recomputed from current occupancy on each call.
        """
        return _product_percent(self.occupancy())

    @property
    def num_tables(self):
        return len(self._tables)

    @property
    def table_sizes(self):
        return tuple(table.size for table in self._tables)

    @property
    def tables(self):
        """Read-only views of the bit tables."""
        views = []
        for table in self._tables:
            view = table.view()
            view.flags.writeable = False
            views.append(view)
        return tuple(views)

    def size_bits(self):
        # One slot per bit, summed across tables
        return sum(self.table_sizes)

    def bits_set(self):
        return tuple(int(np.count_nonzero(table)) for table in self._tables)

    def occupancy(self):
        return tuple(
            count / size for count, size in zip(self.bits_set(), self.table_sizes)
        )

    def stats(self):
        """Snapshot of table sizes, occupancy and the estimated rate."""
        sizes = self.table_sizes
        counts = self.bits_set()
        fractions = tuple(count / size for count, size in zip(counts, sizes))

        return FilterStats(
            table_sizes=sizes,
            bits_set=counts,
            occupancy=fractions,
            size_bits=sum(sizes),
            estimated_false_positive_rate=_product_percent(fractions),
        )
