"""
Configuration parameters for the prime-table membership filter.
"""

import operator
from dataclasses import dataclass

from errors import InvalidConfiguration

# Filter Defaults
DEFAULT_START_SIZE = 10_000  # Table 0 is the first prime above this
DEFAULT_NUM_TABLES = 10  # Number of prime-sized bit tables

# Hash Domain
HASH_BITS = 64  # Hashes are reduced into an unsigned 64-bit domain


@dataclass(frozen=True)
class FilterConfig:
    """Validated construction parameters for a PrimeTableFilter."""

    start_size: int = DEFAULT_START_SIZE
    num_tables: int = DEFAULT_NUM_TABLES

    def __post_init__(self):
        for field_name in ("start_size", "num_tables"):
            value = getattr(self, field_name)
            # bool is an int subclass but never a meaningful size
            if isinstance(value, bool):
                raise InvalidConfiguration(
                    f"{field_name} must be an integer, got {value!r}"
                )
            try:
                number = operator.index(value)
            except TypeError:
                raise InvalidConfiguration(
                    f"{field_name} must be an integer, got {value!r}"
                ) from None
            # Store numpy integers and the like as plain ints
            object.__setattr__(self, field_name, number)

        if self.num_tables < 1:
            raise InvalidConfiguration(
                f"num_tables must be at least 1, got {self.num_tables}"
            )
        if self.start_size < 0:
            raise InvalidConfiguration(
                f"start_size must be non-negative, got {self.start_size}"
            )
