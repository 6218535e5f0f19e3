"""
bidsort exception hierarchy.

All bidsort exceptions inherit from BidsortError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""


class BidsortError(Exception):
    """Base exception class for all bidsort errors."""


class ConfigurationError(BidsortError):
    """Raised for configuration errors (missing keys, invalid values)."""


class DataProcessingError(BidsortError):
    """Raised for data processing errors."""


class AmountParseError(DataProcessingError):
    """Raised when a currency string cannot be converted to a number."""


class FileIOError(BidsortError):
    """Raised for file I/O errors."""


class SortRangeError(BidsortError, IndexError):
    """Raised when a sort range falls outside the sequence being sorted."""
