class AmlichError(Exception):
    """Base error."""

class UnsupportedYearError(AmlichError, ValueError):
    """Raised when a year lies outside the tabulated range 1200..2199."""

class InvalidYearCodeError(AmlichError, ValueError):
    """Raised when a packed year code is 0 (missing table entry)."""

class InvalidInputError(AmlichError, ValueError):
    """Raised for malformed caller arguments (month/day/year out of bounds)."""
