"""
Exception hierarchy for fqcn_stripper.

Two failure classes are kept apart so callers can tell bad data from an
incompatible configuration:

- MalformedInputError: empty names, modifier bits outside the recognised set
- ModifierConflictError: mutually exclusive modifiers, or MULTIBYTE requested
  while multibyte text support is unavailable
"""

from typing import Optional


class StripperError(Exception):
    """Base class for all fqcn_stripper errors."""

    pass


class MalformedInputError(StripperError, ValueError):
    """Raised when the input data itself is unusable."""

    pass


class EmptyNameError(MalformedInputError):
    """Raised when an empty string is given as the qualified name."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "First argument cannot be empty string")


class InvalidModifierError(MalformedInputError):
    """Raised when a modifier carries bits outside the recognised set."""

    def __init__(self, modifier: int, invalid_bits: int):
        self.modifier = modifier
        self.invalid_bits = invalid_bits
        super().__init__(
            f"Invalid modifier value provided: {modifier} Invalid bits provided: {invalid_bits}"
        )


class ModifierConflictError(StripperError):
    """Raised when a modifier combination cannot be honoured."""

    pass


class ConflictingModifiersError(ModifierConflictError):
    """Raised when UPPER is combined with LOWER or UC."""

    def __init__(self, modifier: int):
        self.modifier = modifier
        super().__init__("UPPER modifier cannot be combined with LOWER or UC modifiers")


class MultibyteUnavailableError(ModifierConflictError):
    """Raised when MULTIBYTE is requested but multibyte text support is missing."""

    def __init__(self, modifier: int):
        self.modifier = modifier
        super().__init__("MULTIBYTE modifier requires multibyte text support to be available.")
