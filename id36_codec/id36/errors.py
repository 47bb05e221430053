"""
Errors raised by the id36 codec.
"""


class Id36Error(ValueError):
    """Base class for all id36 errors."""


class DigitOverflowError(Id36Error):
    """The value does not fit in the requested number of output digits."""

    def __init__(self, out_len, out_base):
        super().__init__(
            f"value does not fit in {out_len} base-{out_base} digits"
        )
        self.out_len = out_len
        self.out_base = out_base


class InvalidInputError(Id36Error):
    """Text or bytes that do not represent a 128-bit value."""
