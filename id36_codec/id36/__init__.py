# 128-bit values are carried as 16 bytes
BYTE_LENGTH = 16
BYTE_BASE = 256

# ...and written as 25 Base36 digits (36^24 < 2^128 < 36^25)
TEXT_LENGTH = 25
TEXT_BASE = 36

# Case used by encode when the caller does not pick one
UPPERCASE = False

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
UPPER_DIGITS = DIGITS.upper()

# Accepted on decode regardless of case
DECODE_MAP = {
    **{char: value for value, char in enumerate(DIGITS)},
    **{char: value for value, char in enumerate(UPPER_DIGITS)},
}


def digit_to_char(value, uppercase=UPPERCASE):
    return (UPPER_DIGITS if uppercase else DIGITS)[value]


def char_to_digit(char):
    return DECODE_MAP.get(char)


from id36.errors import Id36Error, DigitOverflowError, InvalidInputError  # noqa: E402
from id36.convert import convert_base, convert_base_naive  # noqa: E402
from id36.encode import encode  # noqa: E402
from id36.decode import decode, is_valid  # noqa: E402
