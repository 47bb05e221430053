from id36 import (
    BYTE_BASE,
    BYTE_LENGTH,
    TEXT_BASE,
    TEXT_LENGTH,
    UPPERCASE,
    digit_to_char,
)
from id36.convert import convert_base
from id36.errors import DigitOverflowError, InvalidInputError


def encode(data, uppercase=UPPERCASE):
    """
    Encode public function that takes 16 bytes and encodes to a 25-digit Base36 string
    """
    if len(data) != BYTE_LENGTH:
        raise InvalidInputError(f"expected {BYTE_LENGTH} bytes, got {len(data)}")

    try:
        digit_values = convert_base(data, BYTE_BASE, TEXT_LENGTH, TEXT_BASE)
    except DigitOverflowError as e:
        # 256^16 < 36^25
        raise AssertionError("16 bytes must fit in 25 Base36 digits") from e

    return "".join(digit_to_char(value, uppercase) for value in digit_values)
