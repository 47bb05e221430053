import logging

from id36 import BYTE_BASE, BYTE_LENGTH, TEXT_BASE, TEXT_LENGTH, char_to_digit
from id36.convert import convert_base
from id36.errors import DigitOverflowError, InvalidInputError

logger = logging.getLogger(__name__)


def _reject(text, reason):
    logger.debug("Rejected %r: %s", text, reason)
    return InvalidInputError(f"not a 128-bit Base36 value: {text!r}")


def _digit_values(text):
    digit_values = []
    for char in text[:TEXT_LENGTH]:
        value = char_to_digit(char)
        if value is None:
            raise _reject(text, f"invalid digit character {char!r}")
        digit_values.append(value)
    if len(text) != TEXT_LENGTH:
        raise _reject(text, f"length {len(text)} is not {TEXT_LENGTH}")
    return digit_values


def decode(text):
    """
    Decode public function that takes a 25-digit Base36 string and decodes to 16 bytes
    """
    digit_values = _digit_values(text)
    try:
        return convert_base(digit_values, TEXT_BASE, BYTE_LENGTH, BYTE_BASE)
    except DigitOverflowError as e:
        raise _reject(text, "out of 128-bit value range") from e


def is_valid(text):
    try:
        decode(text)
    except InvalidInputError:
        return False
    return True
