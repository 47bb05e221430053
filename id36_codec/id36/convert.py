from id36.errors import DigitOverflowError

# Width of the carry accumulator, in bits
ACCUMULATOR_BITS = 64
ACCUMULATOR_MAX = (1 << ACCUMULATOR_BITS) - 1

MIN_BASE = 2
MAX_BASE = 256


def _check_args(digits, in_base, out_len, out_base):
    for base in (in_base, out_base):
        if not MIN_BASE <= base <= MAX_BASE:
            raise ValueError(f"base {base} is outside {MIN_BASE}..{MAX_BASE}")
    if out_len < 0:
        raise ValueError(f"negative output length {out_len}")
    for digit in digits:
        if not 0 <= digit < in_base:
            raise ValueError(f"digit {digit} is not valid in base {in_base}")


def word_length(in_base, out_base):
    """
    Number of input digits folded into one outer step, and in_base to that power.

    The multiplier never exceeds ACCUMULATOR_MAX // out_base, so
    carry + out[j] * word_base stays within the accumulator.
    """
    word_len = 1
    word_base = in_base
    while word_base <= ACCUMULATOR_MAX // (in_base * out_base):
        word_len += 1
        word_base *= in_base
    return word_len, word_base


def convert_base(digits, in_base, out_len, out_base):
    """
    Convert a big-endian digit array in in_base into out_len digits in out_base.

    Raises DigitOverflowError when out_len digits are not enough.
    """
    _check_args(digits, in_base, out_len, out_base)
    out = bytearray(out_len)
    in_len = len(digits)

    word_len, word_base = word_length(in_base, out_base)

    # leftmost position of out written so far
    out_used = out_len - 1

    # the leading word is short so the rest align with the end of digits
    head = in_len % word_len
    if head > 0:
        head -= word_len

    for i in range(head, in_len, word_len):
        carry = 0
        for digit in digits[max(i, 0) : i + word_len]:
            carry = carry * in_base + digit

        for j in range(out_len - 1, -1, -1):
            carry, out[j] = divmod(carry + out[j] * word_base, out_base)
            # everything left of out_used is still zero
            if carry == 0 and j <= out_used:
                out_used = j
                break
        if carry != 0:
            raise DigitOverflowError(out_len, out_base)

    return bytes(out)


def convert_base_naive(digits, in_base, out_len, out_base):
    """
    One input digit per pass over the whole output. Same result as convert_base.
    """
    _check_args(digits, in_base, out_len, out_base)
    out = bytearray(out_len)

    for digit in digits:
        carry = digit
        for j in range(out_len - 1, -1, -1):
            carry, out[j] = divmod(carry + out[j] * in_base, out_base)
        if carry != 0:
            raise DigitOverflowError(out_len, out_base)

    return bytes(out)
