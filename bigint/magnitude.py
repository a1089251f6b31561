"""
Magnitude arithmetic on digit lists.

A magnitude is an unsigned integer stored as a Python list of base-10000 blocks,
least-significant block first.

    assert [5678, 1234] == digits_from_int(12345678)
    assert [] == digits_from_int(0)

Canonical magnitudes never end in a zero block.  So zero is the empty list.
None of the functions here mutate their inputs, except trim() which exists to do exactly that.
So the same list may be passed as both operands, e.g. mul_abs(x, x).
"""

import logging
import string


logger = logging.getLogger(__name__)


RADIX = 10000        # value of one block
RADIX_DIGITS = 4     # decimal digits per block, RADIX == 10**RADIX_DIGITS
assert RADIX == 10 ** RADIX_DIGITS

USE_KARATSUBA = True       # False => schoolbook multiplication always, e.g. for comparison
KARATSUBA_CUTOFF = 32      # blocks, both operands must be at least this long


class DivisionByZero(ZeroDivisionError):
    """e.g. BigInt(1) / BigInt(0) or divmod_abs([1], [])"""


def trim(digits):
    """
    Remove most-significant zero blocks, in place.  Return the same list.

    assert [1, 2] == trim([1, 2, 0, 0])
    assert [] == trim([0, 0])
    """
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def abs_compare(x, y):
    """
    Compare two magnitudes.  Return -1, 0, or +1 as x is less, equal, or greater than y.

    A longer canonical magnitude is always larger.  Otherwise compare blocks from the top down.
    """
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1
    for i in range(len(x) - 1, -1, -1):
        if x[i] != y[i]:
            return -1 if x[i] < y[i] else 1
    return 0


def add_abs(x, y):
    """Sum of two magnitudes."""
    if len(x) < len(y):
        x, y = y, x
    result = [0] * len(x)
    carry = 0
    for i in range(len(x)):
        cur = x[i] + carry
        if i < len(y):
            cur += y[i]
        carry, result[i] = divmod(cur, RADIX)
    if carry:
        result.append(carry)
    return result


def sub_abs(x, y):
    """
    Difference of two magnitudes, x - y.  Requires |x| >= |y|.

    assert [9999] == sub_abs([0, 1], [1])
    """
    if abs_compare(x, y) < 0:
        raise ValueError("sub_abs() needs |x| >= |y|, not {x} - {y}".format(x=repr(x), y=repr(y)))
    result = [0] * len(x)
    borrow = 0
    for i in range(len(x)):
        cur = x[i] - borrow
        if i < len(y):
            cur -= y[i]
        if cur < 0:
            cur += RADIX
            borrow = 1
        else:
            borrow = 0
        result[i] = cur
    assert borrow == 0
    return trim(result)


def mul_by_int(x, m):
    """
    Multiply a magnitude by a single block value, 0 <= m < RADIX.

    assert [0, 2] == mul_by_int([5000], 4)
    """
    if not 0 <= m < RADIX:
        raise ValueError("mul_by_int() multiplier must be in [0, {radix}), not {m}".format(
            radix=RADIX,
            m=repr(m),
        ))
    if not x or m == 0:
        return []
    result = [0] * len(x)
    carry = 0
    for i in range(len(x)):
        carry, result[i] = divmod(x[i] * m + carry, RADIX)
    if carry:
        result.append(carry)
    return result


def mul_schoolbook(x, y):
    """Product of two magnitudes, every block of x times every block of y."""
    if not x or not y:
        return []
    m = len(y)
    result = [0] * (len(x) + m)
    for i, x_block in enumerate(x):
        if x_block == 0:
            continue
        carry = 0
        for j, y_block in enumerate(y):
            carry, result[i + j] = divmod(result[i + j] + x_block * y_block + carry, RADIX)
        result[i + m] = carry
        # NOTE:  Position i + m is untouched so far by rows 0 through i-1,
        #        whose carries stopped at i-1 + m.  And carry < RADIX.
    return trim(result)


def shift_blocks(x, k):
    """
    Multiply a magnitude by RADIX**k, by inserting k zero blocks at the bottom.

    assert [0, 0, 7] == shift_blocks([7], 2)
    """
    if not x:
        return []
    return [0] * k + x


def mul_karatsuba(x, y):
    """
    Product of two magnitudes, in three half-size products instead of four.

    (xh*B + xl)(yh*B + yl) = xh*yh*B*B + ((xh+xl)(yh+yl) - xh*yh - xl*yl)*B + xl*yl
    where B is RADIX**shift.

    Same result as mul_schoolbook(), block for block.
    SEE:  Knuth Vol. 2 section 4.3.3
    """
    if len(x) < KARATSUBA_CUTOFF or len(y) < KARATSUBA_CUTOFF:
        return mul_schoolbook(x, y)
    shift = min(len(x), len(y)) // 2
    x_low, x_high = trim(x[:shift]), x[shift:]
    if x is y:
        y_low, y_high = x_low, x_high
    else:
        y_low, y_high = trim(y[:shift]), y[shift:]

    high = mul_karatsuba(x_high, y_high)
    low = mul_karatsuba(x_low, y_low)
    middle = mul_karatsuba(add_abs(x_low, x_high), add_abs(y_low, y_high))
    middle = sub_abs(sub_abs(middle, high), low)

    return add_abs(add_abs(shift_blocks(high, 2 * shift), shift_blocks(middle, shift)), low)


def mul_abs(x, y):
    """Product of two magnitudes, by whichever algorithm suits their sizes."""
    if USE_KARATSUBA and min(len(x), len(y)) >= KARATSUBA_CUTOFF:
        logger.debug("Karatsuba multiply, %d x %d blocks", len(x), len(y))
        return mul_karatsuba(x, y)
    else:
        return mul_schoolbook(x, y)


def best_quotient_digit(remainder, shifted_divisor):
    """
    Find the biggest block value d such that d * shifted_divisor <= remainder.

    Binary search over 0 through RADIX-1.  The caller guarantees the answer is in that range,
    i.e. remainder < RADIX * shifted_divisor.

    assert 3 == best_quotient_digit([10], [3])
    assert 0 == best_quotient_digit([2], [3])
    """
    low = 0
    high = RADIX - 1
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if abs_compare(mul_by_int(shifted_divisor, mid), remainder) <= 0:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def divmod_abs(u, v):
    """
    Long division of magnitudes.  Return (quotient, remainder) such that u == quotient * v + remainder.

    The divisor is lined up with the top of the dividend, then walks down one block at a time,
    producing one quotient block per position.

    assert ([2], [1]) == divmod_abs([5], [2])
    """
    if not v:
        raise DivisionByZero("Cannot divide {u} by zero".format(u=repr(u)))
    if abs_compare(u, v) < 0:
        return [], list(u)

    k = len(u) - len(v)
    logger.debug("Long division, %d / %d blocks", len(u), len(v))
    shifted_divisor = shift_blocks(v, k)
    remainder = list(u)
    quotient = [0] * (k + 1)
    for position in range(k, -1, -1):
        digit = best_quotient_digit(remainder, shifted_divisor)
        if digit:
            remainder = sub_abs(remainder, mul_by_int(shifted_divisor, digit))
        quotient[position] = digit
        shifted_divisor = shifted_divisor[1:]
    return trim(quotient), remainder


def digits_from_int(n):
    """Blocks of a non-negative Python int."""
    if n < 0:
        raise ValueError("digits_from_int() needs a non-negative int, not {}".format(repr(n)))
    digits = []
    while n:
        n, block = divmod(n, RADIX)
        digits.append(block)
    return digits


def int_from_digits(digits):
    """Python int of a magnitude."""
    n = 0
    for block in reversed(digits):
        n = n * RADIX + block
    return n


def digits_from_decimal(text):
    """
    Blocks from decimal text, grouped 4 characters at a time from the right end.

    Characters that are not ASCII decimal digits are skipped, but they still count
    as positions when grouping.  Zero blocks at the top are trimmed.

    assert [5678, 1234] == digits_from_decimal('12345678')
    assert [7] == digits_from_decimal('007')
    """
    digits = []
    for stop in range(len(text), 0, -RADIX_DIGITS):
        block = 0
        for character in text[max(0, stop - RADIX_DIGITS):stop]:
            if character in string.digits:
                block = block * 10 + int(character)
        digits.append(block)
    return trim(digits)


def decimal_from_digits(digits):
    """
    Decimal text of a magnitude.

    The top block is unpadded, every block below it is zero-padded to exactly 4 digits.

    assert '12340005' == decimal_from_digits([5, 1234])
    assert '0' == decimal_from_digits([])
    """
    if not digits:
        return '0'
    return str(digits[-1]) + ''.join(
        '{block:0{width}d}'.format(block=block, width=RADIX_DIGITS) for block in reversed(digits[:-1])
    )
