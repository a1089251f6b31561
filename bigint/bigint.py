"""
A BigInt is a signed integer of any size, stored as base-10000 blocks.

Features:
 - arbitrary precision, exact arithmetic, no overflow
 - floor division and floor modulo, the way Python int does it
 - lenient decimal parsing
"""

import logging
import operator
import string
import sys

from .magnitude import (
    DivisionByZero,
    abs_compare,
    add_abs,
    decimal_from_digits,
    digits_from_decimal,
    digits_from_int,
    divmod_abs,
    int_from_digits,
    mul_abs,
    sub_abs,
    trim,
)


logger = logging.getLogger(__name__)


class BigInt(object):
    """
    Arbitrary-precision signed integer.

    A BigInt holds a list of blocks (base 10000, least significant first) and a sign flag.
        Example:  BigInt(123456789) has blocks [6789, 2345, 1] and is not negative.

    More examples:
        assert BigInt(-5) == BigInt('-5') == BigInt('  -5')
        assert '123456789012345678901234567891' == str(BigInt('123456789012345678901234567890') + 1)
        assert '-2' == str(BigInt(-5) / BigInt(3))   # floor, not truncation
        assert '1' == str(BigInt(-5) % BigInt(3))    # sign of the divisor

    Canonical form
    --------------
    The top block is never zero.  Zero has no blocks at all.
    Zero is never negative.  So BigInt('-0') == BigInt(0) and str(BigInt('-0')) == '0'.

    Mutation
    --------
    Operators return new BigInt instances, compound ones too.  So x += 1 rebinds x
    and leaves any other holder of the old instance alone.
    The add(), minus(), multiply(), divide(), modulo(), read() methods
    change the BigInt in place, like a C++ value would.
    """

    __slots__ = ('_digits', '_negative')

    DivisionByZero = DivisionByZero

    def __init__(self, content=None):
        """
        BigInt constructor.

        content - the type can be:
            int              10**100
            decimal string   '-123456789012345678901234567890'
            another BigInt   BigInt(42)
            None             zero
        """
        self._digits = []
        self._negative = False
        if isinstance(content, BigInt):
            self._from_another_big_int(content)
        elif isinstance(content, int):
            self._from_int(content)
        elif isinstance(content, str):
            self.read(content)
        elif content is None:
            pass
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type(self).__name__,
                inner=type(content).__name__,
            ))

    class ConstructorTypeError(TypeError):
        """e.g. BigInt(3.14) or BigInt(b'42')"""

    def _from_another_big_int(self, another_big_int):
        """
        Copy constructor.

        The blocks are copied, never shared:

            x = BigInt(1)
            y = BigInt(x)
            y += 1
            assert x == 1
        """
        self._digits = list(another_big_int._digits)
        self._negative = another_big_int._negative

    def _from_int(self, i):
        self._digits = digits_from_int(abs(i))
        self._negative = i < 0

    def _canonicalize(self):
        """Trim zero blocks off the top.  Zero is never negative."""
        trim(self._digits)
        if not self._digits:
            self._negative = False

    def _assign(self, other):
        """Take on the value of another BigInt, in place."""
        self._digits = list(other._digits)
        self._negative = other._negative
        return self

    # Text
    # ----
    def read(self, text):
        """
        Replace the value with one parsed from decimal text.  Return self.

        Leading whitespace and one + or - sign are skipped.
        Anything after the last decimal digit is ignored.
        No digits at all is zero, not an error.

            assert 7 == BigInt().read('  +007 ')
            assert 0 == BigInt().read('nothing')
        """
        if not isinstance(text, str):
            raise self.ConstructorTypeError("read() needs a str, not a {}".format(type(text).__name__))
        i = 0
        n = len(text)
        while i < n and text[i] in string.whitespace:
            i += 1
        negative = False
        if i < n and text[i] in '+-':
            negative = text[i] == '-'
            i += 1
        end = n - 1
        while end >= i and text[end] not in string.digits:
            end -= 1
        if end < i:
            logger.debug("No decimal digits in %r, reading as zero", text)
        elif end < n - 1 and text[end + 1:].strip():
            logger.debug("Ignoring %r after the digits in %r", text[end + 1:], text)
        self._digits = digits_from_decimal(text[i:end + 1])
        self._negative = negative
        self._canonicalize()
        return self

    @classmethod
    def scan(cls, stream):
        """
        Read the next whitespace-delimited token from a text stream, as a BigInt.

            stream = io.StringIO(' 12\\n-3 ')
            assert 12 == BigInt.scan(stream)
            assert -3 == BigInt.scan(stream)
            assert 0 == BigInt.scan(stream)

        So an exhausted stream gives zero.
        """
        token = []
        character = stream.read(1)
        while character and character in string.whitespace:
            character = stream.read(1)
        while character and character not in string.whitespace:
            token.append(character)
            character = stream.read(1)
        return cls(''.join(token))

    def decimal(self):
        """
        Decimal text, e.g. '-123400005678'.

        assert '0' == BigInt(0).decimal()
        """
        if self._negative:
            return '-' + decimal_from_digits(self._digits)
        else:
            return decimal_from_digits(self._digits)

    def print(self, file=None):
        """Write the decimal text to a stream, sys.stdout by default.  No newline."""
        if file is None:
            file = sys.stdout
        file.write(self.decimal())

    def __str__(self):
        return self.decimal()

    def __repr__(self):
        """Handle repr(BigInt(x))"""
        return "{class_name}('{decimal}')".format(
            class_name=type(self).__name__,
            decimal=self.decimal(),
        )
        # EXAMPLE:  BigInt('-42')

    def to_json(self):
        """Python int, for JSON serializers that call .to_json()."""
        return int(self)
        # NOTE:  Python json writes int of any size exactly.

    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return self._negative, list(self._digits)

    def __setstate__(self, state):
        """For the 'pickle' package, object serialization."""
        negative, digits = state
        self._digits = list(digits)
        self._negative = negative

    # Inspection
    # ----------
    @property
    def digits(self):
        """
        Copy of the base-10000 blocks, least significant first.

        assert [6789, 2345, 1] == BigInt(-123456789).digits
        """
        return list(self._digits)

    def is_negative(self):
        """Is this BigInt negative?"""
        return self._negative

    def is_positive(self):
        """Is this BigInt positive?"""
        return not self._negative and bool(self._digits)

    def is_zero(self):
        """Is this BigInt zero?"""
        return not self._digits

    def __bool__(self):
        """Nonzero is true."""
        return bool(self._digits)

    def __int__(self):
        """Convert to a Python int."""
        magnitude = int_from_digits(self._digits)
        return -magnitude if self._negative else magnitude

    def __hash__(self):
        return hash(int(self))
        # NOTE:  So BigInt(42) and 42 are the same dictionary key, as they are equal.

    # Comparison
    # ----------
    def _compare(self, other):
        """-1, 0, +1 as self is less, equal, greater than the other BigInt."""
        if self._negative != other._negative:
            return -1 if self._negative else 1
        abs_comparison = abs_compare(self._digits, other._digits)
        return -abs_comparison if self._negative else abs_comparison

    def _compare_op(self, op, other):
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        return op(self._compare(other_ready), 0)

    def __eq__(self, other):
        """Handle BigInt(x) == something"""
        other_ready = self._op_ready(other)
        if other_ready is NotImplemented:
            return NotImplemented
        return self._negative == other_ready._negative and self._digits == other_ready._digits

    def __ne__(self, other):
        """Handle BigInt(x) != something"""
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other):  return self._compare_op(operator.__lt__, other)
    def __le__(self, other):  return self._compare_op(operator.__le__, other)
    def __gt__(self, other):  return self._compare_op(operator.__gt__, other)
    def __ge__(self, other):  return self._compare_op(operator.__ge__, other)

    @classmethod
    def _op_ready(cls, x):
        """Get x ready to be an operand.  BigInt and int are welcome.  Others get NotImplemented."""
        if isinstance(x, BigInt):
            return x
        elif isinstance(x, int):
            return cls(x)
        else:
            return NotImplemented
            # NOTE:  Python then tries the other operand's reflected method, e.g. float.__radd__(),
            #        and failing that raises TypeError.  Decimal text is deliberately not coerced,
            #        so BigInt(1) == '1' is False.

    @classmethod
    def _operand(cls, x):
        """Like _op_ready() but for named methods, which raise instead of deferring."""
        x_ready = cls._op_ready(x)
        if x_ready is NotImplemented:
            raise cls.ConstructorTypeError("Cannot operate on a BigInt and a {}".format(type(x).__name__))
        return x_ready

    # Math
    # ----
    def add(self, other):
        """Add in place.  Return self."""
        other = self._operand(other)
        self._add_signed(other._digits, other._negative)
        return self

    def minus(self, other):
        """Subtract in place.  Return self."""
        other = self._operand(other)
        self._add_signed(other._digits, not other._negative)
        return self

    def _add_signed(self, other_digits, other_negative):
        """
        Add a signed magnitude to self.

        Same signs add magnitudes.  Different signs subtract the smaller magnitude from the larger,
        and the larger one's sign wins.
        """
        if self._negative == other_negative:
            self._digits = add_abs(self._digits, other_digits)
        else:
            comparison = abs_compare(self._digits, other_digits)
            if comparison == 0:
                self._digits = []
            elif comparison > 0:
                self._digits = sub_abs(self._digits, other_digits)
            else:
                self._digits = sub_abs(other_digits, self._digits)
                self._negative = other_negative
        self._canonicalize()

    def multiply(self, other):
        """Multiply in place.  Return self."""
        other = self._operand(other)
        negative = self._negative != other._negative
        self._digits = mul_abs(self._digits, other._digits)
        self._negative = negative
        self._canonicalize()
        return self

    def divide(self, other):
        """Floor-divide in place.  Return self."""
        quotient, _ = self._floor_divmod(self, self._operand(other))
        return self._assign(quotient)

    def modulo(self, other):
        """Floor-modulo in place.  Return self."""
        _, remainder = self._floor_divmod(self, self._operand(other))
        return self._assign(remainder)

    @classmethod
    def _floor_divmod(cls, dividend, divisor):
        """
        Floor division and modulo.  Return new (quotient, remainder) BigInts.

        Truncated quotients of operands with different signs round toward zero.
        Those are bumped one further from zero when anything is left over,
        so the quotient rounds toward negative infinity.
        The remainder is then whatever makes dividend == quotient * divisor + remainder,
        which gives it the sign of the divisor (or zero).

            assert (-2, 1) == divmod(BigInt(-5), BigInt(3))
        """
        quotient_digits, remainder_digits = divmod_abs(dividend._digits, divisor._digits)
        signs_differ = dividend._negative != divisor._negative
        quotient = cls()
        if signs_differ and remainder_digits:
            quotient._digits = add_abs(quotient_digits, [1])
            quotient._negative = True
        else:
            quotient._digits = quotient_digits
            quotient._negative = signs_differ
        quotient._canonicalize()
        remainder = cls(dividend).minus(cls(quotient).multiply(divisor))
        return quotient, remainder

    def __pos__(self):
        return type(self)(self)

    def __neg__(self):
        negated = type(self)(self)
        negated._negative = not negated._negative
        negated._canonicalize()
        return negated

    def __abs__(self):
        absolute = type(self)(self)
        absolute._negative = False
        return absolute

    @classmethod
    def _binary_op(cls, method, input_left, input_right):
        """Two-input operator, result in a new BigInt.  Neither input changes."""
        n1 = cls._op_ready(input_left)
        n2 = cls._op_ready(input_right)
        if n1 is NotImplemented or n2 is NotImplemented:
            return NotImplemented
        return method(cls(n1), n2)

    def __add__(self, other): return self._binary_op(BigInt.add, self, other)
    def __radd__(self, other): return self._binary_op(BigInt.add, other, self)
    def __sub__(self, other): return self._binary_op(BigInt.minus, self, other)
    def __rsub__(self, other): return self._binary_op(BigInt.minus, other, self)
    def __mul__(self, other): return self._binary_op(BigInt.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(BigInt.multiply, other, self)
    def __floordiv__( self, other): return self._binary_op(BigInt.divide, self, other)
    def __rfloordiv__(self, other): return self._binary_op(BigInt.divide, other, self)
    def __mod__(self, other): return self._binary_op(BigInt.modulo, self, other)
    def __rmod__(self, other): return self._binary_op(BigInt.modulo, other, self)

    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__
    # NOTE:  A single slash floor-divides too.  There is no fractional BigInt to hand back.
    # NOTE:  No __iadd__() and kin.  So x += y falls back on __add__() and rebinds x to a new BigInt,
    #        never changing an instance that a list, a set, or another name also holds.

    def __divmod__(self, other): return self._divmod_op(self, other)
    def __rdivmod__(self, other): return self._divmod_op(other, self)

    @classmethod
    def _divmod_op(cls, input_left, input_right):
        n1 = cls._op_ready(input_left)
        n2 = cls._op_ready(input_right)
        if n1 is NotImplemented or n2 is NotImplemented:
            return NotImplemented
        return cls._floor_divmod(n1, n2)


def add(a, b):
    """Sum of a and b, as a new BigInt.  Neither a nor b changes."""
    return BigInt(a).add(b)


def minus(a, b):
    """Difference a - b, as a new BigInt.  Neither a nor b changes."""
    return BigInt(a).minus(b)
