"""
bigint - Arbitrary-precision signed integers, in base-10000 blocks.

Usage example:

    import bigint

    big = bigint.BigInt('123456789012345678901234567890')
    assert '123456789012345678901234567891' == str(big + 1)
    assert bigint.BigInt(-2) == bigint.BigInt(-5) / 3     # floor division
    assert bigint.BigInt(1) == bigint.BigInt(-5) % 3      # floor modulo

Usage example:

    from bigint import BigInt, DivisionByZero

    try:
        BigInt(1) / BigInt(0)
    except DivisionByZero:
        print("no")
"""

from .bigint import BigInt
from .bigint import add
from .bigint import minus
from .magnitude import DivisionByZero

__all__ = [
    'BigInt',
    'DivisionByZero',
    'add',
    'minus',
]

from . import version
__version__ = version.__doc__
