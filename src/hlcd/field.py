"""
Field Arithmetic Module

Packed vector arithmetic over GF(4) = {0, 1, w, w^2} and its prime subfield
GF(2). Every element takes two bits:

    0 -> 0b00,  1 -> 0b01,  w -> 0b10,  w^2 (conjugate of w) -> 0b11

A vector of length n is an unsigned integer holding its elements two bits
each, the first (leftmost) element in the most significant used pair, so
ascending integer order is lexicographic order on the digits. Up to
``CAPACITY`` elements fit in a 64-bit word and every bit above ``2 * n`` is
zero.

The operations below only use shifts, masks and bitwise logic, so they work
on plain Python integers and element-wise on ``numpy.uint64`` arrays alike.
None of them validates its input; ``scalar_multiply`` is the only checked
entry point.
"""

import numbers

from .errors import InvalidBaseError, InvalidDigitError

CAPACITY = 32

# "01" repeated: the low bit plane
ONE = 0x5555_5555_5555_5555
# "10" repeated: the high bit plane, also the all-w vector
TWO = 0xAAAA_AAAA_AAAA_AAAA
# "0011" repeated
THREE = 0x3333_3333_3333_3333
# "00001111" repeated
NIBBLES = 0x0F0F_0F0F_0F0F_0F0F
# every element equal to w^2
ALL_ONES = 0xFFFF_FFFF_FFFF_FFFF

VALID_BASES = (2, 4)

# Multiplication table of GF(4) in the 0,1,2,3 encoding
MUL_TABLE = (
    (0, 0, 0, 0),
    (0, 1, 2, 3),
    (0, 2, 3, 1),
    (0, 3, 1, 2),
)
INVERSE_TABLE = (None, 1, 3, 2)


def add(u, v):
    """GF(4) addition is XOR since the field has characteristic 2."""
    return u ^ v


def multiply(u, v):
    """
    Element-wise product of two packed vectors.

    With ``u = (a1, a0)`` and ``v = (b1, b0)`` per element, the product of
    ``a1 w + a0`` and ``b1 w + b0`` using ``w^2 = w + 1`` has high bit
    ``a1 b0 ^ a0 b1 ^ a1 b1`` and low bit ``a0 b0 ^ a1 b1``.
    """
    a = (u >> 1) & ONE
    b = (v >> 1) & ONE
    return (((u & b) ^ (v & a)) << 1) ^ (a & b) ^ (u & v)


def hermitian(v):
    """Conjugate every element: 0 and 1 are fixed, w and w^2 are swapped."""
    return v ^ ((v >> 1) & ONE)


def popcount(x):
    """Branch-free population count of a 64-bit word."""
    x = x - ((x >> 1) & ONE)
    x = (x & THREE) + ((x >> 2) & THREE)
    x = (x + (x >> 4)) & NIBBLES
    x = x + (x >> 8)
    x = x + (x >> 16)
    x = x + (x >> 32)
    return x & 0x7F


def hamming_weight(v):
    """Number of nonzero elements: a position counts if either plane bit is set."""
    return popcount((v | (v >> 1)) & ONE)


def inner_product(u, v):
    """
    Ordinary inner product ``sum(u_i * v_i)`` as a single field element.

    The element-wise product is split into the positions holding 1, w and
    w^2; the sum is the parity of each group recombined with XOR.
    """
    p = multiply(u, v)
    a = p & ONE
    b = (p & TWO) >> 1
    c = a ^ b
    ones = p & c
    twos = c ^ ones
    threes = a & b
    r1 = popcount(ones) & 1
    r2 = popcount(twos) & 1
    r3 = popcount(threes) & 1
    return (r1 | (r2 << 1)) ^ (r3 | (r3 << 1))


def hermitian_inner_product(u, v):
    """Hermitian inner product, conjugating the first operand."""
    return inner_product(hermitian(u), v)


def scalar_multiples(v, base=4):
    """
    All multiples of ``v`` indexed by digit, without validation.

    Returns ``(0, v, w v, w^2 v)`` in base 4 and ``(0, v)`` in base 2.
    """
    if base == 2:
        return (0, v)
    return (0, v, multiply(v, TWO), multiply(v, ALL_ONES))


def is_valid_base(base) -> bool:
    return base in VALID_BASES


def is_valid_digit(digit, base) -> bool:
    if base == 2:
        return digit in (0, 1)
    if base == 4:
        return digit in (0, 1, 2, 3)
    return False


def check_base(base):
    """Return ``base`` or raise ``InvalidBaseError``."""
    if not is_valid_base(base):
        raise InvalidBaseError(base)
    return base


def check_digit(digit, base):
    """Return ``digit`` or raise ``InvalidDigitError``."""
    check_base(base)
    if not is_valid_digit(digit, base):
        raise InvalidDigitError(digit, base)
    return digit


def scalar_multiply(v, digit, base=4):
    """
    Multiply every element of ``v`` by the scalar ``digit``.

    Parameters
    ----------
    v : int
        Packed vector
    digit : int
        0 or 1 in base 2; 0, 1, 2 (w) or 3 (w^2) in base 4
    base : int, default=4
        2 or 4

    Raises
    ------
    InvalidBaseError, InvalidDigitError
    """
    check_digit(digit, base)
    if digit == 0:
        return 0
    if digit == 1:
        return v
    if digit == 2:
        return multiply(v, TWO)
    return multiply(v, ALL_ONES)


def field_multiply(x: int, y: int) -> int:
    """Product of two single field elements."""
    return MUL_TABLE[x][y]


def field_inverse(x: int) -> int:
    """Multiplicative inverse of a nonzero field element."""
    inverse = INVERSE_TABLE[x]
    if inverse is None:
        raise ZeroDivisionError("0 has no inverse in GF(4)")
    return inverse


def conjugate(x: int) -> int:
    """Conjugate of a single field element."""
    return hermitian(x) & 0b11


def unit_vector(position: int, length: int) -> int:
    """Vector with a single 1 at ``position`` (0 is the leftmost element)."""
    return 1 << (2 * (length - 1 - position))


def vector_from_digits(digits) -> int:
    """Pack a digit sequence (leftmost first) into a vector."""
    v = 0
    for digit in digits:
        v = (v << 2) | (int(digit) & 0b11)
    return v


def digits_of(v: int, length: int):
    """Unpack a vector of the given length into a list of digits."""
    return [(v >> (2 * (length - 1 - j))) & 0b11 for j in range(length)]


def is_well_formed(v, length: int, base: int = 4) -> bool:
    """Whether ``v`` is a vector of ``length`` elements over the given base."""
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        return False
    v = int(v)
    if v < 0 or v >> (2 * length):
        return False
    if base == 2 and v & TWO:
        return False
    return True
