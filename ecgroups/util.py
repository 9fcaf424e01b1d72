"""
Integer helpers shared by the field and group code.
"""


def is_integer(value):
    """True for int values. Booleans are rejected."""
    return isinstance(value, int) and not isinstance(value, bool)


def bit_length(n):
    """Number of bits it takes to represent the non-negative integer n."""
    if n < 0:
        raise ValueError("bit_length is only defined for non-negative integers")
    return n.bit_length()


def byte_length(n):
    """Number of bytes it takes to represent the non-negative integer n."""
    return (bit_length(n) + 7) // 8
