"""
Arithmetic in the prime field GF(p).

Field elements are plain Python integers in the range [0, p-1]; the field
object only carries the modulus and knows how to combine elements.
"""

from .errors import DomainError, InvalidParameterError, UnsupportedFieldError
from .util import is_integer


class PrimeField:
    """Finite field GF(p) for prime p."""

    def __init__(self, prime):
        # Only odd primes; 2y has no inverse in GF(2).
        if not is_integer(prime) or prime < 3 or prime % 2 == 0:
            raise InvalidParameterError(f"Invalid prime {prime!r}")
        self._prime = prime

    @property
    def prime(self):
        return self._prime

    def includes(self, e):
        """Return True if e is an integer in the range [0, p-1]."""
        return is_integer(e) and 0 <= e < self._prime

    def reduce(self, x):
        """Reduce any integer, including negative ones, into [0, p-1]."""
        return x % self._prime

    def add(self, x, y):
        return (x + y) % self._prime

    def subtract(self, x, y):
        return (x - y) % self._prime

    def multiply(self, x, y):
        return (x * y) % self._prime

    def negate(self, x):
        return (-x) % self._prime

    def square(self, x):
        return (x * x) % self._prime

    def inverse(self, x):
        """
        Multiplicative inverse of x, computed with the extended Euclidean
        algorithm.

        Raises DomainError when x is congruent to zero.
        """
        x = x % self._prime
        if x == 0:
            raise DomainError(f"0 has no inverse modulo {self._prime}")

        old_r, r = x, self._prime
        old_s, s = 1, 0
        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_s, s = s, old_s - quotient * s

        if old_r != 1:
            # Only reachable when the modulus is not actually prime.
            raise DomainError(f"{x} has no inverse modulo {self._prime}")
        return old_s % self._prime

    def power(self, x, e):
        """Compute x**e in the field. Negative exponents invert first."""
        if e < 0:
            return pow(self.inverse(x), -e, self._prime)
        return pow(x, e, self._prime)

    def is_square(self, x):
        """Check if x is a quadratic residue (zero counts as one)."""
        x = x % self._prime
        if x == 0:
            return True
        return pow(x, (self._prime - 1) // 2, self._prime) == 1

    def square_roots(self, x):
        """
        Return all elements y with y*y == x as a frozenset of zero, one or
        two integers.

        Only primes congruent to 3 mod 4 are supported; for those a root is
        x**((p+1)/4). Any other prime raises UnsupportedFieldError.
        """
        if self._prime % 4 != 3:
            raise UnsupportedFieldError(
                f"square roots are only implemented for p = 3 mod 4, got p = {self._prime}"
            )

        x = x % self._prime
        if x == 0:
            return frozenset([0])

        root = pow(x, (self._prime + 1) // 4, self._prime)
        if self.square(root) != x:
            return frozenset()
        return frozenset([root, self._prime - root])

    def __eq__(self, other):
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self._prime == other._prime

    def __hash__(self):
        return hash(self._prime)

    def __repr__(self):
        return f"GF({self._prime})"


def GF(p):
    """Factory function for prime fields, mimicking SAGE's GF()."""
    return PrimeField(p)
