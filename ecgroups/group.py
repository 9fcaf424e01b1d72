"""
Elliptic curve groups: curve parameters, point factory and the SEC1
public key validation primitives.

The parameters follow SEC 2 (https://www.secg.org/sec2-v2.pdf): a prime p
defining the field, the coefficients a and b of y^2 = x^3 + ax + b, a
generator g, its order n and an optional cofactor h.
"""

import logging
import threading
from collections import namedtuple
from collections.abc import Mapping

from .errors import InvalidParameterError
from .field import PrimeField
from .point import INFINITY, Point
from .util import bit_length, byte_length, is_integer

logger = logging.getLogger(__name__)


CurveParameters = namedtuple(
    "CurveParameters", ["p", "a", "b", "g", "n", "h", "name"], defaults=(None, None)
)


class Group:
    """Group of points on a short Weierstrass curve over GF(p)."""

    def __init__(self, p, a, b, g, n, h=None, name=None):
        """
        p: the field prime.
        a, b: curve coefficients, reduced modulo p.
        g: the generator, as an (x, y) pair or INFINITY.
        n: the order of g, the smallest positive i with i*g = infinity.
        h: the cofactor (optional).
        name: human readable name; defaults to a unique token.

        Neither the generator's curve membership nor the primality of n is
        checked.
        """
        self._name = name if name is not None else f"{id(self):#x}"
        self._field = PrimeField(p)

        if not is_integer(a):
            raise InvalidParameterError(f"Invalid a {a!r}")
        if not is_integer(b):
            raise InvalidParameterError(f"Invalid b {b!r}")
        if not is_integer(n) or n < 1:
            raise InvalidParameterError(f"Invalid order {n!r}")
        if h is not None and not is_integer(h):
            raise InvalidParameterError(f"Invalid cofactor {h!r}")

        self._param_a = self._field.reduce(a)
        self._param_b = self._field.reduce(b)
        self._order = n
        self._cofactor = h

        self._lock = threading.Lock()
        self._infinity = None
        self._bit_length = None
        self._byte_length = None

        if is_integer(g):
            # A multiple of the generator needs the generator first.
            raise InvalidParameterError(f"Invalid generator {g!r}")
        self._generator = self.new_point(g)

        logger.debug("Created group %s over GF(%#x)", self._name, self.prime)

    @classmethod
    def from_parameters(cls, params):
        """Build a group from a CurveParameters record or a mapping with the same keys."""
        if isinstance(params, CurveParameters):
            params = params._asdict()
        elif not isinstance(params, Mapping):
            raise InvalidParameterError(f"Invalid curve parameters {params!r}")

        unknown = set(params) - set(CurveParameters._fields)
        if unknown:
            raise InvalidParameterError(f"Unknown curve parameters {sorted(unknown)}")
        missing = [k for k in ("p", "a", "b", "g", "n") if k not in params]
        if missing:
            raise InvalidParameterError(f"Missing curve parameters {missing}")

        return cls(**params)

    @property
    def name(self):
        return self._name

    @property
    def field(self):
        """The field that coordinates on the curve belong to."""
        return self._field

    @property
    def prime(self):
        return self._field.prime

    @property
    def param_a(self):
        return self._param_a

    @property
    def param_b(self):
        return self._param_b

    @property
    def generator(self):
        return self._generator

    @property
    def order(self):
        return self._order

    @property
    def cofactor(self):
        return self._cofactor

    @property
    def parameters(self):
        """The CurveParameters record this group was built from, with a and b reduced."""
        g = self._generator.coords if not self._generator.infinity else INFINITY
        return CurveParameters(
            self.prime, self._param_a, self._param_b, g, self._order, self._cofactor, self._name
        )

    @property
    def infinity(self):
        """The point at infinity, created once per group."""
        if self._infinity is None:
            with self._lock:
                if self._infinity is None:
                    self._infinity = Point(self)
        return self._infinity

    @property
    def bit_length(self):
        """The number of bits it takes to represent a field element."""
        if self._bit_length is None:
            self._bit_length = bit_length(self.prime)
        return self._bit_length

    @property
    def byte_length(self):
        """The number of bytes it takes to represent a field element."""
        if self._byte_length is None:
            self._byte_length = byte_length(self.prime)
        return self._byte_length

    def new_point(self, spec):
        """
        Create a point of this group from one of:

        - INFINITY, giving the point at infinity;
        - an (x, y) pair of integers, giving that point (not checked to be
          on the curve);
        - an integer k, giving k times the generator.
        """
        if isinstance(spec, str):
            if spec == INFINITY:
                return self.infinity
        elif is_integer(spec):
            return self._generator.multiply_by_scalar(spec)
        elif isinstance(spec, (tuple, list)) and len(spec) == 2:
            x, y = spec
            return Point(self, x, y)

        raise InvalidParameterError(f"Invalid point specifier {spec!r}")

    def includes(self, point):
        """
        Return True if the point belongs to this group and is either the
        point at infinity or a solution of the curve equation.
        """
        if not isinstance(point, Point) or point.group is not self:
            return False
        return point.infinity or self._satisfies_equation(point)

    def is_valid_public_key(self, point):
        """
        Full public key validation, SEC1 2.0 section 3.2.2.1.

        The point must belong to this group, not be infinity, satisfy the
        curve equation and be annihilated by the group order.
        """
        if not self.is_partially_valid_public_key(point):
            return False
        if not point.multiply_by_scalar(self._order).infinity:
            logger.debug("Rejected %r: order does not divide %d", point, self._order)
            return False
        return True

    def is_partially_valid_public_key(self, point):
        """
        Partial public key validation, SEC1 2.0 section 3.2.3.1.

        Same as is_valid_public_key without the order check. Only use it
        when the point's order is trusted by other means.
        """
        if not isinstance(point, Point) or point.group is not self:
            logger.debug("Rejected %r: not a point of %r", point, self)
            return False
        if point.infinity:
            logger.debug("Rejected the point at infinity of %r", self)
            return False
        if not self._satisfies_equation(point):
            logger.debug("Rejected %r: not on the curve", point)
            return False
        return True

    def solve_for_y(self, x):
        """Given an x coordinate, find all y coordinates that put (x, y) on the curve."""
        if not is_integer(x):
            raise InvalidParameterError(f"Invalid x coordinate {x!r}")
        return self._field.square_roots(self._equation_right_hand_side(x))

    def _satisfies_equation(self, point):
        return self._field.square(point.y) == self._equation_right_hand_side(point.x)

    def _equation_right_hand_side(self, x):
        return self._field.reduce(x * x * x + self._param_a * x + self._param_b)

    def __repr__(self):
        return f"<{self.__class__.__name__}:{self._name}>"

    __str__ = __repr__
