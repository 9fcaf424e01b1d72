"""
Affine points on a short Weierstrass curve y^2 = x^3 + ax + b.

A point only knows its owning group and its coordinates. It does not check
that it satisfies the curve equation; use Group.includes or the public key
predicates for that.
"""

from .errors import InvalidParameterError, MismatchedGroupError
from .util import is_integer


# Point specifier for the identity element, accepted by Group.new_point.
INFINITY = "infinity"


class Point:
    """Immutable point on an elliptic curve, or the point at infinity."""

    __slots__ = ("_group", "_x", "_y")

    def __init__(self, group, x=None, y=None):
        """
        Create the point (x, y) of the given group, or the point at infinity
        when both coordinates are omitted.

        Coordinates are reduced modulo the field prime.
        """
        if x is None and y is None:
            pass
        elif x is None or y is None:
            raise InvalidParameterError("A finite point needs both coordinates")
        elif not is_integer(x):
            raise InvalidParameterError(f"Invalid x coordinate {x!r}")
        elif not is_integer(y):
            raise InvalidParameterError(f"Invalid y coordinate {y!r}")
        else:
            x = group.field.reduce(x)
            y = group.field.reduce(y)

        object.__setattr__(self, "_group", group)
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    @property
    def group(self):
        return self._group

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def infinity(self):
        """True if this is the point at infinity."""
        return self._x is None

    @property
    def coords(self):
        """The (x, y) pair, or None for the point at infinity."""
        if self.infinity:
            return None
        return (self._x, self._y)

    def _check_group(self, other):
        if not isinstance(other, Point):
            raise TypeError(f"Expected a Point, got {type(other).__name__}")
        if other._group is not self._group:
            raise MismatchedGroupError(
                f"Cannot combine a point of {self._group!r} with a point of {other._group!r}"
            )

    def add(self, other):
        """
        Add two points of the same group (SEC1 2.2.1).

        Raises MismatchedGroupError for a point of another group. Two points
        with the same x and unrelated y values cannot both lie on the curve;
        such an operand is rejected with InvalidParameterError.
        """
        self._check_group(other)

        if self.infinity:
            return other
        if other.infinity:
            return self

        field = self._group.field

        if self._x == other._x and self._y == field.negate(other._y):
            return self._group.infinity

        if self._x != other._x:
            s = field.multiply(
                field.subtract(other._y, self._y),
                field.inverse(field.subtract(other._x, self._x)),
            )
            x3 = field.subtract(field.subtract(field.square(s), self._x), other._x)
            y3 = field.subtract(field.multiply(s, field.subtract(self._x, x3)), self._y)
            return Point(self._group, x3, y3)

        if self == other:
            return self.double()

        raise InvalidParameterError(
            f"No addition rule applies to {self!r} and {other!r}: not both on the curve"
        )

    def double(self):
        """Double this point using the tangent slope."""
        if self.infinity:
            return self
        if self._y == 0:
            return self._group.infinity

        field = self._group.field
        x, y = self._x, self._y

        s = field.multiply(
            field.add(field.multiply(3, field.square(x)), self._group.param_a),
            field.inverse(field.multiply(2, y)),
        )
        x3 = field.subtract(field.square(s), field.multiply(2, x))
        y3 = field.subtract(field.multiply(s, field.subtract(x, x3)), y)
        return Point(self._group, x3, y3)

    def negate(self):
        """Reflect the point over the x-axis."""
        if self.infinity:
            return self
        return Point(self._group, self._x, self._group.field.negate(self._y))

    def multiply_by_scalar(self, k):
        """
        Scalar multiplication using double-and-add.

        The scalar is not reduced modulo the group order. A negative scalar
        multiplies the negated point.
        """
        if not is_integer(k):
            raise InvalidParameterError(f"Scalar must be an integer, got {k!r}")

        if k < 0:
            return self.negate().multiply_by_scalar(-k)

        result = self._group.infinity
        addend = self

        while k:
            if k & 1:
                result = result.add(addend)
            k >>= 1
            if k:
                addend = addend.double()

        return result

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other.negate())

    def __neg__(self):
        return self.negate()

    def __mul__(self, scalar):
        if not is_integer(scalar):
            return NotImplemented
        return self.multiply_by_scalar(scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self._group is other._group
            and self._x == other._x
            and self._y == other._y
        )

    def __hash__(self):
        return hash((id(self._group), self._x, self._y))

    def __repr__(self):
        if self.infinity:
            return f"<Point: {self._group.name}, infinity>"
        return f"<Point: {self._group.name}, {self._x:#x}, {self._y:#x}>"
