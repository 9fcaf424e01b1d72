"""
Prime field, elliptic curve point and group primitives for ECDSA.
"""

from .errors import (
    ECGroupError, InvalidParameterError, DomainError,
    UnsupportedFieldError, MismatchedGroupError, UnknownCurveError
)
from .field import PrimeField, GF
from .point import Point, INFINITY
from .group import Group, CurveParameters
from .named_curves import get_group, available_curves
from .util import bit_length, byte_length

__all__ = [
    'ECGroupError', 'InvalidParameterError', 'DomainError',
    'UnsupportedFieldError', 'MismatchedGroupError', 'UnknownCurveError',
    'PrimeField', 'GF',
    'Point', 'INFINITY',
    'Group', 'CurveParameters',
    'get_group', 'available_curves',
    'bit_length', 'byte_length'
]
