"""
Exceptions raised by the field, point and group layer.
"""


class ECGroupError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParameterError(ECGroupError, ValueError):
    """Malformed group parameters or point specifier."""


class DomainError(ECGroupError, ZeroDivisionError):
    """A field element without a multiplicative inverse was inverted."""


class UnsupportedFieldError(ECGroupError, NotImplementedError):
    """The operation is not implemented for this field's prime."""


class MismatchedGroupError(ECGroupError, ValueError):
    """Arithmetic between points that belong to different groups."""


class UnknownCurveError(ECGroupError, KeyError):
    """No named curve is registered under the requested name."""
