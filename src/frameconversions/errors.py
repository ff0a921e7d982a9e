"""Errors raised while building axis sets and coordinate frames."""


class AxisSetError(ValueError):
    """Base class for invalid axis descriptions."""


class FormatError(AxisSetError):
    """The descriptor does not decompose into three signed axis tokens from {X, Y, Z}."""


class RedundancyError(AxisSetError):
    """An axis name is repeated where the axis set does not allow it."""
