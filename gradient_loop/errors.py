"""Exception types raised by gradient_loop.

Input errors are raised before any output is created; resource errors wrap the
underlying OSError as their cause.
"""


class GradientLoopError(Exception):
    pass


# Input errors

class ColorParseError(GradientLoopError, ValueError):
    pass


class InvalidHexLength(ColorParseError):
    pass


class InvalidHexDigits(ColorParseError):
    pass


class WrongComponentCount(ColorParseError):
    pass


class ComponentOutOfRange(ColorParseError):
    pass


class InvalidParameter(GradientLoopError, ValueError):
    pass


# Resource errors

class OutputCreateFailed(GradientLoopError):
    pass


class FrameWriteFailed(GradientLoopError):
    pass


# Invariant violations

class FrameSizeMismatch(GradientLoopError):
    pass


class SinkStateError(GradientLoopError, RuntimeError):
    pass
