"""Errors raised while mapping data values onto visual channels."""


class MappingError(ValueError):
    """Base class for every attribute mapping failure."""


class UnboundScaleError(MappingError):
    """An attribute without scales was asked to map a value."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"{kind} attribute has no scale bound; cannot map values")


class EmptyValuesError(MappingError):
    """The configured output values resolved to an empty list."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"{kind} attribute has no output values to map onto")


class UnknownCategoryError(MappingError):
    """A category scale was given a value outside its known categories."""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"Unknown category {value!r} for field {field!r}")


class LengthMismatchError(MappingError):
    """Position received x and y sequences of different lengths."""

    def __init__(self, x_len, y_len):
        self.x_len = x_len
        self.y_len = y_len
        super().__init__(
            f"x and y sequences must have the same length (got {x_len} and {y_len})"
        )


class ScaleArityError(MappingError):
    """An attribute was configured with the wrong number of scales."""


class ValueCountError(MappingError):
    """``mapping`` received the wrong number of data values."""

    def __init__(self, kind, expected, got):
        self.kind = kind
        self.expected = expected
        self.got = got
        super().__init__(f"{kind} attribute maps {expected} value(s) at a time (got {got})")
