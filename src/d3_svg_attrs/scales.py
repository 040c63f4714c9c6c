"""Reference scales satisfying the scale contract consumed by attributes.

Every scale exposes ``field``, ``type``, ``is_categorical()``,
``cardinality()``, ``normalize(value)`` and ``denormalize(position)``.
Category scales also expose ``translate(value)`` returning the category index.
Any object with the same surface can be passed to an attribute instead.
"""

import math

from .errors import UnknownCategoryError

IDENTITY = "identity"
CATEGORY = "category"
LINEAR = "linear"


class IdentityScale:
    """Pass values through untouched, or always answer with a fixed value."""

    type = IDENTITY

    def __init__(self, field, value=None):
        self.field = field
        self.value = value

    def is_categorical(self):
        return False

    def cardinality(self):
        return 1

    def normalize(self, value):
        if self.value is not None:
            return self.value
        return value

    def denormalize(self, position):
        return self.normalize(position)


class CategoryScale:
    """Map discrete inputs to their index in a fixed list of categories."""

    type = CATEGORY

    def __init__(self, field, values=None):
        self.field = field
        self._values = list(values or [])
        self._index = {}
        for idx, value in enumerate(self._values):
            self._index.setdefault(value, idx)

    @property
    def values(self):
        return list(self._values)

    def is_categorical(self):
        return True

    def cardinality(self):
        return len(self._values)

    def translate(self, value):
        """Return the category index of ``value``."""
        try:
            return self._index[value]
        except (KeyError, TypeError):
            raise UnknownCategoryError(self.field, value) from None

    def normalize(self, value):
        """Spread categories evenly over [0, 1]: first is 0, last is 1."""
        idx = self.translate(value)
        steps = len(self._values) - 1
        if steps <= 0:
            return 0.0
        return idx / steps

    def denormalize(self, position):
        if not self._values:
            raise UnknownCategoryError(self.field, position)
        steps = len(self._values) - 1
        idx = int(math.floor(float(position) * steps + 0.5))
        return self._values[max(0, min(steps, idx))]


class LinearScale:
    """Tiny helper similar to d3.scaleLinear with a fixed [0, 1] range."""

    type = LINEAR

    def __init__(self, field, min=0.0, max=1.0):
        self.field = field
        self._domain = (float(min), float(max))

    @property
    def min(self):
        return self._domain[0]

    @property
    def max(self):
        return self._domain[1]

    def domain(self, values):
        if len(values) != 2:
            raise ValueError("LinearScale.domain expects two values")
        self._domain = tuple(map(float, values))
        return self

    def is_categorical(self):
        return False

    def cardinality(self):
        return 0

    def normalize(self, value):
        d0, d1 = self._domain
        if d1 == d0:
            return 0.0
        return (float(value) - d0) / (d1 - d0)

    def denormalize(self, position):
        d0, d1 = self._domain
        return d0 + float(position) * (d1 - d0)


def scale_identity(field, value=None):
    return IdentityScale(field, value)


def scale_category(field, values=None):
    return CategoryScale(field, values)


def scale_linear(field, min=0.0, max=1.0):
    return LinearScale(field, min, max)
