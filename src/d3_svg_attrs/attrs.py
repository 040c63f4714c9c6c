"""Map data values onto visual channels (color, size, shape, opacity, position).

An :class:`Attribute` binds one or two scales to a list of output values.
Calling :meth:`Attribute.mapping` normalizes the raw data value(s) through the
scale(s) and resolves the matching visual value(s)::

    >>> from d3_svg_attrs import scale_linear, size
    >>> s = size(scales=[scale_linear("age", 0, 10)], values=[0, 100])
    >>> s.mapping(5)
    [50.0]

Attributes are immutable once built and hold no per-call state.
"""

import logging
import math
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .colors import interpolate_rgb, parse_gradient, rgb_to_hex, to_hex, to_rgb
from .errors import (
    EmptyValuesError,
    LengthMismatchError,
    ScaleArityError,
    UnboundScaleError,
    ValueCountError,
)
from .scales import IDENTITY

logger = logging.getLogger(__name__)


class ChannelKind(str, Enum):
    COLOR = "color"
    SIZE = "size"
    SHAPE = "shape"
    OPACITY = "opacity"
    POSITION = "position"


class AttributeConfig(BaseModel):
    """Construction-time configuration of an attribute, resolved and frozen."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ChannelKind
    scales: Tuple[Any, ...] = ()
    values: Tuple[Any, ...] = ()
    gradient: bool = False
    callback: Optional[Callable[..., Any]] = None

    @property
    def linear(self) -> bool:
        if self.gradient:
            return True
        return bool(self.scales) and not self.scales[0].is_categorical()

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(scale.field for scale in self.scales)


def _is_sequence(value):
    return isinstance(value, (list, tuple))


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_scales(scales):
    if scales is None:
        return ()
    if _is_sequence(scales):
        return tuple(scales)
    return (scales,)


def resolve_output_spec(kind, values):
    """Turn a raw ``values`` option into ``(canonical_values, is_gradient)``.

    Lists are kept as given. A gradient string such as ``"#000-#00f"`` expands
    into its color stops (colors only). Any other single value becomes a
    one-element list; single color strings are normalized to ``#rrggbb``.
    """
    if values is None:
        return (), False
    if _is_sequence(values):
        return tuple(values), False
    if kind is ChannelKind.COLOR and isinstance(values, str):
        stops = parse_gradient(values)
        if stops:
            return tuple(to_hex(stop) for stop in stops), True
        try:
            return (to_hex(values),), False
        except ValueError:
            return (values,), False
    return (values,), False


def clamp_position(position):
    return max(0.0, min(1.0, float(position)))


def lookup(values, index):
    """Exact index lookup, cycling through ``values`` when ``index`` overflows."""
    if not values:
        raise ValueError("lookup requires at least one value")
    return values[int(index) % len(values)]


def _segment(count, position):
    # index of the left anchor and the fraction travelled towards the next one
    steps = count - 1
    scaled = clamp_position(position) * steps
    idx = int(math.floor(scaled))
    if idx >= steps:
        return steps, 0.0
    return idx, scaled - idx


def interpolate(values, position):
    """Piecewise-linear interpolation across evenly spaced numeric anchors."""
    if len(values) == 1:
        return values[0]
    idx, frac = _segment(len(values), position)
    start = values[idx]
    if frac == 0.0:
        return start
    end = values[idx + 1]
    return start + (end - start) * frac


def step(values, position):
    """Pick from ``len(values)`` equal buckets; position 1 lands in the last one."""
    count = len(values)
    bucket = int(math.floor(clamp_position(position) * count))
    return values[min(bucket, count - 1)]


def interpolate_colors(stops, position):
    """Piecewise RGB interpolation across ``(r, g, b)`` stops; returns hex."""
    if len(stops) == 1:
        return rgb_to_hex(stops[0])
    idx, frac = _segment(len(stops), position)
    if frac == 0.0:
        return rgb_to_hex(stops[idx])
    return rgb_to_hex(interpolate_rgb(stops[idx], stops[idx + 1], frac))


def _category_position(scale, value):
    idx = scale.translate(value)
    steps = scale.cardinality() - 1
    if steps <= 0:
        return 0.0
    return idx / steps


def _expect_count(kind, values, count):
    if len(values) != count:
        raise ValueCountError(kind.value, count, len(values))


class ValueResolver:
    """Resolve one data value into one output value (size, opacity, shape).

    Categorical scales use exact lookup with wraparound. Continuous scales
    interpolate between numeric anchors, or fall back to equal-width buckets
    when the values cannot be interpolated. The value always goes through
    the scale first, so unknown categories raise even with a single output.
    """

    def __init__(self, kind, values, linear, interpolable=True):
        self.kind = kind
        self.values = values
        self.linear = linear
        self.interpolable = interpolable and all(_is_number(v) for v in values)

    def resolve(self, scales, *values):
        if not scales:
            raise UnboundScaleError(self.kind.value)
        _expect_count(self.kind, values, 1)
        value = values[0]
        scale = scales[0]
        if scale.type == IDENTITY:
            return [scale.normalize(value)]
        if not self.values:
            raise EmptyValuesError(self.kind.value)
        return [self.resolve_value(scale, value)]

    def resolve_value(self, scale, value):
        if scale.is_categorical():
            return lookup(self.values, scale.translate(value))
        position = scale.normalize(value)
        if self.interpolable:
            return interpolate(self.values, position)
        return step(self.values, position)


class ColorResolver(ValueResolver):
    """Value resolver that blends colors per RGB channel on linear attributes."""

    def __init__(self, kind, values, linear):
        super().__init__(kind, values, linear, interpolable=False)
        self._stops = None
        if linear and len(values) > 1:
            self._stops = tuple(to_rgb(v) for v in values)

    def resolve_value(self, scale, value):
        if not self.linear:
            return lookup(self.values, scale.translate(value))
        if scale.is_categorical():
            position = _category_position(scale, value)
        else:
            position = scale.normalize(value)
        if self._stops is None:
            return self.values[0]
        return interpolate_colors(self._stops, position)


class PositionResolver:
    """Normalize an (x, y) pair, broadcasting a scalar against a sequence."""

    kind = ChannelKind.POSITION

    def resolve(self, scales, *values):
        if not scales:
            raise UnboundScaleError(self.kind.value)
        _expect_count(self.kind, values, 2)
        x, y = values
        x_scale, y_scale = scales
        if _is_sequence(x) and _is_sequence(y) and len(x) != len(y):
            raise LengthMismatchError(len(x), len(y))
        return [self._normalize(x_scale, x), self._normalize(y_scale, y)]

    @staticmethod
    def _normalize(scale, value):
        if _is_sequence(value):
            return [scale.normalize(v) for v in value]
        return scale.normalize(value)


class CallbackResolver:
    """Hand the raw data values to a user function, skipping the scales."""

    def __init__(self, callback):
        self.callback = callback

    def resolve(self, scales, *values):
        return [self.callback(*values)]


def _build_resolver(config):
    if config.callback is not None:
        return CallbackResolver(config.callback)
    kind = config.kind
    if kind is ChannelKind.POSITION:
        return PositionResolver()
    if kind is ChannelKind.COLOR:
        return ColorResolver(kind, config.values, config.linear)
    return ValueResolver(
        kind, config.values, config.linear, interpolable=kind is not ChannelKind.SHAPE
    )


class Attribute:
    """A visual channel bound to its scale(s) and output values.

    Parameters
    ----------
    kind:
        One of ``color``, ``size``, ``shape``, ``opacity`` or ``position``.
    scales:
        A scale or a list of scales. Position takes exactly two (x then y);
        the other channels are driven by the first one. Passing no scale
        builds an unbound attribute that can only be introspected.
    values:
        Output values: a list, a single value, or for colors a gradient
        string such as ``"#000000-#0000ff"``.
    callback:
        Optional function receiving the raw data value(s); when given its
        result replaces the scale-driven mapping.
    """

    def __init__(self, kind, scales=None, values=None, callback=None):
        kind = ChannelKind(kind)
        scales = _as_scales(scales)
        if kind is ChannelKind.POSITION and len(scales) not in (0, 2):
            raise ScaleArityError(
                f"position attribute needs exactly two scales (got {len(scales)})"
            )
        if kind is ChannelKind.POSITION:
            values = None
        resolved, gradient = resolve_output_spec(kind, values)
        self.config = AttributeConfig(
            kind=kind,
            scales=scales,
            values=resolved,
            gradient=gradient,
            callback=callback,
        )
        self._resolver = _build_resolver(self.config)
        logger.debug(
            "Built %s attribute fields=%s linear=%s values=%r callback=%s",
            kind.value,
            list(self.config.names),
            self.config.linear,
            resolved,
            callback is not None,
        )

    @property
    def type(self):
        return self.config.kind.value

    @property
    def scales(self):
        return self.config.scales

    @property
    def values(self):
        return self.config.values

    @property
    def linear(self):
        return self.config.linear

    @property
    def callback(self):
        return self.config.callback

    def get_type(self):
        return self.type

    def get_names(self):
        """Field names of the bound scales, in scale order."""
        return list(self.config.names)

    def mapping(self, *values):
        """Map raw data value(s) to a list of visual values."""
        return self._resolver.resolve(self.config.scales, *values)

    def __repr__(self):
        return "Attribute(type=%r, names=%r, values=%r)" % (
            self.type,
            self.get_names(),
            self.values,
        )


def color(scales=None, values=None, callback=None):
    return Attribute(ChannelKind.COLOR, scales, values, callback)


def size(scales=None, values=None, callback=None):
    return Attribute(ChannelKind.SIZE, scales, values, callback)


def shape(scales=None, values=None, callback=None):
    return Attribute(ChannelKind.SHAPE, scales, values, callback)


def opacity(scales=None, values=None, callback=None):
    return Attribute(ChannelKind.OPACITY, scales, values, callback)


def position(scales=None, callback=None):
    return Attribute(ChannelKind.POSITION, scales, callback=callback)
