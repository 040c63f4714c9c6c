from .attrs import (
    Attribute,
    AttributeConfig,
    ChannelKind,
    color,
    opacity,
    position,
    shape,
    size,
)
from .errors import (
    EmptyValuesError,
    LengthMismatchError,
    MappingError,
    ScaleArityError,
    UnboundScaleError,
    UnknownCategoryError,
    ValueCountError,
)
from .scales import (
    CategoryScale,
    IdentityScale,
    LinearScale,
    scale_category,
    scale_identity,
    scale_linear,
)

__all__ = [
    "Attribute",
    "AttributeConfig",
    "ChannelKind",
    "color",
    "opacity",
    "position",
    "shape",
    "size",
    "EmptyValuesError",
    "LengthMismatchError",
    "MappingError",
    "ScaleArityError",
    "UnboundScaleError",
    "UnknownCategoryError",
    "ValueCountError",
    "CategoryScale",
    "IdentityScale",
    "LinearScale",
    "scale_category",
    "scale_identity",
    "scale_linear",
]
