__version__ = "0.1.0"

from .matrix import (
    identity,
    translation,
    rotation,
    scaling,
    projection,
    multiply,
    translate,
    rotate,
    scale,
    project,
    inverse,
    determinant,
)
from .vector import (
    dot,
    distance,
    normalize,
    reflect,
    transform_point,
)
from .utils.units import deg2rad, rad2deg
