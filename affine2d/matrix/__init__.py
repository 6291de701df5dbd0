from .builders import (
    identity,
    translation,
    rotation,
    scaling,
    projection,
)
from .compose import (
    multiply,
    translate,
    rotate,
    scale,
    project,
)
from .inverse import determinant, inverse
