from .ops import dot, distance, normalize, reflect, NORMALIZE_EPS
from .points import transform_point
