from .linalg import vec2, mat3
from .units import deg2rad, rad2deg
