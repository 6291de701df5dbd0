from numpy import pi


def deg2rad(d: float) -> float:
    """Convert an angle in degrees to radians."""
    return d * pi / 180


def rad2deg(r: float) -> float:
    """Convert an angle in radians to degrees."""
    return r * 180 / pi
