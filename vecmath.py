# vecmath.py
"""
Vector and color algebra shared by the noise generator and the body shaders.

Components may be plain floats or NumPy arrays of a common shape; every
operation is elementwise, so a Vec3 of (H, W) arrays is a whole frame of
independent samples.
"""
import logging
import string

import numpy as np

logger = logging.getLogger(__name__)

PI = np.pi
EPSILON = 1e-8


class Vec3:
    """Immutable three-component vector. Also used for RGB colors."""

    __slots__ = ('x', 'y', 'z')
    # NumPy operands defer to our reflected operators instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, x, y, z):
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)
        object.__setattr__(self, 'z', z)

    def __setattr__(self, name, value):
        raise AttributeError(f"Vec3 is immutable (cannot set '{name}')")

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self):
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return all(np.array_equal(a, b) for a, b in zip(self, other))

    def __hash__(self):
        # Only scalar vectors are hashable
        return hash((self.x, self.y, self.z))

    # --- Arithmetic ---
    def __add__(self, o):
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, o):
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, o):
        if isinstance(o, Vec3):
            return Vec3(self.x * o.x, self.y * o.y, self.z * o.z)
        return Vec3(self.x * o, self.y * o, self.z * o)

    def __rmul__(self, s):
        return Vec3(s * self.x, s * self.y, s * self.z)

    def __truediv__(self, d):
        return self * (1.0 / d)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    # --- Geometry ---
    def dot(self, o):
        return self.x * o.x + self.y * o.y + self.z * o.z

    def length(self):
        return np.sqrt(self.dot(self))

    def normalized(self):
        return self / np.maximum(self.length(), EPSILON)

    # --- Color helpers ---
    def clamp01(self):
        return Vec3(saturate(self.x), saturate(self.y), saturate(self.z))

    def mix(self, b, k):
        """Blend toward b by k; k outside [0, 1] extrapolates."""
        return self * (1.0 - k) + b * k

    def as_array(self):
        """Stack components on a trailing axis: shape (..., 3)."""
        return np.stack(np.broadcast_arrays(self.x, self.y, self.z), axis=-1).astype(float)


Color = Vec3


def vec3(x, y, z):
    return Vec3(x, y, z)


def rgb(r, g, b):
    return Vec3(r, g, b)


def saturate(x):
    return np.clip(x, 0.0, 1.0)


def mix(a, b, k):
    return a * (1.0 - k) + b * k


def fract(x):
    """Fractional part in [0, 1), i.e. x - floor(x)."""
    return x - np.floor(x)


def hex_rgb_u8(hex_str):
    """
    Parse '#rrggbb' into linear [0, 1] channels.
    A channel that cannot be parsed becomes 1.0; this never raises.
    """
    h = hex_str.lstrip('#')
    channels = []
    for name, start in (('red', 0), ('green', 2), ('blue', 4)):
        digits = h[start:start + 2]
        try:
            if len(digits) != 2 or not all(c in string.hexdigits for c in digits):
                raise ValueError(f"expected 2 hex digits, got {digits!r}")
            channels.append(int(digits, 16) / 255.0)
        except ValueError as exc:
            logger.warning("Bad %s channel in color %r (%s); using 1.0", name, hex_str, exc)
            channels.append(1.0)
    return rgb(*channels)


def lat_lon_from_normal(n):
    """Project a unit normal to (lat, lon), both in [0, 1]."""
    lat = 0.5 + np.arcsin(np.clip(n.y, -1.0, 1.0)) / PI
    lon = 0.5 + np.arctan2(n.z, n.x) / (2.0 * PI)
    return lat, lon


def rim_term(n, v, power):
    """Fresnel-like factor, 0 facing the viewer and growing toward the silhouette."""
    return (1.0 - np.clip(n.dot(-v), -1.0, 1.0)) ** power
