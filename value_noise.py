# value_noise.py
"""
Deterministic value noise and fractal sums used by every body texture.
There is no RNG state here: all randomness comes from hash31.
"""
import numpy as np

from vecmath import Vec3, fract, mix

# --- Hash coefficients ---
HASH_DOT = (127.1, 311.7, 74.7)
HASH_SCALE = 43758.5453


def hash31(x, y, z):
    """Pseudo-random scalar in [0, 1) for a 3D coordinate."""
    kx, ky, kz = HASH_DOT
    return fract(np.sin(x * kx + y * ky + z * kz) * HASH_SCALE)


def _smooth(f):
    # 3t^2 - 2t^3
    return f * f * (3.0 - 2.0 * f)


def value_noise3(p):
    """
    Smooth 3D value noise in [0, 1].
    Trilinear blend of hash31 at the 8 lattice corners around p, with smoothstep weights
    per axis. At integer p the result equals hash31(p) exactly.
    """
    ix, iy, iz = np.floor(p.x), np.floor(p.y), np.floor(p.z)
    ux, uy, uz = _smooth(p.x - ix), _smooth(p.y - iy), _smooth(p.z - iz)

    h000 = hash31(ix, iy, iz)
    h100 = hash31(ix + 1.0, iy, iz)
    h010 = hash31(ix, iy + 1.0, iz)
    h110 = hash31(ix + 1.0, iy + 1.0, iz)
    h001 = hash31(ix, iy, iz + 1.0)
    h101 = hash31(ix + 1.0, iy, iz + 1.0)
    h011 = hash31(ix, iy + 1.0, iz + 1.0)
    h111 = hash31(ix + 1.0, iy + 1.0, iz + 1.0)

    x00 = mix(h000, h100, ux)
    x10 = mix(h010, h110, ux)
    x01 = mix(h001, h101, ux)
    x11 = mix(h011, h111, ux)

    y0 = mix(x00, x10, uy)
    y1 = mix(x01, x11, uy)
    return mix(y0, y1, uz)


def fbm3(p, octaves, lacunarity, gain):
    """
    Fractal sum of value_noise3.

    Args:
        p: Sample point (Vec3; components may be arrays).
        octaves: Number of layers. 0 gives exactly 0.
        lacunarity: Frequency multiplier per layer.
        gain: Amplitude multiplier per layer, starting from 0.5.

    Returns:
        Sum of weighted layers, in [0, 1) for gain <= 1.
    """
    amp, total = 0.5, 0.0
    for _ in range(octaves):
        total = total + amp * value_noise3(p)
        p = Vec3(p.x * lacunarity, p.y * lacunarity, p.z * lacunarity)
        amp *= gain
    return total
