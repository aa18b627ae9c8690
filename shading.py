# shading.py
"""
Procedural shaders for the five celestial body kinds and the dispatcher that
selects between them.

Every function here is pure: the context and parameter bundles are read,
never stored, so frames or samples can be shaded in any order or in parallel.
"""
import enum
from dataclasses import dataclass

import numpy as np

from value_noise import fbm3
from vecmath import PI, Color, Vec3, fract, hex_rgb_u8, lat_lon_from_normal, rgb, rim_term, saturate, vec3


class BodyKind(enum.Enum):
    BLACK_HOLE = 'blackhole'
    ACCRETION_DISK = 'disk'
    ROCKY = 'rocky'
    GAS_GIANT = 'gas'
    ICE = 'ice'


@dataclass(frozen=True)
class ShadingCtx:
    p: Vec3  # world position
    n: Vec3  # unit normal
    v: Vec3  # unit view direction, point -> camera
    l0: Vec3  # primary light direction, point -> light
    l1: Vec3  # secondary light direction
    t: float = 0.0
    seed: float = 0.0


# --- Parameter bundles ---
@dataclass(frozen=True)
class CommonParams:
    warm: Color
    cool: Color


@dataclass(frozen=True)
class DiskParams:
    rin: float
    rout: float
    bands_w: float
    bands_phi: float
    noise_freq: float
    noise_amp: float
    beaming: float
    c1: Color
    c2: Color
    c3: Color


@dataclass(frozen=True)
class RockyParams:
    bioma_freq: float
    height_freq: float
    grad_amp: float  # elevation contribution to the diffuse term
    k_atm: float  # rim atmosphere strength
    c_land1: Color
    c_land2: Color
    c_ocean: Color


@dataclass(frozen=True)
class GasParams:
    k_bands: float
    dist_amp: float
    noise_freq: float
    storm_speed: float
    c_a: Color
    c_b: Color
    c_c: Color
    # Storm ellipse in (lon, lat) space
    storm_lon: float = 0.35
    storm_lat: float = 0.15
    storm_rx: float = 0.12
    storm_ry: float = 0.08
    c_spot: Color = hex_rgb_u8('#b24d2a')


@dataclass(frozen=True)
class IceParams:
    freq: float
    marbling: float
    c_ice: Color
    c_snow: Color
    c_crack: Color


@dataclass(frozen=True)
class Params:
    common: CommonParams
    disk: DiskParams
    rocky: RockyParams
    gas: GasParams
    ice: IceParams


SNOW_COLOR = hex_rgb_u8('#e6edf3')
BLACK_HOLE_TINT = rgb(0.06, 0.03, 0.10)


# --- Shared helpers ---
def palette3(u, a, b, c):
    """Two-segment ramp: a -> b over [0, 0.5), b -> c over [0.5, 1]."""
    if np.ndim(u) == 0:
        return a.mix(b, u * 2.0) if u < 0.5 else b.mix(c, (u - 0.5) * 2.0)
    lower = a.mix(b, u * 2.0)
    upper = b.mix(c, (u - 0.5) * 2.0)
    below = u < 0.5
    return Vec3(*(np.where(below, lo, hi) for lo, hi in zip(lower, upper)))


def nl_mix(n, l0, l1):
    """Two-light diffuse term with fixed 0.7 / 0.3 weights."""
    return 0.7 * saturate(n.dot(l0)) + 0.3 * saturate(n.dot(l1))


def pole_cap(lat):
    """Polar snow weight: 0 within 0.35 of the equator, rising quadratically to 1 at the poles."""
    return saturate((np.abs(lat - 0.5) - 0.35) / 0.15) ** 2.0


def storm_mask(lon, lat, t, gas):
    """Elliptical storm weight in a longitude frame drifting with time."""
    storm_lon = fract(lon + t * gas.storm_speed)
    dlon = fract(storm_lon - gas.storm_lon + 0.5) - 0.5
    el = (dlon / gas.storm_rx) ** 2 + ((lat - gas.storm_lat) / gas.storm_ry) ** 2
    return saturate(1.0 - el) ** 3.0


# --- Body shaders ---
def shade_black_hole(ctx):
    # Edge glow only; horizon masking belongs to the caller
    glow = rim_term(ctx.n, ctx.v, 3.5)
    return BLACK_HOLE_TINT * (glow * 0.25)


def shade_accretion(ctx, disk):
    r = np.sqrt(ctx.p.x * ctx.p.x + ctx.p.z * ctx.p.z)

    # Radial emission, hottest at the inner edge
    heat = saturate(np.exp(-(r - disk.rin) * 3.0))
    bands = np.sin(disk.bands_w * r + disk.bands_phi) * 0.5 + 0.5

    # Grain drifting slowly with time
    drift = ctx.t * 0.05
    rp = vec3(ctx.p.x, 0.0, ctx.p.z) * disk.noise_freq + vec3(drift, 0.0, drift)
    grain = fbm3(rp, 4, 2.0, 0.5)
    distort = saturate(bands + disk.noise_amp * (grain - 0.5))
    warm = palette3(distort, disk.c1, disk.c2, disk.c3)

    # Fake beaming
    ndv = saturate(ctx.n.dot(-ctx.v))
    beam = 0.6 + disk.beaming * ndv ** 3.0

    inside = saturate((r - disk.rin) / (disk.rout - disk.rin))
    outer = 1.0 - np.minimum(np.maximum(r - disk.rout, 0.0), 1.0)
    ring_mask = (1.0 - (1.0 - inside) ** 16.0) * outer

    return warm * ((0.35 + 0.65 * heat) * beam * ring_mask)


def shade_rocky(ctx, common, rocky):
    lat, lon = lat_lon_from_normal(ctx.n)

    # Biomes
    k = fbm3(vec3(lat * rocky.bioma_freq, lon * rocky.bioma_freq, ctx.seed), 5, 2.0, 0.5)
    base = palette3(k, rocky.c_land1, rocky.c_land2, rocky.c_ocean)

    # Synthetic elevation and fake relief
    h = fbm3(vec3(lat * rocky.height_freq, lon * rocky.height_freq, ctx.seed + 17.0), 4, 2.1, 0.5)
    nl = nl_mix(ctx.n, ctx.l0, ctx.l1)
    base = base * (0.6 + 0.4 * saturate(nl + rocky.grad_amp * (h - 0.5)))

    # Peaks, then polar caps
    peaks = saturate((h - 0.62) / 0.08)
    base = base.mix(SNOW_COLOR, peaks)
    base = base.mix(SNOW_COLOR, 0.35 * pole_cap(lat))

    rim = rim_term(ctx.n, ctx.v, 2.5)
    return base + common.cool * (rocky.k_atm * rim)


def shade_gas_giant(ctx, common, gas):
    lat, lon = lat_lon_from_normal(ctx.n)

    # Undulating band boundaries
    d = fbm3(ctx.p * gas.noise_freq, 4, 2.0, 0.5)
    lat = saturate(lat + gas.dist_amp * (d - 0.5))
    bands = np.sin(gas.k_bands * lat * 2.0 * PI) * 0.5 + 0.5

    storm = storm_mask(lon, lat, ctx.t, gas)
    col = palette3(bands, gas.c_a, gas.c_b, gas.c_c).mix(gas.c_spot, 0.6 * storm)

    nl = nl_mix(ctx.n, ctx.l0, ctx.l1)
    col = col * (0.45 + 0.55 * nl)
    rim = rim_term(ctx.n, ctx.v, 2.8)
    return col + common.warm * (0.10 * rim)


def shade_ice(ctx, common, ice):
    lat, lon = lat_lon_from_normal(ctx.n)
    swirl = fbm3(vec3(lat * ice.freq, lon * ice.freq, ctx.seed), 4, 2.0, 0.5)
    m = np.sin(lon * 2.0 * PI * ice.freq + ice.marbling * swirl) * 0.5 + 0.5
    cracks = saturate((m - 0.65) / 0.03)
    col = ice.c_ice.mix(ice.c_snow, m).mix(ice.c_crack, cracks)

    nl = nl_mix(ctx.n, ctx.l0, ctx.l1)
    col = col * (0.5 + 0.5 * nl)
    rim = rim_term(ctx.n, ctx.v, 2.2)
    return col + common.cool * (0.12 * rim)


_SHADERS = {
    BodyKind.BLACK_HOLE: lambda ctx, params: shade_black_hole(ctx),
    BodyKind.ACCRETION_DISK: lambda ctx, params: shade_accretion(ctx, params.disk),
    BodyKind.ROCKY: lambda ctx, params: shade_rocky(ctx, params.common, params.rocky),
    BodyKind.GAS_GIANT: lambda ctx, params: shade_gas_giant(ctx, params.common, params.gas),
    BodyKind.ICE: lambda ctx, params: shade_ice(ctx, params.common, params.ice),
}


def shade(ctx, body, params):
    """Shade one sample (or an array of samples) of the given body. Channels are clamped to [0, 1]."""
    return _SHADERS[body](ctx, params).clamp01()
