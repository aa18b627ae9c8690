# config.py
"""
Contains the default palettes, body parameters and viewer settings.
Runtime settings can be overridden through environment variables.
"""
import logging
import os

import numpy as np

from shading import CommonParams, DiskParams, GasParams, IceParams, Params, RockyParams
from vecmath import hex_rgb_u8, vec3

logger = logging.getLogger(__name__)


def _env_number(name, default, cast=float):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a valid %s); using %r", name, raw, cast.__name__, default)
        return default


# --- Palettes ---
WARM_TINT = '#ffb347'
COOL_TINT = '#8bb6ff'
DISK_PALETTE = ('#ff9a00', '#ffd65c', '#fff3e0')
ROCKY_PALETTE = ('#6b4f2a', '#9db36b', '#1c3b6b')  # land1, land2, ocean
GAS_PALETTE = ('#f0e1c2', '#d9a066', '#9b6b43')
STORM_COLOR = '#b24d2a'
ICE_PALETTE = ('#9fd0ff', '#e6f4ff', '#284a73')  # ice, snow, crack


def default_params():
    """Build the default parameter bundles for all five bodies."""
    return Params(
        common=CommonParams(warm=hex_rgb_u8(WARM_TINT), cool=hex_rgb_u8(COOL_TINT)),
        disk=DiskParams(
            rin=1.2, rout=5.0,
            bands_w=22.0, bands_phi=0.3,
            noise_freq=2.8, noise_amp=0.08,
            beaming=0.4,
            c1=hex_rgb_u8(DISK_PALETTE[0]), c2=hex_rgb_u8(DISK_PALETTE[1]), c3=hex_rgb_u8(DISK_PALETTE[2]),
        ),
        rocky=RockyParams(
            bioma_freq=7.0, height_freq=8.0, grad_amp=0.15, k_atm=0.12,
            c_land1=hex_rgb_u8(ROCKY_PALETTE[0]), c_land2=hex_rgb_u8(ROCKY_PALETTE[1]),
            c_ocean=hex_rgb_u8(ROCKY_PALETTE[2]),
        ),
        gas=GasParams(
            k_bands=16.0, dist_amp=0.06, noise_freq=3.0, storm_speed=0.12,
            c_a=hex_rgb_u8(GAS_PALETTE[0]), c_b=hex_rgb_u8(GAS_PALETTE[1]), c_c=hex_rgb_u8(GAS_PALETTE[2]),
            c_spot=hex_rgb_u8(STORM_COLOR),
        ),
        ice=IceParams(
            freq=10.0, marbling=1.6,
            c_ice=hex_rgb_u8(ICE_PALETTE[0]), c_snow=hex_rgb_u8(ICE_PALETTE[1]),
            c_crack=hex_rgb_u8(ICE_PALETTE[2]),
        ),
    )


# --- Scene lighting (world space) ---
VIEW_DIR = vec3(0.0, 0.0, -1.0)  # point -> camera for the sphere preview
LIGHT_PRIMARY = vec3(0.0, 0.15, 1.0).normalized()
LIGHT_SECONDARY = vec3(0.0, 0.15, -1.0).normalized()
SEED = 0.5

# --- Accretion disk / black hole camera ---
DISK_TILT_DEG = 20.0  # Camera elevation above the disk plane
DISK_VIEW_SCALE = 6.0  # World units covered by half the screen at zoom 1
HORIZON_RADIUS = 1.0  # Screen-space event horizon, in world units

# --- Viewer ---
WIDTH = _env_number('SHADER_WIDTH', 320, int)
HEIGHT = _env_number('SHADER_HEIGHT', 240, int)
FPS = _env_number('SHADER_FPS', 20, int)
TIME_STEP = 0.01  # Time advanced per frame
PAN_STEP = 0.05
ZOOM_STEP = 1.1
ZOOM_MIN, ZOOM_MAX = 0.3, 5.0
BACKGROUND = np.array([0.0, 0.0, 0.0])

# --- Logging ---
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = os.getenv('LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
