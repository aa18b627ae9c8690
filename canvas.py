# canvas.py
"""
Builds per-pixel shading contexts for a previewed body, evaluates the shaders
for a whole frame at once, and defines the BodyCanvas class that displays
the result.

All contexts built here pass the camera ray direction as `v`, so that
n . (-v) is 1 on surfaces facing the viewer and rim terms peak at silhouettes.
"""
import logging
import time

import numpy as np

import config as cfg
from shading import BodyKind, ShadingCtx, shade
from vecmath import vec3

logger = logging.getLogger(__name__)

SPHERE_BODIES = (BodyKind.ROCKY, BodyKind.GAS_GIANT, BodyKind.ICE)
DISK_DISTANCE = 20.0  # Orthographic camera distance from the origin


# --- Sample construction ---
def screen_grid(width, height, center=(0.0, 0.0), zoom=1.0):
    """Normalized screen coordinates in [-1, 1], panned and zoomed. Row 0 is the top."""
    xs = (np.arange(width) / width) * 2.0 - 1.0
    ys = (np.arange(height) / height) * 2.0 - 1.0
    sx, sy = np.meshgrid((xs - center[0]) / zoom, (ys - center[1]) / zoom)
    return sx, -sy


def sphere_samples(sx, sy, t, seed):
    """Project screen coordinates onto a unit sphere facing +z. Returns (ctx, covered)."""
    r2 = sx * sx + sy * sy
    covered = r2 <= 1.0
    z = np.sqrt(np.clip(1.0 - r2, 0.0, 1.0))
    n = vec3(sx, sy, z).normalized()
    ctx = ShadingCtx(p=n, n=n, v=cfg.VIEW_DIR, l0=cfg.LIGHT_PRIMARY, l1=cfg.LIGHT_SECONDARY, t=t, seed=seed)
    return ctx, covered


def _disk_camera(tilt_deg):
    a = np.deg2rad(tilt_deg)
    forward = vec3(0.0, -np.sin(a), -np.cos(a))
    right = vec3(1.0, 0.0, 0.0)
    up = vec3(0.0, np.cos(a), -np.sin(a))
    return forward, right, up


def disk_samples(sx, sy, t, seed, tilt_deg=cfg.DISK_TILT_DEG, scale=cfg.DISK_VIEW_SCALE):
    """
    Intersect orthographic camera rays with the y = 0 disk plane.

    Returns:
        (ctx, depth) where depth is the distance along the ray to the plane.
        The context normal is the orbital direction of the disk material, so
        the beaming term brightens the side moving toward the camera.
    """
    forward, right, up = _disk_camera(tilt_deg)
    origin = right * (sx * scale) + up * (sy * scale) - forward * DISK_DISTANCE
    # forward.y is strictly negative for any positive tilt
    depth = -origin.y / forward.y
    p = origin + forward * depth
    orbit = vec3(-p.z, 0.0, p.x).normalized()
    ctx = ShadingCtx(p=p, n=orbit, v=forward, l0=cfg.LIGHT_PRIMARY, l1=cfg.LIGHT_SECONDARY, t=t, seed=seed)
    return ctx, depth


def horizon_samples(sx, sy, t, seed, tilt_deg=cfg.DISK_TILT_DEG, scale=cfg.DISK_VIEW_SCALE,
                    radius=cfg.HORIZON_RADIUS):
    """Screen-space horizon disc around the origin. Returns (ctx, covered)."""
    forward, right, up = _disk_camera(tilt_deg)
    hx, hy = sx * scale / radius, sy * scale / radius
    r2 = hx * hx + hy * hy
    covered = r2 < 1.0
    hz = np.sqrt(np.clip(1.0 - r2, 0.0, 1.0))
    n = (right * hx + up * hy - forward * hz).normalized()
    ctx = ShadingCtx(p=n * radius, n=n, v=forward, l0=cfg.LIGHT_PRIMARY, l1=cfg.LIGHT_SECONDARY, t=t, seed=seed)
    return ctx, covered


# --- Frame rendering ---
def render_body(body, params, width, height, t=0.0, center=(0.0, 0.0), zoom=1.0, seed=cfg.SEED):
    """
    Shade a full frame of one body.

    Returns:
        (height, width, 3) float array with every channel in [0, 1].
    """
    start = time.perf_counter()
    sx, sy = screen_grid(width, height, center, zoom)

    if body in SPHERE_BODIES:
        ctx, covered = sphere_samples(sx, sy, t, seed)
        image = shade(ctx, body, params).as_array()
        image = np.where(covered[..., None], image, cfg.BACKGROUND)
    elif body is BodyKind.ACCRETION_DISK:
        ctx, _ = disk_samples(sx, sy, t, seed)
        image = shade(ctx, body, params).as_array()
    else:
        image = _render_black_hole(sx, sy, t, seed, params)

    logger.debug("Rendered %s at %dx%d in %.1f ms", body.value, width, height,
                 (time.perf_counter() - start) * 1000.0)
    return image


def _render_black_hole(sx, sy, t, seed, params):
    # The core only tints the rim; the horizon and occlusion are resolved here in screen space
    disk_ctx, depth = disk_samples(sx, sy, t, seed)
    disk = shade(disk_ctx, BodyKind.ACCRETION_DISK, params).as_array()

    hole_ctx, covered = horizon_samples(sx, sy, t, seed)
    hole = shade(hole_ctx, BodyKind.BLACK_HOLE, params).as_array()

    in_front = depth < DISK_DISTANCE
    over_hole = np.where(in_front[..., None], np.clip(hole + disk, 0.0, 1.0), hole)
    return np.where(covered[..., None], over_hole, disk)


def pack_rgb(image):
    """Pack a (H, W, 3) [0, 1] image into 0xRRGGBB words."""
    channels = (np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint32)
    return (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]


# --- Body Canvas Class ---
class BodyCanvas:
    def __init__(self, ax, background_color, line_color):
        self.ax = ax
        self.background_color = background_color
        self.line_color = line_color
        self.image_artist = None

    def update(self, image, body, t):
        """Show a rendered frame, reusing the image artist after the first call."""
        if self.image_artist is None:
            self.ax.set_facecolor(self.background_color)
            self.image_artist = self.ax.imshow(image, interpolation='nearest')
            self.ax.axis('off')
        else:
            self.image_artist.set_data(image)
        self.ax.set_title(f'{body.name.replace("_", " ").title()}  (t = {t:.2f})', color=self.line_color)
