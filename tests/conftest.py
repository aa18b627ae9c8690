"""Pytest configuration and shared fixtures."""

import logging
import os
import sys
from pathlib import Path

import numpy as np
import pytest

# Headless matplotlib for the viewer tests
os.environ.setdefault("MPLBACKEND", "Agg")

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import config as cfg  # noqa: E402
from shading import ShadingCtx  # noqa: E402
from vecmath import Vec3, vec3  # noqa: E402


@pytest.fixture
def params():
    """Default parameter bundles for all bodies."""
    return cfg.default_params()


@pytest.fixture
def make_ctx():
    """Build a scalar shading context with sensible defaults."""
    def _make(p=None, n=None, v=None, l0=None, l1=None, t=0.0, seed=0.5):
        n = n if n is not None else vec3(0.0, 0.0, 1.0)
        return ShadingCtx(
            p=p if p is not None else n,
            n=n,
            v=v if v is not None else -n,
            l0=l0 if l0 is not None else vec3(0.0, 0.0, 1.0),
            l1=l1 if l1 is not None else vec3(0.0, 0.0, -1.0),
            t=t,
            seed=seed,
        )
    return _make


@pytest.fixture
def random_unit_vectors():
    """Factory for arrays of random unit vectors, shape (count,) per component."""
    rng = np.random.default_rng(1234)

    def _make(count):
        raw = rng.normal(size=(3, count))
        raw /= np.linalg.norm(raw, axis=0)
        return Vec3(raw[0], raw[1], raw[2])
    return _make


@pytest.fixture
def restore_root_logging():
    """Undo any handler / level changes made to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
