"""Tests for the vector / color algebra."""

import logging

import numpy as np
import pytest

from vecmath import Vec3, fract, hex_rgb_u8, lat_lon_from_normal, mix, rgb, rim_term, saturate, vec3


class TestVec3:
    def test_arithmetic(self):
        a, b = vec3(1.0, 2.0, 3.0), vec3(0.5, -1.0, 2.0)
        assert a + b == vec3(1.5, 1.0, 5.0)
        assert a - b == vec3(0.5, 3.0, 1.0)
        assert a * b == vec3(0.5, -2.0, 6.0)
        assert a * 2.0 == vec3(2.0, 4.0, 6.0)
        assert 2.0 * a == vec3(2.0, 4.0, 6.0)
        assert a / 2.0 == vec3(0.5, 1.0, 1.5)
        assert -a == vec3(-1.0, -2.0, -3.0)
        assert a.dot(b) == pytest.approx(0.5 - 2.0 + 6.0)

    def test_numpy_scalars_and_arrays_multiply_from_the_left(self):
        a = vec3(1.0, 2.0, 3.0)
        assert np.float64(2.0) * a == vec3(2.0, 4.0, 6.0)
        scaled = np.array([1.0, 2.0]) * a
        assert isinstance(scaled, Vec3)
        np.testing.assert_array_equal(scaled.z, [3.0, 6.0])

    def test_length_and_normalized(self):
        v = vec3(3.0, 0.0, 4.0)
        assert v.length() == pytest.approx(5.0)
        assert v.normalized().length() == pytest.approx(1.0)

    def test_normalized_zero_vector_stays_finite(self):
        n = vec3(0.0, 0.0, 0.0).normalized()
        assert all(np.isfinite(c) for c in n)

    def test_clamp01_is_idempotent(self):
        values = np.linspace(-2.0, 3.0, 41)
        c = Vec3(values, values[::-1], values * 0.5)
        once = c.clamp01()
        assert once.clamp01() == once
        arr = once.as_array()
        assert arr.min() >= 0.0 and arr.max() <= 1.0

    def test_mix_extrapolates_outside_unit_range(self):
        a, b = rgb(0.0, 0.0, 0.0), rgb(1.0, 0.5, 0.25)
        assert a.mix(b, 0.0) == a
        assert a.mix(b, 1.0) == b
        assert a.mix(b, 2.0) == rgb(2.0, 1.0, 0.5)

    def test_immutable(self):
        v = vec3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_hashable_by_value(self):
        assert hash(vec3(1.0, 2.0, 3.0)) == hash(vec3(1.0, 2.0, 3.0))
        assert len({vec3(1.0, 2.0, 3.0), vec3(1.0, 2.0, 3.0)}) == 1

    def test_as_array_broadcasts_components(self):
        v = Vec3(np.zeros((2, 3)), 1.0, 2.0)
        arr = v.as_array()
        assert arr.shape == (2, 3, 3)
        np.testing.assert_array_equal(arr[1, 2], [0.0, 1.0, 2.0])


def test_scalar_helpers():
    assert saturate(-0.5) == 0.0
    assert saturate(1.5) == 1.0
    assert saturate(0.25) == 0.25
    assert mix(2.0, 4.0, 0.5) == 3.0
    assert mix(2.0, 4.0, 1.5) == 5.0
    assert fract(-0.25) == pytest.approx(0.75)
    assert fract(3.5) == pytest.approx(0.5)


class TestHexColor:
    def test_black_and_white(self):
        black, white = hex_rgb_u8("#000000"), hex_rgb_u8("#ffffff")
        for channel in black:
            assert channel == pytest.approx(0.0, abs=1 / 255)
        for channel in white:
            assert channel == pytest.approx(1.0, abs=1 / 255)

    def test_parses_each_channel(self):
        c = hex_rgb_u8("#ff8000")
        assert (c.x, c.y, c.z) == pytest.approx((1.0, 128 / 255, 0.0))

    def test_hash_prefix_is_optional(self):
        assert hex_rgb_u8("1c3b6b") == hex_rgb_u8("#1c3b6b")

    def test_bad_channels_degrade_to_full_intensity(self, caplog):
        with caplog.at_level(logging.WARNING, logger="vecmath"):
            c = hex_rgb_u8("#zz00")
        assert (c.x, c.y, c.z) == (1.0, 0.0, 1.0)
        assert len(caplog.records) == 2
        assert "#zz00" in caplog.records[0].getMessage()

    @pytest.mark.parametrize("text", ["", "#", "+f+f+f", " f f f", "#GGGGGG"])
    def test_never_raises(self, text):
        c = hex_rgb_u8(text)
        assert c == rgb(1.0, 1.0, 1.0)


class TestLatLon:
    def test_poles_and_equator(self):
        assert lat_lon_from_normal(vec3(0.0, 1.0, 0.0))[0] == pytest.approx(1.0)
        assert lat_lon_from_normal(vec3(0.0, -1.0, 0.0))[0] == pytest.approx(0.0)
        lat, lon = lat_lon_from_normal(vec3(1.0, 0.0, 0.0))
        assert (lat, lon) == pytest.approx((0.5, 0.5))

    def test_range_for_unit_normals(self, random_unit_vectors):
        lat, lon = lat_lon_from_normal(random_unit_vectors(2000))
        assert lat.min() >= 0.0 and lat.max() <= 1.0
        assert lon.min() >= 0.0 and lon.max() <= 1.0

    def test_slightly_denormalized_normal_stays_finite(self):
        lat, _ = lat_lon_from_normal(vec3(0.0, 1.0000001, 0.0))
        assert lat == pytest.approx(1.0)


def test_rim_term_is_zero_facing_and_one_at_silhouette():
    n = vec3(0.0, 0.0, 1.0)
    assert rim_term(n, -n, 3.0) == pytest.approx(0.0)
    assert rim_term(n, vec3(1.0, 0.0, 0.0), 3.0) == pytest.approx(1.0)
    assert rim_term(n, n, 2.0) == pytest.approx(4.0)
