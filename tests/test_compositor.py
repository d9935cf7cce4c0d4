"""Tests for rasterizing and compositing overlays."""

import numpy as np
import pytest

from facepaint.domain.errors import RenderError
from facepaint.domain.geometry import build_eyebrow_geometry, build_lip_geometry
from facepaint.domain.models import Color, MappedPoint
from facepaint.infrastructure.compositor import composite, flatten_curve, geometry_outline, rasterize

RED = Color(255, 0, 0)
SQUARE = [MappedPoint(20, 20), MappedPoint(60, 20), MappedPoint(60, 60), MappedPoint(20, 60)]


@pytest.fixture
def base():
    return np.full((100, 120, 3), 100, dtype=np.uint8)


def test_output_matches_source_size(base):
    result = composite(base, [build_lip_geometry(SQUARE, RED)])

    assert result.shape == base.shape
    assert result.dtype == np.uint8


def test_fill_blends_color_at_overlay_alpha(base):
    result = composite(base, [build_lip_geometry(SQUARE, RED)])

    # BGR: blue/green fade toward 0, red toward 255
    b, g, r = (int(v) for v in result[40, 40])
    assert b == pytest.approx(100 * 0.3, abs=1)
    assert g == pytest.approx(100 * 0.3, abs=1)
    assert r == pytest.approx(100 * 0.3 + 255 * 0.7, abs=1)


def test_pixels_outside_overlay_identical(base):
    geometry = build_lip_geometry(SQUARE, RED)
    mask = rasterize(geometry_outline(geometry), base.shape[:2])

    result = composite(base, [geometry])

    assert np.array_equal(result[mask == 0], base[mask == 0])
    assert not np.array_equal(result[mask > 0], base[mask > 0])


def test_polygon_closes_back_to_first_point(base):
    # A triangle only has area if the last point joins the first
    triangle = [MappedPoint(10, 10), MappedPoint(90, 10), MappedPoint(50, 80)]
    mask = rasterize(geometry_outline(build_lip_geometry(triangle, RED)), base.shape[:2])

    assert mask[30, 50] == 255
    assert mask[5, 50] == 0


def test_base_never_modified(base):
    original = base.copy()

    composite(base, [build_lip_geometry(SQUARE, RED)])

    assert np.array_equal(base, original)


def test_skipped_geometry_leaves_image_identical(base):
    result = composite(base, [build_lip_geometry(SQUARE[:1], RED), None])

    assert np.array_equal(result, base)
    assert result is not base


def test_two_point_lips_leave_image_identical(base):
    lips = build_lip_geometry([MappedPoint(20, 50), MappedPoint(90, 50)], RED)

    result = composite(base, [lips])

    assert np.array_equal(result, base)


def test_two_point_eyebrow_leaves_image_identical(base):
    brow = build_eyebrow_geometry([MappedPoint(20, 50), MappedPoint(90, 50)], RED)

    result = composite(base, [brow])

    assert np.array_equal(result, base)


def test_collinear_eyebrow_covers_nothing(base):
    brow = build_eyebrow_geometry([MappedPoint(10, 30), MappedPoint(50, 30), MappedPoint(100, 30)], RED)

    assert not rasterize(geometry_outline(brow), base.shape[:2]).any()


def test_grayscale_base_promoted_to_color():
    gray = np.full((50, 50), 80, dtype=np.uint8)

    result = composite(gray, [])

    assert result.shape == (50, 50, 3)
    assert np.all(result == 80)


def test_flattened_curve_starts_at_anchor_and_ends_at_last_midpoint():
    p0, p1, p2 = MappedPoint(0, 10), MappedPoint(10, 0), MappedPoint(20, 10)
    curve = build_eyebrow_geometry([p0, p1, p2], RED)

    outline = flatten_curve(curve, steps=8)

    assert outline.shape == (1 + 2 * 8, 2)
    assert tuple(outline[0]) == (0, 10)
    assert tuple(outline[8]) == pytest.approx((5, 5))
    assert tuple(outline[-1]) == pytest.approx((15, 5))


def test_curve_bends_toward_control_point():
    p0, p1, p2 = MappedPoint(0, 40), MappedPoint(20, 0), MappedPoint(40, 40)
    curve = build_eyebrow_geometry([p0, p1, p2], RED)

    outline = flatten_curve(curve, steps=16)
    second = outline[17:]

    # The second segment starts at (10, 20), ends at (30, 20) and is pulled up toward (20, 0)
    assert second[:, 1].min() < 20
    assert second[:, 1].min() > 0


def test_eyebrow_fill_covers_area_under_curve(base):
    brow = [MappedPoint(20, 50), MappedPoint(40, 20), MappedPoint(70, 15), MappedPoint(90, 45)]
    geometry = build_eyebrow_geometry(brow, RED)

    result = composite(base, [geometry])

    assert result[30, 50, 2] > base[30, 50, 2]
    assert np.array_equal(result[90:, :], base[90:, :])


def test_overlays_drawn_in_order(base):
    blue = Color(0, 0, 255)
    first = build_lip_geometry(SQUARE, RED)
    second = build_lip_geometry(SQUARE, blue)

    result = composite(base, [first, second])
    single = composite(composite(base, [first]), [second])

    assert np.array_equal(result, single)
    assert result[40, 40, 0] > result[40, 40, 2]


def test_unknown_geometry_rejected(base):
    with pytest.raises(RenderError):
        composite(base, ["not a geometry"])
