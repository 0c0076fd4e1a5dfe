import math

import pytest

from outline_pie_chart.handlers.canvas.kivy_geometry import (
    arc_point,
    blur_layers,
    kivy_cap,
    split_arc,
    to_kivy_angles,
    to_kivy_ellipse,
    to_kivy_point,
)
from outline_pie_chart.handlers.canvas.primitives import Rect
from outline_pie_chart.services.pie_chart_painter import radians


def test_ellipse_is_flipped_into_kivy_space():
    rect = Rect.from_ltwh(5, 10, 100, 100)

    assert to_kivy_ellipse(rect, originX=20, originTop=300) == (25.0, 190.0, 100.0, 100.0)


def test_angles_are_rotated_to_twelve_oclock_zero():
    angleStart, angleEnd = to_kivy_angles(radians(270.0), radians(90.0))

    assert angleStart == pytest.approx(360.0)
    assert angleEnd == pytest.approx(450.0)


def test_split_arc_covers_whole_sweep():
    slices = split_arc(radians(10.0), radians(10.0), maxSliceDegrees=3.0)

    assert len(slices) == 4
    assert slices[0][0] == pytest.approx(radians(10.0))
    assert sum(sweep for _, sweep in slices) == pytest.approx(radians(10.0))
    assert slices[-1][0] + slices[-1][1] == pytest.approx(radians(20.0))


def test_split_arc_keeps_tiny_arc_whole():
    assert split_arc(0.0, radians(1.0), maxSliceDegrees=3.0) == [(0.0, radians(1.0))]


def test_arc_point_in_screen_space():
    rect = Rect.from_ltwh(0, 0, 100, 100)

    assert arc_point(rect, 0.0) == pytest.approx((100.0, 50.0))
    assert arc_point(rect, math.pi / 2) == pytest.approx((50.0, 100.0))


def test_blur_layers():
    assert blur_layers(10.0, 0.0, 4) == [(10.0, 1.0)]
    assert blur_layers(10.0, 0.0, 4, alpha=0.5) == [(10.0, 0.5)]

    layers = blur_layers(10.0, 4.0, 4, alpha=0.5)

    assert [width for width, _ in layers] == pytest.approx([14.0, 13.0, 12.0, 11.0])
    assert layers[0][1] < layers[-1][1]


def test_stacked_blur_layers_composite_to_shadow_alpha():
    layers = blur_layers(10.0, 4.0, 4, alpha=0.5)

    # в центре полосы лежат все слои: итоговая альфа 1 - П(1 - a_i)
    transparency = 1.0
    for _, layerAlpha in layers:
        transparency *= 1.0 - layerAlpha

    assert 1.0 - transparency == pytest.approx(0.5)


def test_opaque_blur_layers_stay_opaque():
    assert all(layerAlpha == 1.0 for _, layerAlpha in blur_layers(10.0, 4.0, 4, alpha=1.0))


def test_to_kivy_point_flips_y():
    assert to_kivy_point((10.0, 30.0), originX=5.0, originTop=100.0) == (15.0, 70.0)


def test_kivy_cap():
    assert kivy_cap("round") == "round"
    assert kivy_cap("butt") == "none"
