import pytest

from outline_pie_chart.services.percentages import adjust_percentages
from outline_pie_chart.services.schema import Segment


def test_empty_list_is_returned_unchanged():
    assert adjust_percentages([]) == ()


def test_valid_partition_is_not_rescaled(makeSegments):
    segments = makeSegments(0.64, 0.36)

    adjusted = adjust_percentages(segments)

    assert all(a is b for a, b in zip(adjusted, segments))
    assert [s.percentage for s in adjusted] == [0.64, 0.36]


def test_sum_within_tolerance_is_not_rescaled(makeSegments):
    # 0.1 * 10 в float дает 0.9999999999999999
    segments = makeSegments(*([0.1] * 10))

    adjusted = adjust_percentages(segments)

    assert [s.percentage for s in adjusted] == [0.1] * 10


def test_normalizing_twice_is_bit_identical(makeSegments):
    segments = makeSegments(0.25, 0.25, 0.5)

    once = adjust_percentages(segments)
    twice = adjust_percentages(once)

    assert [s.percentage for s in once] == [s.percentage for s in twice]


def test_rescales_by_total(makeSegments):
    segments = makeSegments(0.4, 0.2, 0.2)

    adjusted = adjust_percentages(segments)

    assert [s.percentage for s in adjusted] == pytest.approx([0.5, 0.25, 0.25])
    assert [s.percentage for s in adjusted] == pytest.approx([s.percentage * 1.25 for s in segments])
    assert sum(s.percentage for s in adjusted) == pytest.approx(1.0, abs=1e-9)


def test_rescales_totals_above_one(makeSegments):
    segments = makeSegments(3.0, 1.0)

    adjusted = adjust_percentages(segments)

    assert [s.percentage for s in adjusted] == pytest.approx([0.75, 0.25])


def test_zero_total_is_passthrough(makeSegments):
    segments = makeSegments(0.0, 0.0, 0.0)

    adjusted = adjust_percentages(segments)

    assert [s.percentage for s in adjusted] == [0.0, 0.0, 0.0]


def test_keeps_order_zero_segments_and_styling():
    segments = [
        Segment(percentage=0.2, color=(1, 0, 0), cornerRadius=4),
        Segment(percentage=0.0, color=(0, 1, 0)),
        Segment(
            percentage=0.2,
            color=(0, 0, 1),
            gradient={"kind": "radial", "colors": [(0, 0, 1), (1, 1, 1)]},
            shadowList=[{"offset": {"dx": 1, "dy": 2}, "blurRadius": 3}],
        ),
    ]

    adjusted = adjust_percentages(segments)

    assert len(adjusted) == 3
    assert [s.percentage for s in adjusted] == pytest.approx([0.5, 0.0, 0.5])
    assert adjusted[0].cornerRadius == 4
    assert adjusted[1].color == (0.0, 1.0, 0.0, 1.0)
    assert adjusted[2].gradient == segments[2].gradient
    assert adjusted[2].shadowList == segments[2].shadowList
    # исходные сегменты не меняются
    assert segments[0].percentage == 0.2
