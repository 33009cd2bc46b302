import numpy as np
import pytest

from isobands.config import MAX_SEGMENTS_PER_TRIANGLE
from isobands.contouring.classifier import classify_triangle
from isobands.contouring.segments import edge_weight, first_level, generate_segments
from isobands.model.geometry_primitives import Point3
from isobands.model.settings import BandSettings

P1 = Point3(0.0, 0.0, 0.0)
P2 = Point3(0.5, 1.0, 0.0)
P3 = Point3(1.0, 0.0, 0.0)


def segments_for(values, settings, points=(P1, P2, P3)):
    tri = classify_triangle(points, values, settings.min)
    return tri, generate_segments(tri, settings)


def test_edge_weight():
    assert edge_weight(0.0, 1.0, 0.0) == 1.0
    assert edge_weight(0.0, 1.0, 1.0) == 0.0
    assert edge_weight(0.2, 0.6, 0.3) == pytest.approx(0.75)
    assert edge_weight(0.6, 0.2, 0.3) == pytest.approx(0.25)


@pytest.mark.parametrize("vmin, vmax, band_count, expected", [
    (0.0, 1.0, 10, 0.0),
    (0.2, 0.6, 4, 0.2),
    (0.23, 0.63, 4, 0.2),
    (0.27, 0.67, 4, 0.3),
    (0.9, 1.0, 10, 0.9),
])
def test_first_level_snaps_to_increment_from_zero(vmin, vmax, band_count, expected):
    settings = BandSettings(min=vmin, max=vmax, band_count=band_count)
    assert first_level(settings) == pytest.approx(expected)


def test_first_level_of_empty_window():
    assert first_level(BandSettings(min=0.4, max=0.4, band_count=5)) == 0.4


def test_single_crossing_at_middle_vertex():
    tri, segments = segments_for((0.0, 0.5, 1.0), BandSettings(band_count=2))
    assert len(segments) == 1
    seg = segments[0]
    assert seg.iso == 0.5
    # At v2 the cut starts on the middle vertex itself
    assert seg.p1 == P2
    assert seg.p2.to_tuple() == pytest.approx((0.5, 0.0, 0.0))
    assert tri.baseline_value == 0.0


def test_constant_triangle_has_no_segment():
    tri, segments = segments_for((0.3, 0.3, 0.3), BandSettings(band_count=4))
    assert segments == []
    assert tri.baseline_value == 0.25


def test_baseline_tracks_highest_level_below_minimum():
    tri, segments = segments_for((0.35, 0.6, 0.9), BandSettings(band_count=10))
    assert tri.baseline_value == pytest.approx(0.3)
    assert segments[0].iso == pytest.approx(0.4)
    assert segments[-1].iso == pytest.approx(0.8)


def test_baseline_starts_at_window_minimum():
    tri, segments = segments_for((0.1, 0.6, 0.9), BandSettings(min=0.5, band_count=10))
    assert tri.baseline_value == 0.5
    assert segments[0].iso == pytest.approx(0.5)


def test_segments_stay_inside_window():
    settings = BandSettings(min=0.2, max=0.6, band_count=10)
    _, segments = segments_for((0.0, 0.5, 1.0), settings)
    assert len(segments) >= 3
    assert all(0.2 - 1e-12 <= s.iso < 0.6 for s in segments)


def test_end_points_lie_on_iso_level():
    # The scalar value equals x on this triangle
    points = (Point3(0.0, 0.0, 0.0), Point3(0.4, 2.0, 1.0), Point3(1.0, -1.0, 0.5))
    values = (0.0, 0.4, 1.0)
    for band_count in (3, 7, 20):
        _, segments = segments_for(values, BandSettings(band_count=band_count), points)
        assert segments
        for seg in segments:
            assert seg.p1.x == pytest.approx(seg.iso)
            assert seg.p2.x == pytest.approx(seg.iso)


def test_segments_are_strictly_increasing():
    rng = np.random.default_rng(7)
    for _ in range(200):
        values = tuple(rng.random(3))
        settings = BandSettings(band_count=int(rng.integers(1, 50)))
        _, segments = segments_for(values, settings)
        isos = [s.iso for s in segments]
        assert all(a < b for a, b in zip(isos, isos[1:]))


def test_segment_count_is_capped():
    _, segments = segments_for((0.0, 0.5, 1.0), BandSettings(band_count=1_000_000))
    assert 90 <= len(segments) <= MAX_SEGMENTS_PER_TRIANGLE


def test_segment_count_is_bounded_for_any_band_count():
    rng = np.random.default_rng(11)
    for _ in range(200):
        values = tuple(rng.random(3))
        band_count = int(rng.integers(1, 10_000_000))
        vmin = float(rng.random() * 0.5)
        settings = BandSettings(min=vmin, max=vmin + 0.5, band_count=band_count)
        _, segments = segments_for(values, settings)
        assert len(segments) <= MAX_SEGMENTS_PER_TRIANGLE


def test_levels_split_the_window():
    settings = BandSettings(min=0.2, max=0.6, band_count=4)
    assert settings.increment == pytest.approx(0.1)
    tri, segments = segments_for((0.0, 0.5, 1.0), settings)
    assert [s.iso for s in segments] == pytest.approx([0.2, 0.3, 0.4, 0.5])
    assert tri.baseline_value == 0.2


@pytest.mark.parametrize("vmin, vmax", [(0.4, 0.4), (0.7, 0.3)])
def test_empty_window_has_no_levels(vmin, vmax):
    tri, segments = segments_for((0.0, 0.5, 1.0), BandSettings(min=vmin, max=vmax, band_count=5))
    assert segments == []
    assert tri.baseline_value == vmin
