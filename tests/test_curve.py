import numpy as np
import pytest
from ghgmac.util.curve import CURVE_ERROR, PointSetCurve


@pytest.fixture
def curve() -> PointSetCurve:
    return PointSetCurve([(0, 0), (100, 0.5), (200, 0.9)])


def test_interpolates_between_points(curve: PointSetCurve):
    np.testing.assert_allclose(curve.get_y(150), 0.7)
    np.testing.assert_allclose(curve.get_y(50), 0.25)
    np.testing.assert_allclose(curve.get_y(100), 0.5)


def test_extrapolates_below_first_point(curve: PointSetCurve):
    np.testing.assert_allclose(curve.get_y(-100), -0.5)


def test_domain(curve: PointSetCurve):
    assert curve.get_min_x() == 0
    assert curve.get_max_x() == 200
    assert len(curve) == 3


def test_empty_curve_reports_errors():
    curve = PointSetCurve()

    assert curve.get_y(10) == CURVE_ERROR
    assert curve.get_max_x() == CURVE_ERROR
    assert curve.get_min_x() == -CURVE_ERROR
    assert curve.get_sorted_pairs() == []


def test_nan_reports_error(curve: PointSetCurve):
    assert curve.get_y(np.nan) == CURVE_ERROR


def test_single_point_is_flat():
    curve = PointSetCurve([(50, 0.3)])

    assert curve.get_y(0) == 0.3
    assert curve.get_y(500) == 0.3
    assert curve.get_min_x() == curve.get_max_x() == 50


def test_sorted_pairs_and_duplicates():
    curve = PointSetCurve([(200, 0.9), (0, 0), (100, 0.5), (100, 0.6)])

    # The last y given for an x wins
    assert curve.get_sorted_pairs() == [(0.0, 0.0), (100.0, 0.6), (200.0, 0.9)]


def test_clone_is_independent(curve: PointSetCurve):
    clone = curve.clone()

    assert clone is not curve
    assert clone.x is not curve.x
    assert clone.get_sorted_pairs() == curve.get_sorted_pairs()
    np.testing.assert_allclose(clone.get_y(150), curve.get_y(150))


def test_to_frame(curve: PointSetCurve):
    frame = curve.to_frame(x_name="tax", y_name="reduction")

    assert list(frame.columns) == ["tax", "reduction"]
    np.testing.assert_allclose(frame["reduction"].values, [0, 0.5, 0.9])
