from __future__ import annotations

import logging

import numpy as np
import pytest

from frameconversions import (
    AxisSet,
    CoordinateFrame,
    EulerAngles,
    all_axis_sets,
    convert_euler_angles,
    convert_euler_order,
    convert_position,
    extract_euler_angles,
    to_equivalent_rotation_order,
    to_quaternion,
)
from frameconversions.quaternions import quat_to_rotation_matrix, rotations_equivalent

ROTATION_ORDERS = all_axis_sets(rotation_order=True)
SPATIAL_AXES = all_axis_sets()


def rot(axis: str, degrees: float) -> np.ndarray:
    """Right-handed elementary rotation matrix."""
    angle = np.radians(degrees)
    c, s = np.cos(angle), np.sin(angle)
    if axis == "X":
        return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])
    if axis == "Y":
        return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def recovers_exactly(order: AxisSet) -> bool:
    """Whether angles with |middle| < 90 (Tait-Bryan) or middle in (0, 180) (proper) come back unchanged."""
    return not order.is_proper_euler or not order[1].negative


@pytest.mark.parametrize(
    ("from_axes", "to_axes", "expected"),
    [
        ("+X+Y-Z", "+Y-Z+X", (-3.0, 1.0, -2.0)),
        ("-Z-X+Y", "+X-Z+Y", (-3.0, 2.0, 1.0)),
        ("+X+Y+Z", "+X+Y+Z", (1.0, 2.0, 3.0)),
        ("+X+Y+Z", "-X-Y-Z", (-1.0, -2.0, -3.0)),
    ],
)
def test_convert_position(from_axes: str, to_axes: str, expected: tuple[float, float, float]) -> None:
    """Test position conversion on known axis pairs."""
    res = convert_position(AxisSet(from_axes), AxisSet(to_axes), (1, 2, 3))
    np.testing.assert_array_equal(res, expected)
    # Descriptors are accepted directly
    np.testing.assert_array_equal(convert_position(from_axes, to_axes, [1, 2, 3]), expected)


def test_convert_position_round_trip() -> None:
    """Test that converting a position there and back is the identity for every pair of spatial axis sets."""
    v = np.array([1.5, -2.25, 3.0])
    for a in SPATIAL_AXES:
        for b in SPATIAL_AXES:
            converted = convert_position(a, b, v)
            assert sorted(np.abs(converted)) == sorted(np.abs(v))
            np.testing.assert_array_equal(convert_position(b, a, converted), v)


def test_convert_position_rejects_bad_shape() -> None:
    """Test that positions must have three components."""
    with pytest.raises(ValueError, match="shape"):
        convert_position("XYZ", "YZX", (1.0, 2.0))


def test_to_quaternion_matches_intrinsic_composition() -> None:
    """Test that "-Z-X-Y" with (30, 10, 20) is a Z, then X, then Y right-handed composition."""
    quat = to_quaternion(AxisSet("-Z-X-Y", rotation_order=True), EulerAngles(30, 10, 20))

    expected = rot("Y", 20) @ rot("X", 10) @ rot("Z", 30)
    np.testing.assert_allclose(quat_to_rotation_matrix(quat), expected, atol=1e-12)
    assert np.linalg.norm(quat) == pytest.approx(1.0)


def test_to_quaternion_positive_axes_turn_clockwise() -> None:
    """Test that a positive axis negates the angle and a negative axis keeps it."""
    np.testing.assert_allclose(quat_to_rotation_matrix(to_quaternion("XYZ", (0, 0, 30))), rot("Z", -30), atol=1e-12)
    np.testing.assert_allclose(quat_to_rotation_matrix(to_quaternion("XY-Z", (0, 0, 30))), rot("Z", 30), atol=1e-12)


@pytest.mark.parametrize("order", ROTATION_ORDERS, ids=str)
@pytest.mark.parametrize("angles", [(20.0, 40.0, 80.0), (-35.0, 70.0, 150.0), (0.0, 0.0, 0.0)])
def test_extract_euler_angles_round_trip(order: AxisSet, angles: tuple[float, float, float]) -> None:
    """Test that extraction inverts composition for every rotation order away from gimbal lock."""
    quat = to_quaternion(order, angles)
    extracted = extract_euler_angles(order, quat)

    assert isinstance(extracted, EulerAngles)
    assert rotations_equivalent(to_quaternion(order, extracted), quat)
    if recovers_exactly(order) and angles != (0.0, 0.0, 0.0):
        np.testing.assert_allclose(extracted.to_array(), angles, atol=1e-6)


@pytest.mark.parametrize("order", ROTATION_ORDERS, ids=str)
def test_extract_euler_angles_gimbal_lock(order: AxisSet) -> None:
    """Test that gimbal lock yields an equivalent orientation with the third angle zeroed."""
    middles = (0.0, 180.0) if order.is_proper_euler else (90.0, -90.0)
    for middle in middles:
        quat = to_quaternion(order, (30.0, middle, 10.0))
        extracted = extract_euler_angles(order, quat)

        assert extracted.third == 0.0
        assert abs(extracted.second) == pytest.approx(abs(middle))
        assert rotations_equivalent(to_quaternion(order, extracted), quat)


def test_extract_euler_angles_logs_gimbal_lock(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a non-unique decomposition is reported at debug level."""
    with caplog.at_level(logging.DEBUG, logger="frameconversions"):
        extract_euler_angles("XYZ", to_quaternion("XYZ", (30.0, 90.0, 10.0)))

    assert any("Non-unique" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize("from_order", ROTATION_ORDERS, ids=str)
def test_convert_euler_order_round_trip(from_order: AxisSet) -> None:
    """Test converting angles into every other rotation order and back."""
    angles = (20.0, 40.0, 80.0)
    quat = to_quaternion(from_order, angles)
    for to_order in ROTATION_ORDERS:
        converted = convert_euler_order(from_order, to_order, angles)
        assert rotations_equivalent(to_quaternion(to_order, converted), quat)

        back = convert_euler_order(to_order, from_order, converted)
        assert rotations_equivalent(to_quaternion(from_order, back), quat)
        if recovers_exactly(from_order):
            np.testing.assert_allclose(back.to_array(), angles, atol=1e-6)


@pytest.mark.parametrize(
    ("axes_from", "axes_to", "order", "expected"),
    [
        ("+X+Y-Z", "XYZ", "-Z-X-Y", "+Z-X-Y"),
        ("XYZ", "XYZ", "-Z-X-Y", "-Z-X-Y"),
        ("XYZ", "YZX", "XYZ", "YZX"),
        ("XYZ", "-X-Y-Z", "XYX", "-X-Y-X"),
    ],
)
def test_to_equivalent_rotation_order(axes_from: str, axes_to: str, order: str, expected: str) -> None:
    """Test rotation-order remapping on known conventions."""
    res = to_equivalent_rotation_order(axes_from, axes_to, order)
    assert res == AxisSet(expected, rotation_order=True)
    assert res.is_rotation_order


def test_to_equivalent_rotation_order_round_trip() -> None:
    """Test that remapping a rotation order there and back returns it unchanged."""
    orders = [AxisSet(descriptor, rotation_order=True) for descriptor in ("XYZ", "-Z-X-Y", "+Y-X+Y", "Z-YZ")]
    for a in SPATIAL_AXES:
        for b in SPATIAL_AXES:
            for order in orders:
                remapped = to_equivalent_rotation_order(a, b, order)
                assert remapped.is_proper_euler == order.is_proper_euler
                assert to_equivalent_rotation_order(b, a, remapped) == order


def test_convert_euler_angles_identity() -> None:
    """Test that converting within the same frame keeps the angles."""
    frame = CoordinateFrame("+X+Y-Z", "-Z-X-Y")
    res = convert_euler_angles(frame, frame, (20.0, 40.0, 80.0))
    np.testing.assert_allclose(res.to_array(), (20.0, 40.0, 80.0), atol=1e-6)


def test_convert_euler_angles_relabelled_frame() -> None:
    """Test that relabelling the axes and the rotation order together describes the same rotation."""
    res = convert_euler_angles(CoordinateFrame("XYZ", "XYZ"), CoordinateFrame("YZX", "YZX"), (20.0, 40.0, 80.0))
    np.testing.assert_allclose(res.to_array(), (20.0, 40.0, 80.0), atol=1e-6)


def _sample_frame_pairs(count: int) -> list[tuple[CoordinateFrame, CoordinateFrame]]:
    rng = np.random.default_rng(7)
    pairs = []
    for _ in range(count):
        frames = [
            CoordinateFrame(SPATIAL_AXES[rng.integers(len(SPATIAL_AXES))], ROTATION_ORDERS[rng.integers(96)])
            for _ in range(2)
        ]
        pairs.append(tuple(frames))
    return pairs


@pytest.mark.parametrize(("frame1", "frame2"), _sample_frame_pairs(200), ids=str)
@pytest.mark.parametrize("angles", [(20.0, 40.0, 80.0), (-35.0, 70.0, 150.0)])
def test_convert_euler_angles_round_trip(
    frame1: CoordinateFrame, frame2: CoordinateFrame, angles: tuple[float, float, float]
) -> None:
    """Test that angles converted between two frames keep their physical effect and convert back."""
    converted = convert_euler_angles(frame1, frame2, angles)
    assert rotations_equivalent(frame2.to_reference_quaternion(converted), frame1.to_reference_quaternion(angles))

    back = convert_euler_angles(frame2, frame1, converted)
    assert rotations_equivalent(frame1.to_reference_quaternion(back), frame1.to_reference_quaternion(angles))
    if recovers_exactly(frame1.reference_order):
        np.testing.assert_allclose(back.to_array(), angles, atol=1e-6)


def test_convert_euler_angles_gimbal_lock_round_trip() -> None:
    """Test that a locked orientation survives a round trip as an equivalent orientation."""
    frame1 = CoordinateFrame("+X+Y-Z", "-Z-X-Y")
    frame2 = CoordinateFrame("-Y+Z+X", "+Z+Y+X")
    angles = (30.0, 90.0, 10.0)

    back = convert_euler_angles(frame2, frame1, convert_euler_angles(frame1, frame2, angles))
    assert rotations_equivalent(frame1.to_reference_quaternion(back), frame1.to_reference_quaternion(angles))
