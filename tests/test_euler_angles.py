from __future__ import annotations

import numpy as np
import pytest

from frameconversions import EulerAngles
from frameconversions.euler_angles import as_euler_angles


def test_euler_angles_value_semantics() -> None:
    """Test construction, indexing, iteration and equality of angle triples."""
    angles = EulerAngles(20, np.float32(40.0), 80.5)

    assert angles.first == 20.0
    assert type(angles.second) is float
    assert angles[2] == 80.5
    assert angles[-1] == 80.5
    assert list(angles) == [20.0, 40.0, 80.5]
    assert len(angles) == 3
    assert angles == EulerAngles(20.0, 40.0, 80.5)
    assert hash(angles) == hash(EulerAngles(20.0, 40.0, 80.5))
    assert EulerAngles() == EulerAngles(0, 0, 0)

    with pytest.raises(AttributeError):
        angles.first = 1.0  # type: ignore[misc]


def test_euler_angles_array_conversion() -> None:
    """Test conversion from and to numpy arrays."""
    angles = EulerAngles.from_array(np.array([1.0, -2.0, 3.0]))

    assert angles == EulerAngles(1.0, -2.0, 3.0)
    np.testing.assert_array_equal(angles.to_array(), [1.0, -2.0, 3.0])
    assert angles.to_array().dtype == np.float64
    assert EulerAngles.from_array(angles) is angles
    assert as_euler_angles((1, -2, 3)) == angles


@pytest.mark.parametrize("values", [(1.0, 2.0), (1.0, 2.0, 3.0, 4.0), [[1.0, 2.0, 3.0]]])
def test_euler_angles_rejects_bad_shape(values: object) -> None:
    """Test that only three angles are accepted."""
    with pytest.raises(ValueError, match="shape"):
        EulerAngles.from_array(values)


def test_euler_angles_to_string() -> None:
    """Test the comma-separated rendering."""
    angles = EulerAngles(20.0, -40.25, 80.0)

    assert angles.to_string() == "20.0, -40.2, 80.0"
    assert angles.to_string(precision=3) == "20.000, -40.250, 80.000"
