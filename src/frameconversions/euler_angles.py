"""Euler angle triples."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class EulerAngles:
    """Three angles in degrees.

    The angles carry no convention of their own: index i is the angle about axis i of whichever rotation order the
    triple is paired with.
    """

    first: float = 0.0
    second: float = 0.0
    third: float = 0.0

    def __post_init__(self) -> None:
        """Store plain floats so numpy scalars compare and print like regular numbers."""
        for field_name in ("first", "second", "third"):
            object.__setattr__(self, field_name, float(getattr(self, field_name)))

    @classmethod
    def from_array(cls, values: ArrayLike | EulerAngles) -> EulerAngles:
        """Build from any sequence or array of three numbers.

        Raises:
            ValueError: If `values` does not hold exactly three numbers.

        """
        if isinstance(values, EulerAngles):
            return values
        array = np.asarray(values, dtype=np.float64)
        if array.shape != (3,):
            msg = f"Euler angles must have shape (3,), but got {array.shape}"
            raise ValueError(msg)
        return cls(*array)

    def to_array(self) -> NDArray[np.float64]:
        """Return the angles as a float64 array of shape (3,)."""
        return np.array([self.first, self.second, self.third], dtype=np.float64)

    def __getitem__(self, index: int) -> float:
        return (self.first, self.second, self.third)[index]

    def __iter__(self) -> Iterator[float]:
        return iter((self.first, self.second, self.third))

    def __len__(self) -> int:
        return 3

    def to_string(self, precision: int = 1) -> str:
        """Render as "20.0, 40.0, 80.0" with `precision` decimals."""
        return ", ".join(f"{angle:.{precision}f}" for angle in self)


def as_euler_angles(values: EulerAngles | Sequence[float] | ArrayLike) -> EulerAngles:
    """Coerce a triple of angles into `EulerAngles`."""
    return EulerAngles.from_array(values)
