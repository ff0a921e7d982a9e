"""Coordinate frames and converters between them."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from .axes import AxisSet, parse_axis_set
from .conversions import (
    REFERENCE_AXES,
    convert_euler_angles,
    convert_position,
    to_equivalent_rotation_order,
    to_quaternion,
)
from .logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy as np
    from numpy.typing import ArrayLike, NDArray

    from .euler_angles import EulerAngles

logger = get_logger(__name__)


class CoordinateFrame:
    """A complete 3D convention: how positions are named and how rotations are composed.

    Attributes:
        axes: Spatial axis set, the physical axes assigned to right, up and forward.
        rotation_order: Signed axes rotated about first, second and third.
        reference_order: `rotation_order` re-expressed in the reference axes "XYZ".

    Example:
        >>> frame = CoordinateFrame("+X+Y-Z", "-Z-X-Y")
        >>> frame.to_string(include_sign=True)
        '+X+Y-Z, -Z-X-Y'

    """

    __slots__ = ("_axes", "_reference_order", "_rotation_order")

    def __init__(self, axes: AxisSet | str, rotation_order: AxisSet | str) -> None:
        """Build a frame from spatial axes and a rotation order, given as axis sets or descriptors.

        Raises:
            FormatError: If a descriptor is malformed.
            RedundancyError: If the spatial axes repeat a name, or the rotation order repeats its middle axis.

        """
        self._axes = parse_axis_set(axes, rotation_order=False)
        self._rotation_order = parse_axis_set(rotation_order, rotation_order=True)
        self._reference_order = to_equivalent_rotation_order(self._axes, REFERENCE_AXES, self._rotation_order)

    @property
    def axes(self) -> AxisSet:
        return self._axes

    @property
    def rotation_order(self) -> AxisSet:
        return self._rotation_order

    @property
    def reference_order(self) -> AxisSet:
        return self._reference_order

    def to_position(self, other: CoordinateFrame, v: ArrayLike) -> NDArray[np.float64]:
        """Convert a position in this frame into `other`."""
        return convert_position(self._axes, other.axes, v)

    def to_quaternion(self, euler: EulerAngles | Sequence[float]) -> NDArray[np.float64]:
        """Compose angles with this frame's rotation order, ignoring its spatial axes."""
        return to_quaternion(self._rotation_order, euler)

    def to_reference_quaternion(self, euler: EulerAngles | Sequence[float]) -> NDArray[np.float64]:
        """Compose angles into the quaternion of the same rotation expressed in the reference axes "XYZ".

        Two angle triples describe the same orientation of this frame exactly when their reference quaternions
        rotate the basis vectors identically.
        """
        return to_quaternion(self._reference_order, euler)

    def to_euler_angles(self, other: CoordinateFrame, euler: EulerAngles | Sequence[float]) -> EulerAngles:
        """Convert angles in this frame into angles with the same physical effect in `other`."""
        return convert_euler_angles(self, other, euler)

    def to_string(self, include_sign: bool = False) -> str:
        return self._axes.to_string(include_sign) + ", " + self._rotation_order.to_string(include_sign)

    def __str__(self) -> str:
        return self.to_string(include_sign=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._axes}', '{self._rotation_order}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateFrame):
            return NotImplemented
        return self._axes == other.axes and self._rotation_order == other.rotation_order

    def __hash__(self) -> int:
        return hash((self._axes, self._rotation_order))


class CoordinateFrameConverter:
    """Converts positions and Euler angles from one coordinate frame to another.

    The inverse converter is built on first access and shared: `converter.inverse.inverse is converter`.
    """

    def __init__(self, from_frame: CoordinateFrame, to_frame: CoordinateFrame) -> None:
        self._from_frame = from_frame
        self._to_frame = to_frame
        self._inverse: CoordinateFrameConverter | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_descriptors(
        cls, from_axes: str, from_rotation_order: str, to_axes: str, to_rotation_order: str
    ) -> CoordinateFrameConverter:
        """Build a converter from four descriptors, e.g. ("+X+Y-Z", "-Z-X-Y", "-Y+Z+X", "+Z+Y+X")."""
        return cls(CoordinateFrame(from_axes, from_rotation_order), CoordinateFrame(to_axes, to_rotation_order))

    @property
    def from_frame(self) -> CoordinateFrame:
        return self._from_frame

    @property
    def to_frame(self) -> CoordinateFrame:
        return self._to_frame

    @property
    def inverse(self) -> CoordinateFrameConverter:
        """Converter from `to_frame` back to `from_frame`."""
        with self._lock:
            if self._inverse is None:
                logger.debug("Building inverse converter for %s", self)
                inverse = CoordinateFrameConverter(self._to_frame, self._from_frame)
                inverse._inverse = self
                self._inverse = inverse
        return self._inverse

    def convert_position(self, p: ArrayLike) -> NDArray[np.float64]:
        """Convert a position from `from_frame` to `to_frame`."""
        return self._from_frame.to_position(self._to_frame, p)

    def convert_euler_angles(self, euler: EulerAngles | Sequence[float]) -> EulerAngles:
        """Convert Euler angles from `from_frame` to `to_frame`."""
        return self._from_frame.to_euler_angles(self._to_frame, euler)

    def to_string(self, include_sign: bool = False) -> str:
        return self._from_frame.to_string(include_sign) + " to " + self._to_frame.to_string(include_sign)

    def __str__(self) -> str:
        return self.to_string(include_sign=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._from_frame!r}, {self._to_frame!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateFrameConverter):
            return NotImplemented
        return self._from_frame == other.from_frame and self._to_frame == other.to_frame

    def __hash__(self) -> int:
        return hash((self._from_frame, self._to_frame))
