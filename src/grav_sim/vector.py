# MIT License (see LICENSE)
"""
Immutable 3D vector type for positions, velocities and accelerations.

Vec3 is a value type: every operation returns a new instance and equality
is componentwise. Conversion helpers bridge to float64 numpy arrays for
trajectory recording and analysis.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vec3:
    """
    Cartesian 3-vector.

    Attributes:
        x, y, z: Components, in whatever unit the caller works in
                 (meters for positions, m/s for velocities, m/s² for
                 accelerations).
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values) -> Vec3:
        """
        Build a vector from any length-3 array-like (tuple, list, ndarray).

        Raises:
            ValueError: If the input does not have exactly three components.
        """
        try:
            arr = np.asarray(values, dtype=np.float64)
        except (TypeError, ValueError):
            raise ValueError(f"Cannot coerce {values!r} to a 3D vector") from None
        if arr.shape != (3,):
            raise ValueError(f"Cannot coerce {values!r} to a 3D vector")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_list(self) -> list[float]:
        return [self.x, self.y, self.z]

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, s: float) -> Vec3:
        if isinstance(s, Vec3):
            return NotImplemented
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vec3:
        if isinstance(s, Vec3):
            return NotImplemented
        return Vec3(self.x / s, self.y / s, self.z / s)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def norm2(self) -> float:
        """Squared magnitude. Avoids sqrt for comparisons."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        """Euclidean length, always >= 0."""
        return float(np.sqrt(self.norm2()))

    def normalized(self) -> Vec3:
        """
        Unit vector in the same direction.

        The zero vector has no direction; it is returned unchanged rather
        than producing NaN components.
        """
        n = self.norm()
        if n == 0.0:
            return self
        return Vec3(self.x / n, self.y / n, self.z / n)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product self × other."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )
