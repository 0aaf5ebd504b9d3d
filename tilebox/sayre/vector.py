"""Fixed-length numeric vectors with element-wise and scalar arithmetic."""

from __future__ import annotations

import math
import numbers
from typing import Iterator


def _format_component(value: float) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


class Vector:
    """An immutable vector of numbers; most operations require equal lengths."""

    __slots__ = ("_components",)

    def __init__(self, *args: float) -> None:
        self._components = tuple(args)

    @classmethod
    def zero(cls, size: int) -> Vector:
        if size < 0:
            raise ValueError(f"vector size must not be negative, got {size}")
        return cls(*([0.0] * size))

    def _require_size(self, *sizes: int) -> None:
        if len(self._components) not in sizes:
            raise ValueError(
                f"operation needs a vector of size {' or '.join(map(str, sizes))}, "
                f"got size {len(self._components)}"
            )

    def _require_same(self, other: Vector) -> None:
        if len(self) != len(other):
            raise ValueError(
                f"vectors differ in size: {len(self)} and {len(other)}"
            )

    @property
    def x(self) -> float:
        self._require_size(2, 3)
        return self._components[0]

    @property
    def y(self) -> float:
        self._require_size(2, 3)
        return self._components[1]

    @property
    def z(self) -> float:
        self._require_size(3)
        return self._components[2]

    def unpack(self) -> tuple[float, ...]:
        return self._components

    def rotate_by_vector(self, other: Vector) -> Vector:
        """Rotate by multiplying as complex numbers."""
        self._require_size(2)
        other._require_size(2)
        return Vector(
            self.x * other.x - self.y * other.y,
            self.x * other.y + self.y * other.x,
        )

    def rotate_by_angle(self, angle: float) -> Vector:
        """Rotate counter-clockwise by an angle in radians."""
        self._require_size(2)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def mag(self) -> float:
        return math.sqrt(self.magsqr())

    def magsqr(self) -> float:
        return sum((c * c for c in self._components), 0.0)

    def dot(self, other: Vector) -> float:
        self._require_same(other)
        return sum((a * b for a, b in zip(self._components, other._components)), 0.0)

    def project2d(self, other: Vector) -> Vector:
        """Project this vector onto another."""
        return other * (self.dot(other) / other.magsqr())

    def norm(self) -> Vector:
        """The unit vector in this direction; a zero vector has none."""
        return self / self.mag()

    def __abs__(self) -> Vector:
        return Vector(*(abs(c) for c in self._components))

    def __neg__(self) -> Vector:
        return Vector(*(-c for c in self._components))

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same(other)
        return Vector(*(a + b for a, b in zip(self._components, other._components)))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same(other)
        return Vector(*(a - b for a, b in zip(self._components, other._components)))

    def __mul__(self, other: Vector | float) -> Vector:
        if isinstance(other, Vector):
            self._require_same(other)
            return Vector(
                *(a * b for a, b in zip(self._components, other._components))
            )
        if isinstance(other, numbers.Real):
            return Vector(*(a * other for a in self._components))
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if isinstance(other, numbers.Real):
            return Vector(*(other * a for a in self._components))
        return NotImplemented

    def __truediv__(self, other: float) -> Vector:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Vector(*(a / other for a in self._components))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __str__(self) -> str:
        inner = "".join(f"{_format_component(c)}, " for c in self._components)
        return f"Vector({inner})"

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self._components)})"