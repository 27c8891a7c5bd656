from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Sequence

import numpy as np

from utils.vector_operations import (
    add_vectors,
    divide_vector,
    float_equal,
    normalize_vector,
    scale_vector,
    subtract_vectors,
    vector_cross,
    vector_dot,
    vector_length,
)


@dataclass(frozen=True, slots=True)
class Tuple:
    """Homogeneous coordinate (x, y, z, w).

    w is 1 for a point and 0 for a vector. Arithmetic carries w along
    untouched, so point + point gives w == 2, which is neither.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_array(cls, components: Sequence[float] | np.ndarray) -> Tuple:
        x, y, z, w = (float(c) for c in components)
        return cls(x, y, z, w)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    def is_point(self) -> bool:
        return float_equal(self.w, 1.0)

    def is_vector(self) -> bool:
        return float_equal(self.w, 0.0)

    def is_equal_to(self, other: Tuple) -> bool:
        # spatial coordinates only, a point and a vector at the same x, y, z are equal
        return (
            float_equal(self.x, other.x)
            and float_equal(self.y, other.y)
            and float_equal(self.z, other.z)
        )

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(add_vectors(self.as_array(), other.as_array()))

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(subtract_vectors(self.as_array(), other.as_array()))

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Tuple.from_array(scale_vector(self.as_array(), scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Tuple.from_array(divide_vector(self.as_array(), scalar))

    def magnitude(self) -> float:
        return vector_length(self.as_array())

    def normalize(self) -> Tuple:
        return Tuple.from_array(normalize_vector(self.as_array()))

    def dot_product(self, other: Tuple) -> float:
        return vector_dot(self.as_array(), other.as_array())

    def cross_product(self, other: Tuple) -> Tuple:
        """Cross product of the spatial parts. Always a vector, whatever w the operands carry."""
        cross_x, cross_y, cross_z = vector_cross(self.as_array(), other.as_array())
        return new_vector(cross_x, cross_y, cross_z)


def new_point(x: float, y: float, z: float) -> Tuple:
    return Tuple(float(x), float(y), float(z), 1.0)


def new_vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(float(x), float(y), float(z), 0.0)


# Functional spellings of the operators, for call sites that pass operations around.

def add(a: Tuple, b: Tuple) -> Tuple:
    return a + b


def sub(a: Tuple, b: Tuple) -> Tuple:
    return a - b


def neg(a: Tuple) -> Tuple:
    return -a


def mul(a: Tuple, scalar: float) -> Tuple:
    return a * scalar


def div(a: Tuple, scalar: float) -> Tuple:
    return a / scalar


def magnitude(a: Tuple) -> float:
    return a.magnitude()


def normalize(a: Tuple) -> Tuple:
    return a.normalize()


def dot_product(a: Tuple, b: Tuple) -> float:
    return a.dot_product(b)


def cross_product(a: Tuple, b: Tuple) -> Tuple:
    return a.cross_product(b)


def is_equal_to(a: Tuple, b: Tuple) -> bool:
    return a.is_equal_to(b)
