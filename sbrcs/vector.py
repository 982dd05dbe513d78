"""Three-component vectors with element-wise arithmetic."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from numbers import Number
from typing import Callable, Iterator, Union

Scalar = Union[int, float, complex]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3-vector of real or complex components.

    Arithmetic with another ``Vec3`` works element by element; arithmetic
    with a scalar applies the scalar to every component, from either side.
    """

    x: Scalar = 0.0
    y: Scalar = 0.0
    z: Scalar = 0.0

    def __getitem__(self, idx: int) -> Scalar:
        return (self.x, self.y, self.z)[idx]

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z

    def _combine(
        self, other: object, op: Callable[[Scalar, Scalar], Scalar], reflected: bool = False
    ) -> Vec3:
        if isinstance(other, Vec3):
            pairs = zip(other, self) if reflected else zip(self, other)
            return Vec3(*(op(a, b) for a, b in pairs))
        if isinstance(other, Number) and not isinstance(other, bool):
            if reflected:
                return Vec3(*(op(other, c) for c in self))
            return Vec3(*(op(c, other) for c in self))
        return NotImplemented

    def __add__(self, other: object) -> Vec3:
        return self._combine(other, operator.add)

    def __radd__(self, other: object) -> Vec3:
        return self._combine(other, operator.add, reflected=True)

    def __sub__(self, other: object) -> Vec3:
        return self._combine(other, operator.sub)

    def __rsub__(self, other: object) -> Vec3:
        return self._combine(other, operator.sub, reflected=True)

    def __mul__(self, other: object) -> Vec3:
        return self._combine(other, operator.mul)

    def __rmul__(self, other: object) -> Vec3:
        return self._combine(other, operator.mul, reflected=True)

    def __truediv__(self, other: object) -> Vec3:
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other: object) -> Vec3:
        return self._combine(other, operator.truediv, reflected=True)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return "(" + ",".join(str(c) for c in self) + ")"