# vector.py

import math
from collections import namedtuple


class Vec2(namedtuple('Vec2', ['x', 'y'])):
    """
    Immutable 2D vector.

    Every operation returns a new Vec2, so a position can be handed out (e.g. as
    a journey's start point) without later motion leaking into it. Being a tuple,
    it can be passed straight to pygame drawing calls.
    """
    __slots__ = ()

    def __new__(cls, x=0.0, y=0.0):
        return super().__new__(cls, float(x), float(y))

    def __add__(self, other):
        return Vec2(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Vec2(self.x - other[0], self.y - other[1])

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float):
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float):
        return Vec2(self.x / scalar, self.y / scalar)

    def mag(self) -> float:
        return math.hypot(self.x, self.y)

    def dist(self, other) -> float:
        return math.hypot(self.x - other[0], self.y - other[1])

    def normalize(self):
        """Unit vector in the same direction. The zero vector stays zero."""
        length = self.mag()
        if length == 0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)

    def perpendicular(self):
        """Rotates by +90 degrees."""
        return Vec2(-self.y, self.x)

    def lerp(self, other, t: float):
        return Vec2(self.x + (other[0] - self.x) * t, self.y + (other[1] - self.y) * t)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def lerp(start: float, stop: float, t: float) -> float:
    return start + (stop - start) * t
