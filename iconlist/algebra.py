"""Small value types: complex numbers and 2D/3D vectors."""

import math
from dataclasses import dataclass

_UINT64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Complex:
    """A complex number with float parts."""

    re: float
    im: float

    def modulus(self):
        return math.sqrt(self.re * self.re + self.im * self.im)

    def __add__(self, other):
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other):
        return Complex(self.re - other.re, self.im - other.im)

    def __mul__(self, other):
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __truediv__(self, other):
        """Multiply by the conjugate of ``other`` and divide by its modulus."""
        mod = other.modulus()
        return Complex(
            (self.re * other.re + self.im * other.im) / mod,
            (self.im * other.re - self.re * other.im) / mod,
        )


@dataclass(frozen=True)
class Vector2:
    """A 2D vector of floats."""

    x: float
    y: float

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def scale(self, num):
        return Vector2(num * self.x, num * self.y)

    def dot(self, other):
        """Return ``self.x * other.x + other.y * other.y``."""
        return self.x * other.x + other.y * other.y

    def module(self):
        return math.sqrt(self.x**2 + self.y**2)

    def normalized(self):
        module = self.module()
        return Vector2(self.x / module, self.y / module)


@dataclass(frozen=True)
class Vector3:
    """A 3D vector of floats."""

    x: float
    y: float
    z: float

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, num):
        return Vector3(self.x * num, self.y * num, self.z * num)

    def dot(self, other):
        """Return ``self.x * other.x + other.y * other.y + self.z * other.z``."""
        return self.x * other.x + other.y * other.y + self.z * other.z

    def cross(self, other):
        """Componentwise sums of cross terms: (y*z' + z*y', z*x' + x*z', x*y' + y*x')."""
        return Vector3(
            self.y * other.z + self.z * other.y,
            self.z * other.x + self.x * other.z,
            self.x * other.y + self.y * other.x,
        )

    def module(self):
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalized(self):
        module = self.module()
        return Vector3(self.x / module, self.y / module, self.z / module)


@dataclass(frozen=True)
class UVector2:
    """A pair of unsigned 64-bit integers."""

    x: int
    y: int

    def __post_init__(self):
        for value in (self.x, self.y):
            if not 0 <= value <= _UINT64_MAX:
                raise ValueError(f"value out of unsigned 64-bit range: {value}")