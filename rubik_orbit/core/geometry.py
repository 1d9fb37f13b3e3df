# rubik_orbit/core/geometry.py
from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import NamedTuple, Sequence, Tuple

Vec3i = Tuple[int, int, int]
Vec4 = Tuple[float, float, float, float]
Mat4 = Tuple[float, ...]  # 16 floats, column-major (como glLoadMatrixf)


class Axis(IntEnum):
    """Eje principal. El valor sirve como índice en una terna (x, y, z)."""

    X = 0
    Y = 1
    Z = 2

    @property
    def unit(self) -> "Vec3":
        return Vec3(*(1.0 if i == self else 0.0 for i in range(3)))


class Vec3(NamedTuple):
    """Vector 3D inmutable. Toda operación retorna un vector nuevo."""

    x: float
    y: float
    z: float

    def add(self, o: Sequence[float]) -> "Vec3":
        return Vec3(self.x + o[0], self.y + o[1], self.z + o[2])

    def sub(self, o: Sequence[float]) -> "Vec3":
        return Vec3(self.x - o[0], self.y - o[1], self.z - o[2])

    def scale(self, s: float) -> "Vec3":
        return Vec3(self.x * s, self.y * s, self.z * s)

    def dot(self, o: Sequence[float]) -> float:
        return self.x * o[0] + self.y * o[1] + self.z * o[2]

    def cross(self, o: Sequence[float]) -> "Vec3":
        return Vec3(
            self.y * o[2] - self.z * o[1],
            self.z * o[0] - self.x * o[2],
            self.x * o[1] - self.y * o[0],
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vec3":
        n = self.length()
        if n == 0.0:
            return self
        return self.scale(1.0 / n)


class Face(Enum):
    """Las seis direcciones canónicas: (eje, signo)."""

    U = (Axis.Y, 1)
    D = (Axis.Y, -1)
    F = (Axis.Z, 1)
    B = (Axis.Z, -1)
    L = (Axis.X, -1)
    R = (Axis.X, 1)

    @property
    def axis(self) -> Axis:
        return self.value[0]

    @property
    def sign(self) -> int:
        return self.value[1]

    @property
    def normal(self) -> Vec3i:
        n = [0, 0, 0]
        n[self.axis] = self.sign
        return (n[0], n[1], n[2])

    @classmethod
    def from_normal(cls, n: Sequence[int]) -> "Face":
        """Retorna la cara cuya normal es `n` (vector unitario entero).

        Raises:
            ValueError: Si `n` no es una normal canónica.
        """
        for face in cls:
            if face.normal == tuple(n):
                return face
        raise ValueError(f"Normal inválida: {tuple(n)}")


class ScreenPoint(NamedTuple):
    x: float
    y: float


# --------------------------
# Rotaciones
# --------------------------
def rotate_vector(v: Sequence[float], angle_deg: float, axis: Axis) -> Vec3:
    """Rota un punto alrededor de un eje principal (regla de la mano derecha).

    Args:
        v: Punto (x, y, z).
        angle_deg: Ángulo en grados.
        axis: Eje de rotación.

    Returns:
        Punto rotado.
    """
    x, y, z = v
    a = math.radians(angle_deg)
    c = math.cos(a)
    s = math.sin(a)

    if axis == Axis.X:
        return Vec3(x, y * c - z * s, y * s + z * c)
    if axis == Axis.Y:
        return Vec3(x * c + z * s, y, -x * s + z * c)
    return Vec3(x * c - y * s, x * s + y * c, z)


def rotate_quarter(v: Vec3i, axis: Axis, direction: int) -> Vec3i:
    """Cuarto de vuelta exacto sobre enteros.

    Coincide con `rotate_vector(v, 90 * direction, axis)` sin error de redondeo.
    """
    x, y, z = v
    if axis == Axis.X:
        return (x, -z, y) if direction > 0 else (x, z, -y)
    if axis == Axis.Y:
        return (z, y, -x) if direction > 0 else (-z, y, x)
    return (-y, x, z) if direction > 0 else (y, -x, z)


# --------------------------
# Matrices 4x4 (column-major)
# --------------------------
def mat4_identity() -> Mat4:
    return (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def mat4_multiply(a: Mat4, b: Mat4) -> Mat4:
    """Producto a·b (b se aplica primero al transformar un punto)."""
    out = [0.0] * 16
    for col in range(4):
        for row in range(4):
            out[col * 4 + row] = sum(a[k * 4 + row] * b[col * 4 + k] for k in range(4))
    return tuple(out)


def mat4_translation(tx: float, ty: float, tz: float) -> Mat4:
    return (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        tx, ty, tz, 1.0,
    )


def mat4_scaling(sx: float, sy: float, sz: float) -> Mat4:
    return (
        sx, 0.0, 0.0, 0.0,
        0.0, sy, 0.0, 0.0,
        0.0, 0.0, sz, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def mat4_rotation(axis: Axis, angle_deg: float) -> Mat4:
    """Matriz de rotación equivalente a `glRotatef(angle, *axis.unit)`."""
    a = math.radians(angle_deg)
    c = math.cos(a)
    s = math.sin(a)
    if axis == Axis.X:
        return (
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    if axis == Axis.Y:
        return (
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    return (
        c, s, 0.0, 0.0,
        -s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def mat4_perspective(
    fov_y_deg: float,
    aspect: float,
    near: float,
    far: float,
    flip_y: bool = False,
) -> Mat4:
    """Proyección en perspectiva al estilo `gluPerspective`.

    Args:
        fov_y_deg: Campo de visión vertical en grados.
        aspect: Relación ancho/alto.
        near: Plano cercano (> 0).
        far: Plano lejano.
        flip_y: Si True, +Y del mundo apunta hacia abajo en pantalla.
    """
    f = 1.0 / math.tan(math.radians(fov_y_deg) / 2.0)
    fy = -f if flip_y else f
    nf = 1.0 / (near - far)
    return (
        f / aspect, 0.0, 0.0, 0.0,
        0.0, fy, 0.0, 0.0,
        0.0, 0.0, (far + near) * nf, -1.0,
        0.0, 0.0, 2.0 * far * near * nf, 0.0,
    )


def transform_point(m: Mat4, p: Sequence[float], w: float = 1.0) -> Vec4:
    """Aplica una matriz column-major a (x, y, z, w)."""
    x, y, z = p
    return (
        m[0] * x + m[4] * y + m[8] * z + m[12] * w,
        m[1] * x + m[5] * y + m[9] * z + m[13] * w,
        m[2] * x + m[6] * y + m[10] * z + m[14] * w,
        m[3] * x + m[7] * y + m[11] * z + m[15] * w,
    )


def project_to_screen(
    model_view: Mat4,
    projection: Mat4,
    point: Sequence[float],
    width: float,
    height: float,
) -> ScreenPoint:
    """Lleva un punto del modelo a coordenadas de pantalla (origen arriba-izquierda).

    Si la componente homogénea `w` es exactamente cero se omite la división de
    perspectiva y el resultado se toma como ya normalizado.
    """
    eye = transform_point(model_view, point)
    cx, cy, _cz, cw = transform_point(projection, eye[:3], eye[3])
    if cw != 0.0:
        cx /= cw
        cy /= cw
    return ScreenPoint((cx + 1.0) * width / 2.0, (1.0 - cy) * height / 2.0)
