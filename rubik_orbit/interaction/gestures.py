# rubik_orbit/interaction/gestures.py
from __future__ import annotations

from typing import Dict, NamedTuple

from rubik_orbit.core.geometry import Axis


class GestureSigns(NamedTuple):
    """Signo de giro por componente dominante del drag, para caras con capa +1.

    Attributes:
        vertical_first: Si True, el drag vertical gana solo cuando |dy| > |dx|
            (los empates van al horizontal). Si False, el horizontal gana solo
            cuando |dx| > |dy| (los empates van al vertical).
        right: dx > 0 dominante.
        left: dx <= 0 dominante.
        down: dy > 0 dominante (pantalla con Y hacia abajo).
        up: dy <= 0 dominante.
    """

    vertical_first: bool
    right: int
    left: int
    down: int
    up: int


# Heurística en espacio de pantalla: aproxima "la cara sigue al dedo", no es una
# proyección inversa del drag. Con vistas oblicuas puede girar al revés.
SIGN_TABLE: Dict[Axis, GestureSigns] = {
    Axis.X: GestureSigns(vertical_first=True, right=-1, left=1, down=1, up=-1),
    Axis.Y: GestureSigns(vertical_first=False, right=1, left=-1, down=1, up=-1),
    Axis.Z: GestureSigns(vertical_first=False, right=1, left=-1, down=-1, up=1),
}


def resolve_turn_direction(axis: Axis, layer: int, dx: float, dy: float) -> int:
    """Traduce un drag en pantalla al sentido de giro de la capa elegida.

    Args:
        axis: Eje de la cara elegida al presionar.
        layer: Capa de la cara (-1 o 1); la capa -1 invierte el signo.
        dx: Delta horizontal acumulado (px).
        dy: Delta vertical acumulado (px).

    Returns:
        +1 o -1 (0 no ocurre con la tabla completa).
    """
    signs = SIGN_TABLE[axis]
    if signs.vertical_first:
        horizontal = not abs(dy) > abs(dx)
    else:
        horizontal = abs(dx) > abs(dy)

    if horizontal:
        sign = signs.right if dx > 0 else signs.left
    else:
        sign = signs.down if dy > 0 else signs.up

    return sign * (1 if layer == 1 else -1)
