# rubik_orbit/core/cubie.py
from __future__ import annotations

from typing import Dict, Tuple

from rubik_orbit.core.geometry import Axis, Face, Vec3i, rotate_quarter

Color = str  # "#rrggbb"

# (eje, dirección) -> {cara origen: cara destino}
StickerPermutation = Dict[Face, Face]


def _build_sticker_permutations() -> Dict[Tuple[Axis, int], StickerPermutation]:
    """Precalcula hacia dónde mira cada sticker tras un cuarto de vuelta.

    Se rota la normal de cada cara con la misma regla que la posición, así los
    colores siempre acompañan a la geometría (p. ej. +X: U→F→D→B→U).
    """
    table: Dict[Tuple[Axis, int], StickerPermutation] = {}
    for axis in Axis:
        for direction in (1, -1):
            table[(axis, direction)] = {
                face: Face.from_normal(rotate_quarter(face.normal, axis, direction))
                for face in Face
            }
    return table


STICKER_PERMUTATIONS = _build_sticker_permutations()


class Cubie:
    """Uno de los 27 cubos unitarios.

    Attributes:
        position: Posición entera en la grilla, cada componente en {-1, 0, 1}.
        colors: Color de sticker por dirección canónica. Todas las caras llevan
            color, incluso las interiores.
    """

    def __init__(self, position: Vec3i, colors: Dict[Face, Color]) -> None:
        self.position: Vec3i = tuple(int(v) for v in position)  # type: ignore[assignment]
        self.colors: Dict[Face, Color] = dict(colors)

    def __repr__(self) -> str:
        return f"Cubie(position={self.position})"

    def in_layer(self, axis: Axis, layer: int) -> bool:
        return self.position[axis] == layer

    def quarter_turn(self, axis: Axis, direction: int) -> None:
        """Aplica un cuarto de vuelta: mueve la posición y permuta los stickers.

        Ambas actualizaciones se hacen juntas; el diccionario `colors` se permuta
        en el mismo objeto (no se reemplaza).

        Args:
            axis: Eje de giro.
            direction: +1 o -1.
        """
        perm = STICKER_PERMUTATIONS[(axis, 1 if direction > 0 else -1)]
        moved = {perm[face]: color for face, color in self.colors.items()}

        self.position = rotate_quarter(self.position, axis, direction)
        self.colors.clear()
        self.colors.update(moved)

    def snapshot(self) -> Tuple[Vec3i, Tuple[Color, ...]]:
        """Estado hasheable: (posición, colores en el orden de `Face`)."""
        return self.position, tuple(self.colors[f] for f in Face)
