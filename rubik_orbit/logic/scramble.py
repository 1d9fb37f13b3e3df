# rubik_orbit/logic/scramble.py
from __future__ import annotations

import random
from typing import List, Optional, Tuple

from rubik_orbit.core.cube_model import CubeModel, Turn
from rubik_orbit.core.geometry import Axis

LAYERS: List[Tuple[Axis, int]] = [(axis, layer) for axis in Axis for layer in (-1, 1)]


def generate_scramble(n: int, seed: Optional[int] = None) -> List[Turn]:
    """Genera una mezcla aleatoria de cuartos de vuelta.

    Nunca repite la misma capa en dos giros consecutivos, lo que evita pares
    que se cancelan (por ejemplo R seguido de R').

    Args:
        n: Cantidad de giros.
        seed: Semilla opcional para resultados reproducibles.

    Returns:
        Lista de giros.

    Raises:
        ValueError: Si `n` es menor o igual a 0.
    """
    if n <= 0:
        raise ValueError("n debe ser mayor que 0.")

    rng = random.Random(seed)

    seq: List[Turn] = []
    last: Optional[Tuple[Axis, int]] = None

    for _ in range(n):
        axis, layer = rng.choice([al for al in LAYERS if al != last])
        last = (axis, layer)
        seq.append(Turn(axis, layer, rng.choice((-1, 1))))

    return seq


def apply_scramble(cube: CubeModel, turns: List[Turn]) -> None:
    """Aplica los giros sin animación (se ignoran si el cubo está girando)."""
    for t in turns:
        cube.apply_turn(t.axis, t.layer, t.direction)
