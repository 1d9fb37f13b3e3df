# rubik_orbit/core/cube_model.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from rubik_orbit.config import DEFAULT_CONFIG, CubeConfig
from rubik_orbit.core.cubie import Color, Cubie
from rubik_orbit.core.geometry import Axis, Face, Vec3i

logger = logging.getLogger(__name__)

QUARTER = 90.0
CubeHash = Tuple[Tuple[Vec3i, Tuple[Color, ...]], ...]


class Turn(NamedTuple):
    """Cuarto de vuelta de una capa: eje, capa (-1 | 1) y sentido (-1 | 1)."""

    axis: Axis
    layer: int
    direction: int


@dataclass(frozen=True)
class TurnState:
    """Giro en curso. `angle` va de 0 a 90 grados."""

    turn: Turn
    angle: float = 0.0

    @property
    def axis(self) -> Axis:
        return self.turn.axis

    @property
    def layer(self) -> int:
        return self.turn.layer

    @property
    def direction(self) -> int:
        return self.turn.direction


class CubieDrawState(NamedTuple):
    """Lo que necesita el render para dibujar un cubie.

    `rotation` es None para cubies quietos, o (eje, ángulo con signo) a aplicar
    antes de la traslación del cubie.
    """

    position: Vec3i
    colors: Dict[Face, Color]
    rotation: Optional[Tuple[Axis, float]]


CubeDrawList = List[CubieDrawState]


def _validate_turn(axis: Axis, layer: int, direction: int) -> Turn:
    if layer not in (-1, 1):
        raise ValueError(f"Capa no soportada: {layer}")
    if direction not in (-1, 1):
        raise ValueError(f"Sentido no soportado: {direction}")
    return Turn(Axis(axis), layer, direction)


class CubeModel:
    """Máquina de estados del cubo 3x3x3 basada en 27 cubies.

    Estados:
        - idle: `turn is None`.
        - turning: `turn` es un `TurnState`; la capa se anima hasta 90° y luego
          se confirma (commit) moviendo posiciones y colores de sus 9 cubies.

    Solo hay un giro en vuelo a la vez; pedir otro mientras gira no hace nada
    (no hay cola).
    """

    def __init__(
        self,
        config: CubeConfig = DEFAULT_CONFIG,
        on_commit: Optional[Callable[[Turn], None]] = None,
    ) -> None:
        """Crea el cubo resuelto.

        Args:
            config: Constantes de diseño (colores y paso de animación).
            on_commit: Callback opcional invocado tras cada giro confirmado.
        """
        self.config = config
        self.on_commit = on_commit
        self.cubies: List[Cubie] = []
        self.turn: Optional[TurnState] = None
        self.reset()

    # --------------------------
    # Public API
    # --------------------------
    def reset(self) -> None:
        """Vuelve al estado resuelto y cancela cualquier giro en curso."""
        colors = {f: self.config.sticker_colors[f.name] for f in Face}
        self.cubies = [
            Cubie((x, y, z), colors)
            for x in (-1, 0, 1)
            for y in (-1, 0, 1)
            for z in (-1, 0, 1)
        ]
        self.turn = None

    def is_turning(self) -> bool:
        return self.turn is not None

    def cubie_at(self, position: Vec3i) -> Cubie:
        """Retorna el cubie que ocupa `position`.

        Raises:
            KeyError: Si no hay cubie en esa posición.
        """
        for c in self.cubies:
            if c.position == tuple(position):
                return c
        raise KeyError(position)

    def layer_cubies(self, axis: Axis, layer: int) -> List[Cubie]:
        return [c for c in self.cubies if c.in_layer(axis, layer)]

    def start_turn(self, axis: Axis, layer: int, direction: int) -> bool:
        """Inicia la animación de un cuarto de vuelta.

        Args:
            axis: Eje de giro.
            layer: Capa a girar (-1 o 1).
            direction: Sentido (-1 o 1).

        Returns:
            True si el giro comenzó; False si ya había un giro en curso.

        Raises:
            ValueError: Si la capa o el sentido no son válidos.
        """
        turn = _validate_turn(axis, layer, direction)
        if self.turn is not None:
            logger.debug("Giro ignorado (ya hay uno en curso): %s", turn)
            return False

        self.turn = TurnState(turn)
        return True

    def advance(self, ticks: float = 1.0) -> Optional[Turn]:
        """Avanza la animación `ticks` pasos de `turn_step` grados.

        El ángulo se limita a 90°; al alcanzarlo se confirma el giro y el cubo
        vuelve a idle.

        Returns:
            El giro confirmado en este avance, o None.
        """
        if self.turn is None:
            return None

        angle = min(QUARTER, self.turn.angle + self.config.turn_step * ticks)
        self.turn = replace(self.turn, angle=angle)
        if angle < QUARTER:
            return None

        done = self.turn.turn
        self.turn = None
        self._commit(done)
        return done

    def apply_turn(self, axis: Axis, layer: int, direction: int) -> None:
        """Aplica un cuarto de vuelta sin animación.

        Se ignora si hay un giro animado en curso.
        """
        turn = _validate_turn(axis, layer, direction)
        if self.turn is not None:
            logger.debug("Giro instantáneo ignorado (giro en curso): %s", turn)
            return
        self._commit(turn)

    def draw_state(self) -> CubeDrawList:
        """Estado de dibujo por cubie, incluida la rotación extra de la capa animada."""
        out: CubeDrawList = []
        t = self.turn
        for c in self.cubies:
            rotation = None
            if t is not None and c.in_layer(t.axis, t.layer):
                rotation = (t.axis, t.angle * t.direction)
            out.append(CubieDrawState(c.position, dict(c.colors), rotation))
        return out

    def is_solved(self) -> bool:
        """Indica si cada cara exterior muestra un solo color."""
        for face in Face:
            shown = {c.colors[face] for c in self.layer_cubies(face.axis, face.sign)}
            if len(shown) != 1:
                return False
        return True

    def snapshot(self) -> CubeHash:
        """Estado inmutable y hasheable, ordenado por posición."""
        return tuple(sorted(c.snapshot() for c in self.cubies))

    # --------------------------
    # Commit
    # --------------------------
    def _commit(self, turn: Turn) -> None:
        for c in self.layer_cubies(turn.axis, turn.layer):
            c.quarter_turn(turn.axis, turn.direction)

        logger.debug("Giro confirmado: %s", turn)
        if self.on_commit is not None:
            self.on_commit(turn)
