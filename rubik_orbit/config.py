# rubik_orbit/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


def _default_sticker_colors() -> Dict[str, str]:
    return {
        "U": "#ffff00",
        "D": "#ffffff",
        "F": "#00ff00",
        "B": "#0000ff",
        "L": "#ff8000",
        "R": "#ff0000",
    }


@dataclass(frozen=True)
class CubeConfig:
    """Constantes de diseño del cubo, la cámara y las partículas.

    Todas las distancias están en unidades de mundo (antes de aplicar la escala
    del viewport). Los ángulos están en grados.
    """

    # Geometría
    edge: float = 60.0
    gap: float = 2.0

    # Animación
    turn_step: float = 6.0      # grados por tick
    frame_rate: float = 60.0    # ticks por segundo

    # Cámara / orbit
    orbit_sensitivity: float = 0.5
    initial_pitch: float = 25.0
    initial_yaw: float = -35.0
    reference_size: float = 720.0
    fov_y: float = 60.0

    # Picking
    pick_tolerance: float = 1.1  # en aristas de cubie
    tie_epsilon: float = 0.5     # px^2

    sticker_colors: Dict[str, str] = field(default_factory=_default_sticker_colors)

    # Partículas decorativas
    particle_count: int = 48
    particle_orbit: float = 0.8
    particle_push: float = 140.0
    particle_scale_up: float = 4.0

    @property
    def spacing(self) -> float:
        """Distancia entre centros de cubies vecinos."""
        return self.edge + self.gap

    @property
    def half_extent(self) -> float:
        """Mitad del tamaño exterior del cubo completo."""
        return self.spacing + self.edge / 2.0

    @property
    def anchor_offset(self) -> float:
        """Distancia del origen al ancla de cada cara (cubie central de la cara)."""
        return self.spacing


DEFAULT_CONFIG = CubeConfig()
