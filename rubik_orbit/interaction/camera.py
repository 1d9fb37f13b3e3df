# rubik_orbit/interaction/camera.py
from __future__ import annotations

import math
from typing import Sequence

from rubik_orbit.config import DEFAULT_CONFIG, CubeConfig
from rubik_orbit.core.geometry import (
    Axis,
    Mat4,
    ScreenPoint,
    mat4_multiply,
    mat4_perspective,
    mat4_rotation,
    mat4_scaling,
    mat4_translation,
    project_to_screen,
    transform_point,
)


class OrbitCamera:
    """Cámara orbital libre (pitch/yaw sin límites).

    Replica la cámara por defecto de un canvas WEBGL: el ojo está sobre +Z a una
    distancia tal que un plano de alto `height` llena la vista con 60° de FOV, y
    +Y del mundo apunta hacia abajo en pantalla. Sobre eso se aplica una escala
    relativa al viewport y luego las rotaciones X (pitch) e Y (yaw).

    La misma matriz se usa para picking y para render.
    """

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        config: CubeConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self.pitch: float = config.initial_pitch
        self.yaw: float = config.initial_yaw
        self.width: float = 1.0
        self.height: float = 1.0
        self.resize(width, height)

    def resize(self, width: float, height: float) -> None:
        """Actualiza el tamaño del viewport (en píxeles lógicos)."""
        self.width = max(1.0, float(width))
        self.height = max(1.0, float(height))

    def orbit(self, dx: float, dy: float) -> None:
        """Acumula un delta de mouse en los ángulos de la cámara.

        Args:
            dx: Delta horizontal en píxeles (mueve yaw).
            dy: Delta vertical en píxeles (mueve pitch).
        """
        sens = self.config.orbit_sensitivity
        self.yaw += dx * sens
        self.pitch += dy * sens

    @property
    def scale(self) -> float:
        return min(self.width, self.height) / self.config.reference_size

    @property
    def eye_distance(self) -> float:
        return (self.height / 2.0) / math.tan(math.radians(self.config.fov_y / 2.0))

    def projection(self) -> Mat4:
        eye = self.eye_distance
        return mat4_perspective(
            self.config.fov_y,
            self.width / self.height,
            eye / 10.0,
            eye * 10.0,
            flip_y=True,
        )

    def model_view(self) -> Mat4:
        m = mat4_translation(0.0, 0.0, -self.eye_distance)
        s = self.scale
        m = mat4_multiply(m, mat4_scaling(s, s, s))
        m = mat4_multiply(m, mat4_rotation(Axis.X, self.pitch))
        return mat4_multiply(m, mat4_rotation(Axis.Y, self.yaw))

    def project(self, point: Sequence[float]) -> ScreenPoint:
        """Proyecta un punto del modelo a píxeles de pantalla."""
        return project_to_screen(
            self.model_view(), self.projection(), point, self.width, self.height
        )

    def eye_depth(self, point: Sequence[float]) -> float:
        """Distancia del punto al ojo a lo largo de la dirección de vista."""
        return -transform_point(self.model_view(), point)[2]
