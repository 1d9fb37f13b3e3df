# rubik_orbit/decor/particles.py
from __future__ import annotations

import math
import random
from typing import List, Optional, Tuple

from rubik_orbit.config import DEFAULT_CONFIG, CubeConfig
from rubik_orbit.core.cube_model import CubeModel
from rubik_orbit.core.cubie import Color, Cubie
from rubik_orbit.core.geometry import Face, Vec3, rotate_vector
from rubik_orbit.interaction.camera import OrbitCamera

Basis = Tuple[Vec3, Vec3]

# Orden en que se recorren las caras de cada cubie al generar partículas
PARTICLE_FACES = (Face.R, Face.L, Face.U, Face.D, Face.F, Face.B)


def tangent_basis(n: Vec3) -> Basis:
    """Base ortonormal (tangente, binormal) del plano perpendicular a `n`."""
    ref = Vec3(1.0, 0.0, 0.0) if abs(n.x) < 0.9 else Vec3(0.0, 1.0, 0.0)
    binormal = n.cross(ref).normalized()
    tangent = binormal.cross(n).normalized()
    return tangent, binormal


class Particle:
    """Plano decorativo que orbita frente a un sticker de un cubie.

    Sigue la posición del cubie (incluida la rotación de la capa animada); la
    normal con la que nació no cambia al confirmar giros.
    """

    def __init__(
        self,
        cubie: Cubie,
        face: Face,
        color: Color,
        angle: float,
        speed: float,
        config: CubeConfig = DEFAULT_CONFIG,
    ) -> None:
        self.cubie = cubie
        self.face = face
        self.color = color
        self.config = config

        self.normal: Vec3 = Vec3(*face.normal)
        self.angle: float = angle
        self.speed: float = speed
        self.size: float = config.edge
        self.scale_factor: float = 1.0

        self.sticker_offset: Vec3 = self.normal.scale(config.edge / 2.0 + config.gap / 2.0)
        self.position: Vec3 = Vec3(0.0, 0.0, 0.0)

    def update(self, cube: CubeModel, ticks: float = 1.0) -> None:
        """Avanza la órbita y recalcula la posición en el mundo."""
        self.angle = (self.angle + self.speed * ticks) % 360.0

        base = Vec3(*self.cubie.position).scale(self.config.spacing)
        n = self.normal
        sp = self.sticker_offset

        t = cube.turn
        if t is not None and self.cubie.in_layer(t.axis, t.layer):
            ang = t.angle * t.direction
            base = rotate_vector(base, ang, t.axis)
            n = rotate_vector(n, ang, t.axis)
            sp = rotate_vector(sp, ang, t.axis)

        tangent, binormal = tangent_basis(n)
        rad = math.radians(self.angle)
        r = self.config.edge * self.config.particle_orbit
        orbit = tangent.scale(math.cos(rad) * r).add(binormal.scale(math.sin(rad) * r))

        self.position = (
            base.add(sp).add(n.scale(self.config.particle_push)).add(orbit)
        )

    @property
    def display_size(self) -> float:
        return self.size * self.scale_factor

    def toggle_scale(self) -> None:
        self.scale_factor = self.config.particle_scale_up if self.scale_factor == 1.0 else 1.0

    def is_pointer_over(self, camera: OrbitCamera, x: float, y: float) -> bool:
        """Prueba circular en pantalla con el radio aproximado del plano."""
        p = camera.project(self.position)
        r = self.display_size * camera.scale / 2.0
        return (x - p.x) ** 2 + (y - p.y) ** 2 < r * r

    def corners(self) -> List[Vec3]:
        """Vértices del plano (orientado por su normal original) para dibujarlo."""
        tangent, binormal = tangent_basis(self.normal)
        h = self.display_size / 2.0
        p = self.position
        return [
            p.add(tangent.scale(-h)).add(binormal.scale(-h)),
            p.add(tangent.scale(h)).add(binormal.scale(-h)),
            p.add(tangent.scale(h)).add(binormal.scale(h)),
            p.add(tangent.scale(-h)).add(binormal.scale(h)),
        ]


class ParticleField:
    """Conjunto de partículas decorativas, ocultas por defecto."""

    def __init__(
        self,
        cube: CubeModel,
        config: CubeConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
    ) -> None:
        self.cube = cube
        self.config = config
        self.visible: bool = False
        self._rng = random.Random(seed)
        self.particles: List[Particle] = self._generate()

    def _generate(self) -> List[Particle]:
        out: List[Particle] = []
        limit = self.config.particle_count
        for cubie in self.cube.cubies:
            for face in PARTICLE_FACES:
                if len(out) >= limit:
                    return out
                if not cubie.in_layer(face.axis, face.sign):
                    continue
                out.append(
                    Particle(
                        cubie,
                        face,
                        self.config.sticker_colors[face.name],
                        angle=self._rng.uniform(0.0, 360.0),
                        speed=self._rng.uniform(0.5, 1.5),
                        config=self.config,
                    )
                )
        return out

    def rebuild(self) -> None:
        """Vuelve a asociar las partículas a los cubies actuales (tras un reset)."""
        self.particles = self._generate()

    def toggle_visible(self) -> bool:
        self.visible = not self.visible
        return self.visible

    def update(self, ticks: float = 1.0) -> None:
        for p in self.particles:
            p.update(self.cube, ticks)

    def hit(self, camera: OrbitCamera, x: float, y: float) -> Optional[Particle]:
        """Primera partícula visible bajo el cursor, o None."""
        if not self.visible:
            return None
        for p in self.particles:
            if p.is_pointer_over(camera, x, y):
                return p
        return None
