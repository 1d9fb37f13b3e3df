# rubik_orbit/interaction/picking.py
from __future__ import annotations

from itertools import product
from typing import NamedTuple, Optional

from rubik_orbit.config import DEFAULT_CONFIG, CubeConfig
from rubik_orbit.core.geometry import Axis, Face, project_to_screen, transform_point
from rubik_orbit.interaction.camera import OrbitCamera

# Orden de prueba de las anclas de cara
PICK_FACES = (Face.R, Face.L, Face.U, Face.D, Face.F, Face.B)


class BoundingBox(NamedTuple):
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def contains(self, x: float, y: float) -> bool:
        return self.min_x < x < self.max_x and self.min_y < y < self.max_y


class FacePick(NamedTuple):
    axis: Axis
    layer: int


def project_bounding_box(camera: OrbitCamera, half_extent: float) -> BoundingBox:
    """Caja en pantalla que encierra las 8 esquinas del cubo proyectadas.

    Args:
        camera: Cámara con la vista actual.
        half_extent: Mitad del tamaño exterior del cubo.
    """
    mv = camera.model_view()
    proj = camera.projection()
    xs = []
    ys = []
    for sx, sy, sz in product((-1, 1), repeat=3):
        p = project_to_screen(
            mv,
            proj,
            (sx * half_extent, sy * half_extent, sz * half_extent),
            camera.width,
            camera.height,
        )
        xs.append(p.x)
        ys.append(p.y)
    return BoundingBox(min(xs), max(xs), min(ys), max(ys))


def pick_face(
    camera: OrbitCamera,
    x: float,
    y: float,
    config: CubeConfig = DEFAULT_CONFIG,
) -> Optional[FacePick]:
    """Elige la cara cuyo ancla proyectada queda más cerca del cursor.

    Los empates (distancias al cuadrado a menos de `tie_epsilon`) se resuelven a
    favor del ancla más cercana al ojo. La selección solo vale si cae dentro de
    `pick_tolerance` aristas de cubie (en la escala actual).

    Args:
        camera: Cámara con la vista actual.
        x: Coordenada X del mouse en píxeles.
        y: Coordenada Y del mouse en píxeles.
        config: Constantes de geometría y picking.

    Returns:
        (eje, capa) de la cara elegida, o None.
    """
    mv = camera.model_view()
    proj = camera.projection()
    offset = config.anchor_offset

    best: Optional[Face] = None
    best_d2 = float("inf")
    best_depth = float("inf")

    for face in PICK_FACES:
        anchor = tuple(n * offset for n in face.normal)
        p = project_to_screen(mv, proj, anchor, camera.width, camera.height)
        depth = -transform_point(mv, anchor)[2]
        d2 = (x - p.x) ** 2 + (y - p.y) ** 2

        if abs(d2 - best_d2) < config.tie_epsilon:
            if depth < best_depth:
                best, best_d2, best_depth = face, d2, depth
        elif d2 < best_d2:
            best, best_d2, best_depth = face, d2, depth

    if best is None:
        return None

    tolerance = config.edge * config.pick_tolerance * camera.scale
    if best_d2 ** 0.5 < tolerance:
        return FacePick(best.axis, best.sign)
    return None
